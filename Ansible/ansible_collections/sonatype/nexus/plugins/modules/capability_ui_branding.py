#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_ui_branding

short_description: Manage the UI Branding Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Adds an HTML header and/or footer to every page of the Sonatype Nexus Repository UI.

options:
    properties:
        description:
            - Settings of the UI Branding Capability.
        type: dict
        suboptions:
            header_enabled:
                description:
                    - Enable branding header HTML snippet.
                default: False
                type: bool
            header_html:
                description:
                    - An HTML snippet to be included in branding header.  Use C($baseUrl) to insert the base URL of
                      the server (e.g. to reference an image).
                default: ''
                type: str
            footer_enabled:
                description:
                    - Enable branding footer HTML snippet.
                default: False
                type: bool
            footer_html:
                description:
                    - An HTML snippet to be included in branding footer.  Use C($baseUrl) to insert the base URL of
                      the server (e.g. to reference an image).
                default: ''
                type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Show an environment banner
  sonatype.nexus.capability_ui_branding:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      header_enabled: true
      header_html: '<div style="background: orange">STAGING</div>'
'''

RETURN = r'''
capability:
    description: State of the Capability after execution.
    type: dict
    returned: when state is present
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'UI Branding Capability updated'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_UI_BRANDING


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_UI_BRANDING)
    module = AnsibleModule(
        argument_spec=capability_module_argument_spec(handler),
        required_if=capability_module_required_if(handler),
        supports_check_mode=True
    )
    run_capability_module(module, handler)


def main():
    run_module()


if __name__ == '__main__':
    main()
