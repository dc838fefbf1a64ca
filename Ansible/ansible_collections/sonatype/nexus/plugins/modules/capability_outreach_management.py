#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_outreach_management

short_description: Manage the Outreach Management Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Controls where Sonatype Nexus Repository fetches Outreach content from.

options:
    properties:
        description:
            - Settings of the Outreach Management Capability.
        type: dict
        suboptions:
            override_url:
                description:
                    - Override external URL for downloading new Outreach content.  Must start with http:// or https://.
                required: False
                type: str
            always_remote:
                description:
                    - Always check the remote server for updates.
                default: False
                type: bool

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Disable Outreach
  sonatype.nexus.capability_outreach_management:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: false
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
    sample: 'Outreach Management Capability updated'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_OUTREACH


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_OUTREACH)
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
