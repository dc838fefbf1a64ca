#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_base_url

short_description: Manage the Base URL Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Sets the base URL Sonatype Nexus Repository uses when building links, typically the URL of a reverse proxy
      in front of it.

options:
    properties:
        description:
            - Settings of the Base URL Capability.
        type: dict
        suboptions:
            url:
                description:
                    - Reverse proxy base URL.  Must start with http:// or https://.
                required: True
                type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Set the base URL
  sonatype.nexus.capability_base_url:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      url: https://repo.example.com/
'''

RETURN = r'''
capability:
    description: State of the Capability after execution.
    type: dict
    returned: when state is present
    sample:
        id: "0f3d9e5c1a2b4c6d"
        type: baseurl
        notes: ''
        enabled: true
        properties:
            url: https://repo.example.com/
        last_updated: "Monday, 19-Oct-26 10:15:00 UTC"
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'Base URL Capability updated'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_CORE_BASE_URL


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_CORE_BASE_URL)
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
