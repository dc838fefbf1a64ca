#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_rut_auth

short_description: Manage the RUT Auth Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Lets a reverse proxy that has already authenticated a user pass the user's principal in an HTTP header
      (Remote User Token).

options:
    properties:
        description:
            - Settings of the RUT Auth Capability.
        type: dict
        suboptions:
            http_header:
                description:
                    - Name of the header that is used to source the principal of the already authenticated user.
                required: True
                type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Trust X-Remote-User set by the proxy
  sonatype.nexus.capability_rut_auth:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      http_header: X-Remote-User
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
    sample: 'RUT Auth Capability created'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_RUT_AUTH


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_RUT_AUTH)
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
