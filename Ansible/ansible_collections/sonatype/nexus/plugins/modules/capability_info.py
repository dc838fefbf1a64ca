#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_info

short_description: List Capabilities configured in Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Returns every Capability of the server, or only those of one type.
    - Properties are returned exactly as the server stores them, as strings.

options:
    type:
        description:
            - Only return Capabilities with this type id, for example C(webhook.global).
        required: False
        type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Find all global webhooks
  sonatype.nexus.capability_info:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    type: webhook.global
  register: webhooks
'''

RETURN = r'''
capabilities:
    description: Capabilities found.
    type: list
    elements: dict
    returned: always
    sample:
        - id: "0f3d9e5c1a2b4c6d"
          type: baseurl
          notes: ''
          enabled: true
          properties:
              url: https://repo.example.com/
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import report_diagnostics
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityResource import (
    list_capabilities, summarise_capability
)
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusApi, nexus_argument_spec
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import Diagnostics, NexusError


def run_capability_info(module, api=None):
    result = dict(changed=False, capabilities=[])
    if api is None:
        api = NexusApi.from_module(module)

    try:
        found = list_capabilities(api, module.params.get('type'))
    except NexusError as e:
        diagnostics = Diagnostics()
        diagnostics.add_api_error('Unable to list Capabilities', e)
        report_diagnostics(module, diagnostics, result)
        return

    module.debug('Iterating %d Capabilities' % len(found))
    result['capabilities'] = [summarise_capability(dto) for dto in found]
    module.exit_json(**result)


def run_module():
    module_args = nexus_argument_spec()
    module_args.update(
        type=dict(type='str', required=False),
    )

    module = AnsibleModule(
        argument_spec=module_args,
        supports_check_mode=True
    )
    run_capability_info(module)


def main():
    run_module()


if __name__ == '__main__':
    main()
