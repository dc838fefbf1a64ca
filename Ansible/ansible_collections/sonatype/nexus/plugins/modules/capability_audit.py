#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_audit

short_description: Manage the Audit Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Enables or disables auditing of changes made to Sonatype Nexus Repository.
    - The Audit Capability has no settings of its own.

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Enable auditing
  sonatype.nexus.capability_audit:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    notes: Managed by Ansible

- name: Remove the Audit Capability
  sonatype.nexus.capability_audit:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    state: absent
'''

RETURN = r'''
capability:
    description: State of the Capability after execution.
    type: dict
    returned: when state is present
    sample:
        id: "6a8f3c2e5b7d1f09"
        type: audit
        notes: Managed by Ansible
        enabled: true
        properties: {}
        last_updated: "Monday, 19-Oct-26 10:15:00 UTC"
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'Audit Capability created'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_AUDIT


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_AUDIT)
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
