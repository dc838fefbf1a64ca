#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_firewall_audit_and_quarantine

short_description: Manage Firewall Audit and Quarantine Capabilities of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Enables Sonatype Repository Firewall audit, and optionally quarantine, for one repository.
    - There is one Capability per repository.  Without I(id), the Capability for I(properties.repository)
      is managed.
    - If quarantine is enabled and later disabled, all quarantined components will be made available in the
      repository; those components cannot be re-quarantined.

options:
    properties:
        description:
            - Settings of the Firewall Audit and Quarantine Capability.
        type: dict
        suboptions:
            repository:
                description:
                    - The repository to be evaluated.
                required: True
                type: str
            quarantine:
                description:
                    - Whether to enable Quarantine for this repository.
                required: True
                type: bool

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Audit and quarantine maven-central
  sonatype.nexus.capability_firewall_audit_and_quarantine:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      repository: maven-central
      quarantine: true
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
    sample: 'Firewall Audit and Quarantine Capability created'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_FIREWALL_AUDIT_QUARANTINE


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_FIREWALL_AUDIT_QUARANTINE)
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
