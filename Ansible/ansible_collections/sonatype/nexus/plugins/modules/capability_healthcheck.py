#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_healthcheck

short_description: Manage the Healthcheck Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Configures Sonatype Repository Healthcheck for proxy repositories.

options:
    properties:
        description:
            - Settings of the Healthcheck Capability.
        type: dict
        suboptions:
            configured_for_all_proxies:
                description:
                    - Configure all supported proxy repositories to regularly check with Sonatype Repository
                      Healthcheck for updates by default.
                default: True
                type: bool
            use_nexus_truststore:
                description:
                    - Whether to use Nexus Truststore when communicating with Sonatype Repository Healthcheck.
                default: False
                type: bool

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Enable Healthcheck with default settings
  sonatype.nexus.capability_healthcheck:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true

- name: Enable Healthcheck through the Nexus truststore
  sonatype.nexus.capability_healthcheck:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      configured_for_all_proxies: false
      use_nexus_truststore: true
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
    sample: 'Healthcheck Capability unchanged'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_HEALTHCHECK


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_HEALTHCHECK)
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
