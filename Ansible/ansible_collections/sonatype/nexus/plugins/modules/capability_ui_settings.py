#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_ui_settings

short_description: Manage the UI Settings Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Tunes title, debugging, polling intervals and timeouts of the Sonatype Nexus Repository UI.

options:
    properties:
        description:
            - Settings of the UI Settings Capability.  Numbers must fit in a signed 32 bit integer.
        type: dict
        suboptions:
            title:
                description:
                    - Browser page title.
                default: Sonatype Nexus Repository
                type: str
            debug_allowed:
                description:
                    - Allow developer debugging.
                default: False
                type: bool
            status_interval_authenticated:
                description:
                    - Interval between status requests for authenticated users (seconds).
                default: 5
                type: int
            status_interval_anonymous:
                description:
                    - Interval between status requests for anonymous user (seconds).
                default: 60
                type: int
            session_timeout:
                description:
                    - Period of inactivity before session times out (minutes).  A value of 0 will mean that a
                      session never expires.
                default: 30
                type: int
            request_timeout:
                description:
                    - Period of time to keep the connection alive for requests expected to take a normal period
                      of time (seconds).
                default: 60
                type: int
            long_request_timeout:
                description:
                    - Period of time to keep the connection alive for requests expected to take an extended
                      period of time (seconds).
                default: 180
                type: int

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Longer sessions and a custom title
  sonatype.nexus.capability_ui_settings:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      title: Example Corp Artifacts
      session_timeout: 120
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
    sample: 'UI Settings Capability updated'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_UI_SETTINGS


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_UI_SETTINGS)
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
