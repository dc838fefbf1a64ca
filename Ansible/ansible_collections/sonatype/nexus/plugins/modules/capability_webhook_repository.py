#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_webhook_repository

short_description: Manage Repository Webhook Capabilities of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Sends an HTTP POST request to a URL on asset and/or component events of one repository.
    - The server never returns I(properties.secret), so it cannot be compared.  See I(update_secret).
    - Without I(id), the Webhook with the same I(properties.repository) and I(properties.url) is managed, and
      one is created when there is none.

options:
    properties:
        description:
            - Settings of the Webhook.
        type: dict
        suboptions:
            names:
                description:
                    - Event types which trigger this Webhook.  One or both of C(asset) and C(component).
                required: True
                type: list
                elements: str
                choices:
                    - asset
                    - component
            repository:
                description:
                    - Repository to discriminate events from.
                required: True
                type: str
            url:
                description:
                    - Send a HTTP POST request to this URL.  Must start with http:// or https://.
                required: True
                type: str
            secret:
                description:
                    - Key to use for HMAC payload digest.
                required: False
                type: str
    update_secret:
        description:
            - C(always) sends I(properties.secret) whenever it is set, which reports the task as changed.
            - C(on_create) only sends it when the Webhook is created, or when another setting changed.
        default: always
        choices:
            - always
            - on_create
        required: False
        type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Notify the build system of new components in maven-releases
  sonatype.nexus.capability_webhook_repository:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    id: "{{ releases_webhook_id }}"
    enabled: true
    properties:
      names:
        - component
      repository: maven-releases
      url: https://ci.example.com/hooks/nexus
'''

RETURN = r'''
capability:
    description: State of the Capability after execution.  I(properties.secret) is masked.
    type: dict
    returned: when state is present
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'Webhook Repository Capability updated'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_WEBHOOK_REPOSITORY


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_WEBHOOK_REPOSITORY)
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
