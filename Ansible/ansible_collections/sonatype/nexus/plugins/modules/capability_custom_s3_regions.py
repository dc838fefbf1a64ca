#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: capability_custom_s3_regions

short_description: Manage the Custom S3 Regions Capability of Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Makes additional S3 regions available when configuring S3 Blob Stores.

options:
    properties:
        description:
            - Settings of the Custom S3 Regions Capability.
        type: dict
        suboptions:
            regions:
                description:
                    - Custom S3 regions.  At least one region is required; duplicates are ignored.
                required: True
                type: list
                elements: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs
    - sonatype.nexus.capability_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Add custom S3 regions
  sonatype.nexus.capability_custom_s3_regions:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    enabled: true
    properties:
      regions:
        - eu-central-3
        - us-gov-east-9
'''

RETURN = r'''
capability:
    description: State of the Capability after execution.  Regions are returned sorted.
    type: dict
    returned: when state is present
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'Custom S3 Regions Capability unchanged'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    capability_module_argument_spec, capability_module_required_if, run_capability_module
)
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import CAPABILITY_TYPE_CUSTOM_S3_REGIONS


def run_module():
    handler = default_registry().get(CAPABILITY_TYPE_CUSTOM_S3_REGIONS)
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
