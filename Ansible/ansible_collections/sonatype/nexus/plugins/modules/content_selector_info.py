#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: content_selector_info

short_description: Read Content Selectors from Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Returns one Content Selector by name, or all of them when no name is given.

options:
    name:
        description:
            - Name of the Content Selector to return.  The task fails if it does not exist.
        required: False
        type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: List all Content Selectors
  sonatype.nexus.content_selector_info:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
  register: selectors
'''

RETURN = r'''
content_selectors:
    description: Content Selectors found, each with name, description and expression.
    type: list
    elements: dict
    returned: always
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import report_diagnostics
from ansible_collections.sonatype.nexus.plugins.module_utils.ContentSelectorApi import ContentSelectorResource
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusApi, nexus_argument_spec
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import Diagnostics, NexusError


def run_content_selector_info(module, api=None):
    result = dict(changed=False, content_selectors=[])
    if api is None:
        api = NexusApi.from_module(module)
    resource = ContentSelectorResource(api)
    name = module.params.get('name')

    if name:
        current, diagnostics = resource.lookup(name)
        report_diagnostics(module, diagnostics, result)
        if current is None:
            module.fail_json(msg='Content Selector %s does not exist' % name, **result)
            return
        result['content_selectors'] = [current]
    else:
        try:
            result['content_selectors'] = resource.list()
        except NexusError as e:
            diagnostics = Diagnostics()
            diagnostics.add_api_error('Unable to list Content Selectors', e)
            report_diagnostics(module, diagnostics, result)
            return

    module.exit_json(**result)


def run_module():
    module_args = nexus_argument_spec()
    module_args.update(
        name=dict(type='str', required=False),
    )

    module = AnsibleModule(
        argument_spec=module_args,
        supports_check_mode=True
    )
    run_content_selector_info(module)


def main():
    run_module()


if __name__ == '__main__':
    main()
