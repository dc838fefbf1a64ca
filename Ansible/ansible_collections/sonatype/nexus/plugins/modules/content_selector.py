#!/usr/bin/python

# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

DOCUMENTATION = r'''
---
module: content_selector

short_description: Manage Content Selectors in Sonatype Nexus Repository

version_added: "1.0.0"

description:
    - Creates, updates or deletes a Content Selector, identified by its name.

options:
    name:
        description:
            - The name of the Content Selector.  Must match C(^[a-zA-Z0-9\-]{1}[a-zA-Z0-9_\-\.]*$).
        required: True
        type: str
    description:
        description:
            - The description of this Content Selector.  Required when I(state=present).
        required: False
        type: str
    expression:
        description:
            - The Content Selector expression used to identify content.  Required when I(state=present).
        required: False
        type: str
    state:
        description:
            - Desired state of the Content Selector after execution.
        default: present
        choices:
            - present
            - absent
        type: str

extends_documentation_fragment:
    - sonatype.nexus.nexus_common_docs

author:
    - Jared Schmidt (@jared-schmidt-civ)
'''

EXAMPLES = r'''
- name: Select everything below /org/example/
  sonatype.nexus.content_selector:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    name: org-example
    description: Example Corp artifacts
    expression: format == "maven2" and path =^ "/org/example/"

- name: Remove a Content Selector
  sonatype.nexus.content_selector:
    url: https://nexus.example.com
    username: admin
    password: "{{ nexus_admin_password }}"
    name: org-example
    state: absent
'''

RETURN = r'''
content_selector:
    description: State of the Content Selector after execution.
    type: dict
    returned: when state is present
    sample:
        name: org-example
        description: Example Corp artifacts
        expression: format == "maven2" and path =^ "/org/example/"
        last_updated: "Monday, 19-Oct-26 10:15:00 UTC"
message:
    description: Message stating whether things changed or not
    type: str
    returned: always
    sample: 'Content Selector org-example created'
'''

from ansible.module_utils.basic import AnsibleModule

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule import (
    STATE_ABSENT, STATE_PRESENT, report_diagnostics
)
from ansible_collections.sonatype.nexus.plugins.module_utils.ContentSelectorApi import ContentSelectorResource
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusApi, nexus_argument_spec


def run_content_selector(module, api=None):
    result = dict(changed=False, message='')
    if api is None:
        api = NexusApi.from_module(module)
    resource = ContentSelectorResource(api, inCheckMode=module.check_mode)
    name = module.params['name']
    plan = dict(name=name, description=module.params['description'], expression=module.params['expression'])

    current, diagnostics = resource.lookup(name)
    report_diagnostics(module, diagnostics, result)

    if module.params['state'] == STATE_ABSENT:
        if current is None:
            result['message'] = 'Content Selector %s not present' % name
        else:
            report_diagnostics(module, resource.delete(current), result)
            result['changed'] = True
            result['message'] = 'Content Selector %s deleted' % name
            result['diff'] = dict(before=current, after={})
        module.exit_json(**result)
        return

    if current is None:
        state, diagnostics = resource.create(plan)
        report_diagnostics(module, diagnostics, result)
        result['changed'] = True
        result['message'] = 'Content Selector %s created' % name
        result['diff'] = dict(before={}, after=state)
    elif resource.differs(plan, current):
        state, diagnostics = resource.update(plan, current)
        report_diagnostics(module, diagnostics, result)
        result['changed'] = True
        result['message'] = 'Content Selector %s updated' % name
        result['diff'] = dict(before=current, after=state)
    else:
        state = current
        result['message'] = 'Content Selector %s unchanged' % name

    result['content_selector'] = state
    module.exit_json(**result)


def run_module():
    module_args = nexus_argument_spec()
    module_args.update(
        name=dict(type='str', required=True),
        description=dict(type='str', required=False),
        expression=dict(type='str', required=False),
        state=dict(type='str', required=False, default=STATE_PRESENT, choices=[STATE_PRESENT, STATE_ABSENT]),
    )

    module = AnsibleModule(
        argument_spec=module_args,
        required_if=[('state', STATE_PRESENT, ['description', 'expression'])],
        supports_check_mode=True
    )
    run_content_selector(module)


def main():
    run_module()


if __name__ == '__main__':
    main()
