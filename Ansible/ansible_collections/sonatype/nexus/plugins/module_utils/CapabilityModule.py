# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Shared body of the capability_* modules.  Each module only differs in the handler it
passes in, which decides the "properties" suboptions and how they reach the server.
'''

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityResource import CapabilityResource
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusApi, nexus_argument_spec
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import Diagnostics

STATE_PRESENT = 'present'
STATE_ABSENT = 'absent'
UPDATE_SECRET_ALWAYS = 'always'
UPDATE_SECRET_ON_CREATE = 'on_create'


def has_unreturned_properties(handler):
    return any(not p.returned for p in handler.PROPERTIES)


def capability_module_argument_spec(handler):
    spec = nexus_argument_spec()
    spec.update(
        id=dict(type='str', required=False),
        notes=dict(type='str', required=False, default=''),
        enabled=dict(type='bool', required=False),
        state=dict(type='str', required=False, default=STATE_PRESENT, choices=[STATE_PRESENT, STATE_ABSENT]),
    )
    if handler.PROPERTIES:
        spec['properties'] = dict(type='dict', required=False, options=handler.argument_spec())
    if has_unreturned_properties(handler):
        spec['update_secret'] = dict(type='str', required=False, default=UPDATE_SECRET_ALWAYS,
                                     choices=[UPDATE_SECRET_ALWAYS, UPDATE_SECRET_ON_CREATE], no_log=False)
    return spec


def capability_module_required_if(handler):
    '''enabled, and properties when any of them is required, must be given for state=present.'''
    required = ['enabled']
    if any(p.required for p in handler.PROPERTIES):
        required.append('properties')
    return [('state', STATE_PRESENT, required)]


def report_diagnostics(module, diagnostics, result):
    '''Warnings go to module.warn.  Any error fails the module.'''
    for warning in diagnostics.warnings():
        module.warn(str(warning))
    if diagnostics.has_error():
        module.fail_json(msg='; '.join(str(error) for error in diagnostics.errors()), **result)


def plan_from_params(params):
    return dict(
        id=params.get('id'),
        notes=params.get('notes') or '',
        enabled=params.get('enabled'),
        properties=params.get('properties'),
    )


def find_current(module, resource, plan, result):
    '''State of the Capability this task refers to, or None when there is none.
    Without an id, the one existing Capability of the kind (or matching repository) is adopted.
    '''
    handler = resource.handler
    if plan['id']:
        current, diagnostics = resource.read(dict(id=plan['id'], type=handler.kind))
        report_diagnostics(module, diagnostics, result)
        if current is None and module.params['state'] == STATE_PRESENT:
            module.fail_json(msg='%s Capability with id %s does not exist' % (handler.public_name, plan['id']),
                             **result)
        return current

    found, diagnostics = resource.find_existing(plan)
    report_diagnostics(module, diagnostics, result)
    if len(found) > 1:
        module.fail_json(
            msg='Found %d %s Capabilities (%s); set id to choose which one to manage' % (
                len(found), handler.public_name, ', '.join(str(state['id']) for state in found)),
            **result)
    if found:
        return found[0]
    return None


def run_capability_module(module, handler, api=None):
    '''Ensures the Capability is present and matches the task, or is absent.

    :param module: AnsibleModule built with capability_module_argument_spec(handler)
    :param handler: Capability type handler from the registry
    :param api: NexusApi to use instead of one built from the module's connection options
    '''
    result = dict(changed=False, message='')
    if api is None:
        api = NexusApi.from_module(module)
    resource = CapabilityResource(api, handler, inCheckMode=module.check_mode)
    plan = plan_from_params(module.params)

    current = find_current(module, resource, plan, result)

    if module.params['state'] == STATE_ABSENT:
        if current is None:
            result['message'] = '%s Capability not present' % handler.public_name
        else:
            report_diagnostics(module, resource.delete(current), result)
            result['changed'] = True
            result['message'] = '%s Capability deleted' % handler.public_name
            result['diff'] = dict(before=current, after={})
        module.exit_json(**result)
        return

    if current is None:
        state, diagnostics = resource.create(plan)
        report_diagnostics(module, diagnostics, result)
        result['changed'] = True
        result['message'] = '%s Capability created' % handler.public_name
        result['diff'] = dict(before={}, after=state)
    else:
        diagnostics = Diagnostics()
        planned = handler.plan_as_model(plan, diagnostics)
        report_diagnostics(module, diagnostics, result)
        existing = handler.state_as_model(current)
        resend = (has_unreturned_properties(handler)
                  and module.params.get('update_secret', UPDATE_SECRET_ALWAYS) == UPDATE_SECRET_ALWAYS)
        changed_fields = handler.changed_fields(planned, existing, resend_unreturned=resend)
        if changed_fields:
            module.debug('%s Capability %s differs in %s' % (handler.public_name, existing.id, ', '.join(changed_fields)))
            state, diagnostics = resource.update(plan, current)
            report_diagnostics(module, diagnostics, result)
            result['changed'] = True
            result['message'] = '%s Capability updated' % handler.public_name
            result['diff'] = dict(before=current, after=state)
        else:
            state = handler.preserve_sensitive(planned, existing).as_dict()
            result['message'] = '%s Capability unchanged' % handler.public_name

    result['capability'] = state
    module.exit_json(**result)
