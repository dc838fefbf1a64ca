# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

import re

from ansible.module_utils.common.arg_spec import ArgumentSpecValidator

from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusResourceApi, stamp_last_updated
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import (
    Diagnostics, NexusApiError, NexusError
)

CONTENT_SELECTORS_URLTAIL = '/v1/security/content-selectors'
CONTENT_SELECTOR_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9\-]{1}[a-zA-Z0-9_\-\.]*$')
CONTENT_SELECTOR_FIELDS = ('name', 'description', 'expression')


def content_selector_argument_spec():
    return dict(
        name=dict(type='str', required=True),
        description=dict(type='str', required=True),
        expression=dict(type='str', required=True),
        last_updated=dict(type='str', required=False),
    )


def summarise_content_selector(dto):
    return dict((field, dto.get(field)) for field in CONTENT_SELECTOR_FIELDS)


class ContentSelectorResource(NexusResourceApi):
    '''Content Selectors are identified by name, which is also the import key.'''

    def _item_urltail(self, name):
        return '%s/%s' % (CONTENT_SELECTORS_URLTAIL, self.api.quote(name))

    def validate(self, plan, diagnostics):
        '''Returns the validated plan, or None after recording errors in diagnostics.'''
        result = ArgumentSpecValidator(content_selector_argument_spec()).validate(dict(plan))
        errors = list(result.error_messages)
        validated = result.validated_parameters
        name = validated.get('name')
        if not errors and not CONTENT_SELECTOR_NAME_PATTERN.match(name):
            errors.append('name: Content Selector name must match pattern `%s`, got %r' % (
                CONTENT_SELECTOR_NAME_PATTERN.pattern, name))
        if errors:
            for message in errors:
                diagnostics.add_error('Invalid configuration for content_selector', message)
            return None
        return validated

    @staticmethod
    def _payload(plan):
        return summarise_content_selector(plan)

    @staticmethod
    def differs(plan, state):
        return any(plan.get(field) != state.get(field) for field in CONTENT_SELECTOR_FIELDS)

    def list(self):
        '''All Content Selectors.

        :raises NexusError: the list could not be fetched
        '''
        response = self.api.send_request('GET', CONTENT_SELECTORS_URLTAIL)
        return [summarise_content_selector(dto) for dto in (response.body or [])]

    def lookup(self, name):
        '''Current state of the named Content Selector, or None.  Unlike read, a missing one is not a warning.'''
        diagnostics = Diagnostics()
        try:
            response = self.api.send_request('GET', self._item_urltail(name))
        except NexusApiError as e:
            if not e.not_found:
                diagnostics.add_api_error('Error reading Content Selector %s' % name, e)
            return None, diagnostics
        except NexusError as e:
            diagnostics.add_api_error('Error reading Content Selector %s' % name, e)
            return None, diagnostics
        return summarise_content_selector(response.body or {}), diagnostics

    def create(self, plan):
        diagnostics = Diagnostics()
        validated = self.validate(plan, diagnostics)
        if validated is None:
            return None, diagnostics
        if not self.inCheckMode:
            try:
                self.api.send_request('POST', CONTENT_SELECTORS_URLTAIL, self._payload(validated), expected=(204,))
            except NexusError as e:
                diagnostics.add_api_error('Error creating Content Selector', e)
                return None, diagnostics
        state = self._payload(validated)
        state['last_updated'] = stamp_last_updated(validated.get('last_updated'))
        return state, diagnostics

    def read(self, state):
        diagnostics = Diagnostics()
        name = state.get('name')
        try:
            response = self.api.send_request('GET', self._item_urltail(name))
        except NexusApiError as e:
            if e.not_found:
                diagnostics.add_api_warning('Content Selector %s to read did not exist' % name, e)
                return None, diagnostics
            diagnostics.add_api_error('Error reading Content Selector %s' % name, e)
            return state, diagnostics
        except NexusError as e:
            diagnostics.add_api_error('Error reading Content Selector %s' % name, e)
            return state, diagnostics

        current = summarise_content_selector(response.body or {})
        current['last_updated'] = state.get('last_updated') or stamp_last_updated()
        return current, diagnostics

    def update(self, plan, state):
        diagnostics = Diagnostics()
        validated = self.validate(plan, diagnostics)
        if validated is None:
            return state, diagnostics
        if not self.inCheckMode:
            try:
                self.api.send_request('PUT', self._item_urltail(state.get('name')), self._payload(validated),
                                      expected=(204,))
            except NexusApiError as e:
                if e.not_found:
                    diagnostics.add_api_warning('Content Selector %s to update did not exist' % state.get('name'), e)
                    return None, diagnostics
                diagnostics.add_api_error('Error updating Content Selector %s' % state.get('name'), e)
                return state, diagnostics
            except NexusError as e:
                diagnostics.add_api_error('Error updating Content Selector %s' % state.get('name'), e)
                return state, diagnostics
        updated = self._payload(validated)
        updated['last_updated'] = stamp_last_updated(state.get('last_updated'))
        return updated, diagnostics

    def delete(self, state):
        diagnostics = Diagnostics()
        if self.inCheckMode:
            return diagnostics
        try:
            self.api.send_request('DELETE', self._item_urltail(state.get('name')), expected=(204,))
        except NexusApiError as e:
            if not e.not_found:
                diagnostics.add_api_error('Error removing Content Selector %s' % state.get('name'), e)
        except NexusError as e:
            diagnostics.add_api_error('Error removing Content Selector %s' % state.get('name'), e)
        return diagnostics

    def import_state(self, import_id):
        current, diagnostics = self.read(dict(name=import_id))
        if current is None:
            imported = Diagnostics()
            imported.add_error('Error importing Content Selector %s' % import_id, 'Content Selector does not exist')
            return None, imported
        return current, diagnostics
