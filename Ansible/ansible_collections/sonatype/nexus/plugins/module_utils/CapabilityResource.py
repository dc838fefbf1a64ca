# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Generic Capability resource.  One class serves every kind of Capability; everything
kind specific is delegated to the handler the resource was built with.
'''

import time

from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusResourceApi
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import (
    Diagnostics, NexusApiError, NexusError
)

CAPABILITIES_URLTAIL = '/v1/capabilities'
DELETE_MAX_ATTEMPTS = 3
DELETE_RETRY_DELAY = 1


def summarise_capability(dto):
    '''A CapabilityDTO as returned by the info module.'''
    return dict(
        id=dto.get('id'),
        type=capability_type_of(dto),
        notes=dto.get('notes') or '',
        enabled=dto.get('enabled'),
        properties=dict(dto.get('properties') or {}),
    )


def capability_type_of(dto):
    return dto.get('typeId') or dto.get('type')


def list_capabilities(api, kind=None):
    '''All Capabilities on the server, optionally only those of one kind.

    :raises NexusError: the list could not be fetched
    '''
    response = api.send_request('GET', CAPABILITIES_URLTAIL)
    capabilities = response.body or []
    if kind is None:
        return capabilities
    return [dto for dto in capabilities if capability_type_of(dto) == kind]


class CapabilityResource(NexusResourceApi):
    '''Create, read, update, delete and import for Capabilities of the handler's kind.

    States passed in and returned are plain dictionaries as produced by CapabilityModel.as_dict().
    '''

    def __init__(self, api, handler, inCheckMode=False, sleep=time.sleep):
        super().__init__(api, inCheckMode)
        self.handler = handler
        self._sleep = sleep

    def _label(self, capability_id=None):
        if capability_id:
            return '%s (ID=%s) Capability' % (self.handler.kind, capability_id)
        return '%s Capability' % self.handler.kind

    def _item_urltail(self, capability_id):
        return '%s/%s' % (CAPABILITIES_URLTAIL, self.api.quote(capability_id))

    def _require_capabilities(self, diagnostics):
        '''Server version, or None after recording an error when Capabilities cannot be managed.'''
        try:
            version = self.api.server_version()
        except NexusError as e:
            if self.api.writable is False:
                diagnostics.add_api_error('Sonatype Nexus Repository is not writable', e)
            else:
                diagnostics.add_api_error('Unable to determine Sonatype Nexus Repository version', e)
            return None
        if not version.supports_capabilities():
            diagnostics.add_error(
                'Unsupported Sonatype Nexus Repository version',
                'Managing %s requires Sonatype Nexus Repository 3.84.0 or later, found %s' % (
                    self.handler.resource_name, version))
            return None
        return version

    def create(self, plan):
        diagnostics = Diagnostics()
        model = self.handler.plan_as_model(plan, diagnostics)
        if model is None:
            return None, diagnostics
        version = self._require_capabilities(diagnostics)
        if version is None:
            return None, diagnostics

        payload = self.handler.to_create_payload(model, version)
        if self.inCheckMode:
            state = self.handler.stamp_plan_for_state(model.copy())
            return self.handler.preserve_sensitive(model, state).as_dict(), diagnostics

        try:
            response = self.api.send_request('POST', CAPABILITIES_URLTAIL, payload,
                                             expected=self.handler.create_success_codes)
        except NexusError as e:
            diagnostics.add_api_error('Error creating %s' % self._label(), e)
            return None, diagnostics

        state = self.handler.from_server_dto(model.copy(), response.body or {})
        state = self.handler.stamp_plan_for_state(state)
        state = self.handler.preserve_sensitive(model, state)
        return state.as_dict(), diagnostics

    def read(self, state):
        diagnostics = Diagnostics()
        prior = self.handler.state_as_model(state)
        try:
            response = self.api.send_request('GET', self._item_urltail(prior.id))
        except NexusApiError as e:
            if e.not_found:
                diagnostics.add_api_warning('%s did not exist to read' % self._label(prior.id), e)
                return None, diagnostics
            diagnostics.add_api_error('Error reading %s' % self._label(prior.id), e)
            return state, diagnostics
        except NexusError as e:
            diagnostics.add_api_error('Error reading %s' % self._label(prior.id), e)
            return state, diagnostics

        current = self.handler.merge_api_into_state(prior.copy(), response.body or {})
        current = self.handler.preserve_sensitive(prior, current)
        return current.as_dict(), diagnostics

    def update(self, plan, state):
        diagnostics = Diagnostics()
        model = self.handler.plan_as_model(plan, diagnostics)
        if model is None:
            return state, diagnostics
        prior = self.handler.state_as_model(state)
        version = self._require_capabilities(diagnostics)
        if version is None:
            return state, diagnostics

        updated = self.handler.merge_plan_for_update(model.copy(), prior)
        payload = self.handler.to_update_payload(updated, version)
        if not self.inCheckMode:
            try:
                self.api.send_request('PUT', self._item_urltail(prior.id), payload, expected=(204,))
            except NexusApiError as e:
                if e.not_found:
                    diagnostics.add_api_warning('%s did not exist to update' % self._label(prior.id), e)
                    return None, diagnostics
                diagnostics.add_api_error('Error updating %s' % self._label(prior.id), e)
                return state, diagnostics
            except NexusError as e:
                diagnostics.add_api_error('Error updating %s' % self._label(prior.id), e)
                return state, diagnostics

        updated = self.handler.preserve_sensitive(model, updated)
        return updated.as_dict(), diagnostics

    def delete(self, state):
        '''Deletes the Capability.  A Capability that is already gone counts as deleted.
        The server answers 500 while a Capability is in a transitional state, so that is retried.
        '''
        diagnostics = Diagnostics()
        capability_id = state.get('id')
        if self.inCheckMode:
            return diagnostics

        for attempt in range(1, DELETE_MAX_ATTEMPTS + 1):
            try:
                self.api.send_request('DELETE', self._item_urltail(capability_id), expected=(204,))
                return diagnostics
            except NexusApiError as e:
                if e.not_found:
                    return diagnostics
                if e.status == 500 and attempt < DELETE_MAX_ATTEMPTS:
                    self.api.log('Unexpected response when deleting %s (attempt %d)' % (
                        self._label(capability_id), attempt))
                    self._sleep(DELETE_RETRY_DELAY)
                    continue
                diagnostics.add_api_error('Error deleting %s' % self._label(capability_id), e)
                return diagnostics
            except NexusError as e:
                diagnostics.add_api_error('Error deleting %s' % self._label(capability_id), e)
                return diagnostics
        return diagnostics

    def import_state(self, import_id):
        diagnostics = Diagnostics()
        try:
            response = self.api.send_request('GET', self._item_urltail(import_id))
        except NexusError as e:
            diagnostics.add_api_error('Error importing %s' % self._label(import_id), e)
            return None, diagnostics

        dto = response.body or {}
        actual = capability_type_of(dto)
        if actual != self.handler.kind:
            diagnostics.add_error(
                'Error importing %s' % self._label(import_id),
                'Capability %s is of type %s, not %s' % (import_id, actual, self.handler.kind))
            return None, diagnostics

        state = self.handler.merge_api_into_state(self.handler.new_model(), dto)
        return state.as_dict(), diagnostics

    def find_by_properties(self, values):
        '''Capabilities of this kind whose properties (named as exposed to Ansible) all equal values.

        :raises NexusError: the list could not be fetched
        '''
        schema = self.handler.properties_schema()
        wanted = dict((schema[name].api_name, schema[name].to_api(value)) for name, value in values.items())
        return [dto for dto in list_capabilities(self.api, self.handler.kind)
                if all((dto.get('properties') or {}).get(key) == value for key, value in wanted.items())]

    def find_by_property(self, name, value):
        return self.find_by_properties({name: value})

    def find_existing(self, plan):
        '''Looks up the Capability a plan without an id refers to.  Returns (states, diagnostics).

        Capabilities are matched by kind, and additionally by the handler's adopt_by_properties when it has any.
        Kinds that can have several instances set those, so a plan only adopts the instance it declares.
        '''
        diagnostics = Diagnostics()
        keys = self.handler.adopt_by_properties
        declared = plan.get('properties') or {}
        try:
            if keys and all(declared.get(key) is not None for key in keys):
                found = self.find_by_properties(dict((key, declared.get(key)) for key in keys))
            else:
                found = list_capabilities(self.api, self.handler.kind)
        except NexusError as e:
            diagnostics.add_api_error('Error listing Capabilities', e)
            return [], diagnostics
        states = [self.handler.merge_api_into_state(self.handler.new_model(), dto).as_dict() for dto in found]
        return states, diagnostics
