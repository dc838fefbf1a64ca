# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Registry mapping each Capability kind (the server's typeId) to its handler.
The default registry is built once at import and frozen.
'''

from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import ALL_CAPABILITY_TYPES


class CapabilityRegistry():

    def __init__(self):
        self._byKind = dict()
        self._byResourceName = dict()
        self._frozen = False

    def register(self, handler):
        '''Adds a handler.

        :raises ValueError: the registry is frozen, or the handler's kind or resource name is already taken
        '''
        if self._frozen:
            raise ValueError('Cannot register %s: capability registry is frozen' % handler.kind)
        if handler.kind in self._byKind:
            raise ValueError('Duplicate capability kind: %s' % handler.kind)
        if handler.resource_name in self._byResourceName:
            raise ValueError('Duplicate capability resource name: %s' % handler.resource_name)
        self._byKind[handler.kind] = handler
        self._byResourceName[handler.resource_name] = handler
        return handler

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def get(self, kind):
        '''Handler for kind, or None.'''
        return self._byKind.get(kind)

    def by_resource_name(self, resource_name):
        return self._byResourceName.get(resource_name)

    def kinds(self):
        return sorted(self._byKind)

    def resource_names(self):
        return sorted(self._byResourceName)

    def handlers(self):
        return [self._byKind[kind] for kind in self.kinds()]

    def __len__(self):
        return len(self._byKind)

    def __contains__(self, kind):
        return kind in self._byKind


def build_registry(handler_classes=ALL_CAPABILITY_TYPES):
    registry = CapabilityRegistry()
    for handler_class in handler_classes:
        registry.register(handler_class())
    return registry.freeze()


DEFAULT_REGISTRY = build_registry()


def default_registry():
    return DEFAULT_REGISTRY
