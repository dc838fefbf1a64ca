# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

import pytest

import ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry as examinee
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes import (
    AuditCapability, BaseCapabilityType, BaseUrlCapability
)


def test_default_registry_advertises_every_capability_resource():
    registry = examinee.default_registry()

    assert registry.frozen
    assert len(registry) == 12
    assert registry.resource_names() == [
        'capability_audit',
        'capability_base_url',
        'capability_custom_s3_regions',
        'capability_default_role',
        'capability_firewall_audit_and_quarantine',
        'capability_healthcheck',
        'capability_outreach_management',
        'capability_rut_auth',
        'capability_ui_branding',
        'capability_ui_settings',
        'capability_webhook_global',
        'capability_webhook_repository',
    ]


def test_lookup_by_kind_and_resource_name():
    registry = examinee.default_registry()

    assert registry.get('baseurl') is registry.by_resource_name('capability_base_url')
    assert 'webhook.repository' in registry
    assert registry.get('storage-settings') is None


def test_duplicate_kind_is_rejected():
    registry = examinee.CapabilityRegistry()
    registry.register(AuditCapability())

    with pytest.raises(ValueError, match='Duplicate capability kind'):
        registry.register(AuditCapability())


def test_duplicate_resource_name_is_rejected():
    class AnotherBaseUrl(BaseCapabilityType):
        kind = 'baseurl2'
        public_name = 'Base-URL'

    registry = examinee.CapabilityRegistry()
    registry.register(BaseUrlCapability())

    with pytest.raises(ValueError, match='Duplicate capability resource name'):
        registry.register(AnotherBaseUrl())


def test_frozen_registry_refuses_registration():
    registry = examinee.build_registry((AuditCapability,))

    with pytest.raises(ValueError, match='frozen'):
        registry.register(BaseUrlCapability())
