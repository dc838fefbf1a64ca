# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

import pytest

import ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityTypes as examinee
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import parse_rfc850
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import (
    CapabilityProgrammingError, Diagnostics
)
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusVersion import SystemVersion

VERSION = SystemVersion(3, 85, 0, 3, pro=True)

SAMPLE_PROPERTIES = {
    'audit': None,
    'baseurl': {'url': 'https://example.test/'},
    'customs3regions': {'regions': ['eu-west-9', 'ap-east-7', 'eu-west-9']},
    'defaultrole': {'role': 'nx-anonymous'},
    'firewall.audit': {'repository': 'maven-central', 'quarantine': True},
    'healthcheck': {'configured_for_all_proxies': False, 'use_nexus_truststore': True},
    'OutreachManagementCapability': {'override_url': 'https://outreach.example.test/', 'always_remote': True},
    'rutauth': {'http_header': 'X-Remote-User'},
    'rapture.branding': {'header_enabled': True, 'header_html': '<b>$baseUrl</b>'},
    'rapture.settings': {'title': 'Artifacts', 'session_timeout': 0, 'long_request_timeout': 2147483647},
    'webhook.global': {'names': ['repository', 'audit'], 'url': 'https://hooks.example.test/', 'secret': 'k3y'},
    'webhook.repository': {'names': ['component'], 'url': 'http://hooks.example.test/x',
                           'repository': 'maven-releases'},
}


def plan_for(kind, **overrides):
    plan = dict(enabled=True, notes='managed')
    if SAMPLE_PROPERTIES[kind] is not None:
        plan['properties'] = dict(SAMPLE_PROPERTIES[kind])
    plan.update(overrides)
    return plan


def validated(handler, plan):
    diagnostics = Diagnostics()
    model = handler.plan_as_model(plan, diagnostics)
    assert not diagnostics.has_error(), [str(d) for d in diagnostics]
    return model


def error_messages(handler, plan):
    diagnostics = Diagnostics()
    assert handler.plan_as_model(plan, diagnostics) is None
    return ' | '.join(str(d) for d in diagnostics.errors())


def test_every_kind_has_a_sample():
    assert sorted(SAMPLE_PROPERTIES) == default_registry().kinds()


@pytest.mark.parametrize('kind', sorted(SAMPLE_PROPERTIES))
def test_server_round_trip_keeps_user_visible_fields(kind):
    handler = default_registry().get(kind)
    model = validated(handler, plan_for(kind))

    payload = handler.to_create_payload(model, VERSION)
    assert payload['typeId'] == kind
    assert all(isinstance(value, str) for value in payload['properties'].values())

    returned = dict((k, v) for k, v in payload['properties'].items() if k != 'secret')
    dto = dict(payload, id='cap-1', properties=returned)
    back = handler.from_server_dto(handler.new_model(), dto)

    assert back.id == 'cap-1'
    assert back.notes == model.notes
    assert back.enabled == model.enabled
    for prop in handler.PROPERTIES:
        if prop.returned:
            assert back.properties[prop.name] == model.properties[prop.name], prop.name


def test_resource_names_are_sanitised_public_names():
    registry = default_registry()

    assert registry.get('baseurl').resource_name == 'capability_base_url'
    assert registry.get('firewall.audit').resource_name == 'capability_firewall_audit_and_quarantine'
    assert registry.get('OutreachManagementCapability').resource_name == 'capability_outreach_management'
    assert registry.get('rapture.branding').resource_name == 'capability_ui_branding'
    assert examinee.sanitise_for_resource_name('RUT  Auth!') == 'rut_auth'


def test_payload_encoding():
    handler = default_registry().get('rapture.settings')
    model = validated(handler, plan_for('rapture.settings'))

    properties = handler.to_create_payload(model, VERSION)['properties']

    assert properties['debugAllowed'] == 'false'
    assert properties['sessionTimeout'] == '0'
    assert properties['statusIntervalAnonymous'] == '60'
    assert properties['longRequestTimeout'] == '2147483647'
    assert properties['title'] == 'Artifacts'


def test_sets_are_deduplicated_and_comma_joined():
    handler = default_registry().get('customs3regions')
    model = validated(handler, plan_for('customs3regions'))

    assert model.properties['regions'] == ['ap-east-7', 'eu-west-9']
    assert handler.to_create_payload(model, VERSION)['properties'] == {'regions': 'ap-east-7,eu-west-9'}


def test_update_payload_carries_id():
    handler = default_registry().get('baseurl')
    model = validated(handler, plan_for('baseurl'))
    model.id = 'cap-9'

    payload = handler.to_update_payload(model, VERSION)

    assert payload['id'] == 'cap-9'
    assert payload['properties'] == {'url': 'https://example.test/'}


def test_defaults_apply_when_properties_are_omitted():
    handler = default_registry().get('healthcheck')

    model = validated(handler, dict(enabled=True))

    assert model.notes == ''
    assert model.properties == {'configured_for_all_proxies': True, 'use_nexus_truststore': False}


def test_invalid_url_is_rejected():
    message = error_messages(default_registry().get('baseurl'), plan_for('baseurl', properties={'url': 'not-a-url'}))

    assert 'Must be a valid http:// or https:// URL' in message


def test_empty_region_set_is_rejected():
    handler = default_registry().get('customs3regions')

    assert 'at least 1 element' in error_messages(handler, plan_for('customs3regions', properties={'regions': []}))


def test_empty_http_header_is_rejected():
    handler = default_registry().get('rutauth')

    message = error_messages(handler, plan_for('rutauth', properties={'http_header': ''}))

    assert 'length must be at least 1' in message


def test_integer_outside_int32_is_rejected():
    handler = default_registry().get('rapture.settings')

    message = error_messages(handler, plan_for('rapture.settings', properties={'session_timeout': 2 ** 31}))

    assert '32 bit' in message


@pytest.mark.parametrize('kind, properties', [
    ('webhook.global', {'names': ['asset'], 'url': 'https://hooks.example.test/'}),
    ('webhook.repository', {'names': ['asset'], 'url': 'https://hooks.example.test/', 'repository': '_hidden'}),
    ('baseurl', {'url': 'https://example.test/', 'bogus': 'x'}),
    ('defaultrole', {}),
])
def test_invalid_properties_are_rejected(kind, properties):
    handler = default_registry().get(kind)

    assert error_messages(handler, plan_for(kind, properties=properties))


def test_enabled_is_required():
    plan = plan_for('audit')
    del plan['enabled']

    assert 'enabled' in error_messages(default_registry().get('audit'), plan)


def test_handler_refuses_foreign_models():
    audit = default_registry().get('audit').new_model(enabled=True)

    with pytest.raises(CapabilityProgrammingError):
        default_registry().get('baseurl').to_create_payload(audit, VERSION)


def test_unknown_property_in_model_is_a_programming_error():
    handler = default_registry().get('baseurl')
    model = handler.new_model(enabled=True, properties={'url': 'https://example.test/', 'path': '/x'})

    with pytest.raises(CapabilityProgrammingError):
        handler.to_create_payload(model, VERSION)


def test_state_of_other_kind_is_refused():
    with pytest.raises(CapabilityProgrammingError):
        default_registry().get('baseurl').state_as_model(dict(id='cap-1', type='audit', enabled=True))


def test_webhook_secret_comes_from_plan():
    handler = default_registry().get('webhook.global')
    plan = validated(handler, plan_for('webhook.global'))
    state = handler.from_server_dto(handler.new_model(), {
        'id': 'cap-3', 'typeId': 'webhook.global', 'enabled': True,
        'properties': {'names': 'audit,repository', 'url': 'https://hooks.example.test/'},
    })
    assert state.properties['secret'] is None

    state = handler.preserve_sensitive(plan, state)

    assert state.properties['secret'] == 'k3y'


def test_secret_is_ignored_by_change_detection():
    handler = default_registry().get('webhook.global')
    plan = validated(handler, plan_for('webhook.global'))
    state = plan.copy()
    state.properties = dict(plan.properties, secret=None)

    assert handler.changed_fields(plan, state) == []

    state.properties['url'] = 'https://elsewhere.example.test/'
    state.enabled = False
    assert handler.changed_fields(plan, state) == ['enabled', 'properties.url']


def test_declared_secret_counts_as_changed_when_resent():
    handler = default_registry().get('webhook.global')
    plan = validated(handler, plan_for('webhook.global'))
    state = plan.copy()
    state.properties = dict(plan.properties, secret=None)

    assert handler.changed_fields(plan, state, resend_unreturned=True) == ['properties.secret']

    plan.properties['secret'] = None
    assert handler.changed_fields(plan, state, resend_unreturned=True) == []


def test_webhooks_are_adopted_by_their_identity():
    assert default_registry().get('webhook.global').adopt_by_properties == ('url',)
    assert default_registry().get('webhook.repository').adopt_by_properties == ('repository', 'url')
    assert default_registry().get('firewall.audit').adopt_by_properties == ('repository',)
    assert default_registry().get('baseurl').adopt_by_properties == ()


def test_merge_plan_for_update_carries_id_and_stamps():
    handler = default_registry().get('rutauth')
    state = validated(handler, plan_for('rutauth'))
    state.id = 'cap-7'
    state.last_updated = 'Monday, 01-Jan-24 00:00:00 UTC'
    plan = validated(handler, plan_for('rutauth', properties={'http_header': 'X-Proxy-User'}))

    merged = handler.merge_plan_for_update(plan, state)

    assert merged.id == 'cap-7'
    assert parse_rfc850(merged.last_updated) > parse_rfc850(state.last_updated)


def test_missing_quarantine_reads_as_false():
    handler = default_registry().get('firewall.audit')

    model = handler.from_server_dto(handler.new_model(), {
        'id': 'cap-2', 'typeId': 'firewall.audit', 'enabled': True, 'properties': {'repository': 'npm-proxy'},
    })

    assert model.properties == {'repository': 'npm-proxy', 'quarantine': False}


def test_unparseable_server_values_fall_back_to_defaults():
    handler = default_registry().get('rapture.settings')

    model = handler.from_server_dto(handler.new_model(), {
        'id': 'cap-4', 'typeId': 'rapture.settings', 'enabled': 'true',
        'properties': {'sessionTimeout': 'soon', 'debugAllowed': 'maybe', 'requestTimeout': '99999999999'},
    })

    assert model.enabled is True
    assert model.properties['session_timeout'] == 30
    assert model.properties['debug_allowed'] is False
    assert model.properties['request_timeout'] == 60
    assert model.properties['title'] == 'Sonatype Nexus Repository'


def test_firewall_description_warns_about_quarantine():
    description = default_registry().get('firewall.audit').description

    assert '3.84.0' in description
    assert 'cannot be re-quarantined' in description
