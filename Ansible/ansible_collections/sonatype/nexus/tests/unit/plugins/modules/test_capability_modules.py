# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

import pytest

import ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityModule as examinee
from ansible_collections.sonatype.nexus.plugins.module_utils.CapabilityRegistry import default_registry
from ansible_collections.sonatype.nexus.plugins.modules import capability_info


def params(**kwargs):
    result = dict(id=None, notes='', enabled=True, properties=None, state='present')
    result.update(kwargs)
    return result


def run(fake_module, api, kind, check_mode=False, **kwargs):
    module = fake_module(params(**kwargs), check_mode=check_mode)
    with pytest.raises(fake_module.ExitJson) as exited:
        examinee.run_capability_module(module, default_registry().get(kind), api=api)
    return exited.value.args[0], module


def fail(fake_module, api, kind, **kwargs):
    module = fake_module(params(**kwargs))
    with pytest.raises(fake_module.FailJson) as failed:
        examinee.run_capability_module(module, default_registry().get(kind), api=api)
    return failed.value.args[0]


def base_url_dto(capability_id='cap-1', url='https://example.test/'):
    return {'id': capability_id, 'typeId': 'baseurl', 'notes': '', 'enabled': True, 'properties': {'url': url}}


def test_argument_spec_includes_connection_and_properties():
    handler = default_registry().get('webhook.repository')

    spec = examinee.capability_module_argument_spec(handler)

    assert spec['password']['no_log'] is True
    assert spec['properties']['options']['secret']['no_log'] is True
    assert spec['properties']['options']['names']['choices'] == ['asset', 'component']
    assert examinee.capability_module_required_if(handler) == [('state', 'present', ['enabled', 'properties'])]


def test_audit_has_no_properties_option():
    handler = default_registry().get('audit')

    assert 'properties' not in examinee.capability_module_argument_spec(handler)
    assert examinee.capability_module_required_if(handler) == [('state', 'present', ['enabled'])]


def test_creates_when_none_exists(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[])
    server.add('POST', '/v1/capabilities', body=base_url_dto())

    result, module = run(fake_module, api, 'baseurl', properties=dict(url='https://example.test/'))

    assert result['changed'] is True
    assert result['capability']['id'] == 'cap-1'
    assert result['message'] == 'Base URL Capability created'
    assert result['diff']['before'] == {}


def test_unchanged_capability_is_adopted_without_update(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[base_url_dto()])

    result, module = run(fake_module, api, 'baseurl', properties=dict(url='https://example.test/'))

    assert result['changed'] is False
    assert result['capability']['id'] == 'cap-1'
    assert ('PUT', '/v1/capabilities/cap-1') not in server.calls()


def test_changed_capability_is_updated(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[base_url_dto()])
    server.add('PUT', '/v1/capabilities/cap-1', status=204)

    result, module = run(fake_module, api, 'baseurl', notes='behind the proxy',
                         properties=dict(url='https://proxy.example.test/'))

    assert result['changed'] is True
    assert result['capability']['properties'] == {'url': 'https://proxy.example.test/'}
    assert server.bodies('PUT')[0]['notes'] == 'behind the proxy'
    assert any('differs in notes, properties.url' in message for message in module.debugs)


def test_explicit_id_is_read(fake_module, api, server):
    server.add('GET', '/v1/capabilities/cap-2', body=base_url_dto('cap-2'))

    result, module = run(fake_module, api, 'baseurl', id='cap-2', properties=dict(url='https://example.test/'))

    assert result['changed'] is False
    assert server.calls() == [('GET', '/v1/capabilities/cap-2')]


def test_explicit_id_that_does_not_exist_fails(fake_module, api, server):
    server.add('GET', '/v1/capabilities/cap-2', status=404)

    result = fail(fake_module, api, 'baseurl', id='cap-2', properties=dict(url='https://example.test/'))

    assert 'does not exist' in result['msg']


def test_several_candidates_require_an_id(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[base_url_dto('cap-1'), base_url_dto('cap-2')])

    result = fail(fake_module, api, 'baseurl', properties=dict(url='https://example.test/'))

    assert 'set id to choose' in result['msg']


def test_firewall_is_adopted_by_repository(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[
        {'id': 'fw-1', 'typeId': 'firewall.audit', 'enabled': True,
         'properties': {'repository': 'npm-proxy', 'quarantine': 'true'}},
        {'id': 'fw-2', 'typeId': 'firewall.audit', 'enabled': True,
         'properties': {'repository': 'maven-central', 'quarantine': 'false'}},
    ])
    server.add('PUT', '/v1/capabilities/fw-2', status=204)

    result, module = run(fake_module, api, 'firewall.audit',
                         properties=dict(repository='maven-central', quarantine=True))

    assert result['changed'] is True
    assert result['capability']['id'] == 'fw-2'
    assert server.bodies('PUT')[0]['properties'] == {'repository': 'maven-central', 'quarantine': 'true'}


def repository_webhook_dto(capability_id, repository, url):
    return {'id': capability_id, 'typeId': 'webhook.repository', 'notes': '', 'enabled': True,
            'properties': {'names': 'component', 'repository': repository, 'url': url}}


def test_webhook_for_another_repository_is_created_not_adopted(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[
        repository_webhook_dto('wh-1', 'maven-releases', 'https://a.example/'),
    ])
    server.add('POST', '/v1/capabilities', body=repository_webhook_dto('wh-2', 'npm-proxy', 'https://b.example/'))

    result, module = run(fake_module, api, 'webhook.repository',
                         properties=dict(names=['component'], repository='npm-proxy', url='https://b.example/'))

    assert result['message'] == 'Webhook Repository Capability created'
    assert result['capability']['id'] == 'wh-2'
    assert ('POST', '/v1/capabilities') in server.calls()
    assert ('PUT', '/v1/capabilities/wh-1') not in server.calls()


def test_webhook_with_same_repository_and_url_is_adopted(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[
        repository_webhook_dto('wh-1', 'maven-releases', 'https://a.example/'),
        repository_webhook_dto('wh-2', 'maven-releases', 'https://b.example/'),
    ])

    result, module = run(fake_module, api, 'webhook.repository',
                         properties=dict(names=['component'], repository='maven-releases', url='https://b.example/'))

    assert result['changed'] is False
    assert result['capability']['id'] == 'wh-2'
    assert ('POST', '/v1/capabilities') not in server.calls()


def global_webhook_dto():
    return {'id': 'wh-1', 'typeId': 'webhook.global', 'notes': '', 'enabled': True,
            'properties': {'names': 'audit', 'url': 'https://hooks.example.test/'}}


def test_declared_secret_is_sent_again_by_default(fake_module, api, server):
    server.add('GET', '/v1/capabilities/wh-1', body=global_webhook_dto())
    server.add('PUT', '/v1/capabilities/wh-1', status=204)

    result, module = run(fake_module, api, 'webhook.global', id='wh-1', update_secret='always',
                         properties=dict(names=['audit'], url='https://hooks.example.test/', secret='new-secret'))

    assert result['changed'] is True
    assert result['message'] == 'Webhook Global Capability updated'
    assert server.bodies('PUT')[0]['properties']['secret'] == 'new-secret'


def test_secret_is_not_sent_again_on_create_only(fake_module, api, server):
    server.add('GET', '/v1/capabilities/wh-1', body=global_webhook_dto())

    result, module = run(fake_module, api, 'webhook.global', id='wh-1', update_secret='on_create',
                         properties=dict(names=['audit'], url='https://hooks.example.test/', secret='new-secret'))

    assert result['changed'] is False
    assert server.calls() == [('GET', '/v1/capabilities/wh-1')]


def test_update_secret_option_only_for_kinds_with_secrets():
    assert 'update_secret' in examinee.capability_module_argument_spec(default_registry().get('webhook.global'))
    assert 'update_secret' not in examinee.capability_module_argument_spec(default_registry().get('baseurl'))


def test_validation_errors_fail_the_module(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[])

    result = fail(fake_module, api, 'baseurl', properties=dict(url='ftp://example.test/'))

    assert 'Must be a valid http:// or https:// URL' in result['msg']
    assert ('POST', '/v1/capabilities') not in server.calls()


def test_absent_deletes_existing(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[base_url_dto()])
    server.add('DELETE', '/v1/capabilities/cap-1', status=204)

    result, module = run(fake_module, api, 'baseurl', state='absent', enabled=None)

    assert result['changed'] is True
    assert result['diff']['after'] == {}


def test_absent_when_missing_is_unchanged(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[])

    result, module = run(fake_module, api, 'audit', state='absent', enabled=None)

    assert result['changed'] is False
    assert server.calls() == [('GET', '/v1/capabilities')]


def test_check_mode_reports_change_without_posting(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[])

    result, module = run(fake_module, api, 'audit', check_mode=True)

    assert result['changed'] is True
    assert server.calls() == [('GET', '/v1/capabilities')]


def test_read_warnings_are_passed_to_ansible(fake_module, api, server):
    server.add('GET', '/v1/capabilities/cap-9', status=404)

    result, module = run(fake_module, api, 'audit', id='cap-9', state='absent', enabled=None)

    assert result['changed'] is False
    assert module.warnings == ['audit (ID=cap-9) Capability did not exist to read: Error response: 404 Error']


def test_capability_info_filters_by_type(fake_module, api, server):
    server.add('GET', '/v1/capabilities', body=[
        base_url_dto(),
        {'id': 'cap-2', 'typeId': 'audit', 'notes': 'x', 'enabled': False, 'properties': {}},
    ])
    module = fake_module(dict(type='audit'))

    with pytest.raises(fake_module.ExitJson) as exited:
        capability_info.run_capability_info(module, api=api)

    assert exited.value.args[0]['capabilities'] == [
        {'id': 'cap-2', 'type': 'audit', 'notes': 'x', 'enabled': False, 'properties': {}},
    ]


def test_capability_info_reports_list_failure(fake_module, api, server):
    server.add('GET', '/v1/capabilities', status=401, body='unauthorized')
    module = fake_module(dict(type=None))

    with pytest.raises(fake_module.FailJson) as failed:
        capability_info.run_capability_info(module, api=api)

    assert 'Unable to list Capabilities' in failed.value.args[0]['msg']
