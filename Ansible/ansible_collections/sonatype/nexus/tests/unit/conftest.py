# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

import io
import json
import urllib.error

import pytest

from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import NexusApi

BASE_URL = 'https://nexus.example.test'
API_URL = BASE_URL + '/service/rest'
WRITABLE = '/v1/status/writable'


class FakeResponse():

    def __init__(self, status, raw, headers):
        self.status = status
        self.reason = 'OK'
        self.headers = headers
        self._raw = raw

    def read(self):
        return self._raw


class RecordedRequest():

    def __init__(self, method, path, body, headers):
        self.method = method
        self.path = path
        self.body = body
        self.headers = headers


class FakeServer():
    '''Stands in for ansible.module_utils.urls.Request.  Responses are queued per (method, path);
    the last queued response for a route keeps being returned.
    '''

    def __init__(self, server_header='Nexus/3.85.0-03 (PRO)'):
        self.routes = dict()
        self.requests = list()
        self.add('GET', WRITABLE, headers={'Server': server_header})

    def add(self, method, path, status=200, body=None, headers=None):
        self.routes.setdefault((method, path), []).append((status, body, headers or {}))
        return self

    def replace(self, method, path, status=200, body=None, headers=None):
        self.routes[(method, path)] = []
        return self.add(method, path, status, body, headers)

    def open(self, method, url, data=None, headers=None):
        assert url.startswith(API_URL), url
        path = url[len(API_URL):]
        self.requests.append(RecordedRequest(method, path, json.loads(data) if data else None, headers))

        queue = self.routes.get((method, path))
        if not queue:
            raise AssertionError('unexpected request %s %s' % (method, path))
        status, body, response_headers = queue.pop(0) if len(queue) > 1 else queue[0]
        raw = b''
        if body is not None:
            raw = body.encode('utf-8') if isinstance(body, str) else json.dumps(body).encode('utf-8')
        if status < 200 or status >= 300:
            raise urllib.error.HTTPError(url, status, 'Error', response_headers, io.BytesIO(raw))
        return FakeResponse(status, raw, response_headers)

    def calls(self):
        '''Requests made, without the writable probe.'''
        return [(r.method, r.path) for r in self.requests if r.path != WRITABLE]

    def bodies(self, method):
        return [r.body for r in self.requests if r.method == method]


class FakeModule():
    '''Just enough of AnsibleModule for the module runners.'''

    class ExitJson(Exception):
        pass

    class FailJson(Exception):
        pass

    def __init__(self, params, check_mode=False):
        self.params = params
        self.check_mode = check_mode
        self.warnings = list()
        self.debugs = list()

    def warn(self, msg):
        self.warnings.append(msg)

    def debug(self, msg):
        self.debugs.append(msg)

    def exit_json(self, **kwargs):
        raise FakeModule.ExitJson(kwargs)

    def fail_json(self, **kwargs):
        raise FakeModule.FailJson(kwargs)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def api(server):
    nexus = NexusApi(BASE_URL, 'admin', 'admin123')
    nexus._request = server
    return nexus


@pytest.fixture
def make_api():
    def make(server, **kwargs):
        nexus = NexusApi(BASE_URL, 'admin', 'admin123', **kwargs)
        nexus._request = server
        return nexus
    return make


@pytest.fixture
def fake_server():
    return FakeServer


@pytest.fixture
def fake_module():
    return FakeModule
