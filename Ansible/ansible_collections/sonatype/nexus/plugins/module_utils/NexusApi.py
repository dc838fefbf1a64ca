# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
This library is used for declaratively defining a desired configuration state
for Sonatype Nexus Repository and applying it using Create, Read, Update, Delete
operations against its REST API.  Create is a POST message, Read is a GET message,
Update is a PUT message, and Delete is a DELETE message.
'''

import base64
import json
import urllib.error
import urllib.parse
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from ansible.module_utils.basic import env_fallback
from ansible.module_utils.common.text.converters import to_bytes, to_text
from ansible.module_utils.urls import Request, ConnectionError as UrlsConnectionError

from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import (
    NexusApiError, classify_transport_error
)
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusVersion import (
    parse_server_header, parse_version_hint
)

DEFAULT_API_BASE_PATH = '/service/rest'
DEFAULT_TIMEOUT = 60

# Go's time.RFC850 layout, which is what last_updated has always been rendered in
RFC850_FORMAT = '%A, %d-%b-%y %H:%M:%S %Z'


def nexus_argument_spec():
    '''Connection options shared by every module in this collection.
    Documented in the sonatype.nexus.nexus_common_docs doc fragment.
    '''
    return dict(
        url=dict(type='str', required=True, fallback=(env_fallback, ['NXRM_SERVER_URL'])),
        username=dict(type='str', required=True, fallback=(env_fallback, ['NXRM_SERVER_USERNAME'])),
        password=dict(type='str', required=True, no_log=True, fallback=(env_fallback, ['NXRM_SERVER_PASSWORD'])),
        api_base_path=dict(type='str', required=False, default=DEFAULT_API_BASE_PATH),
        version_hint=dict(type='str', required=False),
        validate_certs=dict(type='bool', required=False, default=True),
        timeout=dict(type='int', required=False, default=DEFAULT_TIMEOUT),
    )


def now_rfc850():
    return datetime.now(timezone.utc).strftime(RFC850_FORMAT)


def parse_rfc850(value):
    return datetime.strptime(value, RFC850_FORMAT).replace(tzinfo=timezone.utc)


def stamp_last_updated(previous=None):
    '''Returns the value for last_updated at the moment of a successful apply.
    Never goes backwards relative to previous, even if the wall clock does.
    '''
    now = now_rfc850()
    if previous:
        try:
            if parse_rfc850(previous) > parse_rfc850(now):
                return previous
        except ValueError:
            pass
    return now


class NexusResponse():
    '''Status, headers and decoded JSON body of a successful API call.'''

    def __init__(self, status, headers, body):
        self.status = status
        self.headers = headers
        self.body = body

    def header(self, name):
        if self.headers is None:
            return None
        return self.headers.get(name)


class NexusApi():
    '''Transport context for one Nexus Repository server.  Every call made through it carries
    HTTP Basic credentials, and the server version is probed on first use.
    '''

    def __init__(self, base_url, username, password, api_base_path=DEFAULT_API_BASE_PATH, version_hint=None,
                 validate_certs=True, timeout=DEFAULT_TIMEOUT, log=None):
        '''Creates a new Nexus Repository API context.

        :param base_url: Contains the schema, hostname, and port number (if not default) for the Nexus Repository server
        :param username: User to authenticate as.  Needs permissions for the resources being managed.
        :param password: Password for username.
        :param api_base_path: Path the REST API is served at.  Defaults to "/service/rest".
        :param version_hint: Full version string (e.g. "3.85.0-03 (PRO)") used instead of the server header.
        :param validate_certs: Defaults to true.  When set to false, API calls will skip cert verification.
        :param timeout: Seconds to wait for each request before giving up.
        :param log: Optional callable receiving debug messages, normally AnsibleModule.debug.
        '''
        self.baseUrl = base_url.rstrip('/') + '/' + (api_base_path or DEFAULT_API_BASE_PATH).strip('/')
        self.headers = {
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        self._credentials = base64.b64encode(to_bytes('%s:%s' % (username, password))).decode('ascii')
        self.version_hint = version_hint
        self.validate_certs = validate_certs
        self.timeout = timeout
        self.log = log or (lambda msg: None)
        self._request = Request(headers=self.headers, validate_certs=validate_certs, timeout=timeout)
        self._version = None
        self.writable = None

    @classmethod
    def from_module(cls, module):
        '''Builds an API context from the connection options of an AnsibleModule.'''
        params = module.params
        return cls(
            params['url'], params['username'], params['password'],
            api_base_path=params.get('api_base_path'),
            version_hint=params.get('version_hint'),
            validate_certs=params.get('validate_certs', True),
            timeout=params.get('timeout', DEFAULT_TIMEOUT),
            log=module.debug,
        )

    def auth_context(self):
        '''Per-call headers carrying the Basic credentials.'''
        return {'Authorization': 'Basic ' + self._credentials}

    def url_for(self, urltail):
        return self.baseUrl + urltail

    @staticmethod
    def quote(segment):
        return urllib.parse.quote(to_text(segment), safe='')

    def send_request(self, method, urltail, content=None, expected=(200,)):
        '''Sends a request to baseUrl + urltail and returns a NexusResponse.

        :param content: Python object sent as the JSON body, or None
        :param expected: status codes counted as success.  Any other status raises NexusApiError.
        :raises NexusApiError: the server answered with an unexpected status
        :raises NexusTransportError: no response was received
        '''
        url = self.url_for(urltail)
        data = json.dumps(content) if content is not None else None
        self.log('%s %s' % (method, url))
        try:
            response = self._request.open(method, url, data=data, headers=self.auth_context())
        except urllib.error.HTTPError as e:
            raise NexusApiError(method, url, e.code, e.reason, _read_body(e))
        except (urllib.error.URLError, UrlsConnectionError, OSError) as e:
            raise classify_transport_error(e, url)

        try:
            raw = response.read()
        except OSError as e:
            raise classify_transport_error(e, url)
        status = response.status
        self.log('%s %s returned %s' % (method, url, status))
        if status not in expected:
            raise NexusApiError(method, url, status, getattr(response, 'reason', ''), to_text(raw))

        body = None
        if raw:
            try:
                body = json.loads(raw)
            except ValueError:
                body = to_text(raw)
        return NexusResponse(status, getattr(response, 'headers', None), body)

    def check_writable_and_get_version(self):
        '''Queries the writable status endpoint, remembering writability and server version.

        :raises NexusError: the server is read only or could not be contacted
        '''
        try:
            response = self.send_request('GET', '/v1/status/writable')
        except NexusApiError:
            self.writable = False
            raise
        self.writable = True

        if self.version_hint:
            version = parse_version_hint(self.version_hint)
            self.log('Version Hint: %s' % version)
        else:
            version = parse_server_header(response.header('Server'))
            self.log('Server Header: %s' % version)
        self._version = version
        self.log('Determined Sonatype Nexus Repository to be version %s' % version)
        return version

    def server_version(self):
        '''Version of the server, probed once and then cached.'''
        if self._version is None:
            self.check_writable_and_get_version()
        return self._version


def _read_body(http_error):
    try:
        return to_text(http_error.read())
    except (OSError, ValueError):
        return ''


class NexusResourceApi(ABC):
    '''This abstract class defines a Nexus Repository API endpoint and how to perform CRUD operations
    on it in a declarative fashion.  Each operation takes the declared plan and/or the last known
    state as plain dictionaries and returns the new state together with the diagnostics it produced.
    A returned state of None means the resource does not exist (any more).
    '''

    def __init__(self, api, inCheckMode=False):
        '''
        :param api: NexusApi transport context
        :param inCheckMode: Defaults to false.  When set to true, no changes will be made to Nexus Repository,
            but functions will still return as if they had.
        '''
        self.api = api
        self.inCheckMode = inCheckMode

    @abstractmethod
    def create(self, plan):
        '''Creates the resource described by plan.  Returns (state, diagnostics).  Honors check mode.
        '''
        pass

    @abstractmethod
    def read(self, state):
        '''Refreshes state from the server.  Returns (state or None, diagnostics).
        '''
        pass

    @abstractmethod
    def update(self, plan, state):
        '''Replaces the server side resource identified by state with plan.  Returns (state, diagnostics).
        Honors check mode.
        '''
        pass

    @abstractmethod
    def delete(self, state):
        '''Deletes the resource identified by state.  Returns diagnostics.  Honors check mode.
        '''
        pass

    @abstractmethod
    def import_state(self, import_id):
        '''Builds full state for an existing server side resource.  Returns (state or None, diagnostics).
        '''
        pass
