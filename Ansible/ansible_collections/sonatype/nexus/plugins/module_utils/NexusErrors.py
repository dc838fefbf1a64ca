# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Errors raised while talking to Sonatype Nexus Repository and the diagnostics
they are turned into.  Exceptions are raised where a call fails; the resource
layer catches them and records a Diagnostic of severity "error" or "warning"
so that modules can decide whether to fail or just warn.
'''

import socket
import ssl
import urllib.error

from ansible.module_utils.common.text.converters import to_text
from ansible.module_utils.urls import SSLValidationError

SEVERITY_ERROR = 'error'
SEVERITY_WARNING = 'warning'


class NexusError(Exception):
    '''Base class for all failures talking to the Nexus Repository API.'''


class NexusTransportError(NexusError):
    '''The request never produced an HTTP response (DNS, refused, timeout, socket, TLS).

    :param cause: short human readable name of the transport failure
    :param url: the url that was being requested
    '''

    def __init__(self, cause, url, original=None):
        self.cause = cause
        self.url = url
        self.original = original
        super().__init__('%s while requesting %s: %s' % (cause, url, original))


class NexusApiError(NexusError):
    '''The server answered, but not with the status code we expected.'''

    def __init__(self, method, url, status, reason='', body=''):
        self.method = method
        self.url = url
        self.status = status
        self.reason = reason or ''
        self.body = body or ''
        super().__init__('%s %s failed with status %s %s: %s' % (method, url, status, self.reason, self.body))

    @property
    def status_line(self):
        return ('%s %s' % (self.status, self.reason)).strip()

    @property
    def not_found(self):
        return self.status == 404


class CapabilityProgrammingError(Exception):
    '''A handler was used with the wrong kind of model or an unknown property.  Always fatal.'''


def classify_transport_error(exc, url):
    '''Maps a low level exception raised while opening a url to a NexusTransportError.

    urllib wraps most socket failures in URLError, so the reason is unwrapped first.
    HTTPError is a URLError too, but callers must handle it before getting here.
    '''
    reason = exc.reason if isinstance(exc, urllib.error.URLError) else exc
    if isinstance(reason, SSLValidationError):
        cause = 'TLS certificate validation failed'
    elif isinstance(reason, socket.gaierror):
        cause = 'DNS lookup failed'
    elif isinstance(reason, ConnectionRefusedError):
        cause = 'Connection refused'
    elif isinstance(reason, (socket.timeout, TimeoutError)):
        cause = 'Request timed out'
    elif isinstance(reason, ssl.SSLError):
        cause = 'TLS handshake failed'
    elif isinstance(reason, OSError):
        cause = 'Socket error'
    else:
        cause = 'Connection failed'
    return NexusTransportError(cause, url, to_text(reason))


class Diagnostic():
    '''A user visible message of severity "error" or "warning".'''

    def __init__(self, severity, summary, detail=''):
        self.severity = severity
        self.summary = summary
        self.detail = detail

    def __eq__(self, other):
        if not isinstance(other, Diagnostic):
            return False
        return (self.severity, self.summary, self.detail) == (other.severity, other.summary, other.detail)

    def __str__(self):
        if self.detail:
            return '%s: %s' % (self.summary, self.detail)
        return self.summary

    def __repr__(self):
        return 'Diagnostic(%r, %r, %r)' % (self.severity, self.summary, self.detail)


class Diagnostics():
    '''Additive collection of diagnostics for a single operation.'''

    def __init__(self):
        self._items = list()

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def add_error(self, summary, detail=''):
        self._items.append(Diagnostic(SEVERITY_ERROR, summary, detail))

    def add_warning(self, summary, detail=''):
        self._items.append(Diagnostic(SEVERITY_WARNING, summary, detail))

    def extend(self, other):
        self._items.extend(other)

    def has_error(self):
        return any(d.severity == SEVERITY_ERROR for d in self._items)

    def errors(self):
        return [d for d in self._items if d.severity == SEVERITY_ERROR]

    def warnings(self):
        return [d for d in self._items if d.severity == SEVERITY_WARNING]

    def add_api_error(self, summary, exc):
        '''Records an error for a failed API call, keeping the response body verbatim.'''
        self._items.append(Diagnostic(SEVERITY_ERROR, summary, _describe(exc)))

    def add_api_warning(self, summary, exc):
        self._items.append(Diagnostic(SEVERITY_WARNING, summary, _describe(exc)))


def _describe(exc):
    if isinstance(exc, NexusApiError):
        if exc.body:
            return 'Error response: %s - %s' % (exc.status_line, exc.body)
        return 'Error response: %s' % exc.status_line
    if isinstance(exc, NexusTransportError):
        return 'Error response: %s (%s)' % (exc.cause, exc.original)
    return 'Error response: %s' % exc
