# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Capability types known to this collection.  Every kind of Capability has one handler
object which owns the schema of its "properties" and the mapping between the
declared configuration, the CapabilityDTO exchanged with the server, and the state
returned to Ansible.  The generic capability resource only ever talks to a handler.
'''

import re
from collections import OrderedDict

from ansible.module_utils.common.arg_spec import ArgumentSpecValidator
from ansible.module_utils.parsing.convert_bool import boolean

from ansible_collections.sonatype.nexus.plugins.module_utils.NexusApi import stamp_last_updated
from ansible_collections.sonatype.nexus.plugins.module_utils.NexusErrors import CapabilityProgrammingError

CAPABILITY_TYPE_AUDIT = 'audit'
CAPABILITY_TYPE_CORE_BASE_URL = 'baseurl'
CAPABILITY_TYPE_CUSTOM_S3_REGIONS = 'customs3regions'
CAPABILITY_TYPE_DEFAULT_ROLE = 'defaultrole'
CAPABILITY_TYPE_FIREWALL_AUDIT_QUARANTINE = 'firewall.audit'
CAPABILITY_TYPE_HEALTHCHECK = 'healthcheck'
CAPABILITY_TYPE_OUTREACH = 'OutreachManagementCapability'
CAPABILITY_TYPE_RUT_AUTH = 'rutauth'
CAPABILITY_TYPE_UI_BRANDING = 'rapture.branding'
CAPABILITY_TYPE_UI_SETTINGS = 'rapture.settings'
CAPABILITY_TYPE_WEBHOOK_GLOBAL = 'webhook.global'
CAPABILITY_TYPE_WEBHOOK_REPOSITORY = 'webhook.repository'

WEBHOOK_EVENT_TYPES_GLOBAL = ('audit', 'repository')
WEBHOOK_EVENT_TYPES_REPOSITORY = ('asset', 'component')

URL_PATTERN = r'^https?://[^\s]+$'
URL_PATTERN_MESSAGE = 'Must be a valid http:// or https:// URL'
REPOSITORY_NAME_PATTERN = r'^[a-zA-Z0-9\-]{1}[a-zA-Z0-9_\-\.]*$'
REPOSITORY_NAME_PATTERN_MESSAGE = 'Must be a valid repository name'

CAPABILITY_FIREWALL_AUDIT_QUARANTINE_DEFAULT_QUARANTINE = False
CAPABILITY_HEALTHCHECK_DEFAULT_CONFIGURED_FOR_ALL = True
CAPABILITY_HEALTHCHECK_DEFAULT_USE_NEXUS_TRUSTSTORE = False
CAPABILITY_OUTREACH_DEFAULT_ALWAYS_REMOTE = False
CAPABILITY_UI_BRANDING_DEFAULT_FOOTER_ENABLED = False
CAPABILITY_UI_BRANDING_DEFAULT_HEADER_ENABLED = False
CAPABILITY_UI_BRANDING_DEFAULT_FOOTER_HTML = ''
CAPABILITY_UI_BRANDING_DEFAULT_HEADER_HTML = ''
CAPABILITY_UI_SETTINGS_DEFAULT_DEBUG_ALLOWED = False
CAPABILITY_UI_SETTINGS_DEFAULT_LONG_REQUEST_TIMEOUT = 180
CAPABILITY_UI_SETTINGS_DEFAULT_REQUEST_TIMEOUT = 60
CAPABILITY_UI_SETTINGS_DEFAULT_SESSION_TIMEOUT = 30
CAPABILITY_UI_SETTINGS_DEFAULT_STATUS_INTERVAL_ANONYMOUS = 60
CAPABILITY_UI_SETTINGS_DEFAULT_STATUS_INTERVAL_AUTHENTICATED = 5
CAPABILITY_UI_SETTINGS_DEFAULT_TITLE = 'Sonatype Nexus Repository'

TYPE_STRING = 'str'
TYPE_BOOL = 'bool'
TYPE_INT32 = 'int32'
TYPE_STRING_SET = 'set'

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def sanitise_for_resource_name(value):
    '''Lowercases and replaces every run of non alphanumeric characters with "_".'''
    return re.sub(r'[^a-z0-9]+', '_', value.lower()).strip('_')


def parse_bool(value, default):
    if value is None:
        return default
    try:
        return boolean(value, strict=True)
    except TypeError:
        return default


def parse_int32(value, default):
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    if parsed < INT32_MIN or parsed > INT32_MAX:
        return default
    return parsed


def parse_string_set(value):
    if not value:
        return []
    return sorted(set(part.strip() for part in value.split(',') if part.strip()))


class CapabilityProperty():
    '''Describes one attribute inside the "properties" block of a Capability.

    :param name: attribute name as exposed to Ansible
    :param api_name: key in the CapabilityDTO properties map (defaults to name)
    :param type: one of TYPE_STRING, TYPE_BOOL, TYPE_INT32, TYPE_STRING_SET
    :param sensitive: value is masked in output (no_log)
    :param returned: False when the server never sends the value back
    '''

    def __init__(self, name, description, api_name=None, type=TYPE_STRING, required=False, default=None,
                 pattern=None, pattern_message=None, min_length=None, min_size=None, max_size=None,
                 choices=None, sensitive=False, returned=True):
        self.name = name
        self.description = description
        self.api_name = api_name or name
        self.type = type
        self.required = required
        self.default = default
        self.pattern = re.compile(pattern) if pattern else None
        self.pattern_message = pattern_message
        self.min_length = min_length
        self.min_size = min_size
        self.max_size = max_size
        self.choices = choices
        self.sensitive = sensitive
        self.returned = returned

    def argument_spec(self):
        '''This property as an Ansible argument spec entry.'''
        spec = dict(required=self.required)
        if self.type == TYPE_STRING_SET:
            spec['type'] = 'list'
            spec['elements'] = 'str'
        elif self.type == TYPE_INT32:
            spec['type'] = 'int'
        else:
            spec['type'] = self.type
        if self.default is not None:
            spec['default'] = self.default
        if self.choices:
            spec['choices'] = list(self.choices)
        if self.sensitive:
            spec['no_log'] = True
        return spec

    def validate(self, value):
        '''Checks beyond what the argument spec can express.  Returns a list of error messages.'''
        if value is None:
            return []
        label = 'properties.%s' % self.name
        errors = list()
        if self.pattern is not None and not self.pattern.match(value):
            errors.append('%s: %s - %r does not match regex %s' % (
                label, self.pattern_message or 'Invalid value', value, self.pattern.pattern))
        if self.min_length is not None and len(value) < self.min_length:
            errors.append('%s: string length must be at least %d, got %d' % (label, self.min_length, len(value)))
        if self.type == TYPE_INT32 and (value < INT32_MIN or value > INT32_MAX):
            errors.append('%s: %d is outside the signed 32 bit integer range' % (label, value))
        if self.type == TYPE_STRING_SET:
            if self.min_size is not None and len(set(value)) < self.min_size:
                errors.append('%s: set must contain at least %d element(s), got %d' % (
                    label, self.min_size, len(set(value))))
            if self.max_size is not None and len(set(value)) > self.max_size:
                errors.append('%s: set must contain at most %d element(s), got %d' % (
                    label, self.max_size, len(set(value))))
        return errors

    def normalise(self, value):
        if value is not None and self.type == TYPE_STRING_SET:
            return sorted(set(value))
        return value

    def to_api(self, value):
        if self.type == TYPE_BOOL:
            return 'true' if value else 'false'
        if self.type == TYPE_INT32:
            return str(value)
        if self.type == TYPE_STRING_SET:
            return ','.join(sorted(set(value)))
        return value

    def from_api(self, properties):
        raw = properties.get(self.api_name)
        if self.type == TYPE_BOOL:
            return parse_bool(raw, self.default)
        if self.type == TYPE_INT32:
            return parse_int32(raw, self.default)
        if self.type == TYPE_STRING_SET:
            return parse_string_set(raw)
        if not self.returned and not raw:
            return None
        if raw is None:
            return self.default
        return raw


class CapabilityModel():
    '''Internal representation of a Capability.  The kind is the variant tag; handlers refuse
    models carrying any other kind.
    '''

    def __init__(self, kind, id=None, notes='', enabled=None, properties=None, last_updated=None):
        self.kind = kind
        self.id = id
        self.notes = notes
        self.enabled = enabled
        self.properties = dict(properties or {})
        self.last_updated = last_updated

    def copy(self):
        return CapabilityModel(self.kind, self.id, self.notes, self.enabled, self.properties, self.last_updated)

    def as_dict(self):
        return dict(
            id=self.id,
            type=self.kind,
            notes=self.notes,
            enabled=self.enabled,
            properties=dict(self.properties),
            last_updated=self.last_updated,
        )

    def __eq__(self, other):
        if not isinstance(other, CapabilityModel):
            return False
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return 'CapabilityModel(%r)' % self.as_dict()


class BaseCapabilityType():
    '''Behaviour shared by all Capability types.  Subclasses set kind, public_name and PROPERTIES
    and override hooks where their Capability differs.
    '''

    kind = None
    public_name = None
    PROPERTIES = ()
    create_success_codes = (200,)
    # properties identifying an existing Capability when no id is given
    adopt_by_properties = ()

    @property
    def resource_name(self):
        return 'capability_%s' % sanitise_for_resource_name(self.public_name)

    @property
    def description(self):
        return 'Manage Capability: %s\n\n**NOTE:** Requires Sonatype Nexus Repository 3.84.0 or later.' % self.public_name

    def properties_schema(self):
        return OrderedDict((p.name, p) for p in self.PROPERTIES)

    def properties_for_version(self, version):
        '''Properties sent to a server of the given version.  All of them unless a type says otherwise.'''
        return list(self.PROPERTIES)

    def argument_spec(self):
        '''Suboptions of "properties" as an Ansible argument spec.'''
        return dict((p.name, p.argument_spec()) for p in self.PROPERTIES)

    def resource_argument_spec(self):
        '''Full schema of a resource of this type: common attributes plus "properties".'''
        spec = dict(
            id=dict(type='str', required=False),
            notes=dict(type='str', required=False, default=''),
            enabled=dict(type='bool', required=True),
            last_updated=dict(type='str', required=False),
        )
        if self.PROPERTIES:
            any_required = any(p.required for p in self.PROPERTIES)
            spec['properties'] = dict(type='dict', required=any_required, options=self.argument_spec())
            if not any_required:
                spec['properties']['apply_defaults'] = True
        return spec

    def _check(self, model):
        if not isinstance(model, CapabilityModel) or model.kind != self.kind:
            raise CapabilityProgrammingError('%s handler cannot handle %r' % (self.kind, model))
        schema = self.properties_schema()
        for key in model.properties:
            if key not in schema:
                raise CapabilityProgrammingError('Unknown property %r for %s Capability' % (key, self.kind))

    def new_model(self, **kwargs):
        return CapabilityModel(self.kind, **kwargs)

    def plan_as_model(self, plan, diagnostics):
        '''Validates the declared configuration and returns it as a CapabilityModel.
        Returns None and records errors in diagnostics when validation fails.
        '''
        params = dict((key, value) for key, value in plan.items() if value is not None)
        if not self.PROPERTIES and not params.get('properties'):
            params.pop('properties', None)
        result = ArgumentSpecValidator(self.resource_argument_spec()).validate(params)
        errors = list(result.error_messages)
        validated = result.validated_parameters

        properties = validated.get('properties') or {}
        if not errors:
            for prop in self.PROPERTIES:
                errors.extend(prop.validate(properties.get(prop.name)))
        if errors:
            for message in errors:
                diagnostics.add_error('Invalid configuration for %s' % self.resource_name, message)
            return None

        return self.new_model(
            id=validated.get('id'),
            notes=validated.get('notes') or '',
            enabled=validated.get('enabled'),
            properties=dict((p.name, p.normalise(properties.get(p.name))) for p in self.PROPERTIES),
            last_updated=validated.get('last_updated'),
        )

    def state_as_model(self, state):
        '''Returns previously returned state as a CapabilityModel.  State is trusted, not validated.'''
        stateType = state.get('type')
        if stateType is not None and stateType != self.kind:
            raise CapabilityProgrammingError('State of a %s Capability passed to the %s handler' % (stateType, self.kind))
        properties = state.get('properties') or {}
        model = self.new_model(
            id=state.get('id'),
            notes=state.get('notes') or '',
            enabled=state.get('enabled'),
            properties=dict((p.name, properties.get(p.name)) for p in self.PROPERTIES),
            last_updated=state.get('last_updated'),
        )
        for key in properties:
            if key not in model.properties:
                raise CapabilityProgrammingError('Unknown property %r for %s Capability' % (key, self.kind))
        return model

    def _properties_to_api(self, model, version):
        result = dict()
        for prop in self.properties_for_version(version):
            value = model.properties.get(prop.name)
            if value is None:
                continue
            result[prop.api_name] = prop.to_api(value)
        return result

    def to_create_payload(self, model, version):
        self._check(model)
        return {
            'typeId': self.kind,
            'notes': model.notes,
            'enabled': model.enabled,
            'properties': self._properties_to_api(model, version),
        }

    def to_update_payload(self, model, version):
        self._check(model)
        payload = self.to_create_payload(model, version)
        payload['id'] = model.id
        return payload

    def from_server_dto(self, model, dto):
        '''Populates model from a CapabilityDTO returned by the server.'''
        self._check(model)
        properties = dto.get('properties') or {}
        model.id = dto.get('id')
        model.notes = dto.get('notes') or ''
        model.enabled = parse_bool(dto.get('enabled'), False)
        model.properties = dict((p.name, p.from_api(properties)) for p in self.PROPERTIES)
        return model

    def stamp_plan_for_state(self, plan):
        self._check(plan)
        plan.last_updated = stamp_last_updated(plan.last_updated)
        return plan

    def merge_api_into_state(self, state, dto):
        '''Refreshes state from a CapabilityDTO.  last_updated is only stamped when state has none yet.'''
        self._check(state)
        previous = state.last_updated
        self.from_server_dto(state, dto)
        state.last_updated = previous or stamp_last_updated()
        return state

    def merge_plan_for_update(self, plan, state):
        self._check(plan)
        self._check(state)
        plan.id = state.id
        plan.last_updated = stamp_last_updated(state.last_updated)
        return plan

    def preserve_sensitive(self, plan, state):
        '''Copies values the server never returns from plan into state.  Nothing to do by default.'''
        self._check(state)
        return state

    def changed_fields(self, plan, state, resend_unreturned=False):
        '''Names of user visible fields whose declared value differs from state.
        Values the server never returns cannot be compared.  They are skipped, unless resend_unreturned
        is set, in which case any declared one counts as changed.
        '''
        self._check(plan)
        self._check(state)
        changed = list()
        if plan.notes != state.notes:
            changed.append('notes')
        if plan.enabled != state.enabled:
            changed.append('enabled')
        for prop in self.PROPERTIES:
            if not prop.returned:
                if resend_unreturned and plan.properties.get(prop.name) is not None:
                    changed.append('properties.%s' % prop.name)
                continue
            if prop.normalise(plan.properties.get(prop.name)) != prop.normalise(state.properties.get(prop.name)):
                changed.append('properties.%s' % prop.name)
        return changed


# --------------------------------------------
# Capability Type: Audit
# --------------------------------------------
class AuditCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_AUDIT
    public_name = 'Audit'


# --------------------------------------------
# Capability Type: Base URL
# --------------------------------------------
class BaseUrlCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_CORE_BASE_URL
    public_name = 'Base URL'
    PROPERTIES = (
        CapabilityProperty('url', 'Reverse proxy base URL', required=True,
                           pattern=URL_PATTERN, pattern_message=URL_PATTERN_MESSAGE),
    )


# --------------------------------------------
# Capability Type: Custom S3 Regions
# --------------------------------------------
class CustomS3RegionsCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_CUSTOM_S3_REGIONS
    public_name = 'Custom S3 Regions'
    PROPERTIES = (
        CapabilityProperty('regions', 'Custom S3 regions to make available when configuring S3 Blob Stores.',
                           type=TYPE_STRING_SET, required=True, min_size=1),
    )


# --------------------------------------------
# Capability Type: Default Role
# --------------------------------------------
class DefaultRoleCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_DEFAULT_ROLE
    public_name = 'Default Role'
    PROPERTIES = (
        CapabilityProperty('role', 'The role which is automatically granted to authenticated users', required=True),
    )


# --------------------------------------------
# Capability Type: Firewall Audit and Quarantine
# --------------------------------------------
class FirewallAuditQuarantineCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_FIREWALL_AUDIT_QUARANTINE
    public_name = 'Firewall Audit and Quarantine'
    adopt_by_properties = ('repository',)
    PROPERTIES = (
        CapabilityProperty('repository', 'The repository to be evaluated.', required=True),
        CapabilityProperty('quarantine', 'Whether enable Quarantine for this repository.', type=TYPE_BOOL, required=True,
                           default=None),
    )

    @property
    def description(self):
        return super().description + (
            '\n\n**Note:** If quarantine is enabled and later disabled, all quarantined components will be made '
            'available in the repository; those components cannot be re-quarantined.')

    def from_server_dto(self, model, dto):
        super().from_server_dto(model, dto)
        if model.properties['quarantine'] is None:
            model.properties['quarantine'] = CAPABILITY_FIREWALL_AUDIT_QUARANTINE_DEFAULT_QUARANTINE
        return model


# --------------------------------------------
# Capability Type: Healthcheck
# --------------------------------------------
class HealthcheckCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_HEALTHCHECK
    public_name = 'Healthcheck'
    PROPERTIES = (
        CapabilityProperty('configured_for_all_proxies',
                           'Configure all supported proxy repositories to regularly check with Sonatype Repository '
                           'Healthcheck for updates by default.',
                           api_name='configuredForAll', type=TYPE_BOOL,
                           default=CAPABILITY_HEALTHCHECK_DEFAULT_CONFIGURED_FOR_ALL),
        CapabilityProperty('use_nexus_truststore',
                           'Whether to use Nexus Truststore when communicating with Sonatype Repository Healthcheck.',
                           api_name='useTrustStore', type=TYPE_BOOL,
                           default=CAPABILITY_HEALTHCHECK_DEFAULT_USE_NEXUS_TRUSTSTORE),
    )


# --------------------------------------------
# Capability Type: Outreach Management
# --------------------------------------------
class OutreachCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_OUTREACH
    public_name = 'Outreach Management'
    PROPERTIES = (
        CapabilityProperty('override_url', 'Override external URL for downloading new Outreach content.',
                           api_name='overrideUrl', pattern=URL_PATTERN, pattern_message=URL_PATTERN_MESSAGE),
        CapabilityProperty('always_remote', 'Always check the remote server for updates.',
                           api_name='alwaysRemote', type=TYPE_BOOL, default=CAPABILITY_OUTREACH_DEFAULT_ALWAYS_REMOTE),
    )


# --------------------------------------------
# Capability Type: RUT Auth
# --------------------------------------------
class RutAuthCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_RUT_AUTH
    public_name = 'RUT Auth'
    PROPERTIES = (
        CapabilityProperty('http_header',
                           'Handled HTTP Header should contain the name of the header that is used to source the '
                           'principal of already authenticated user.',
                           required=True, min_length=1),
    )


# --------------------------------------------
# Capability Type: UI Branding
# --------------------------------------------
class UiBrandingCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_UI_BRANDING
    public_name = 'UI Branding'
    PROPERTIES = (
        CapabilityProperty('header_enabled', 'Enable branding header HTML snippet.', api_name='headerEnabled',
                           type=TYPE_BOOL, default=CAPABILITY_UI_BRANDING_DEFAULT_HEADER_ENABLED),
        CapabilityProperty('header_html',
                           "An HTML snippet to be included in branding header. Use '$baseUrl' to insert the base URL "
                           "of the server (e.g. to reference an image).",
                           api_name='headerHtml', default=CAPABILITY_UI_BRANDING_DEFAULT_HEADER_HTML),
        CapabilityProperty('footer_enabled', 'Enable branding footer HTML snippet.', api_name='footerEnabled',
                           type=TYPE_BOOL, default=CAPABILITY_UI_BRANDING_DEFAULT_FOOTER_ENABLED),
        CapabilityProperty('footer_html',
                           "An HTML snippet to be included in branding footer. Use '$baseUrl' to insert the base URL "
                           "of the server (e.g. to reference an image).",
                           api_name='footerHtml', default=CAPABILITY_UI_BRANDING_DEFAULT_FOOTER_HTML),
    )


# --------------------------------------------
# Capability Type: UI Settings
# --------------------------------------------
class UiSettingsCapability(BaseCapabilityType):
    kind = CAPABILITY_TYPE_UI_SETTINGS
    public_name = 'UI Settings'
    PROPERTIES = (
        CapabilityProperty('title', 'Browser page title.', default=CAPABILITY_UI_SETTINGS_DEFAULT_TITLE),
        CapabilityProperty('debug_allowed', 'Allow developer debugging.', api_name='debugAllowed', type=TYPE_BOOL,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_DEBUG_ALLOWED),
        CapabilityProperty('status_interval_authenticated',
                           'Interval between status requests for authenticated users (seconds).',
                           api_name='statusIntervalAuthenticated', type=TYPE_INT32,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_STATUS_INTERVAL_AUTHENTICATED),
        CapabilityProperty('status_interval_anonymous', 'Interval between status requests for anonymous user (seconds).',
                           api_name='statusIntervalAnonymous', type=TYPE_INT32,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_STATUS_INTERVAL_ANONYMOUS),
        CapabilityProperty('session_timeout',
                           'Period of inactivity before session times out (minutes). A value of 0 will mean that a '
                           'session never expires.',
                           api_name='sessionTimeout', type=TYPE_INT32,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_SESSION_TIMEOUT),
        CapabilityProperty('request_timeout',
                           'Period of time to keep the connection alive for requests expected to take a normal '
                           'period of time (seconds).',
                           api_name='requestTimeout', type=TYPE_INT32,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_REQUEST_TIMEOUT),
        CapabilityProperty('long_request_timeout',
                           'Period of time to keep the connection alive for requests expected to take an extended '
                           'period of time (seconds).',
                           api_name='longRequestTimeout', type=TYPE_INT32,
                           default=CAPABILITY_UI_SETTINGS_DEFAULT_LONG_REQUEST_TIMEOUT),
    )


# --------------------------------------------
# Capability Types: Webhooks
# --------------------------------------------
def webhook_properties(event_types, include_repository):
    properties = [
        CapabilityProperty('names', 'Event types which trigger this Webhook.', type=TYPE_STRING_SET, required=True,
                           min_size=1, max_size=2, choices=event_types),
        CapabilityProperty('url', 'Send a HTTP POST request to this URL.', required=True,
                           pattern=URL_PATTERN, pattern_message=URL_PATTERN_MESSAGE),
        CapabilityProperty('secret', 'Key to use for HMAC payload digest.', sensitive=True, returned=False),
    ]
    if include_repository:
        properties.append(
            CapabilityProperty('repository', 'Repository to discriminate events from.', required=True,
                               pattern=REPOSITORY_NAME_PATTERN, pattern_message=REPOSITORY_NAME_PATTERN_MESSAGE))
    return tuple(properties)


class WebhookCapabilityType(BaseCapabilityType):
    '''The server never returns a webhook's secret, so it is carried over from the plan.'''

    def preserve_sensitive(self, plan, state):
        self._check(plan)
        self._check(state)
        state.properties['secret'] = plan.properties.get('secret')
        return state


class WebhookGlobalCapability(WebhookCapabilityType):
    kind = CAPABILITY_TYPE_WEBHOOK_GLOBAL
    public_name = 'Webhook Global'
    adopt_by_properties = ('url',)
    PROPERTIES = webhook_properties(WEBHOOK_EVENT_TYPES_GLOBAL, False)


class WebhookRepositoryCapability(WebhookCapabilityType):
    kind = CAPABILITY_TYPE_WEBHOOK_REPOSITORY
    public_name = 'Webhook Repository'
    adopt_by_properties = ('repository', 'url')
    PROPERTIES = webhook_properties(WEBHOOK_EVENT_TYPES_REPOSITORY, True)


ALL_CAPABILITY_TYPES = (
    AuditCapability,
    BaseUrlCapability,
    CustomS3RegionsCapability,
    DefaultRoleCapability,
    FirewallAuditQuarantineCapability,
    HealthcheckCapability,
    OutreachCapability,
    RutAuthCapability,
    UiBrandingCapability,
    UiSettingsCapability,
    WebhookGlobalCapability,
    WebhookRepositoryCapability,
)
