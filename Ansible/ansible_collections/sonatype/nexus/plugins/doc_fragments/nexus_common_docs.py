# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole


class ModuleDocFragment(object):
    DOCUMENTATION = r'''
options:
    url:
        description:
        - Base url of the Sonatype Nexus Repository server.  It must include the schema (http or https), the fqdn,
            and port number (if not 80 or 443).
        - If not set, the value of the C(NXRM_SERVER_URL) environment variable is used.
        required: True
        type: str
    username:
        description:
        - User to authenticate as using HTTP Basic authentication.  Needs the privileges for the
            configuration being managed.
        - If not set, the value of the C(NXRM_SERVER_USERNAME) environment variable is used.
        required: True
        type: str
    password:
        description:
        - Password for I(username).
        - If not set, the value of the C(NXRM_SERVER_PASSWORD) environment variable is used.
        required: True
        type: str
    api_base_path:
        description:
        - Path the REST API is served at, relative to I(url).  Only needs changing when Nexus Repository
            is served behind a path prefix.
        default: /service/rest
        required: False
        type: str
    version_hint:
        description:
        - Version of the server, for example C(3.85.0-03 (PRO)).  When set, it is used instead of the version
            reported in the C(Server) response header.
        required: False
        type: str
    validate_certs:
        description:
        - When set to false, TLS certificates are not verified.  Opens API calls to MITM attack.  Do not use in
            production environments.
        default: True
        required: False
        type: bool
    timeout:
        description:
        - Seconds to wait for each API call before giving up.
        default: 60
        required: False
        type: int

requirements:
    - Python >= 3.9

notes:
    - Check mode is supported.
'''
