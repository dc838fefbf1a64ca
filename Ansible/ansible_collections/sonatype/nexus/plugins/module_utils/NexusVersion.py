# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole

'''
Parses the "Server" header returned by Sonatype Nexus Repository, for example
"Nexus/3.84.0-03 (PRO)", into a comparable version.
'''

import re

SERVER_HEADER_PATTERN = re.compile(r'^NEXUS/(\d+)\.(\d+)\.(\d+)-(\d+)\s+\((\w+)\)$', re.IGNORECASE)

# Version components are stored as signed 8 bit values
_INT8_MIN = -128
_INT8_MAX = 127


class SystemVersion():
    '''Version of the connected Nexus Repository server.'''

    def __init__(self, major=0, minor=0, patch=0, build=0, pro=False):
        self.major = major
        self.minor = minor
        self.patch = patch
        self.build = build
        self.pro = pro

    def as_tuple(self):
        return (self.major, self.minor, self.patch, self.build)

    def __eq__(self, other):
        if not isinstance(other, SystemVersion):
            return False
        return self.as_tuple() == other.as_tuple() and self.pro == other.pro

    def __repr__(self):
        return 'SystemVersion(%d, %d, %d, %d, pro=%r)' % (self.major, self.minor, self.patch, self.build, self.pro)

    def __str__(self):
        return '%s (PRO=%s)' % (self.semver_string(), str(self.pro).lower())

    def semver_string(self):
        return '%d.%d.%d-%d' % self.as_tuple()

    def newer_than(self, major, minor, patch, build):
        '''True if this version is strictly newer than major.minor.patch-build.'''
        return self.as_tuple() > (major, minor, patch, build)

    def older_than(self, major, minor, patch, build):
        return not self.newer_than(major, minor, patch, build)

    def supports_capabilities(self):
        return self.newer_than(3, 84, 0, 0)

    def requires_lower_case_repository_name_docker(self):
        return self.newer_than(3, 89, 0, 0)


def parse_server_header(header):
    '''Parses a "Server" header (or a version hint in the same format).

    Anything that does not match, or has a component outside the signed 8 bit
    range, yields the zero version.
    '''
    match = SERVER_HEADER_PATTERN.match((header or '').strip())
    if match is None:
        return SystemVersion()

    parts = [int(group) for group in match.groups()[:4]]
    if any(part < _INT8_MIN or part > _INT8_MAX for part in parts):
        return SystemVersion()

    return SystemVersion(*parts, pro=match.group(5).upper() == 'PRO')


def parse_version_hint(hint):
    '''Accepts either a full server header or just "3.85.0-03 (PRO)".'''
    hint = (hint or '').strip()
    if not hint.upper().startswith('NEXUS/'):
        hint = 'NEXUS/' + hint
    return parse_server_header(hint)
