# Public Domain: Jared Schmidt <jared.schmidt.civ@gmail.com>
# CC0 1.0 Universal license (see https://creativecommons.org/publicdomain/zero/1.0/)
# License applies only to the contents of this file, not the collection as a whole


class ModuleDocFragment(object):
    DOCUMENTATION = r'''
options:
    id:
        description:
        - Server assigned id of the Capability.
        - When omitted, the existing Capability of this type is managed.  If there is none it is created, and if
            there are several the task fails and asks for an id.
        required: False
        type: str
    notes:
        description:
        - Notes about this Capability.
        default: ''
        required: False
        type: str
    enabled:
        description:
        - Whether the Capability is enabled.  Required when I(state=present).
        required: False
        type: bool
    state:
        description:
        - Desired state of the Capability after execution.
        - "present" ensures the Capability exists and matches what has been defined.
        - "absent" ensures the Capability is deleted.
        default: present
        choices:
        - present
        - absent
        type: str

notes:
    - Requires Sonatype Nexus Repository 3.84.0 or later.
'''

