# Copyright (c) Cloud Software Group, Inc.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#   1) Redistributions of source code must retain the above copyright
#      notice, this list of conditions and the following disclaimer.
#
#   2) Redistributions in binary form must reproduce the above
#      copyright notice, this list of conditions and the following
#      disclaimer in the documentation and/or other materials
#      provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT,
# INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES
# (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
# HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
# STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED
# OF THE POSSIBILITY OF SUCH DAMAGE.

"""A user or group that can log in xapi"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import (MapOf, RecordOf, RefOf, SetOf, String,
                                     wire_field)
from xenapi_bindings.refs import RoleRef, SubjectRef

SUBJECT = RefOf(SubjectRef)


@dataclass
class SubjectRecord(object):
    uuid: str = wire_field("uuid", String)
    # the subject identifier, unique in the external directory service
    subject_identifier: str = wire_field("subject_identifier", String)
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    roles: List[RoleRef] = wire_field("roles", SetOf(RefOf(RoleRef)))


class Subject(RemoteClass):
    __wire_name__ = "subject"
    __ref__ = SubjectRef
    __record__ = SubjectRecord

    create = Call(("args", RecordOf(SubjectRecord)),
                  returns=SUBJECT, async_=True,
                  doc="Create a new subject instance, and return its handle.")
    destroy = Call(("self", SUBJECT), async_=True,
                   doc="Destroy the specified subject instance.")
    add_to_roles = Call(
        ("self", SUBJECT), ("role", RefOf(RoleRef)),
        doc="This call adds a new role to a subject")
    remove_from_roles = Call(
        ("self", SUBJECT), ("role", RefOf(RoleRef)),
        doc="This call removes a role from a subject")
    get_permissions_name_label = Call(
        ("self", SUBJECT), returns=SetOf(String),
        doc="This call returns a list of permission names given a subject")
