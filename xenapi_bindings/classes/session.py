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

"""A session represents a connection to the Xen-API server."""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import (Bool, DateTime, MapOf, RefOf, SetOf,
                                     String, wire_field)
from xenapi_bindings.refs import (HostRef, SessionRef, SubjectRef, TaskRef,
                                  UserRef)


@dataclass
class SessionRecord(object):
    uuid: str = wire_field("uuid", String)
    this_host: HostRef = wire_field("this_host", RefOf(HostRef))
    this_user: UserRef = wire_field("this_user", RefOf(UserRef))
    last_active: datetime = wire_field("last_active", DateTime)
    pool: bool = wire_field("pool", Bool)
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    is_local_superuser: bool = wire_field("is_local_superuser", Bool)
    subject: SubjectRef = wire_field("subject", RefOf(SubjectRef))
    validation_time: datetime = wire_field("validation_time", DateTime)
    auth_user_sid: str = wire_field("auth_user_sid", String)
    auth_user_name: str = wire_field("auth_user_name", String)
    rbac_permissions: List[str] = wire_field("rbac_permissions",
                                             SetOf(String))
    tasks: List[TaskRef] = wire_field("tasks", SetOf(RefOf(TaskRef)))
    parent: SessionRef = wire_field("parent", RefOf(SessionRef))
    originator: str = wire_field("originator", String)
    client_certificate: bool = wire_field("client_certificate", Bool)


class SessionAPI(RemoteClass):
    """Calls of the session class. Use them through Session, which keeps
    track of the handle they return."""

    __wire_name__ = "session"
    __ref__ = SessionRef
    __record__ = SessionRecord
    __enumerable__ = False

    login_with_password = Call(
        ("uname", String), ("pwd", String), ("version", String),
        ("originator", String),
        returns=RefOf(SessionRef), session=False,
        doc="Attempt to authenticate the user, returning a session "
            "reference if successful")
    slave_local_login_with_password = Call(
        ("uname", String), ("pwd", String),
        returns=RefOf(SessionRef), session=False,
        doc="Authenticate locally against a slave in emergency mode. Note "
            "the resulting sessions are only good for use on this host.")
    logout = Call(doc="Log out of a session")
    local_logout = Call(doc="Log out of local session.")
    change_password = Call(
        ("old_pwd", String), ("new_pwd", String),
        doc="Change the account password; if your session is authenticated "
            "with root privileges then the old_pwd is validated and the "
            "new_pwd is set regardless")
    get_all_subject_identifiers = Call(
        returns=SetOf(String),
        doc="Return a list of all user subject-identifiers of all "
            "existing sessions")
