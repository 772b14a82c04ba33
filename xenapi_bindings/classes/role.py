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

"""A set of permissions associated with a subject"""

from dataclasses import dataclass
from typing import List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import Bool, RefOf, SetOf, String, wire_field
from xenapi_bindings.refs import RoleRef

ROLE = RefOf(RoleRef)


@dataclass
class RoleRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    subroles: List[RoleRef] = wire_field("subroles", SetOf(ROLE))
    is_internal: bool = wire_field("is_internal", Bool)


class Role(RemoteClass):
    __wire_name__ = "role"
    __ref__ = RoleRef
    __record__ = RoleRecord

    get_permissions = Call(
        ("self", ROLE), returns=SetOf(ROLE),
        doc="This call returns a list of permissions given a role")
    get_permissions_name_label = Call(
        ("self", ROLE), returns=SetOf(String),
        doc="This call returns a list of permission names given a role")
    get_by_permission = Call(
        ("permission", ROLE), returns=SetOf(ROLE),
        doc="This call returns a list of roles given a permission")
    get_by_permission_name_label = Call(
        ("label", String), returns=SetOf(ROLE),
        doc="This call returns a list of roles given a permission name")
