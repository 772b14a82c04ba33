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

"""Repository for updates"""

from dataclasses import dataclass
from typing import Optional

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.enums import Origin
from xenapi_bindings.marshal import Bool, EnumOf, RefOf, String, wire_field
from xenapi_bindings.refs import RepositoryRef

REPOSITORY = RefOf(RepositoryRef)


@dataclass
class RepositoryRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    # Base URL of binary packages in this repository
    binary_url: str = wire_field("binary_url", String)
    source_url: str = wire_field("source_url", String)
    # True if updateinfo.xml in this repository needs to be parsed
    update: bool = wire_field("update", Bool)
    hash: str = wire_field("hash", String)
    up_to_date: bool = wire_field("up_to_date", Bool)
    gpgkey_path: str = wire_field("gpgkey_path", String)
    origin: Optional[Origin] = wire_field("origin", EnumOf(Origin))


class Repository(RemoteClass):
    """Repository for updates"""

    __wire_name__ = "Repository"
    __ref__ = RepositoryRef
    __record__ = RepositoryRecord

    set_name_label = Call(("self", REPOSITORY), ("value", String))
    set_name_description = Call(("self", REPOSITORY), ("value", String))
    introduce = Call(
        ("name_label", String), ("name_description", String),
        ("binary_url", String), ("source_url", String), ("update", Bool),
        ("gpgkey_path", String),
        returns=REPOSITORY, async_=True,
        doc="Add the configuration for a new remote repository")
    introduce_bundle = Call(
        ("name_label", String), ("name_description", String),
        returns=REPOSITORY, async_=True,
        doc="Add the configuration for a new bundle repository")
    forget = Call(("self", REPOSITORY), async_=True,
                  doc="Remove the repository record from the database")
    set_gpgkey_path = Call(
        ("self", REPOSITORY), ("value", String), async_=True,
        doc="Set the file name of the GPG public key of the repository")
