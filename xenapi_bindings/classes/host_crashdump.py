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

"""Represents a host crash dump"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.marshal import (DateTime, Int, MapOf, RefOf, String,
                                     wire_field)
from xenapi_bindings.refs import HostCrashdumpRef, HostRef

HOST_CRASHDUMP = RefOf(HostCrashdumpRef)


@dataclass
class HostCrashdumpRecord(object):
    uuid: str = wire_field("uuid", String)
    host: HostRef = wire_field("host", RefOf(HostRef))
    timestamp: datetime = wire_field("timestamp", DateTime)
    # Size of the crashdump
    size: int = wire_field("size", Int)
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))


class HostCrashdump(RemoteClass):
    __wire_name__ = "host_crashdump"
    __ref__ = HostCrashdumpRef
    __record__ = HostCrashdumpRecord

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", HOST_CRASHDUMP), "other_config")
    destroy = Call(("self", HOST_CRASHDUMP), async_=True,
                   doc="Destroy specified host crash dump, removing it from "
                       "the disk.")
    upload = Call(("self", HOST_CRASHDUMP), ("url", String),
                  ("options", MapOf(String, String)), async_=True,
                  doc="Upload the specified host crash dump to a specified "
                      "URL")
