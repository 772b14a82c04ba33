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

"""machines serving blocks of data for provisioning VMs"""

from dataclasses import dataclass
from typing import List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import RefOf, SetOf, String, wire_field
from xenapi_bindings.refs import (PVSCacheStorageRef, PVSProxyRef,
                                  PVSServerRef, PVSSiteRef)

PVS_SITE = RefOf(PVSSiteRef)


@dataclass
class PVSSiteRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    # Unique identifier of the PVS site, as configured in PVS
    pvs_uuid: str = wire_field("PVS_uuid", String)
    cache_storage: List[PVSCacheStorageRef] = wire_field(
        "cache_storage", SetOf(RefOf(PVSCacheStorageRef)))
    servers: List[PVSServerRef] = wire_field("servers",
                                             SetOf(RefOf(PVSServerRef)))
    proxies: List[PVSProxyRef] = wire_field("proxies",
                                            SetOf(RefOf(PVSProxyRef)))


class PVSSite(RemoteClass):
    __wire_name__ = "PVS_site"
    __ref__ = PVSSiteRef
    __record__ = PVSSiteRecord

    set_name_label = Call(("self", PVS_SITE), ("value", String))
    set_name_description = Call(("self", PVS_SITE), ("value", String))
    introduce = Call(("name_label", String), ("name_description", String),
                     ("PVS_uuid", String), returns=PVS_SITE, async_=True,
                     doc="Introduce new PVS site")
    forget = Call(("self", PVS_SITE), async_=True,
                  doc="Remove a site's meta data")
    set_pvs_uuid = Call(("self", PVS_SITE), ("value", String),
                        wire="set_PVS_uuid", async_=True,
                        doc="Update the PVS UUID of the PVS site")
