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

"""Describes the storage that is available to a PVS site for caching
purposes"""

from dataclasses import dataclass

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import Int, RecordOf, RefOf, String, wire_field
from xenapi_bindings.refs import (HostRef, PVSCacheStorageRef, PVSSiteRef,
                                  SRRef, VDIRef)

PVS_CACHE_STORAGE = RefOf(PVSCacheStorageRef)


@dataclass
class PVSCacheStorageRecord(object):
    uuid: str = wire_field("uuid", String)
    host: HostRef = wire_field("host", RefOf(HostRef))
    sr: SRRef = wire_field("SR", RefOf(SRRef))
    site: PVSSiteRef = wire_field("site", RefOf(PVSSiteRef))
    # The size of the cache VDI (in bytes)
    size: int = wire_field("size", Int)
    vdi: VDIRef = wire_field("VDI", RefOf(VDIRef))


class PVSCacheStorage(RemoteClass):
    __wire_name__ = "PVS_cache_storage"
    __ref__ = PVSCacheStorageRef
    __record__ = PVSCacheStorageRecord

    create = Call(("args", RecordOf(PVSCacheStorageRecord)),
                  returns=PVS_CACHE_STORAGE, async_=True,
                  doc="Create a new PVS_cache_storage instance, and return "
                      "its handle.")
    destroy = Call(("self", PVS_CACHE_STORAGE), async_=True,
                   doc="Destroy the specified PVS_cache_storage instance.")
