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

"""Describes an observer which will control observability activity in the
Toolstack"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import (Bool, MapOf, RecordOf, RefOf, SetOf,
                                     String, wire_field)
from xenapi_bindings.refs import HostRef, ObserverRef

OBSERVER = RefOf(ObserverRef)


@dataclass
class ObserverRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    hosts: List[HostRef] = wire_field("hosts", SetOf(RefOf(HostRef)))
    attributes: Dict[str, str] = wire_field("attributes",
                                            MapOf(String, String))
    endpoints: List[str] = wire_field("endpoints", SetOf(String))
    components: List[str] = wire_field("components", SetOf(String))
    enabled: bool = wire_field("enabled", Bool)


class Observer(RemoteClass):
    __wire_name__ = "Observer"
    __ref__ = ObserverRef
    __record__ = ObserverRecord

    create = Call(("args", RecordOf(ObserverRecord)),
                  returns=OBSERVER, async_=True,
                  doc="Create a new Observer instance, and return its handle.")
    destroy = Call(("self", OBSERVER), async_=True,
                   doc="Destroy the specified Observer instance.")
    set_name_label = Call(("self", OBSERVER), ("value", String))
    set_name_description = Call(("self", OBSERVER), ("value", String))
    set_hosts = Call(("self", OBSERVER), ("value", SetOf(RefOf(HostRef))),
                     async_=True,
                     doc="Sets the hosts that the observer is to be "
                         "registered on")
    set_enabled = Call(("self", OBSERVER), ("value", Bool), async_=True,
                       doc="Enable / disable this observer which will stop "
                           "the observer from producing observability "
                           "information")
    set_attributes = Call(("self", OBSERVER),
                          ("value", MapOf(String, String)), async_=True,
                          doc="Set the attributes of the observer. These are "
                              "used to emit metadata by the observer")
    set_endpoints = Call(("self", OBSERVER), ("value", SetOf(String)),
                         async_=True,
                         doc="Set the file/HTTP endpoints the observer sends "
                             "data to")
    set_components = Call(("self", OBSERVER), ("value", SetOf(String)),
                          async_=True,
                          doc="Set the components on which the observer "
                              "will broadcast to. i.e. xapi, xenopsd, "
                              "networkd, etc.")
