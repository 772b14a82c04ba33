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

"""UNSTABLE, might change: Multi-version driver component"""

from dataclasses import dataclass
from typing import List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import RefOf, SetOf, String, wire_field
from xenapi_bindings.refs import DriverVariantRef, HostDriverRef, HostRef

HOST_DRIVER = RefOf(HostDriverRef)
VARIANT = RefOf(DriverVariantRef)


@dataclass
class HostDriverRecord(object):
    uuid: str = wire_field("uuid", String)
    host: HostRef = wire_field("host", RefOf(HostRef))
    name: str = wire_field("name", String)
    friendly_name: str = wire_field("friendly_name", String)
    variants: List[DriverVariantRef] = wire_field("variants", SetOf(VARIANT))
    active_variant: DriverVariantRef = wire_field("active_variant", VARIANT)
    selected_variant: DriverVariantRef = wire_field("selected_variant",
                                                    VARIANT)
    type: str = wire_field("type", String)
    description: str = wire_field("description", String)
    info: str = wire_field("info", String)


class HostDriver(RemoteClass):
    __wire_name__ = "Host_driver"
    __ref__ = HostDriverRef
    __record__ = HostDriverRecord

    select = Call(("self", HOST_DRIVER), ("variant", VARIANT), async_=True,
                  doc="UNSTABLE, might change: Select a variant of the "
                      "driver")
    deselect = Call(("self", HOST_DRIVER), async_=True,
                    doc="UNSTABLE, might change: Deselect the currently "
                        "active variant of this driver after reboot. No "
                        "action will be taken if no variant is currently "
                        "active.")
    rescan = Call(("host", RefOf(HostRef)), async_=True,
                  doc="UNSTABLE, might change: Scan the host and update its "
                      "driver information")
