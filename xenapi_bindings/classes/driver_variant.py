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

"""UNSTABLE, might change: Variant of a host driver"""

from dataclasses import dataclass

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import Bool, Float, RefOf, String, wire_field
from xenapi_bindings.refs import DriverVariantRef, HostDriverRef


@dataclass
class DriverVariantRecord(object):
    uuid: str = wire_field("uuid", String)
    name: str = wire_field("name", String)
    driver: HostDriverRef = wire_field("driver", RefOf(HostDriverRef))
    version: str = wire_field("version", String)
    hardware_present: bool = wire_field("hardware_present", Bool)
    # Priority; this needs an explanation how this is ordered
    priority: float = wire_field("priority", Float)
    status: str = wire_field("status", String)


class DriverVariant(RemoteClass):
    __wire_name__ = "Driver_variant"
    __ref__ = DriverVariantRef
    __record__ = DriverVariantRecord

    select = Call(("self", RefOf(DriverVariantRef)), async_=True,
                  doc="UNSTABLE, might change: Select this variant of a "
                      "driver to become active after reboot or immediately "
                      "if currently no version is active")
