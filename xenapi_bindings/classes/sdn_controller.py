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

"""Describes the SDN controller that is to connect with the pool"""

from dataclasses import dataclass
from typing import Optional

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.enums import SdnControllerProtocol
from xenapi_bindings.marshal import EnumOf, Int, RefOf, String, wire_field
from xenapi_bindings.refs import SDNControllerRef

SDN_CONTROLLER = RefOf(SDNControllerRef)


@dataclass
class SDNControllerRecord(object):
    uuid: str = wire_field("uuid", String)
    protocol: Optional[SdnControllerProtocol] = wire_field(
        "protocol", EnumOf(SdnControllerProtocol))
    # IP address of the controller
    address: str = wire_field("address", String)
    # TCP port of the controller
    port: int = wire_field("port", Int)


class SDNController(RemoteClass):
    __wire_name__ = "SDN_controller"
    __ref__ = SDNControllerRef
    __record__ = SDNControllerRecord

    introduce = Call(("protocol", EnumOf(SdnControllerProtocol)),
                     ("address", String), ("port", Int),
                     returns=SDN_CONTROLLER, async_=True,
                     doc="Introduce an SDN controller to the pool.")
    forget = Call(("self", SDN_CONTROLLER), async_=True,
                  doc="Remove the OVS manager of the pool and destroy the "
                      "db record.")
