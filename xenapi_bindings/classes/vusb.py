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

"""Describes the vusb device"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.enums import VusbOperations
from xenapi_bindings.marshal import (Bool, EnumOf, MapOf, RefOf, SetOf, String,
                                     wire_field)
from xenapi_bindings.refs import USBGroupRef, VMRef, VUSBRef

VUSB_ = RefOf(VUSBRef)
OPERATION = EnumOf(VusbOperations)


@dataclass
class VUSBRecord(object):
    uuid: str = wire_field("uuid", String)
    allowed_operations: List[VusbOperations] = wire_field(
        "allowed_operations", SetOf(OPERATION))
    current_operations: Dict[str, VusbOperations] = wire_field(
        "current_operations", MapOf(String, OPERATION))
    vm: VMRef = wire_field("VM", RefOf(VMRef))
    usb_group: USBGroupRef = wire_field("USB_group", RefOf(USBGroupRef))
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    currently_attached: bool = wire_field("currently_attached", Bool)


class VUSB(RemoteClass):
    __wire_name__ = "VUSB"
    __ref__ = VUSBRef
    __record__ = VUSBRecord

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", VUSB_), "other_config")
    create = Call(("VM", RefOf(VMRef)), ("USB_group", RefOf(USBGroupRef)),
                  ("other_config", MapOf(String, String)),
                  returns=VUSB_, async_=True,
                  doc="Create a new VUSB record in the database only")
    unplug = Call(("self", VUSB_), async_=True,
                  doc="Unplug the vusb device from the vm.")
    destroy = Call(("self", VUSB_), async_=True,
                   doc="Removes a VUSB record from the database")
