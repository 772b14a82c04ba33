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

"""A virtual block device"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.enums import VbdMode, VbdOperations, VbdType
from xenapi_bindings.marshal import (Bool, EnumOf, Int, MapOf, RecordOf,
                                     RefOf, SetOf, String, wire_field)
from xenapi_bindings.refs import VBDMetricsRef, VBDRef, VDIRef, VMRef

VBD_ = RefOf(VBDRef)
OPERATION = EnumOf(VbdOperations)


@dataclass
class VBDRecord(object):
    uuid: str = wire_field("uuid", String)
    allowed_operations: List[VbdOperations] = wire_field(
        "allowed_operations", SetOf(OPERATION))
    current_operations: Dict[str, VbdOperations] = wire_field(
        "current_operations", MapOf(String, OPERATION))
    vm: VMRef = wire_field("VM", RefOf(VMRef))
    vdi: VDIRef = wire_field("VDI", RefOf(VDIRef))
    device: str = wire_field("device", String)
    userdevice: str = wire_field("userdevice", String)
    bootable: bool = wire_field("bootable", Bool)
    mode: Optional[VbdMode] = wire_field("mode", EnumOf(VbdMode))
    type: Optional[VbdType] = wire_field("type", EnumOf(VbdType))
    unpluggable: bool = wire_field("unpluggable", Bool)
    storage_lock: bool = wire_field("storage_lock", Bool)
    # if true this represents an empty drive
    empty: bool = wire_field("empty", Bool)
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    currently_attached: bool = wire_field("currently_attached", Bool)
    status_code: int = wire_field("status_code", Int)
    status_detail: str = wire_field("status_detail", String)
    runtime_properties: Dict[str, str] = wire_field("runtime_properties",
                                                    MapOf(String, String))
    qos_algorithm_type: str = wire_field("qos_algorithm_type", String)
    qos_algorithm_params: Dict[str, str] = wire_field(
        "qos_algorithm_params", MapOf(String, String))
    qos_supported_algorithms: List[str] = wire_field(
        "qos_supported_algorithms", SetOf(String))
    metrics: VBDMetricsRef = wire_field("metrics", RefOf(VBDMetricsRef))


class VBD(RemoteClass):
    __wire_name__ = "VBD"
    __ref__ = VBDRef
    __record__ = VBDRecord

    create = Call(("args", RecordOf(VBDRecord)), returns=VBD_, async_=True,
                  doc="Create a new VBD instance, and return its handle.")
    destroy = Call(("self", VBD_), async_=True,
                   doc="Destroy the specified VBD instance.")
    set_userdevice = Call(("self", VBD_), ("value", String))
    set_bootable = Call(("self", VBD_), ("value", Bool))
    set_type = Call(("self", VBD_), ("value", EnumOf(VbdType)))
    set_unpluggable = Call(("self", VBD_), ("value", Bool))
    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", VBD_), "other_config")
    set_qos_algorithm_type = Call(("self", VBD_), ("value", String))
    set_qos_algorithm_params, add_to_qos_algorithm_params, \
        remove_from_qos_algorithm_params = \
        map_field_calls(("self", VBD_), "qos_algorithm_params")
    eject = Call(("vbd", VBD_), async_=True,
                 doc="Remove the media from the device and leave it empty")
    insert = Call(("vbd", VBD_), ("vdi", RefOf(VDIRef)), async_=True,
                  doc="Insert new media into the device")
    plug = Call(("self", VBD_), async_=True,
                doc="Hotplug the specified VBD, dynamically attaching it to "
                    "the running VM")
    unplug = Call(("self", VBD_), async_=True,
                  doc="Hot-unplug the specified VBD, dynamically unattaching "
                      "it from the running VM")
    unplug_force = Call(("self", VBD_), async_=True,
                        doc="Forcibly unplug the specified VBD")
    assert_attachable = Call(("self", VBD_), async_=True,
                             doc="Throws an error if this VBD could not be "
                                 "attached to this VM if the VM were "
                                 "running. Intended for debugging.")
    set_mode = Call(("self", VBD_), ("value", EnumOf(VbdMode)), async_=True,
                    doc="Sets the mode of the VBD. The power_state of the VM "
                        "must be halted.")
