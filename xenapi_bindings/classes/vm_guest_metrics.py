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

"""The metrics reported by the guest (as opposed to inferred from outside)"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from xenapi_bindings.api import RemoteClass, map_field_calls
from xenapi_bindings.enums import TristateType
from xenapi_bindings.marshal import (Bool, DateTime, EnumOf, MapOf, RefOf,
                                     String, wire_field)
from xenapi_bindings.refs import VMGuestMetricsRef

STRING_MAP = MapOf(String, String)


@dataclass
class VMGuestMetricsRecord(object):
    uuid: str = wire_field("uuid", String)
    os_version: Dict[str, str] = wire_field("os_version", STRING_MAP)
    netbios_name: Dict[str, str] = wire_field("netbios_name", STRING_MAP)
    pv_drivers_version: Dict[str, str] = wire_field("PV_drivers_version",
                                                    STRING_MAP)
    pv_drivers_up_to_date: bool = wire_field("PV_drivers_up_to_date", Bool)
    memory: Dict[str, str] = wire_field("memory", STRING_MAP)
    disks: Dict[str, str] = wire_field("disks", STRING_MAP)
    networks: Dict[str, str] = wire_field("networks", STRING_MAP)
    other: Dict[str, str] = wire_field("other", STRING_MAP)
    last_updated: datetime = wire_field("last_updated", DateTime)
    other_config: Dict[str, str] = wire_field("other_config", STRING_MAP)
    # True if the guest is sending heartbeat messages via the guest agent
    live: bool = wire_field("live", Bool)
    can_use_hotplug_vbd: Optional[TristateType] = wire_field(
        "can_use_hotplug_vbd", EnumOf(TristateType))
    can_use_hotplug_vif: Optional[TristateType] = wire_field(
        "can_use_hotplug_vif", EnumOf(TristateType))
    pv_drivers_detected: bool = wire_field("PV_drivers_detected", Bool)


class VMGuestMetrics(RemoteClass):
    __wire_name__ = "VM_guest_metrics"
    __ref__ = VMGuestMetricsRef
    __record__ = VMGuestMetricsRecord

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", RefOf(VMGuestMetricsRef)), "other_config")
