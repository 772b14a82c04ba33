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

"""The metrics associated with a VM"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from xenapi_bindings.api import RemoteClass, map_field_calls
from xenapi_bindings.enums import DomainType
from xenapi_bindings.marshal import (Bool, DateTime, EnumOf, Float, Int,
                                     MapOf, RefOf, SetOf, String, wire_field)
from xenapi_bindings.refs import VMMetricsRef


@dataclass
class VMMetricsRecord(object):
    uuid: str = wire_field("uuid", String)
    # Guest's actual memory (bytes)
    memory_actual: int = wire_field("memory_actual", Int)
    vcpus_number: int = wire_field("VCPUs_number", Int)
    # Utilisation for all of guest's current VCPUs
    vcpus_utilisation: Dict[int, float] = wire_field("VCPUs_utilisation",
                                                     MapOf(Int, Float))
    # VCPU to PCPU map
    vcpus_cpu: Dict[int, int] = wire_field("VCPUs_CPU", MapOf(Int, Int))
    vcpus_params: Dict[str, str] = wire_field("VCPUs_params",
                                              MapOf(String, String))
    vcpus_flags: Dict[int, List[str]] = wire_field(
        "VCPUs_flags", MapOf(Int, SetOf(String)))
    state: List[str] = wire_field("state", SetOf(String))
    start_time: datetime = wire_field("start_time", DateTime)
    install_time: datetime = wire_field("install_time", DateTime)
    last_updated: datetime = wire_field("last_updated", DateTime)
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    hvm: bool = wire_field("hvm", Bool)
    nested_virt: bool = wire_field("nested_virt", Bool)
    # VM is immobile and can't migrate between hosts
    nomigrate: bool = wire_field("nomigrate", Bool)
    current_domain_type: Optional[DomainType] = wire_field(
        "current_domain_type", EnumOf(DomainType))


class VMMetrics(RemoteClass):
    __wire_name__ = "VM_metrics"
    __ref__ = VMMetricsRef
    __record__ = VMMetricsRecord

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", RefOf(VMMetricsRef)), "other_config")
