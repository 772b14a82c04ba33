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

"""VM appliance"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.enums import VMApplianceOperation
from xenapi_bindings.marshal import (Bool, EnumOf, MapOf, RecordOf, RefOf,
                                     SetOf, String, wire_field)
from xenapi_bindings.refs import SessionRef, SRRef, VMApplianceRef, VMRef

VM_APPLIANCE = RefOf(VMApplianceRef)
OPERATION = EnumOf(VMApplianceOperation)


@dataclass
class VMApplianceRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    allowed_operations: List[VMApplianceOperation] = wire_field(
        "allowed_operations", SetOf(OPERATION))
    current_operations: Dict[str, VMApplianceOperation] = wire_field(
        "current_operations", MapOf(String, OPERATION))
    vms: List[VMRef] = wire_field("VMs", SetOf(RefOf(VMRef)))


class VMAppliance(RemoteClass):
    __wire_name__ = "VM_appliance"
    __ref__ = VMApplianceRef
    __record__ = VMApplianceRecord

    create = Call(("args", RecordOf(VMApplianceRecord)),
                  returns=VM_APPLIANCE, async_=True,
                  doc="Create a new VM_appliance instance, and return its "
                      "handle.")
    destroy = Call(("self", VM_APPLIANCE), async_=True,
                   doc="Destroy the specified VM_appliance instance.")
    set_name_label = Call(("self", VM_APPLIANCE), ("value", String))
    set_name_description = Call(("self", VM_APPLIANCE), ("value", String))
    start = Call(("self", VM_APPLIANCE), ("paused", Bool), async_=True,
                 doc="Start all VMs in the appliance")
    clean_shutdown = Call(("self", VM_APPLIANCE), async_=True,
                          doc="Perform a clean shutdown of all the VMs in "
                              "the appliance")
    hard_shutdown = Call(("self", VM_APPLIANCE), async_=True,
                         doc="Perform a hard shutdown of all the VMs in the "
                             "appliance")
    shutdown = Call(("self", VM_APPLIANCE), async_=True,
                    doc="For each VM in the appliance, try to shut it down "
                        "cleanly. If this fails, perform a hard shutdown of "
                        "the VM.")
    assert_can_be_recovered = Call(
        ("self", VM_APPLIANCE), ("session_to", RefOf(SessionRef)),
        async_=True,
        doc="Assert whether all SRs required to recover this VM appliance "
            "are available.")
    get_srs_required_for_recovery = Call(
        ("self", VM_APPLIANCE), ("session_to", RefOf(SessionRef)),
        returns=SetOf(RefOf(SRRef)), wire="get_SRs_required_for_recovery",
        async_=True,
        doc="Get the list of SRs required by the VM appliance to recover.")
    recover = Call(
        ("self", VM_APPLIANCE), ("session_to", RefOf(SessionRef)),
        ("force", Bool), async_=True,
        doc="Recover the VM appliance")
