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

"""A PCI device"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.enums import PciDom0Access
from xenapi_bindings.marshal import (EnumOf, MapOf, RefOf, SetOf, String,
                                     wire_field)
from xenapi_bindings.refs import HostRef, PCIRef

PCI_ = RefOf(PCIRef)
DOM0_ACCESS = EnumOf(PciDom0Access)


@dataclass
class PCIRecord(object):
    uuid: str = wire_field("uuid", String)
    class_name: str = wire_field("class_name", String)
    vendor_name: str = wire_field("vendor_name", String)
    device_name: str = wire_field("device_name", String)
    host: HostRef = wire_field("host", RefOf(HostRef))
    pci_id: str = wire_field("pci_id", String)
    dependencies: List[PCIRef] = wire_field("dependencies", SetOf(PCI_))
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    subsystem_vendor_name: str = wire_field("subsystem_vendor_name", String)
    subsystem_device_name: str = wire_field("subsystem_device_name", String)
    driver_name: str = wire_field("driver_name", String)


class PCI(RemoteClass):
    __wire_name__ = "PCI"
    __ref__ = PCIRef
    __record__ = PCIRecord

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", PCI_), "other_config")
    disable_dom0_access = Call(
        ("self", PCI_), returns=DOM0_ACCESS, async_=True,
        doc="Hide a PCI device from the dom0 kernel. (Takes affect after "
            "next boot.)")
    enable_dom0_access = Call(
        ("self", PCI_), returns=DOM0_ACCESS, async_=True,
        doc="Unhide a PCI device from the dom0 kernel. (Takes affect after "
            "next boot.)")
    get_dom0_access_status = Call(
        ("self", PCI_), returns=DOM0_ACCESS, async_=True,
        doc="Return a PCI device dom0 access status.")
