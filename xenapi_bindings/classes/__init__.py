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

"""
The Xen-API classes. Importing this package registers every class in
RemoteClass.registry.
"""

from xenapi_bindings.classes.auth import Auth
from xenapi_bindings.classes.certificate import Certificate, CertificateRecord
from xenapi_bindings.classes.data_source import DataSourceRecord
from xenapi_bindings.classes.driver_variant import (DriverVariant,
                                                   DriverVariantRecord)
from xenapi_bindings.classes.event import (Event, EventBatch, EventRecord,
                                          decode_snapshot)
from xenapi_bindings.classes.feature import Feature, FeatureRecord
from xenapi_bindings.classes.host_crashdump import (HostCrashdump,
                                                   HostCrashdumpRecord)
from xenapi_bindings.classes.host_driver import HostDriver, HostDriverRecord
from xenapi_bindings.classes.lvhd import LVHD, LVHDRecord
from xenapi_bindings.classes.message import Message, MessageRecord
from xenapi_bindings.classes.observer import Observer, ObserverRecord
from xenapi_bindings.classes.pci import PCI, PCIRecord
from xenapi_bindings.classes.probe_result import (ProbeResultRecord,
                                                 SrStatRecord)
from xenapi_bindings.classes.pvs_cache_storage import (PVSCacheStorage,
                                                      PVSCacheStorageRecord)
from xenapi_bindings.classes.pvs_site import PVSSite, PVSSiteRecord
from xenapi_bindings.classes.repository import Repository, RepositoryRecord
from xenapi_bindings.classes.role import Role, RoleRecord
from xenapi_bindings.classes.sdn_controller import (SDNController,
                                                   SDNControllerRecord)
from xenapi_bindings.classes.session import SessionAPI, SessionRecord
from xenapi_bindings.classes.sr import SR, SRRecord
from xenapi_bindings.classes.subject import Subject, SubjectRecord
from xenapi_bindings.classes.task import Task, TaskRecord
from xenapi_bindings.classes.vbd import VBD, VBDRecord
from xenapi_bindings.classes.vdi_nbd_server_info import VdiNbdServerInfoRecord
from xenapi_bindings.classes.vgpu_type import VGPUType, VGPUTypeRecord
from xenapi_bindings.classes.vm_appliance import (VMAppliance,
                                                 VMApplianceRecord)
from xenapi_bindings.classes.vm_guest_metrics import (VMGuestMetrics,
                                                     VMGuestMetricsRecord)
from xenapi_bindings.classes.vm_metrics import VMMetrics, VMMetricsRecord
from xenapi_bindings.classes.vusb import VUSB, VUSBRecord

__all__ = [
    "Auth", "Certificate", "CertificateRecord", "DataSourceRecord",
    "DriverVariant", "DriverVariantRecord", "Event", "EventBatch",
    "EventRecord", "decode_snapshot", "Feature", "FeatureRecord",
    "HostCrashdump", "HostCrashdumpRecord", "HostDriver", "HostDriverRecord",
    "LVHD", "LVHDRecord", "Message", "MessageRecord", "Observer",
    "ObserverRecord", "PCI", "PCIRecord", "ProbeResultRecord", "SrStatRecord",
    "PVSCacheStorage", "PVSCacheStorageRecord", "PVSSite", "PVSSiteRecord",
    "Repository", "RepositoryRecord", "Role", "RoleRecord", "SDNController",
    "SDNControllerRecord", "SessionAPI", "SessionRecord", "SR", "SRRecord",
    "Subject", "SubjectRecord", "Task", "TaskRecord", "VBD", "VBDRecord",
    "VdiNbdServerInfoRecord", "VGPUType", "VGPUTypeRecord", "VMAppliance",
    "VMApplianceRecord", "VMGuestMetrics", "VMGuestMetricsRecord",
    "VMMetrics", "VMMetricsRecord", "VUSB", "VUSBRecord",
]
