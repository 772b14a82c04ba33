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

"""A storage repository"""

from dataclasses import dataclass
from typing import Dict, List

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.classes.data_source import DataSourceRecord
from xenapi_bindings.classes.probe_result import ProbeResultRecord
from xenapi_bindings.enums import StorageOperations
from xenapi_bindings.marshal import (Bool, EnumOf, Float, Int, MapOf,
                                     RecordOf, RefOf, SetOf, String,
                                     wire_field)
from xenapi_bindings.refs import (BlobRef, DRTaskRef, HostRef, PBDRef, SRRef,
                                  VDIRef)

SR_ = RefOf(SRRef)
HOST = RefOf(HostRef)
STRING_MAP = MapOf(String, String)
OPERATION = EnumOf(StorageOperations)

# Older servers take the shorter argument lists, sent under the same wire name
CREATE_ARGS = (("host", HOST), ("device_config", STRING_MAP),
               ("physical_size", Int), ("name_label", String),
               ("name_description", String), ("type", String),
               ("content_type", String), ("shared", Bool))
INTRODUCE_ARGS = (("uuid", String), ("name_label", String),
                  ("name_description", String), ("type", String),
                  ("content_type", String), ("shared", Bool))
MAKE_ARGS = (("host", HOST), ("device_config", STRING_MAP),
             ("physical_size", Int), ("name_label", String),
             ("name_description", String), ("type", String),
             ("content_type", String))
PROBE_ARGS = (("host", HOST), ("device_config", STRING_MAP))
BLOB_ARGS = (("sr", SR_), ("name", String), ("mime_type", String))


@dataclass
class SRRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    allowed_operations: List[StorageOperations] = wire_field(
        "allowed_operations", SetOf(OPERATION))
    # links each of the running tasks using this object (by reference) to a
    # current_operation enum which describes the nature of the task.
    current_operations: Dict[str, StorageOperations] = wire_field(
        "current_operations", MapOf(String, OPERATION))
    vdis: List[VDIRef] = wire_field("VDIs", SetOf(RefOf(VDIRef)))
    pbds: List[PBDRef] = wire_field("PBDs", SetOf(RefOf(PBDRef)))
    # sum of virtual_sizes of all VDIs in this storage repository (in bytes)
    virtual_allocation: int = wire_field("virtual_allocation", Int)
    physical_utilisation: int = wire_field("physical_utilisation", Int)
    physical_size: int = wire_field("physical_size", Int)
    type: str = wire_field("type", String)
    content_type: str = wire_field("content_type", String)
    shared: bool = wire_field("shared", Bool)
    other_config: Dict[str, str] = wire_field("other_config", STRING_MAP)
    tags: List[str] = wire_field("tags", SetOf(String))
    sm_config: Dict[str, str] = wire_field("sm_config", STRING_MAP)
    blobs: Dict[str, BlobRef] = wire_field("blobs",
                                           MapOf(String, RefOf(BlobRef)))
    local_cache_enabled: bool = wire_field("local_cache_enabled", Bool)
    introduced_by: DRTaskRef = wire_field("introduced_by", RefOf(DRTaskRef))
    clustered: bool = wire_field("clustered", Bool)
    is_tools_sr: bool = wire_field("is_tools_sr", Bool)


class SR(RemoteClass):
    __wire_name__ = "SR"
    __ref__ = SRRef
    __record__ = SRRecord

    create = Call(
        *CREATE_ARGS, ("sm_config", STRING_MAP),
        returns=SR_, async_=True,
        doc="Create a new Storage Repository and introduce it into the "
            "managed system, creating both SR record and PBD record to "
            "attach it to current host (with specified device_config "
            "parameters)")
    create_without_sm_config = Call(
        *CREATE_ARGS, returns=SR_, wire="create", async_=True,
        doc="SR.create as accepted by servers without the sm_config "
            "argument")
    introduce = Call(
        *INTRODUCE_ARGS, ("sm_config", STRING_MAP),
        returns=SR_, async_=True,
        doc="Introduce a new Storage Repository into the managed system")
    introduce_without_sm_config = Call(
        *INTRODUCE_ARGS, returns=SR_, wire="introduce", async_=True)
    make = Call(
        *MAKE_ARGS, ("sm_config", STRING_MAP),
        returns=String, async_=True,
        doc="Create a new Storage Repository on disk. This call is "
            "deprecated: use SR.create instead.")
    make_without_sm_config = Call(
        *MAKE_ARGS, returns=String, wire="make", async_=True)
    destroy = Call(("sr", SR_), async_=True,
                   doc="Destroy specified SR, removing SR-record from "
                       "database and remove SR from disk. (In order to "
                       "affect this operation the appropriate device_config "
                       "is read from the specified SR's PBD on current "
                       "host)")
    forget = Call(("sr", SR_), async_=True,
                  doc="Removing specified SR-record from database, without "
                      "attempting to remove SR from disk")
    update = Call(("sr", SR_), async_=True,
                  doc="Refresh the fields on the SR object")
    get_supported_types = Call(
        returns=SetOf(String),
        doc="Return a set of all the SR types supported by the system")
    scan = Call(("sr", SR_), async_=True,
                doc="Refreshes the list of VDIs associated with an SR")
    probe = Call(
        *PROBE_ARGS, ("type", String), ("sm_config", STRING_MAP),
        returns=String, async_=True,
        doc="Perform a backend-specific scan, using the given "
            "device_config. If the device_config is complete, then this "
            "will return a list of the SRs present of this type on the "
            "device, if any. If the device_config is partial, then a "
            "backend-specific scan will be performed, returning results "
            "that will guide the user in improving the device_config.")
    probe_without_type = Call(
        *PROBE_ARGS, returns=String, wire="probe", async_=True,
        doc="SR.probe with only the device_config, for older servers")
    probe_ext = Call(
        ("host", HOST), ("device_config", STRING_MAP), ("type", String),
        ("sm_config", STRING_MAP),
        returns=SetOf(RecordOf(ProbeResultRecord)), async_=True,
        doc="Perform a backend-specific scan, using the given "
            "device_config. If the device_config is complete, then this "
            "will return a list of the SRs present of this type on the "
            "device, if any. If the device_config is partial, then a "
            "backend-specific scan will be performed, returning results "
            "that will guide the user in improving the device_config.")
    set_shared = Call(("sr", SR_), ("value", Bool), async_=True,
                      doc="Sets the shared flag on the SR")
    set_name_label = Call(("sr", SR_), ("value", String), async_=True,
                          doc="Set the name label of the SR")
    set_name_description = Call(("sr", SR_), ("value", String), async_=True,
                                doc="Set the name description of the SR")
    create_new_blob = Call(
        *BLOB_ARGS, ("public", Bool),
        returns=RefOf(BlobRef), async_=True,
        doc="Create a placeholder for a named binary blob of data that is "
            "associated with this SR")
    create_new_blob_without_public = Call(
        *BLOB_ARGS, returns=RefOf(BlobRef), wire="create_new_blob",
        async_=True)
    set_physical_size = Call(("self", SR_), ("value", Int),
                             doc="Sets the SR's physical_size field")
    assert_can_host_ha_statefile = Call(
        ("sr", SR_), async_=True,
        doc="Returns successfully if the given SR can host an HA statefile. "
            "Otherwise returns an error to explain why not")
    assert_supports_database_replication = Call(
        ("sr", SR_), async_=True,
        doc="Returns successfully if the given SR supports database "
            "replication. Otherwise returns an error to explain why not.")
    enable_database_replication = Call(("sr", SR_), async_=True)
    disable_database_replication = Call(("sr", SR_), async_=True)
    get_data_sources = Call(
        ("sr", SR_), returns=SetOf(RecordOf(DataSourceRecord)))
    record_data_source = Call(
        ("sr", SR_), ("data_source", String),
        doc="Start recording the specified data source")
    query_data_source = Call(
        ("sr", SR_), ("data_source", String), returns=Float,
        doc="Query the latest value of the specified data source")
    forget_data_source_archives = Call(
        ("sr", SR_), ("data_source", String),
        doc="Forget the recorded statistics related to the specified data "
            "source")

    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", SR_), "other_config")
    set_sm_config, add_to_sm_config, remove_from_sm_config = \
        map_field_calls(("self", SR_), "sm_config")
    set_tags = Call(("self", SR_), ("value", SetOf(String)),
                    doc="Set the tags field of the given SR.")
    add_tags = Call(("self", SR_), ("value", String),
                    doc="Add the given value to the tags field of the given "
                        "SR. If the value is already in that Set, then do "
                        "nothing.")
    remove_tags = Call(("self", SR_), ("value", String),
                       doc="Remove the given value from the tags field of "
                           "the given SR. If the value is not in that Set, "
                           "then do nothing.")
