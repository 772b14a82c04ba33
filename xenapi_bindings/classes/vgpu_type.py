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

"""A type of virtual GPU"""

from dataclasses import dataclass
from typing import List, Optional

from xenapi_bindings.api import RemoteClass
from xenapi_bindings.enums import VgpuTypeImplementation
from xenapi_bindings.marshal import (Bool, EnumOf, Int, RefOf, SetOf, String,
                                     wire_field)
from xenapi_bindings.refs import GPUGroupRef, PGPURef, VGPURef, VGPUTypeRef

PGPUS = SetOf(RefOf(PGPURef))
GPU_GROUPS = SetOf(RefOf(GPUGroupRef))


@dataclass
class VGPUTypeRecord(object):
    uuid: str = wire_field("uuid", String)
    vendor_name: str = wire_field("vendor_name", String)
    model_name: str = wire_field("model_name", String)
    # Framebuffer size of the VGPU type, in bytes
    framebuffer_size: int = wire_field("framebuffer_size", Int)
    max_heads: int = wire_field("max_heads", Int)
    max_resolution_x: int = wire_field("max_resolution_x", Int)
    max_resolution_y: int = wire_field("max_resolution_y", Int)
    supported_on_pgpus: List[PGPURef] = wire_field("supported_on_PGPUs",
                                                   PGPUS)
    enabled_on_pgpus: List[PGPURef] = wire_field("enabled_on_PGPUs", PGPUS)
    vgpus: List[VGPURef] = wire_field("VGPUs", SetOf(RefOf(VGPURef)))
    supported_on_gpu_groups: List[GPUGroupRef] = wire_field(
        "supported_on_GPU_groups", GPU_GROUPS)
    enabled_on_gpu_groups: List[GPUGroupRef] = wire_field(
        "enabled_on_GPU_groups", GPU_GROUPS)
    implementation: Optional[VgpuTypeImplementation] = wire_field(
        "implementation", EnumOf(VgpuTypeImplementation))
    identifier: str = wire_field("identifier", String)
    experimental: bool = wire_field("experimental", Bool)
    # List of VGPU types which are compatible in one VM
    compatible_types_in_vm: List[VGPUTypeRef] = wire_field(
        "compatible_types_in_vm", SetOf(RefOf(VGPUTypeRef)))


class VGPUType(RemoteClass):
    __wire_name__ = "VGPU_type"
    __ref__ = VGPUTypeRef
    __record__ = VGPUTypeRecord
