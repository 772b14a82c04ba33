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

"""Results of SR.probe_ext."""

from dataclasses import dataclass
from typing import Dict, Optional

from xenapi_bindings.enums import SrHealth
from xenapi_bindings.marshal import (Bool, EnumOf, Int, MapOf, OptionOf,
                                     RecordOf, String, wire_field)


@dataclass
class SrStatRecord(object):
    """A set of high-level properties associated with an SR."""
    uuid: Optional[str] = wire_field("uuid", OptionOf(String))
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    free_space: int = wire_field("free_space", Int)
    total_space: int = wire_field("total_space", Int)
    clustered: bool = wire_field("clustered", Bool)
    health: Optional[SrHealth] = wire_field("health", EnumOf(SrHealth))


@dataclass
class ProbeResultRecord(object):
    """A set of properties that describe one result element of SR.probe.
    Result elements and properties can change dynamically based on changes
    to the SR.probe input-parameters or the target."""
    configuration: Dict[str, str] = wire_field("configuration",
                                               MapOf(String, String))
    # True if this configuration is complete and can be used to call
    # SR.create
    complete: bool = wire_field("complete", Bool)
    sr: Optional[SrStatRecord] = wire_field("sr",
                                            OptionOf(RecordOf(SrStatRecord)))
    extra_info: Dict[str, str] = wire_field("extra_info",
                                            MapOf(String, String))
