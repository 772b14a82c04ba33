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

"""LVHD SR specific operations"""

from dataclasses import dataclass

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.marshal import Int, RefOf, String, wire_field
from xenapi_bindings.refs import HostRef, LVHDRef, SRRef


@dataclass
class LVHDRecord(object):
    uuid: str = wire_field("uuid", String)


class LVHD(RemoteClass):
    __wire_name__ = "LVHD"
    __ref__ = LVHDRef
    __record__ = LVHDRecord
    __enumerable__ = False

    enable_thin_provisioning = Call(
        ("host", RefOf(HostRef)), ("SR", RefOf(SRRef)),
        ("initial_allocation", Int), ("allocation_quantum", Int),
        returns=String, async_=True,
        doc="Upgrades an LVHD SR to enable thin-provisioning. Future VDIs "
            "created in this SR will be thinly-provisioned, although "
            "existing VDIs will be left alone. Note that the SR must "
            "be attached to the SRmaster for upgrade to work.")
