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
Opaque object handles.

A reference names one object on the server. It is never dereferenced
locally, only passed back in later calls. Each class gets its own subclass
of Ref so that a handle for one class cannot be passed where another class
is expected (see marshal.RefOf).
"""

NULL_REF = "OpaqueRef:NULL"


class Ref(str):
    """Base class of every object handle."""

    __slots__ = ()

    def is_null(self):
        return self in ("", NULL_REF)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, str.__repr__(self))


class SessionRef(Ref):
    __slots__ = ()


class TaskRef(Ref):
    __slots__ = ()


class AuthRef(Ref):
    __slots__ = ()


class BlobRef(Ref):
    __slots__ = ()


class CertificateRef(Ref):
    __slots__ = ()


class DataSourceRef(Ref):
    __slots__ = ()


class DRTaskRef(Ref):
    __slots__ = ()


class DriverVariantRef(Ref):
    __slots__ = ()


class EventRef(Ref):
    __slots__ = ()


class FeatureRef(Ref):
    __slots__ = ()


class GPUGroupRef(Ref):
    __slots__ = ()


class HostRef(Ref):
    __slots__ = ()


class HostCrashdumpRef(Ref):
    __slots__ = ()


class HostDriverRef(Ref):
    __slots__ = ()


class LVHDRef(Ref):
    __slots__ = ()


class MessageRef(Ref):
    __slots__ = ()


class ObserverRef(Ref):
    __slots__ = ()


class PBDRef(Ref):
    __slots__ = ()


class PCIRef(Ref):
    __slots__ = ()


class PGPURef(Ref):
    __slots__ = ()


class PVSCacheStorageRef(Ref):
    __slots__ = ()


class PVSProxyRef(Ref):
    __slots__ = ()


class PVSServerRef(Ref):
    __slots__ = ()


class PVSSiteRef(Ref):
    __slots__ = ()


class RepositoryRef(Ref):
    __slots__ = ()


class RoleRef(Ref):
    __slots__ = ()


class SDNControllerRef(Ref):
    __slots__ = ()


class SRRef(Ref):
    __slots__ = ()


class SubjectRef(Ref):
    __slots__ = ()


class UserRef(Ref):
    __slots__ = ()


class USBGroupRef(Ref):
    __slots__ = ()


class VBDRef(Ref):
    __slots__ = ()


class VBDMetricsRef(Ref):
    __slots__ = ()


class VDIRef(Ref):
    __slots__ = ()


class VGPURef(Ref):
    __slots__ = ()


class VGPUTypeRef(Ref):
    __slots__ = ()


class VMRef(Ref):
    __slots__ = ()


class VMApplianceRef(Ref):
    __slots__ = ()


class VMGuestMetricsRef(Ref):
    __slots__ = ()


class VMMetricsRef(Ref):
    __slots__ = ()


class VUSBRef(Ref):
    __slots__ = ()


class PoolRef(Ref):
    __slots__ = ()
