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

"""An X509 certificate used for TLS connections"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from xenapi_bindings.api import RemoteClass
from xenapi_bindings.enums import CertificateType
from xenapi_bindings.marshal import DateTime, EnumOf, RefOf, String, wire_field
from xenapi_bindings.refs import CertificateRef, HostRef


@dataclass
class CertificateRecord(object):
    uuid: str = wire_field("uuid", String)
    name: str = wire_field("name", String)
    type: Optional[CertificateType] = wire_field("type",
                                                 EnumOf(CertificateType))
    host: HostRef = wire_field("host", RefOf(HostRef))
    not_before: datetime = wire_field("not_before", DateTime)
    not_after: datetime = wire_field("not_after", DateTime)
    fingerprint: str = wire_field("fingerprint", String)
    fingerprint_sha256: str = wire_field("fingerprint_sha256", String)
    fingerprint_sha1: str = wire_field("fingerprint_sha1", String)


class Certificate(RemoteClass):
    __wire_name__ = "Certificate"
    __ref__ = CertificateRef
    __record__ = CertificateRecord
