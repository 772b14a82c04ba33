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
Typed Python bindings for the Xen-API.

Every remote call goes through the same pipeline: the typed arguments are
marshalled (xenapi_bindings.marshal), sent through the transport bound to a
Session (xenapi_bindings.transport) and the result is unmarshalled back into
a typed value. Each stage fails with its own exception class so callers can
tell a server Failure from a lost connection:

    MarshalException    - an argument could not be encoded, nothing was sent
    TransportError      - no response was received (TransportTimeout if late)
    Failure             - the server answered with an error code and params
    UnmarshalException  - the response did not have the expected shape
"""

API_VERSION_1_1 = '1.1'
API_VERSION_1_2 = '1.2'


class XenAPIError(Exception):
    """Base class of every error raised by the bindings."""


class MarshalException(XenAPIError):
    """A native value could not be converted to its wire form."""

    def __init__(self, context, expected, value, desc=None):
        XenAPIError.__init__(self, context, expected, value)
        self.context = context
        self.expected = expected
        self.value = value
        self.desc = desc

    def __str__(self):
        msg = "%s: cannot marshal %r as %s" % (self.context, self.value,
                                               self.expected)
        if self.desc:
            msg += " (%s)" % self.desc
        return msg


class UnmarshalException(XenAPIError):
    """A wire value did not have the shape of the expected type."""

    def __init__(self, thing, ty, desc):
        XenAPIError.__init__(self, thing, ty, desc)
        self.thing = thing
        self.ty = ty
        self.desc = desc

    def __str__(self):
        return "UnmarshalException thing=%s ty=%s desc=%s" % (
            self.thing, self.ty, self.desc)


class ProtocolError(UnmarshalException):
    """The response envelope itself was malformed."""

    def __init__(self, method, desc):
        UnmarshalException.__init__(self, method, "response", desc)
        self.method = method


class TransportError(XenAPIError):
    """The call did not produce a response: connection refused, reset,
    HTTP level error. Safe to retry only for read-only calls."""

    def __init__(self, url, method, reason):
        XenAPIError.__init__(self, url, method, reason)
        self.url = url
        self.method = method
        self.reason = reason

    def __str__(self):
        return "%s on %s: %s" % (self.method, self.url, self.reason)


class TransportTimeout(TransportError):
    """The call was abandoned because its deadline passed."""


class Failure(XenAPIError):
    """An error reported by the server: a code followed by its parameters."""

    def __init__(self, details):
        XenAPIError.__init__(self, details)
        self.details = [str(d) for d in details]

    @property
    def code(self):
        if self.details:
            return self.details[0]
        return ""

    @property
    def params(self):
        return self.details[1:]

    def __str__(self):
        return str(self.details)

    def _details_map(self):
        return dict([(str(i), self.details[i])
                     for i in range(len(self.details))])
