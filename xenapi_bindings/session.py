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
The Session: an authenticated handle plus the transport carrying calls.

Example:

    session = Session(JsonRpcTransport('https://xenserver.example.com'))
    session.login_with_password('me', 'mypassword', '1.0', 'my-script')
    try:
        for ref, record in SR.get_all_records(session).items():
            print(ref, record.name_label)
    finally:
        session.logout()

Every method of xenapi_bindings.classes takes the session as its first
argument; the session handle is sent first on the wire. The Session holds no
other state, so one Session may be shared between threads.
"""

from xenapi_bindings import log
from xenapi_bindings.classes.session import SessionAPI
from xenapi_bindings.refs import SessionRef
from xenapi_bindings.transport import local_transport

DEFAULT_ORIGINATOR = "xenapi-bindings"


class Session(object):
    """A server proxy and session manager for communicating with xapi."""

    def __init__(self, transport, ref=None):
        self.transport = transport
        self.ref = SessionRef(ref) if ref is not None else None
        self.local = False

    @property
    def handle(self):
        return self.ref

    def call(self, method, params):
        """Send marshalled params and return the raw result."""
        log.debug("%s: %s", self.transport.url, method)
        return self.transport.call(method, params)

    def login_with_password(self, username, password, version="1.0",
                            originator=DEFAULT_ORIGINATOR):
        self.ref = SessionAPI.login_with_password(self, username, password,
                                                  version, originator)
        self.local = False
        log.debug("%s: logged in as %s", self.transport.url, username)
        return self.ref

    def slave_local_login_with_password(self, username, password):
        self.ref = SessionAPI.slave_local_login_with_password(self, username,
                                                              password)
        self.local = True
        log.debug("%s: logged in locally as %s", self.transport.url, username)
        return self.ref

    def logout(self):
        if self.ref is None:
            return
        try:
            if self.local:
                SessionAPI.local_logout(self)
            else:
                SessionAPI.logout(self)
        finally:
            self.ref = None
            self.local = False

    def get_record(self):
        return SessionAPI.get_record(self, self.ref)

    def with_timeout(self, timeout):
        """Return a Session sharing this handle whose calls are abandoned
        after timeout seconds."""
        other = Session(self.transport.copy(timeout=timeout), self.ref)
        other.local = self.local
        return other

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.logout()
        return False

    def __repr__(self):
        return "<Session %s via %r>" % (self.ref, self.transport)


def xapi_local(timeout=None):
    return Session(local_transport(timeout))
