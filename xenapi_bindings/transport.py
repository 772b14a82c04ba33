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
Transports: one synchronous remote call per call().

call(method, params) sends an already marshalled argument list and returns
the raw result. It raises
  Failure           when the server answered with an error
  TransportTimeout  when the deadline passed without a response
  TransportError    when no usable response was received
  ProtocolError     when the response could not be understood

No call is ever retried here: most Xen-API calls are not idempotent.

Every call uses a fresh connection, so a transport may be shared by any
number of threads.
"""

import http.client as httplib
import itertools
import json
import socket
import ssl
import xmlrpc.client as xmlrpclib
from datetime import datetime
from urllib.parse import urlsplit
from xml.parsers.expat import ExpatError

from xenapi_bindings import (Failure, ProtocolError, TransportError,
                             TransportTimeout, codes)
from xenapi_bindings.marshal import WIRE_DATETIME_FORMAT

USER_AGENT = "xenapi-bindings/1.0"
JSONRPC_PATH = "/jsonrpc"
LOCAL_URL = "http://_var_lib_xcp_xapi/"


class Transport(object):
    """Base class: holds the endpoint and the connection options."""

    def __init__(self, url, timeout=None, ignore_ssl=False, headers=None):
        self.url = url
        self.timeout = timeout
        self.ignore_ssl = ignore_ssl
        self.headers = dict(headers or {})

    def _options(self):
        return {"url": self.url, "timeout": self.timeout,
                "ignore_ssl": self.ignore_ssl, "headers": self.headers}

    def copy(self, **overrides):
        """Return a transport to the same endpoint with other options."""
        options = self._options()
        options.update(overrides)
        return type(self)(**options)

    def call(self, method, params):
        raise NotImplementedError

    def _ssl_context(self):
        if self.ignore_ssl:
            return ssl._create_unverified_context()
        return ssl.create_default_context()

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__, self.url)


def parse_result(method, result):
    """Unpack the {"Status": ...} envelope of an XML-RPC response."""
    if not isinstance(result, dict) or 'Status' not in result:
        raise ProtocolError(method, 'Missing Status in response from server')
    if result['Status'] == 'Success':
        # void calls may leave the Value out
        return result.get('Value')
    if 'ErrorDescription' in result:
        details = result['ErrorDescription']
        if not isinstance(details, (list, tuple)):
            raise ProtocolError(method, 'ErrorDescription is not a list: %r'
                                % (details,))
        raise Failure(details)
    raise ProtocolError(method,
                        'Missing ErrorDescription in response from server')


def xmlrpc_encode(value):
    """xapi expects 64-bit integers as strings over XML-RPC."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, dict):
        return dict((k, xmlrpc_encode(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return [xmlrpc_encode(v) for v in value]
    return value


class _HTTPTransport(xmlrpclib.Transport):
    def __init__(self, timeout=None, headers=()):
        xmlrpclib.Transport.__init__(self, use_builtin_types=True,
                                     headers=headers)
        self.timeout = timeout

    def make_connection(self, host):
        conn = xmlrpclib.Transport.make_connection(self, host)
        conn.timeout = self.timeout
        return conn


class _HTTPSTransport(xmlrpclib.SafeTransport):
    def __init__(self, timeout=None, headers=(), context=None):
        xmlrpclib.SafeTransport.__init__(self, use_builtin_types=True,
                                         headers=headers, context=context)
        self.timeout = timeout

    def make_connection(self, host):
        conn = xmlrpclib.SafeTransport.make_connection(self, host)
        conn.timeout = self.timeout
        return conn


class UDSHTTPConnection(httplib.HTTPConnection):
    """HTTPConnection subclass to allow HTTP over Unix domain sockets. """
    def connect(self):
        path = self.host.replace("_", "/")
        self.sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        if self.timeout is not None:
            self.sock.settimeout(self.timeout)
        self.sock.connect(path)


class UDSTransport(xmlrpclib.Transport):
    def __init__(self, timeout=None, headers=()):
        xmlrpclib.Transport.__init__(self, use_builtin_types=True,
                                     headers=headers)
        self.timeout = timeout

    def add_extra_header(self, key, value):
        self._extra_headers += [(key, value)]

    def make_connection(self, host):
        return UDSHTTPConnection(host, timeout=self.timeout)


class XmlRpcTransport(Transport):
    """XML-RPC, the historical Xen-API protocol.

    With unix_socket=True the host part of the URL names a socket path with
    '/' replaced by '_', e.g. http://_var_lib_xcp_xapi/.
    """

    def __init__(self, url, timeout=None, ignore_ssl=False, headers=None,
                 unix_socket=False):
        Transport.__init__(self, url, timeout, ignore_ssl, headers)
        self.unix_socket = unix_socket
        scheme = urlsplit(url).scheme
        if scheme not in ("http", "https"):
            raise ValueError("unsupported URL scheme %r in %s" % (scheme, url))

    def _options(self):
        options = Transport._options(self)
        options["unix_socket"] = self.unix_socket
        return options

    def _proxy(self):
        headers = [(k, v) for k, v in self.headers.items()
                   if k.lower() != "user-agent"]
        if self.unix_socket:
            transport = UDSTransport(self.timeout, headers)
        elif urlsplit(self.url).scheme == "https":
            transport = _HTTPSTransport(self.timeout, headers,
                                        self._ssl_context())
        else:
            transport = _HTTPTransport(self.timeout, headers)
        # xmlrpc.client always sends its own User-Agent header
        transport.user_agent = self.headers.get("User-Agent", USER_AGENT)
        return xmlrpclib.ServerProxy(self.url, transport=transport,
                                     allow_none=True, use_builtin_types=True)

    def call(self, method, params):
        proxy = self._proxy()
        try:
            result = getattr(proxy, method)(*xmlrpc_encode(list(params)))
        except (socket.timeout, TimeoutError) as e:
            raise TransportTimeout(self.url, method, e)
        except xmlrpclib.Fault as fault:
            raise Failure([codes.XMLRPC_FAULT, fault.faultCode,
                           fault.faultString])
        except xmlrpclib.ProtocolError as e:
            raise TransportError(self.url, method,
                                 "HTTP %s %s" % (e.errcode, e.errmsg))
        except (xmlrpclib.ResponseError, ExpatError) as e:
            raise ProtocolError(method, str(e))
        except (OSError, httplib.HTTPException) as e:
            raise TransportError(self.url, method, e)
        finally:
            proxy("close")()
        return parse_result(method, result)


def _json_default(value):
    if isinstance(value, datetime):
        return value.strftime(WIRE_DATETIME_FORMAT)
    raise TypeError("%r is not JSON serializable" % (value,))


def encode_request(method, params, request_id):
    return json.dumps({"jsonrpc": "2.0", "method": method,
                       "params": list(params), "id": request_id},
                      default=_json_default).encode("utf-8")


def parse_response(method, data, request_id):
    """Unpack a JSON-RPC 2.0 response body."""
    try:
        envelope = json.loads(data)
    except ValueError as e:
        raise ProtocolError(method, "invalid JSON in response: %s" % e)
    if not isinstance(envelope, dict):
        raise ProtocolError(method, "response is not an object")
    if envelope.get("id") != request_id:
        raise ProtocolError(method, "response id %r does not match %r"
                            % (envelope.get("id"), request_id))
    error = envelope.get("error")
    if error is not None:
        if not isinstance(error, dict):
            raise ProtocolError(method, "malformed error %r" % (error,))
        params = error.get("data")
        if params is None:
            params = []
        elif not isinstance(params, list):
            params = [params]
        raise Failure([error.get("message", "")] + params)
    if "result" not in envelope:
        raise ProtocolError(method, "Missing result in response from server")
    return envelope["result"]


class JsonRpcTransport(Transport):
    """JSON-RPC 2.0 over HTTP(S), posted to /jsonrpc unless the URL has a
    path of its own."""

    _ids = itertools.count(1)

    def __init__(self, url, timeout=None, ignore_ssl=False, headers=None):
        Transport.__init__(self, url, timeout, ignore_ssl, headers)
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https"):
            raise ValueError("unsupported URL scheme %r in %s"
                             % (parts.scheme, url))
        self._parts = parts
        self.path = parts.path if parts.path not in ("", "/") else JSONRPC_PATH

    def _connection(self):
        if self._parts.scheme == "https":
            return httplib.HTTPSConnection(self._parts.hostname,
                                           self._parts.port,
                                           timeout=self.timeout,
                                           context=self._ssl_context())
        return httplib.HTTPConnection(self._parts.hostname, self._parts.port,
                                      timeout=self.timeout)

    def call(self, method, params):
        request_id = next(self._ids)
        body = encode_request(method, params, request_id)
        headers = {"Content-Type": "application/json",
                   "Accept": "application/json",
                   "User-Agent": USER_AGENT}
        headers.update(self.headers)
        conn = self._connection()
        try:
            conn.request("POST", self.path, body, headers)
            response = conn.getresponse()
            data = response.read()
        except (socket.timeout, TimeoutError) as e:
            raise TransportTimeout(self.url, method, e)
        except (OSError, httplib.HTTPException) as e:
            raise TransportError(self.url, method, e)
        finally:
            conn.close()
        if response.status != 200:
            raise TransportError(self.url, method, "HTTP %d %s"
                                 % (response.status, response.reason))
        return parse_response(method, data, request_id)


def local_transport(timeout=None):
    """XML-RPC over the Unix domain socket of the local xapi."""
    return XmlRpcTransport(LOCAL_URL, timeout=timeout, unix_socket=True)
