"""
In-process Xen-API servers for the transport tests.

JsonRpcStub serves JSON-RPC with aiohttp, XmlRpcStub serves XML-RPC with the
standard library server. Both listen on an ephemeral port of 127.0.0.1 and
run in a background thread; each keeps the requests it received.
"""

import asyncio
import socket
import socketserver
import threading
from collections import namedtuple
from xmlrpc.server import SimpleXMLRPCServer

from aiohttp import web

Request = namedtuple("Request", ["path", "headers", "body"])


def free_port():
    """Return a port nothing is listening on."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def success(data, result):
    return {"jsonrpc": "2.0", "id": data.get("id"), "result": result}


def error(data, code, params):
    return {"jsonrpc": "2.0", "id": data.get("id"),
            "error": {"code": 1, "message": code, "data": params}}


class JsonRpcStub(object):
    """responder(body) returns the reply: a dict sent as JSON, an aiohttp
    response, or a coroutine producing one of those."""

    def __init__(self, responder=None):
        self.responder = responder or (lambda data: success(data, ""))
        self.requests = []
        self.port = None
        self._loop = None
        self._thread = None

    @property
    def url(self):
        return "http://127.0.0.1:%d" % self.port

    async def _handle(self, request):
        data = await request.json()
        self.requests.append(Request(request.path, dict(request.headers),
                                     data))
        reply = self.responder(data)
        if asyncio.iscoroutine(reply):
            reply = await reply
        if isinstance(reply, web.StreamResponse):
            return reply
        return web.json_response(reply)

    def _run(self, started):
        asyncio.set_event_loop(self._loop)
        app = web.Application()
        app.router.add_post("/jsonrpc", self._handle)
        app.router.add_post("/other", self._handle)
        runner = web.AppRunner(app)
        self._loop.run_until_complete(runner.setup())
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.bind(("127.0.0.1", 0))
        self.port = sock.getsockname()[1]
        site = web.SockSite(runner, sock)
        self._loop.run_until_complete(site.start())
        started.set()
        self._loop.run_forever()
        self._loop.run_until_complete(runner.cleanup())
        self._loop.close()

    def start(self):
        self._loop = asyncio.new_event_loop()
        started = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(started,))
        self._thread.daemon = True
        self._thread.start()
        if not started.wait(10):
            raise RuntimeError("JSON-RPC stub server did not start")

    def stop(self):
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(10)


class _ThreadingXMLRPCServer(socketserver.ThreadingMixIn, SimpleXMLRPCServer):
    daemon_threads = True


class XmlRpcStub(object):
    """handler(method, params) returns the XML-RPC response, normally a
    {"Status": ...} envelope, or raises xmlrpc.client.Fault."""

    def __init__(self, handler=None):
        self.handler = handler or (lambda method, params: {"Status": "Success",
                                                           "Value": ""})
        self.requests = []
        self._server = None
        self._thread = None

    @property
    def url(self):
        return "http://127.0.0.1:%d/" % self._server.server_address[1]

    def _dispatch(self, method, params):
        self.requests.append((method, list(params)))
        return self.handler(method, params)

    def start(self):
        self._server = _ThreadingXMLRPCServer(
            ("127.0.0.1", 0), logRequests=False, allow_none=True,
            use_builtin_types=True)
        self._server.register_instance(self)
        self._thread = threading.Thread(target=self._server.serve_forever,
                                        kwargs={"poll_interval": 0.05})
        self._thread.daemon = True
        self._thread.start()

    def stop(self):
        self._server.shutdown()
        self._server.server_close()
        self._thread.join(10)
