"""Test xenapi_bindings/transport.py against in-process servers"""

import asyncio
import json
import time
import unittest
import xmlrpc.client
from datetime import datetime, timezone

from aiohttp import web

from tests.stub_servers import (JsonRpcStub, XmlRpcStub, error, free_port,
                                success)
from xenapi_bindings import (Failure, ProtocolError, TransportError,
                             TransportTimeout, codes)
from xenapi_bindings.transport import (JSONRPC_PATH, LOCAL_URL, USER_AGENT,
                                       JsonRpcTransport, XmlRpcTransport,
                                       encode_request, local_transport,
                                       parse_response, parse_result,
                                       xmlrpc_encode)


# pylint: disable=missing-function-docstring
class TestParseResult(unittest.TestCase):
    def test_success(self):
        self.assertEqual(parse_result("m", {"Status": "Success",
                                            "Value": ["a"]}), ["a"])

    def test_success_without_value(self):
        self.assertIsNone(parse_result("m", {"Status": "Success"}))

    def test_failure(self):
        with self.assertRaises(Failure) as cm:
            parse_result("SR.forget", {"Status": "Failure",
                                       "ErrorDescription": ["SR_HAS_PBD",
                                                            "OpaqueRef:1"]})
        self.assertEqual(cm.exception.code, codes.SR_HAS_PBD)
        self.assertEqual(cm.exception.params, ["OpaqueRef:1"])

    def test_failure_params_are_strings(self):
        with self.assertRaises(Failure) as cm:
            parse_result("m", {"Status": "Failure",
                               "ErrorDescription": ["E", 3]})
        self.assertEqual(cm.exception.details, ["E", "3"])

    def test_malformed_envelopes(self):
        for result in ("OpaqueRef:1", {"Value": 1},
                       {"Status": "Failure"},
                       {"Status": "Failure", "ErrorDescription": "E"}):
            with self.assertRaises(ProtocolError):
                parse_result("m", result)


class TestXmlrpcEncode(unittest.TestCase):
    def test_ints_become_strings(self):
        self.assertEqual(
            xmlrpc_encode(["s", {"size": 2 ** 40, "n": [1, 2]}, True, 1.5]),
            ["s", {"size": "1099511627776", "n": ["1", "2"]}, True, 1.5])

    def test_bools_are_kept(self):
        self.assertIs(xmlrpc_encode(False), False)


class TestJsonEnvelope(unittest.TestCase):
    def test_encode_request(self):
        body = json.loads(encode_request(
            "message.get_since",
            ["OpaqueRef:s", datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)],
            7))
        self.assertEqual(body, {"jsonrpc": "2.0", "id": 7,
                                "method": "message.get_since",
                                "params": ["OpaqueRef:s",
                                           "20240301T12:00:00Z"]})

    def test_parse_response(self):
        data = json.dumps({"jsonrpc": "2.0", "id": 3, "result": [1]})
        self.assertEqual(parse_response("m", data, 3), [1])

    def test_error(self):
        data = json.dumps({"jsonrpc": "2.0", "id": 3, "error": {
            "code": 1, "message": "SR_HAS_PBD", "data": ["OpaqueRef:1"]}})
        with self.assertRaises(Failure) as cm:
            parse_response("SR.forget", data, 3)
        self.assertEqual(cm.exception.details, ["SR_HAS_PBD", "OpaqueRef:1"])

    def test_error_with_null_data(self):
        data = json.dumps({"jsonrpc": "2.0", "id": 3, "error": {
            "code": 1, "message": "SESSION_INVALID", "data": None}})
        with self.assertRaises(Failure) as cm:
            parse_response("m", data, 3)
        self.assertEqual(cm.exception.details, ["SESSION_INVALID"])
        self.assertEqual(cm.exception.params, [])

    def test_error_with_scalar_data(self):
        data = json.dumps({"jsonrpc": "2.0", "id": 3, "error": {
            "code": 1, "message": "INTERNAL_ERROR", "data": "boom"}})
        with self.assertRaises(Failure) as cm:
            parse_response("m", data, 3)
        self.assertEqual(cm.exception.params, ["boom"])

    def test_malformed(self):
        for data in ("not json", "[]",
                     json.dumps({"jsonrpc": "2.0", "id": 4, "result": 1}),
                     json.dumps({"jsonrpc": "2.0", "id": 3})):
            with self.assertRaises(ProtocolError):
                parse_response("m", data, 3)


class TestXmlRpcTransport(unittest.TestCase):
    def setUp(self):
        self.server = XmlRpcStub()
        self.server.start()
        self.transport = XmlRpcTransport(self.server.url)

    def tearDown(self):
        self.server.stop()

    def test_success(self):
        self.server.handler = lambda method, params: {
            "Status": "Success", "Value": {"size": "1024"}}
        result = self.transport.call("SR.get_record",
                                     ["OpaqueRef:s", "OpaqueRef:sr"])
        self.assertEqual(result, {"size": "1024"})
        self.assertEqual(self.server.requests,
                         [("SR.get_record", ["OpaqueRef:s", "OpaqueRef:sr"])])

    def test_ints_travel_as_strings(self):
        self.transport.call("SR.set_physical_size",
                            ["OpaqueRef:s", "OpaqueRef:sr", 2 ** 40])
        self.assertEqual(self.server.requests[0][1][2], "1099511627776")

    def test_failure(self):
        self.server.handler = lambda method, params: {
            "Status": "Failure",
            "ErrorDescription": ["SESSION_INVALID", "OpaqueRef:s"]}
        with self.assertRaises(Failure) as cm:
            self.transport.call("SR.get_all", ["OpaqueRef:s"])
        self.assertEqual(cm.exception.code, codes.SESSION_INVALID)

    def test_fault(self):
        def handler(method, params):
            raise xmlrpc.client.Fault(1, "no such method")
        self.server.handler = handler
        with self.assertRaises(Failure) as cm:
            self.transport.call("SR.get_all", ["OpaqueRef:s"])
        self.assertEqual(cm.exception.details,
                         [codes.XMLRPC_FAULT, "1", "no such method"])

    def test_timeout(self):
        def handler(method, params):
            time.sleep(1)
            return {"Status": "Success", "Value": ""}
        self.server.handler = handler
        transport = self.transport.copy(timeout=0.2)
        with self.assertRaises(TransportTimeout):
            transport.call("SR.scan", ["OpaqueRef:s", "OpaqueRef:sr"])

    def test_connection_refused(self):
        transport = XmlRpcTransport("http://127.0.0.1:%d/" % free_port())
        with self.assertRaises(TransportError) as cm:
            transport.call("SR.get_all", ["OpaqueRef:s"])
        self.assertNotIsInstance(cm.exception, TransportTimeout)

    def test_unsupported_scheme(self):
        with self.assertRaises(ValueError):
            XmlRpcTransport("ftp://host/")


class TestJsonRpcTransport(unittest.TestCase):
    def setUp(self):
        self.server = JsonRpcStub()
        self.server.start()
        self.transport = JsonRpcTransport(self.server.url)

    def tearDown(self):
        self.server.stop()

    def test_success(self):
        self.server.responder = lambda data: success(data, ["OpaqueRef:sr"])
        result = self.transport.call("SR.get_all", ["OpaqueRef:s"])
        self.assertEqual(result, ["OpaqueRef:sr"])
        request = self.server.requests[0]
        self.assertEqual(request.path, JSONRPC_PATH)
        self.assertEqual(request.body["method"], "SR.get_all")
        self.assertEqual(request.body["params"], ["OpaqueRef:s"])
        self.assertEqual(request.body["jsonrpc"], "2.0")
        self.assertEqual(request.headers["User-Agent"], USER_AGENT)

    def test_ints_stay_ints(self):
        self.transport.call("SR.set_physical_size",
                            ["OpaqueRef:s", "OpaqueRef:sr", 2 ** 40])
        self.assertEqual(self.server.requests[0].body["params"][2], 2 ** 40)

    def test_request_ids_increase(self):
        self.transport.call("m", [])
        self.transport.call("m", [])
        first, second = [r.body["id"] for r in self.server.requests]
        self.assertGreater(second, first)

    def test_failure(self):
        self.server.responder = lambda data: error(data, "SR_HAS_PBD",
                                                   ["OpaqueRef:sr"])
        with self.assertRaises(Failure) as cm:
            self.transport.call("SR.forget", ["OpaqueRef:s", "OpaqueRef:sr"])
        self.assertEqual(cm.exception.code, codes.SR_HAS_PBD)
        self.assertEqual(cm.exception.params, ["OpaqueRef:sr"])

    def test_http_error(self):
        self.server.responder = lambda data: web.Response(status=500,
                                                          text="boom")
        with self.assertRaises(TransportError) as cm:
            self.transport.call("SR.get_all", ["OpaqueRef:s"])
        self.assertIn("500", str(cm.exception))

    def test_garbage_response(self):
        self.server.responder = lambda data: web.Response(
            text="<html>", content_type="application/json")
        with self.assertRaises(ProtocolError):
            self.transport.call("SR.get_all", ["OpaqueRef:s"])

    def test_timeout(self):
        async def slow(data):
            await asyncio.sleep(1)
            return success(data, "")
        self.server.responder = slow
        transport = self.transport.copy(timeout=0.2)
        self.assertEqual(transport.timeout, 0.2)
        with self.assertRaises(TransportTimeout):
            transport.call("SR.scan", ["OpaqueRef:s", "OpaqueRef:sr"])

    def test_explicit_path_and_headers(self):
        transport = JsonRpcTransport(self.server.url + "/other",
                                     headers={"User-Agent": "my-tool/2.0"})
        transport.call("m", [])
        request = self.server.requests[0]
        self.assertEqual(request.path, "/other")
        self.assertEqual(request.headers["User-Agent"], "my-tool/2.0")

    def test_connection_refused(self):
        transport = JsonRpcTransport("http://127.0.0.1:%d" % free_port())
        with self.assertRaises(TransportError):
            transport.call("m", [])


class TestLocalTransport(unittest.TestCase):
    def test_unix_socket(self):
        transport = local_transport(timeout=5)
        self.assertIsInstance(transport, XmlRpcTransport)
        self.assertTrue(transport.unix_socket)
        self.assertEqual(transport.url, LOCAL_URL)
        self.assertTrue(transport.copy(timeout=1).unix_socket)
