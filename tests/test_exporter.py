"""Test xenapi_bindings/exporter.py"""

import io
import unittest

import mock
from aiohttp.test_utils import TestClient, TestServer
from prometheus_client import CollectorRegistry, Gauge

from tests.conftest import SESSION_REF
from xenapi_bindings import Failure, TransportError, codes
from xenapi_bindings.cli import EXIT_ERROR, EXIT_FAILURE
from xenapi_bindings.config import ClientConfig
from xenapi_bindings.exporter import (DEFAULT_LISTEN_ADDRESS, SRCollector,
                                      get_argparser, main, make_app,
                                      parse_listen_address)
from xenapi_bindings.session import Session

INSTANCE = "https://xenserver.test"

SR_RECORDS = {
    "OpaqueRef:sr1": {"uuid": "u1", "name_label": "Local storage",
                      "type": "lvm", "physical_size": "1099511627776",
                      "physical_utilisation": "4096",
                      "virtual_allocation": "8192"},
    "OpaqueRef:sr2": {"uuid": "u2", "name_label": "ISOs", "type": "iso"},
}


def fake_server(results):
    """A mock transport answering each method from results."""
    def call(method, params):
        result = results.get(method, "")
        if isinstance(result, Exception):
            raise result
        return result
    transport = mock.Mock()
    transport.url = INSTANCE
    transport.call.side_effect = call
    return transport


def sr_labels(uuid, name_label, sr_type):
    return {"instance": INSTANCE, "uuid": uuid, "name_label": name_label,
            "type": sr_type}


# pylint: disable=missing-function-docstring
class TestSRCollector(unittest.TestCase):
    def make_registry(self, transport):
        registry = CollectorRegistry()
        registry.register(SRCollector(Session(transport, SESSION_REF),
                                      INSTANCE))
        return registry

    def test_gauges_per_sr(self):
        transport = fake_server({"SR.get_all_records": SR_RECORDS})
        registry = self.make_registry(transport)

        self.assertEqual(registry.get_sample_value(
            "xenapi_up", {"instance": INSTANCE}), 1)
        local = sr_labels("u1", "Local storage", "lvm")
        self.assertEqual(registry.get_sample_value(
            "xenapi_sr_physical_size_bytes", local), 2 ** 40)
        self.assertEqual(registry.get_sample_value(
            "xenapi_sr_physical_utilisation_bytes", local), 4096)
        self.assertEqual(registry.get_sample_value(
            "xenapi_sr_virtual_allocation_bytes", local), 8192)
        # missing fields read as zero
        self.assertEqual(registry.get_sample_value(
            "xenapi_sr_physical_size_bytes", sr_labels("u2", "ISOs", "iso")),
            0)
        transport.call.assert_called_with("SR.get_all_records",
                                          [SESSION_REF])

    def test_server_down(self):
        transport = fake_server({"SR.get_all_records": TransportError(
            INSTANCE, "SR.get_all_records", "connection refused")})
        registry = self.make_registry(transport)

        with self.assertLogs("xenapi_bindings", level="ERROR"):
            self.assertEqual(registry.get_sample_value(
                "xenapi_up", {"instance": INSTANCE}), 0)
        self.assertIsNone(registry.get_sample_value(
            "xenapi_sr_physical_size_bytes",
            sr_labels("u1", "Local storage", "lvm")))

    def test_failure(self):
        transport = fake_server({"SR.get_all_records": Failure(
            [codes.SESSION_INVALID, SESSION_REF])})
        registry = self.make_registry(transport)

        with self.assertLogs("xenapi_bindings", level="ERROR") as logs:
            self.assertEqual(registry.get_sample_value(
                "xenapi_up", {"instance": INSTANCE}), 0)
        self.assertIn("SESSION_INVALID", logs.output[0])


class TestMetricsEndpoint(unittest.IsolatedAsyncioTestCase):
    async def test_metrics(self):
        registry = CollectorRegistry()
        Gauge("xenapi_test_gauge", "A gauge", registry=registry).set(3)

        async with TestClient(TestServer(make_app(registry))) as client:
            with self.assertLogs("xenapi_bindings", level="INFO") as logs:
                response = await client.get("/metrics")
                text = await response.text()

        self.assertEqual(response.status, 200)
        self.assertTrue(response.headers["Content-Type"].startswith(
            "text/plain"))
        self.assertIn("xenapi_test_gauge 3.0", text)
        self.assertTrue(any("GET /metrics" in line for line in logs.output))

    async def test_other_paths(self):
        async with TestClient(TestServer(make_app(CollectorRegistry()))) \
                as client:
            response = await client.get("/")
        self.assertEqual(response.status, 404)


class TestListenAddress(unittest.TestCase):
    def test_port_only(self):
        self.assertEqual(parse_listen_address(":5000"), (None, 5000))

    def test_host_and_port(self):
        self.assertEqual(parse_listen_address("127.0.0.1:9100"),
                         ("127.0.0.1", 9100))
        self.assertEqual(parse_listen_address("[::1]:9100"), ("::1", 9100))

    def test_invalid(self):
        for address in ("5000", "host:http"):
            with self.assertRaises(ValueError):
                parse_listen_address(address)

    def test_default(self):
        args = get_argparser().parse_args([])
        self.assertEqual(args.listen_address, DEFAULT_LISTEN_ADDRESS)
        self.assertEqual(DEFAULT_LISTEN_ADDRESS, ":5000")


class TestMain(unittest.TestCase):
    def run_main(self, argv, transport):
        stderr = io.StringIO()
        config = ClientConfig(url=INSTANCE)
        with mock.patch("xenapi_bindings.cli.load_config",
                        return_value=config), \
                mock.patch("xenapi_bindings.cli.make_transport",
                           return_value=transport), \
                mock.patch("xenapi_bindings.exporter.log.configure_logging"), \
                mock.patch("sys.excepthook"), \
                mock.patch("sys.stderr", stderr), \
                mock.patch("xenapi_bindings.exporter.web.run_app") as run_app:
            status = main(argv)
        return status, run_app, stderr.getvalue()

    def test_serves_then_logs_out(self):
        transport = fake_server({
            "session.login_with_password": SESSION_REF})

        status, run_app, _ = self.run_main(
            ["-u", "root", "-p", "pw", "--listen-address", "127.0.0.1:9100"],
            transport)

        self.assertEqual(status, 0)
        run_app.assert_called_once_with(mock.ANY, host="127.0.0.1",
                                        port=9100, print=None)
        self.assertEqual(transport.call.call_args_list, [
            mock.call("session.login_with_password",
                      ["root", "pw", "1.0", "xenapi-exporter"]),
            mock.call("session.logout", [SESSION_REF]),
        ])

    def test_login_failure(self):
        transport = fake_server({"session.login_with_password": Failure(
            [codes.SESSION_AUTHENTICATION_FAILED, "root", "bad"])})

        status, run_app, err = self.run_main([], transport)

        self.assertEqual(status, EXIT_FAILURE)
        self.assertIn("SESSION_AUTHENTICATION_FAILED", err)
        run_app.assert_not_called()

    def test_bad_listen_address(self):
        transport = fake_server({})

        status, run_app, _ = self.run_main(["--listen-address", "5000"],
                                           transport)

        self.assertEqual(status, EXIT_ERROR)
        run_app.assert_not_called()
        transport.call.assert_not_called()
