"""Test xenapi_bindings/cli.py"""

import io
import json
import unittest

import mock

from xenapi_bindings import Failure, TransportError, codes
from xenapi_bindings.cli import (EXIT_ERROR, EXIT_FAILURE, EXIT_TRANSPORT,
                                 get_argparser, get_config, main)
from xenapi_bindings.config import ClientConfig

SESSION_REF = "OpaqueRef:3e2d1c0b"

SR_RECORDS = {
    "OpaqueRef:sr1": {"uuid": "u1", "name_label": "Local storage",
                      "physical_size": "1099511627776",
                      "allowed_operations": ["scan"], "shared": False},
}


def fake_server(results):
    """A mock transport answering each method from results."""
    def call(method, params):
        result = results.get(method, "")
        if isinstance(result, Exception):
            raise result
        return result
    transport = mock.Mock()
    transport.url = "https://xenserver.test"
    transport.call.side_effect = call
    return transport


# pylint: disable=missing-function-docstring
class TestCli(unittest.TestCase):
    def run_main(self, argv, transport=None):
        stdout = io.StringIO()
        stderr = io.StringIO()
        config = ClientConfig(url="https://xenserver.test")
        with mock.patch("xenapi_bindings.cli.load_config",
                        return_value=config), \
                mock.patch("xenapi_bindings.cli.make_transport",
                           return_value=transport), \
                mock.patch("xenapi_bindings.cli.log.configure_logging"), \
                mock.patch("sys.excepthook"), \
                mock.patch("sys.stdout", stdout), \
                mock.patch("sys.stderr", stderr):
            status = main(argv)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_classes(self):
        status, out, _ = self.run_main(["classes"])
        self.assertEqual(status, 0)
        names = out.split()
        self.assertIn("SR", names)
        self.assertIn("Repository", names)
        self.assertIn("VM_appliance", names)

    def test_list(self):
        transport = fake_server({
            "session.login_with_password": SESSION_REF,
            "SR.get_all_records": SR_RECORDS,
        })

        status, out, _ = self.run_main(["-u", "root", "-p", "pw", "list",
                                        "sr"], transport)

        self.assertEqual(status, 0)
        records = json.loads(out)
        record = records["OpaqueRef:sr1"]
        self.assertEqual(record["name_label"], "Local storage")
        self.assertEqual(record["physical_size"], 1099511627776)
        self.assertEqual(record["VDIs"], [])
        methods = [c[0][0] for c in transport.call.call_args_list]
        self.assertEqual(methods, ["session.login_with_password",
                                   "SR.get_all_records", "session.logout"])
        self.assertEqual(transport.call.call_args_list[0][0][1][:2],
                         ["root", "pw"])

    def test_session(self):
        transport = fake_server({
            "session.login_with_password": SESSION_REF,
            "session.get_record": {"uuid": "s", "originator": "xenapi-call",
                                   "last_active": "20240301T12:00:00Z"},
        })

        status, out, _ = self.run_main(["session"], transport)

        self.assertEqual(status, 0)
        record = json.loads(out)
        self.assertEqual(record["originator"], "xenapi-call")
        self.assertEqual(record["last_active"], "20240301T12:00:00Z")

    def test_failure(self):
        transport = fake_server({
            "session.login_with_password": Failure(
                [codes.SESSION_AUTHENTICATION_FAILED, "root", "bad"]),
        })

        status, _, err = self.run_main(["session"], transport)

        self.assertEqual(status, EXIT_FAILURE)
        self.assertIn("SESSION_AUTHENTICATION_FAILED", err)

    def test_transport_error(self):
        transport = fake_server({
            "session.login_with_password": TransportError(
                "https://xenserver.test", "session.login_with_password",
                "Connection refused"),
        })

        status, _, err = self.run_main(["session"], transport)

        self.assertEqual(status, EXIT_TRANSPORT)
        self.assertIn("Connection refused", err)

    def test_unknown_class(self):
        transport = fake_server({
            "session.login_with_password": SESSION_REF,
        })

        status, _, err = self.run_main(["list", "teapot"], transport)

        self.assertEqual(status, EXIT_ERROR)
        self.assertIn("teapot", err)
        # still logged out
        methods = [c[0][0] for c in transport.call.call_args_list]
        self.assertEqual(methods[-1], "session.logout")

    def test_class_that_cannot_be_listed(self):
        transport = fake_server({
            "session.login_with_password": SESSION_REF,
        })

        status, _, err = self.run_main(["list", "event"], transport)

        self.assertEqual(status, EXIT_ERROR)
        self.assertIn("cannot be listed", err)


class TestArguments(unittest.TestCase):
    def test_command_line_overrides_config(self):
        args = get_argparser().parse_args(
            ["--url", "https://other", "--protocol", "xmlrpc",
             "--timeout", "4", "--ignore-ssl", "classes"])
        with mock.patch("xenapi_bindings.cli.load_config",
                        return_value=ClientConfig(url="https://host",
                                                  username="admin")):
            config = get_config(args)
        self.assertEqual(config.url, "https://other")
        self.assertEqual(config.username, "admin")
        self.assertEqual(config.protocol, "xmlrpc")
        self.assertEqual(config.timeout, 4.0)
        self.assertIs(config.ignore_ssl, True)

    def test_ignore_ssl_not_given(self):
        args = get_argparser().parse_args(["classes"])
        self.assertIsNone(args.ignore_ssl)
