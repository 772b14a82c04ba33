"""Test xenapi_bindings/session.py"""

import unittest

import mock

from xenapi_bindings import Failure, codes
from xenapi_bindings.classes import SessionRecord
from xenapi_bindings.refs import SessionRef
from xenapi_bindings.session import DEFAULT_ORIGINATOR, Session, xapi_local
from xenapi_bindings.transport import (LOCAL_URL, JsonRpcTransport,
                                       XmlRpcTransport)

REF = "OpaqueRef:6b0e3c8a-1f44-4f4f-9d8a-4d0b7a7b5b0c"


def make_transport(result=REF):
    transport = mock.Mock()
    transport.url = "https://xenserver.test"
    transport.call.return_value = result
    return transport


# pylint: disable=missing-function-docstring
class TestLogin(unittest.TestCase):
    def test_login_with_password(self):
        transport = make_transport()
        session = Session(transport)

        ref = session.login_with_password("root", "secret")

        self.assertEqual(ref, REF)
        self.assertIsInstance(session.ref, SessionRef)
        self.assertIs(session.handle, session.ref)
        transport.call.assert_called_once_with(
            "session.login_with_password",
            ["root", "secret", "1.0", DEFAULT_ORIGINATOR])

    def test_failed_login_leaves_session_logged_out(self):
        transport = make_transport()
        transport.call.side_effect = Failure(
            [codes.SESSION_AUTHENTICATION_FAILED, "root",
             "Authentication failure"])
        session = Session(transport)

        with self.assertRaises(Failure) as cm:
            session.login_with_password("root", "wrong")

        self.assertEqual(cm.exception.code,
                         codes.SESSION_AUTHENTICATION_FAILED)
        self.assertIsNone(session.ref)

    def test_logout(self):
        transport = make_transport()
        session = Session(transport)
        session.login_with_password("root", "secret", "1.2", "tests")
        transport.call.return_value = ""

        session.logout()

        self.assertIsNone(session.ref)
        transport.call.assert_called_with("session.logout", [REF])

    def test_local_logout(self):
        transport = make_transport()
        session = Session(transport)
        session.slave_local_login_with_password("root", "secret")
        self.assertTrue(session.local)

        session.logout()

        self.assertEqual(transport.call.call_args_list, [
            mock.call("session.slave_local_login_with_password",
                      ["root", "secret"]),
            mock.call("session.local_logout", [REF]),
        ])
        self.assertFalse(session.local)

    def test_logout_forgets_ref_even_on_failure(self):
        transport = make_transport()
        session = Session(transport, REF)
        transport.call.side_effect = Failure([codes.SESSION_INVALID, REF])

        with self.assertRaises(Failure):
            session.logout()

        self.assertIsNone(session.ref)

    def test_logout_when_logged_out(self):
        transport = make_transport()
        Session(transport).logout()
        transport.call.assert_not_called()

    def test_context_manager(self):
        transport = make_transport()
        with Session(transport, REF) as session:
            self.assertEqual(session.ref, REF)
        transport.call.assert_called_once_with("session.logout", [REF])
        self.assertIsNone(session.ref)


class TestSession(unittest.TestCase):
    def test_get_record(self):
        transport = make_transport({"uuid": "u", "this_host": "OpaqueRef:h",
                                    "is_local_superuser": True,
                                    "rbac_permissions": ["vm.start"]})
        session = Session(transport, REF)

        record = session.get_record()

        self.assertIsInstance(record, SessionRecord)
        self.assertEqual(record.this_host, "OpaqueRef:h")
        self.assertEqual(record.rbac_permissions, ["vm.start"])
        transport.call.assert_called_once_with("session.get_record",
                                               [REF, REF])

    def test_arguments_are_not_logged(self):
        transport = make_transport()
        session = Session(transport)

        with self.assertLogs("xenapi_bindings", level="DEBUG") as logs:
            session.login_with_password("root", "hunter2")

        output = "\n".join(logs.output)
        self.assertIn("session.login_with_password", output)
        self.assertNotIn("hunter2", output)

    def test_with_timeout(self):
        session = Session(JsonRpcTransport("https://xenserver.test"), REF)

        other = session.with_timeout(5)

        self.assertEqual(other.transport.timeout, 5)
        self.assertEqual(other.transport.url, "https://xenserver.test")
        self.assertEqual(other.ref, REF)
        self.assertIsNone(session.transport.timeout)

    def test_xapi_local(self):
        session = xapi_local()
        self.assertIsInstance(session.transport, XmlRpcTransport)
        self.assertEqual(session.transport.url, LOCAL_URL)
        self.assertIsNone(session.ref)
