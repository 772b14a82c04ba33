"""Pytest conftest module with the fixtures shared by the binding tests"""
import mock
import pytest

from xenapi_bindings.session import Session

SESSION_REF = "OpaqueRef:0f3cbc4b-8ab7-4dd1-b3c8-6be0b2b8e8b1"


@pytest.fixture(scope="function")
def transport():
    """
    A mock transport standing in for a Xen-API server.

    Tests set transport.call.return_value or transport.call.side_effect to
    the raw result of the call and check transport.call.call_args for the
    method name and the marshalled parameters.

    :returns: The mock transport.
    """
    mock_transport = mock.Mock()
    mock_transport.url = "http://xenserver.test"
    mock_transport.call.return_value = ""
    return mock_transport


@pytest.fixture(scope="function")
def session(transport):
    """
    A Session that is already logged in, bound to the mock transport.

    :returns: The session, with session.transport being the mock.
    """
    return Session(transport, SESSION_REF)
