"""Test the exceptions of xenapi_bindings/__init__.py"""

import unittest

import xenapi_bindings
from xenapi_bindings import (Failure, MarshalException, TransportError,
                             TransportTimeout, XenAPIError)


# pylint: disable=missing-function-docstring,protected-access
class TestFailure(unittest.TestCase):
    def test_code_and_params(self):
        failure = Failure(["SR_HAS_PBD", "OpaqueRef:1"])
        self.assertEqual(failure.code, "SR_HAS_PBD")
        self.assertEqual(failure.params, ["OpaqueRef:1"])
        self.assertEqual(str(failure), "['SR_HAS_PBD', 'OpaqueRef:1']")

    def test_empty_details(self):
        failure = Failure([])
        self.assertEqual(failure.code, "")
        self.assertEqual(failure.params, [])

    def test_details_map(self):
        failure = Failure(["SR_HAS_PBD", "OpaqueRef:1", 3])
        self.assertEqual(failure._details_map(),
                         {"0": "SR_HAS_PBD", "1": "OpaqueRef:1", "2": "3"})


class TestErrors(unittest.TestCase):
    def test_api_versions(self):
        self.assertEqual(xenapi_bindings.API_VERSION_1_1, "1.1")
        self.assertEqual(xenapi_bindings.API_VERSION_1_2, "1.2")

    def test_hierarchy(self):
        timeout = TransportTimeout("https://host", "SR.scan", "timed out")
        self.assertIsInstance(timeout, TransportError)
        self.assertIsInstance(timeout, XenAPIError)
        self.assertEqual(str(timeout), "SR.scan on https://host: timed out")

    def test_marshal_message(self):
        error = MarshalException("SR.create(shared)", "bool", "yes")
        self.assertEqual(str(error),
                         "SR.create(shared): cannot marshal 'yes' as bool")
