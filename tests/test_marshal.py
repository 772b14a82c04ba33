"""Test xenapi_bindings/marshal.py"""

import unittest
import xmlrpc.client
from datetime import datetime, timedelta, timezone

from xenapi_bindings import MarshalException, UnmarshalException
from xenapi_bindings.classes import (ProbeResultRecord, RepositoryRecord,
                                     SRRecord, SrStatRecord, VMMetricsRecord)
from xenapi_bindings.enums import SrHealth, StorageOperations, VbdMode
from xenapi_bindings.marshal import (EPOCH, Bool, DateTime, EnumOf, Float,
                                     Int, MapOf, OptionOf, RecordOf, RefOf,
                                     SetOf, String, Void, record_fields)
from xenapi_bindings.refs import (NULL_REF, DRTaskRef, PBDRef, SRRef, VDIRef,
                                  VMRef)

UTC = timezone.utc


# pylint: disable=missing-function-docstring
class TestScalars(unittest.TestCase):
    def test_bool_is_strict(self):
        self.assertIs(Bool.serialize("x", True), True)
        with self.assertRaises(MarshalException):
            Bool.serialize("x", 1)
        with self.assertRaises(UnmarshalException):
            Bool.deserialize("x", "true")

    def test_int_refuses_bool(self):
        with self.assertRaises(MarshalException):
            Int.serialize("x", True)

    def test_int_range(self):
        self.assertEqual(Int.serialize("x", -(2 ** 63)), -(2 ** 63))
        self.assertEqual(Int.serialize("x", 2 ** 63 - 1), 2 ** 63 - 1)
        with self.assertRaises(MarshalException) as cm:
            Int.serialize("x", 2 ** 63)
        self.assertIn("64-bit", str(cm.exception))

    def test_int_from_xmlrpc_string(self):
        self.assertEqual(Int.deserialize("x", "9223372036854775807"),
                         2 ** 63 - 1)
        self.assertEqual(Int.deserialize("x", 12), 12)
        with self.assertRaises(UnmarshalException):
            Int.deserialize("x", "twelve")

    def test_float_refuses_nan_and_infinity(self):
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.assertRaises(MarshalException):
                Float.serialize("x", value)

    def test_float_widens_int(self):
        self.assertEqual(Float.serialize("x", 3), 3.0)
        self.assertIsInstance(Float.serialize("x", 3), float)
        self.assertEqual(Float.deserialize("x", "1.5"), 1.5)
        with self.assertRaises(UnmarshalException):
            Float.deserialize("x", False)

    def test_string(self):
        self.assertEqual(String.serialize("x", "é"), "é")
        with self.assertRaises(MarshalException):
            String.serialize("x", b"bytes")
        with self.assertRaises(UnmarshalException):
            String.deserialize("x", 5)

    def test_void(self):
        self.assertIsNone(Void.deserialize("x", ""))
        self.assertIsNone(Void.deserialize("x", None))

    def test_zero_values(self):
        self.assertIs(Bool.zero(), False)
        self.assertEqual(Int.zero(), 0)
        self.assertEqual(Float.zero(), 0.0)
        self.assertEqual(String.zero(), "")
        self.assertEqual(DateTime.zero(), EPOCH)


class TestDateTime(unittest.TestCase):
    expected = datetime(2024, 3, 1, 12, 30, 5, tzinfo=UTC)

    def test_naive_datetime_is_utc(self):
        wire = DateTime.serialize("x", datetime(2024, 3, 1, 12, 30, 5))
        self.assertEqual(wire, self.expected)
        self.assertEqual(wire.tzinfo, UTC)

    def test_naive_datetime_comes_back_aware(self):
        naive = datetime(2024, 3, 1, 12, 30, 5)
        value = DateTime.deserialize("x", DateTime.serialize("x", naive))
        self.assertNotEqual(value, naive)
        self.assertEqual(value, naive.replace(tzinfo=timezone.utc))

    def test_aware_datetime_is_converted_to_utc(self):
        paris = timezone(timedelta(hours=1))
        wire = DateTime.serialize(
            "x", datetime(2024, 3, 1, 13, 30, 5, tzinfo=paris))
        self.assertEqual(wire, self.expected)

    def test_wire_formats(self):
        for wire in ("20240301T12:30:05Z", "20240301T12:30:05",
                     "2024-03-01T12:30:05Z", "2024-03-01T12:30:05",
                     "2024-03-01T13:30:05+01:00"):
            self.assertEqual(DateTime.deserialize("x", wire), self.expected,
                             wire)

    def test_xmlrpc_datetime(self):
        wire = xmlrpc.client.DateTime("20240301T12:30:05")
        self.assertEqual(DateTime.deserialize("x", wire), self.expected)
        self.assertEqual(
            DateTime.deserialize("x", datetime(2024, 3, 1, 12, 30, 5)),
            self.expected)

    def test_garbage(self):
        with self.assertRaises(UnmarshalException):
            DateTime.deserialize("x", "yesterday")
        with self.assertRaises(MarshalException):
            DateTime.serialize("x", "20240301T12:30:05Z")


class TestRefs(unittest.TestCase):
    def test_ref_goes_out_as_plain_string(self):
        wire = RefOf(SRRef).serialize("x", SRRef("OpaqueRef:1"))
        self.assertEqual(wire, "OpaqueRef:1")
        self.assertIs(type(wire), str)
        self.assertEqual(RefOf(SRRef).serialize("x", "OpaqueRef:2"),
                         "OpaqueRef:2")

    def test_handle_of_other_class_is_refused(self):
        with self.assertRaises(MarshalException) as cm:
            RefOf(SRRef).serialize("SR.forget(sr)", VDIRef("OpaqueRef:1"))
        self.assertEqual(cm.exception.context, "SR.forget(sr)")
        self.assertIn("VDIRef", str(cm.exception))

    def test_deserialize_gives_typed_ref(self):
        ref = RefOf(VMRef).deserialize("x", "OpaqueRef:1")
        self.assertIsInstance(ref, VMRef)
        self.assertFalse(ref.is_null())
        with self.assertRaises(UnmarshalException):
            RefOf(VMRef).deserialize("x", 1)

    def test_zero_is_null_ref(self):
        zero = RefOf(SRRef).zero()
        self.assertEqual(zero, NULL_REF)
        self.assertIsInstance(zero, SRRef)
        self.assertTrue(zero.is_null())
        self.assertTrue(SRRef("").is_null())

    def test_repr(self):
        self.assertEqual(repr(SRRef("OpaqueRef:1")), "SRRef('OpaqueRef:1')")


class TestEnums(unittest.TestCase):
    def test_serialize(self):
        codec = EnumOf(VbdMode)
        self.assertEqual(codec.serialize("x", VbdMode.RW), "RW")
        self.assertEqual(codec.serialize("x", "RO"), "RO")
        with self.assertRaises(MarshalException):
            codec.serialize("x", "RX")
        with self.assertRaises(MarshalException):
            codec.serialize("x", StorageOperations.SCAN)

    def test_unknown_tag_is_an_error(self):
        with self.assertRaises(UnmarshalException) as cm:
            EnumOf(StorageOperations).deserialize("x", "vdi_teleport")
        self.assertIn("unknown tag", str(cm.exception))

    def test_deserialize(self):
        self.assertIs(EnumOf(StorageOperations).deserialize("x", "scan"),
                      StorageOperations.SCAN)


class TestContainers(unittest.TestCase):
    def test_set(self):
        codec = SetOf(Int)
        self.assertEqual(codec.serialize("x", (1, 2)), [1, 2])
        self.assertEqual(codec.deserialize("x", ["1", 2]), [1, 2])
        self.assertEqual(codec.serialize("x", []), [])
        with self.assertRaises(MarshalException):
            codec.serialize("x", {1, 2})

    def test_set_error_names_the_element(self):
        with self.assertRaises(MarshalException) as cm:
            SetOf(Int).serialize("f(a)", [1, "b"])
        self.assertEqual(cm.exception.context, "f(a)[1]")

    def test_map_keys_are_strings_on_the_wire(self):
        codec = MapOf(Int, Float)
        self.assertEqual(codec.serialize("x", {1: 0.5}), {"1": 0.5})
        self.assertEqual(codec.deserialize("x", {"1": 0.5}), {1: 0.5})
        self.assertEqual(codec.serialize("x", {}), {})

    def test_map_of_enums(self):
        codec = MapOf(String, EnumOf(StorageOperations))
        value = {"OpaqueRef:task": StorageOperations.VDI_CREATE}
        wire = codec.serialize("x", value)
        self.assertEqual(wire, {"OpaqueRef:task": "vdi_create"})
        self.assertEqual(codec.deserialize("x", wire), value)

    def test_option(self):
        codec = OptionOf(String)
        self.assertIsNone(codec.serialize("x", None))
        self.assertIsNone(codec.deserialize("x", None))
        self.assertEqual(codec.deserialize("x", "a"), "a")
        self.assertIsNone(codec.zero())


class TestRecords(unittest.TestCase):
    def test_missing_fields_take_zero_values(self):
        record = RecordOf(RepositoryRecord).deserialize(
            "x", {"name_label": "repo1", "update": True, "up_to_date": False})
        self.assertEqual(record.name_label, "repo1")
        self.assertIs(record.update, True)
        self.assertIs(record.up_to_date, False)
        self.assertEqual(record.uuid, "")
        self.assertEqual(record.binary_url, "")
        self.assertEqual(record.hash, "")
        self.assertIsNone(record.origin)

    def test_extra_fields_are_ignored(self):
        record = RecordOf(RepositoryRecord).deserialize(
            "x", {"uuid": "u", "added_in_a_later_release": 1})
        self.assertEqual(record, RepositoryRecord(uuid="u"))

    def test_none_fields_are_left_out(self):
        wire = RecordOf(RepositoryRecord).serialize("x", RepositoryRecord())
        self.assertNotIn("origin", wire)
        self.assertEqual(wire["uuid"], "")
        self.assertIs(wire["update"], False)

    def test_error_context_names_the_field(self):
        with self.assertRaises(UnmarshalException) as cm:
            RecordOf(RepositoryRecord).deserialize(
                "Repository.get_record -> ", {"update": "yes"})
        self.assertEqual(cm.exception.thing,
                         "Repository.get_record -> .update")

    def test_wire_names(self):
        tags = dict((name, tag) for name, tag, _ in record_fields(SRRecord))
        self.assertEqual(tags["vdis"], "VDIs")
        self.assertEqual(tags["pbds"], "PBDs")
        self.assertEqual(tags["introduced_by"], "introduced_by")

    def test_sr_record_round_trip(self):
        record = SRRecord(
            uuid="3f1c0b4e", name_label="Local storage",
            allowed_operations=[StorageOperations.SCAN,
                                StorageOperations.VDI_CREATE],
            current_operations={"OpaqueRef:t": StorageOperations.SCAN},
            vdis=[VDIRef("OpaqueRef:v1"), VDIRef("OpaqueRef:v2")],
            pbds=[PBDRef("OpaqueRef:p")],
            physical_size=2 ** 40, shared=True,
            other_config={"i18n-key": "local-storage"},
            tags=["fast"], introduced_by=DRTaskRef("OpaqueRef:dr"))
        codec = RecordOf(SRRecord)
        wire = codec.serialize("x", record)
        self.assertEqual(wire["VDIs"], ["OpaqueRef:v1", "OpaqueRef:v2"])
        self.assertEqual(wire["current_operations"], {"OpaqueRef:t": "scan"})
        self.assertEqual(codec.deserialize("x", wire), record)

    def test_int_keyed_maps(self):
        wire = {"VCPUs_utilisation": {"0": 0.25, "1": 0.5},
                "VCPUs_flags": {"0": ["online"]}}
        record = RecordOf(VMMetricsRecord).deserialize("x", wire)
        self.assertEqual(record.vcpus_utilisation, {0: 0.25, 1: 0.5})
        self.assertEqual(record.vcpus_flags, {0: ["online"]})
        self.assertEqual(record.start_time, EPOCH)

    def test_optional_nested_record(self):
        codec = RecordOf(ProbeResultRecord)
        without = codec.deserialize("x", {"complete": True})
        self.assertIsNone(without.sr)
        with_sr = codec.deserialize(
            "x", {"sr": {"name_label": "nfs", "health": "healthy",
                         "free_space": "1024"}})
        self.assertEqual(with_sr.sr, SrStatRecord(
            name_label="nfs", health=SrHealth.HEALTHY, free_space=1024))
        self.assertIsNone(with_sr.sr.uuid)
