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
Conversion between Python values and the Xen-API wire representation.

Each codec knows one shape of the schema and offers
  serialize(context, value) -> wire value   (raises MarshalException)
  deserialize(context, wire) -> value       (raises UnmarshalException)
  zero()                                    the value of an absent field

The context is a human readable location such as "SR.create(host)" or
"SR.get_record -> .other_config" and only ends up in error messages.

The wire values produced here are plain Python trees (bool, int, float, str,
datetime, list, dict). Transports take care of protocol specific quirks such
as XML-RPC carrying 64-bit integers as strings.
"""

import dataclasses
import math
from datetime import datetime, timezone

from xenapi_bindings import MarshalException, UnmarshalException
from xenapi_bindings.refs import NULL_REF, Ref

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Formats seen from xapi: XML-RPC dateTime.iso8601 and the JSON-RPC strings
DATETIME_FORMATS = [
    "%Y%m%dT%H:%M:%SZ",
    "%Y%m%dT%H:%M:%S",
    "%Y%m%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S",
]
WIRE_DATETIME_FORMAT = "%Y%m%dT%H:%M:%SZ"


def is_long(x):
    try:
        int(x)
        return True
    except (TypeError, ValueError):
        return False


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Codec(object):
    """Base class. Subclasses override name, serialize and deserialize."""

    name = "value"

    def serialize(self, context, value):
        raise NotImplementedError

    def deserialize(self, context, value):
        raise NotImplementedError

    def zero(self):
        return None

    def __repr__(self):
        return "<codec %s>" % self.name


class _Bool(Codec):
    name = "bool"

    def serialize(self, context, value):
        if not isinstance(value, bool):
            raise MarshalException(context, self.name, value)
        return value

    def deserialize(self, context, value):
        if not isinstance(value, bool):
            raise UnmarshalException(context, self.name, repr(value))
        return value

    def zero(self):
        return False


class _Int(Codec):
    name = "int"

    def serialize(self, context, value):
        if not _is_int(value):
            raise MarshalException(context, self.name, value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise MarshalException(context, self.name, value,
                                   "outside the 64-bit range")
        return value

    def deserialize(self, context, value):
        if _is_int(value):
            return value
        if isinstance(value, str) and is_long(value):
            return int(value)
        raise UnmarshalException(context, self.name, repr(value))

    def zero(self):
        return 0


class _Float(Codec):
    name = "float"

    def serialize(self, context, value):
        if not _is_number(value):
            raise MarshalException(context, self.name, value)
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise MarshalException(context, self.name, value,
                                   "not representable on the wire")
        return value

    def deserialize(self, context, value):
        if _is_number(value):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass
        raise UnmarshalException(context, self.name, repr(value))

    def zero(self):
        return 0.0


class _String(Codec):
    name = "string"

    def serialize(self, context, value):
        if not isinstance(value, str):
            raise MarshalException(context, self.name, value)
        return str(value)

    def deserialize(self, context, value):
        if not isinstance(value, str):
            raise UnmarshalException(context, self.name, repr(value))
        return str(value)

    def zero(self):
        return ""


def parse_datetime(value):
    """Parse a wire timestamp, returning an aware UTC datetime or None."""
    for fmt in DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return _as_utc(parsed)
    try:
        return _as_utc(datetime.fromisoformat(value))
    except ValueError:
        return None


def _as_utc(value):
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class _DateTime(Codec):
    """Timestamps. Naive datetimes are taken to be UTC and come back as
    aware UTC datetimes, so a naive value does not survive a round trip
    unchanged: compare it with .replace(tzinfo=timezone.utc).
    """

    name = "datetime"

    def serialize(self, context, value):
        if not isinstance(value, datetime):
            raise MarshalException(context, self.name, value)
        return _as_utc(value)

    def deserialize(self, context, value):
        if isinstance(value, datetime):
            return _as_utc(value)
        # xmlrpc.client.DateTime when use_builtin_types is off
        if hasattr(value, "timetuple") and hasattr(value, "value"):
            value = value.value
        if isinstance(value, str):
            parsed = parse_datetime(value)
            if parsed is not None:
                return parsed
        raise UnmarshalException(context, self.name, repr(value))

    def zero(self):
        return EPOCH


class _Void(Codec):
    """Result of calls that return nothing: whatever came back is dropped."""

    name = "void"

    def serialize(self, context, value):
        if value is not None:
            raise MarshalException(context, self.name, value)
        return ""

    def deserialize(self, context, value):
        return None


class _Any(Codec):
    """Untyped values, e.g. the snapshot carried by an event."""

    name = "any"

    def serialize(self, context, value):
        return value

    def deserialize(self, context, value):
        return value


Bool = _Bool()
Int = _Int()
Float = _Float()
String = _String()
DateTime = _DateTime()
Void = _Void()
Any = _Any()


class RefOf(Codec):
    """Handle of one class. A handle of any other class is refused."""

    def __init__(self, ref_cls):
        self.ref_cls = ref_cls
        self.name = ref_cls.__name__

    def serialize(self, context, value):
        if isinstance(value, Ref) and not isinstance(value, self.ref_cls):
            raise MarshalException(context, self.name, value,
                                   "handle of class %s"
                                   % type(value).__name__)
        if not isinstance(value, str):
            raise MarshalException(context, self.name, value)
        return str(value)

    def deserialize(self, context, value):
        if not isinstance(value, str):
            raise UnmarshalException(context, self.name, repr(value))
        return self.ref_cls(value)

    def zero(self):
        return self.ref_cls(NULL_REF)


class EnumOf(Codec):
    """Members of an enum.Enum whose values are the wire tags."""

    def __init__(self, enum_cls):
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__

    def serialize(self, context, value):
        if isinstance(value, self.enum_cls):
            return value.value
        if isinstance(value, str):
            try:
                return self.enum_cls(value).value
            except ValueError:
                pass
        raise MarshalException(context, self.name, value)

    def deserialize(self, context, value):
        if not isinstance(value, str):
            raise UnmarshalException(context, self.name, repr(value))
        try:
            return self.enum_cls(value)
        except ValueError:
            raise UnmarshalException(context, self.name,
                                     "unknown tag %r" % value)


class SetOf(Codec):
    """Ordered sequences, returned as lists."""

    def __init__(self, item):
        self.item = item
        self.name = "%s set" % item.name

    def serialize(self, context, value):
        if not isinstance(value, (list, tuple)):
            raise MarshalException(context, self.name, value)
        return [self.item.serialize("%s[%d]" % (context, i), v)
                for i, v in enumerate(value)]

    def deserialize(self, context, value):
        if not isinstance(value, (list, tuple)):
            raise UnmarshalException(context, self.name, repr(value))
        return [self.item.deserialize("%s[%d]" % (context, i), v)
                for i, v in enumerate(value)]

    def zero(self):
        return []


class MapOf(Codec):
    """Mappings with unique keys. Keys are always strings on the wire."""

    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.name = "(%s -> %s) map" % (key.name, value.name)

    def serialize(self, context, value):
        if not isinstance(value, dict):
            raise MarshalException(context, self.name, value)
        result = {}
        for k, v in value.items():
            wire_key = self.key.serialize("%s{%r}" % (context, k), k)
            if not isinstance(wire_key, str):
                wire_key = str(wire_key)
            result[wire_key] = self.value.serialize(
                "%s[%r]" % (context, k), v)
        return result

    def deserialize(self, context, value):
        if not isinstance(value, dict):
            raise UnmarshalException(context, self.name, repr(value))
        result = {}
        for k, v in value.items():
            key = self.key.deserialize("%s{%r}" % (context, k), k)
            result[key] = self.value.deserialize("%s[%r]" % (context, k), v)
        return result

    def zero(self):
        return {}


class OptionOf(Codec):
    """A value that may be missing altogether, None in Python."""

    def __init__(self, item):
        self.item = item
        self.name = "%s option" % item.name

    def serialize(self, context, value):
        if value is None:
            return None
        return self.item.serialize(context, value)

    def deserialize(self, context, value):
        if value is None:
            return None
        return self.item.deserialize(context, value)


def wire_field(tag, codec):
    """Declare a record field stored under the wire name tag."""
    return dataclasses.field(default_factory=codec.zero,
                             metadata={"wire": tag, "codec": codec})


def record_fields(record_cls):
    """Return (python name, wire name, codec) for each field of a record."""
    return [(f.name, f.metadata["wire"], f.metadata["codec"])
            for f in dataclasses.fields(record_cls)]


class RecordOf(Codec):
    """Dataclasses declared with wire_field.

    Fields missing on the wire take their zero value, extra wire fields are
    ignored and fields holding None are left out when serializing.
    """

    def __init__(self, record_cls):
        self.record_cls = record_cls
        self.name = record_cls.__name__
        self.fields = record_fields(record_cls)

    def serialize(self, context, value):
        if not isinstance(value, self.record_cls):
            raise MarshalException(context, self.name, value)
        result = {}
        for name, tag, codec in self.fields:
            v = getattr(value, name)
            if v is None:
                continue
            result[tag] = codec.serialize("%s.%s" % (context, tag), v)
        return result

    def deserialize(self, context, value):
        if not isinstance(value, dict):
            raise UnmarshalException(context, self.name, repr(value))
        kwargs = {}
        for name, tag, codec in self.fields:
            if tag in value:
                kwargs[name] = codec.deserialize("%s.%s" % (context, tag),
                                                 value[tag])
            else:
                kwargs[name] = codec.zero()
        return self.record_cls(**kwargs)

    def zero(self):
        return self.record_cls()
