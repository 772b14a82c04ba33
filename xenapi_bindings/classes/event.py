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

"""Asynchronous event registration and handling

The usual loop waits on event.from_ with the token of the previous batch:

    token = ""
    while True:
        batch = Event.from_(session, ["vm", "sr"], token, 30.0)
        for event in batch.events:
            record = decode_snapshot(event)
            ...
        token = batch.token
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any as AnyValue
from typing import Dict, List, Optional

from xenapi_bindings.api import Call, RemoteClass, lookup_class
from xenapi_bindings.enums import EventOperation
from xenapi_bindings.marshal import (Any, DateTime, EnumOf, Float, Int, MapOf,
                                     RecordOf, SetOf, String, wire_field)
from xenapi_bindings.refs import EventRef

CLASSES = SetOf(String)


@dataclass
class EventRecord(object):
    # The record of the database object that was added, changed or deleted,
    # as sent by the server. See decode_snapshot.
    snapshot: AnyValue = wire_field("snapshot", Any)
    id: int = wire_field("id", Int)
    timestamp: datetime = wire_field("timestamp", DateTime)
    class_: str = wire_field("class", String)
    operation: Optional[EventOperation] = wire_field(
        "operation", EnumOf(EventOperation))
    ref: str = wire_field("ref", String)
    obj_uuid: str = wire_field("obj_uuid", String)


@dataclass
class EventBatch(object):
    token: str = wire_field("token", String)
    valid_ref_counts: Dict[str, int] = wire_field("validRefCounts",
                                                  MapOf(String, Int))
    events: List[EventRecord] = wire_field("events",
                                           SetOf(RecordOf(EventRecord)))


class Event(RemoteClass):
    __wire_name__ = "event"
    __ref__ = EventRef

    register = Call(("classes", CLASSES), async_=True,
                    doc="Registers this session with the event system for a "
                        "set of given classes. This method is only "
                        "recommended for legacy use in conjunction with "
                        "event.next.")
    unregister = Call(("classes", CLASSES), async_=True,
                      doc="Removes this session's registration with the "
                          "event system for a set of given classes. This "
                          "method is only recommended for legacy use in "
                          "conjunction with event.next.")
    next = Call(returns=SetOf(RecordOf(EventRecord)),
                doc="Blocking call which returns a (possibly empty) batch of "
                    "events. This method is only recommended for legacy use."
                    " New development should use event.from which "
                    "supersedes this method.")
    from_ = Call(("classes", CLASSES), ("token", String),
                 ("timeout", Float),
                 returns=RecordOf(EventBatch), wire="from",
                 doc="Blocking call which returns a new token and a "
                     "(possibly empty) batch of events. The returned token "
                     "can be used in subsequent calls to this function.")
    get_current_id = Call(returns=Int,
                          doc="Return the ID of the next event to be "
                              "generated by the system")
    inject = Call(("class_", String), ("ref", String), returns=String,
                  doc="Injects an artificial event on the given object and "
                      "returns the corresponding ID in the form of a token, "
                      "which can be used as a point of reference for "
                      "database events. For example, to check whether an "
                      "object has reached the right state before attempting "
                      "an operation, one can inject an artificial event on "
                      "the object and wait until the token returned by "
                      "consecutive event.from calls is lexicographically "
                      "greater than the one returned by event.inject.")


def decode_snapshot(event):
    """Return the snapshot of event as a record of its class.

    Snapshots of classes without a known record, and missing snapshots, are
    returned as they came.
    """
    if event.snapshot is None:
        return None
    try:
        cls = lookup_class(event.class_)
    except KeyError:
        return event.snapshot
    if cls.__record__ is None:
        return event.snapshot
    return RecordOf(cls.__record__).deserialize(
        "event(%s).snapshot" % event.class_, event.snapshot)
