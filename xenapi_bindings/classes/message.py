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

"""An message for the attention of the administrator"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from xenapi_bindings.api import Call, RemoteClass
from xenapi_bindings.enums import Cls
from xenapi_bindings.marshal import (DateTime, EnumOf, Int, MapOf, RecordOf,
                                     RefOf, SetOf, String, wire_field)
from xenapi_bindings.refs import MessageRef

MESSAGE = RefOf(MessageRef)


@dataclass
class MessageRecord(object):
    uuid: str = wire_field("uuid", String)
    name: str = wire_field("name", String)
    # The message priority, 0 being low priority
    priority: int = wire_field("priority", Int)
    # The class of the object this message is associated with
    cls: Optional[Cls] = wire_field("cls", EnumOf(Cls))
    obj_uuid: str = wire_field("obj_uuid", String)
    timestamp: datetime = wire_field("timestamp", DateTime)
    body: str = wire_field("body", String)


MESSAGES = MapOf(MESSAGE, RecordOf(MessageRecord))


class Message(RemoteClass):
    __wire_name__ = "message"
    __ref__ = MessageRef
    __record__ = MessageRecord
    # Messages are immutable: only whole records are read back
    __field_getters__ = False

    create = Call(("name", String), ("priority", Int), ("cls", EnumOf(Cls)),
                  ("obj_uuid", String), ("body", String),
                  returns=MESSAGE)
    destroy = Call(("self", MESSAGE))
    destroy_many = Call(("messages", SetOf(MESSAGE)), async_=True)
    get = Call(("cls", EnumOf(Cls)), ("obj_uuid", String),
               ("since", DateTime), returns=MESSAGES)
    get_since = Call(("since", DateTime), returns=MESSAGES)
    get_all_records_where = Call(("expr", String), returns=MESSAGES)
