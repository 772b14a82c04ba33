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

"""A long-running asynchronous task

Async.<class>.<method> calls hand back a TaskRef straight away. Poll it with
Task.get_status until it leaves PENDING, then read get_result or
get_error_info and destroy it:

    task = SR.async_create(session, host, ...)
    while Task.get_status(session, task) == TaskStatusType.PENDING:
        time.sleep(1)
    record = Task.get_record(session, task)
    Task.destroy(session, task)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from xenapi_bindings.api import Call, RemoteClass, map_field_calls
from xenapi_bindings.enums import TaskAllowedOperations, TaskStatusType
from xenapi_bindings.marshal import (DateTime, EnumOf, Float, MapOf, RefOf,
                                     SetOf, String, wire_field)
from xenapi_bindings.refs import HostRef, TaskRef

TASK = RefOf(TaskRef)
OPERATION = EnumOf(TaskAllowedOperations)


@dataclass
class TaskRecord(object):
    uuid: str = wire_field("uuid", String)
    name_label: str = wire_field("name_label", String)
    name_description: str = wire_field("name_description", String)
    allowed_operations: List[TaskAllowedOperations] = wire_field(
        "allowed_operations", SetOf(OPERATION))
    current_operations: Dict[str, TaskAllowedOperations] = wire_field(
        "current_operations", MapOf(String, OPERATION))
    created: datetime = wire_field("created", DateTime)
    finished: datetime = wire_field("finished", DateTime)
    status: Optional[TaskStatusType] = wire_field("status",
                                                  EnumOf(TaskStatusType))
    resident_on: HostRef = wire_field("resident_on", RefOf(HostRef))
    # between 0 and 1
    progress: float = wire_field("progress", Float)
    type: str = wire_field("type", String)
    # the result as XML-RPC encoded text, e.g. <value>OpaqueRef:...</value>
    result: str = wire_field("result", String)
    error_info: List[str] = wire_field("error_info", SetOf(String))
    other_config: Dict[str, str] = wire_field("other_config",
                                              MapOf(String, String))
    subtask_of: TaskRef = wire_field("subtask_of", TASK)
    subtasks: List[TaskRef] = wire_field("subtasks", SetOf(TASK))
    backtrace: str = wire_field("backtrace", String)


class Task(RemoteClass):
    __wire_name__ = "task"
    __ref__ = TaskRef
    __record__ = TaskRecord

    cancel = Call(("task", TASK), async_=True,
                  doc="Request that a task be cancelled. Note that a task "
                      "may fail to be cancelled and may complete or fail "
                      "normally and note that, even when a task does cancel, "
                      "it might take an arbitrary amount of time.")
    destroy = Call(("self", TASK),
                   doc="Destroy the task object")
    set_other_config, add_to_other_config, remove_from_other_config = \
        map_field_calls(("self", TASK), "other_config")
