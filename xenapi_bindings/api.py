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
The per-class method surface.

A class of the Xen-API is a RemoteClass subclass listing its operations as
Call declarations:

    class Repository(RemoteClass):
        __wire_name__ = "Repository"
        __ref__ = RepositoryRef
        __record__ = RepositoryRecord

        forget = Call(("self", RefOf(RepositoryRef)), async_=True)

When the subclass is created every Call becomes a Method, and async_=True
adds an async_<name> Method bound to "Async.<class>.<name>" which returns
a TaskRef as soon as the server has queued the work. The class is never
instantiated: all state lives in the Session passed to each method.

The usual accessors (get_record, get_all, get_all_records, get_by_uuid,
get_by_name_label and one get_<field> per record field) are generated from
the record unless the class declares its own.
"""

import inspect

from xenapi_bindings.marshal import (MapOf, RecordOf, RefOf, SetOf, String,
                                     Void)
from xenapi_bindings.refs import SessionRef, TaskRef

SESSION_ARG = RefOf(SessionRef)
TASK_RESULT = RefOf(TaskRef)


class Call(object):
    """Declaration of one operation: its (name, codec) parameters in wire
    order and the codec of its result."""

    def __init__(self, *params, returns=Void, wire=None, async_=False,
                 session=True, doc=None):
        self.params = params
        self.returns = returns
        self.wire = wire
        self.async_ = async_
        self.session = session
        self.doc = doc


class Method(object):
    """A Call bound to its fully qualified wire name, e.g. "SR.create"."""

    def __init__(self, name, call, returns=None):
        self.name = name
        self.params = call.params
        self.returns = returns or call.returns
        self.takes_session = call.session
        self.__doc__ = call.doc
        kind = inspect.Parameter.POSITIONAL_OR_KEYWORD
        parameters = [inspect.Parameter("session", kind)]
        for param_name, _ in self.params:
            parameters.append(inspect.Parameter(param_name, kind))
        self.__signature__ = inspect.Signature(parameters)

    def marshal_args(self, session, arguments):
        """Serialize the session ref and then every argument, in order."""
        params = []
        if self.takes_session:
            params.append(SESSION_ARG.serialize(
                "%s(session_id)" % self.name, session.ref))
        for param_name, codec in self.params:
            params.append(codec.serialize("%s(%s)" % (self.name, param_name),
                                          arguments[param_name]))
        return params

    def __call__(self, *args, **kwargs):
        try:
            bound = self.__signature__.bind(*args, **kwargs)
        except TypeError as e:
            raise TypeError("%s: %s" % (self.name, e))
        session = bound.arguments["session"]
        params = self.marshal_args(session, bound.arguments)
        result = session.call(self.name, params)
        return self.returns.deserialize("%s -> " % self.name, result)

    def __repr__(self):
        return "<Method %s>" % self.name


def map_field_calls(self_arg, field, value_codec=String):
    """The set_<field>, add_to_<field> and remove_from_<field> calls of a
    string-keyed map field such as other_config."""
    return (
        Call(self_arg, ("value", MapOf(String, value_codec)),
             wire="set_" + field,
             doc="Set the %s field of the given object." % field),
        Call(self_arg, ("key", String), ("value", value_codec),
             wire="add_to_" + field,
             doc="Add the given key-value pair to the %s field of the given "
                 "object." % field),
        Call(self_arg, ("key", String),
             wire="remove_from_" + field,
             doc="Remove the given key and its corresponding value from the "
                 "%s field of the given object. If the key is not in that "
                 "Map, then do nothing." % field),
    )


def lookup_class(name):
    """Find a class by wire name, ignoring case as event class names do."""
    if name in RemoteClass.registry:
        return RemoteClass.registry[name]
    lowered = name.lower()
    for wire_name, cls in RemoteClass.registry.items():
        if wire_name.lower() == lowered:
            return cls
    raise KeyError(name)


def _generated_calls(cls):
    record = RecordOf(cls.__record__)
    ref = RefOf(cls.__ref__)
    self_arg = ("self", ref)
    calls = {
        "get_record": Call(self_arg, returns=record,
                           doc="Get a record containing the current state "
                               "of the given %s." % cls.__wire_name__),
    }
    if cls.__enumerable__:
        calls["get_all"] = Call(
            returns=SetOf(ref),
            doc="Return a list of all the %ss known to the system."
                % cls.__wire_name__)
        calls["get_all_records"] = Call(
            returns=MapOf(ref, record),
            doc="Return a map of %s references to %s records for all "
                "%ss known to the system." % ((cls.__wire_name__,) * 3))
    tags = set(tag for _, tag, _ in record.fields)
    if cls.__field_getters__:
        for name, tag, codec in record.fields:
            calls["get_" + name] = Call(
                self_arg, returns=codec, wire="get_" + tag,
                doc="Get the %s field of the given %s."
                    % (tag, cls.__wire_name__))
    if "uuid" in tags:
        calls["get_by_uuid"] = Call(
            ("uuid", String), returns=ref,
            doc="Get a reference to the %s instance with the specified UUID."
                % cls.__wire_name__)
    if "name_label" in tags:
        calls["get_by_name_label"] = Call(
            ("label", String), returns=SetOf(ref),
            doc="Get all the %s instances with the given label."
                % cls.__wire_name__)
    return calls


class RemoteClass(object):
    """Namespace of the operations of one Xen-API class."""

    __wire_name__ = None
    __ref__ = None
    __record__ = None
    __enumerable__ = True
    __field_getters__ = True

    registry = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__wire_name__ is None:
            return
        calls = dict((name, value) for name, value in vars(cls).items()
                     if isinstance(value, Call))
        if cls.__record__ is not None:
            for name, call in _generated_calls(cls).items():
                if name not in vars(cls):
                    calls[name] = call
        for name, call in calls.items():
            wire = call.wire or name
            setattr(cls, name,
                    Method("%s.%s" % (cls.__wire_name__, wire), call))
            if call.async_:
                setattr(cls, "async_" + name,
                        Method("Async.%s.%s" % (cls.__wire_name__, wire),
                               call, returns=TASK_RESULT))
        RemoteClass.registry[cls.__wire_name__] = cls

    def __init__(self):
        raise TypeError("%s is a namespace of remote calls"
                        % type(self).__name__)

    @classmethod
    def methods(cls):
        """Names of the Python attributes holding the class's methods."""
        return sorted(name for name, value in vars(cls).items()
                      if isinstance(value, Method))
