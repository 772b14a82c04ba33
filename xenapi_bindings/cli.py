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
xenapi-call - log in to a Xen-API server and print objects as JSON.

Usage:
    xenapi-call [--url URL] [-u USER] [-p PASSWORD] session
    xenapi-call [--url URL] [-u USER] [-p PASSWORD] list SR
    xenapi-call classes

Connection settings not given on the command line are taken from the
configuration file and the XENAPI_* environment variables (see
xenapi_bindings.config). Without a URL the local xapi is used.

Exit status: 0 on success, 1 when the server returned a Failure, 2 when the
server could not be reached and 3 for any other error.
"""

import argparse
import json
import logging
import sys

import xenapi_bindings
from xenapi_bindings import log
from xenapi_bindings.api import RemoteClass, lookup_class
from xenapi_bindings.classes import SessionRecord
from xenapi_bindings.config import PROTOCOLS, load_config, make_transport
from xenapi_bindings.marshal import MapOf, RecordOf, RefOf
from xenapi_bindings.session import Session
from xenapi_bindings.transport import _json_default

EXIT_FAILURE = 1
EXIT_TRANSPORT = 2
EXIT_ERROR = 3

ORIGINATOR = "xenapi-call"


def add_connection_options(parser):
    """Options naming the server and the account, shared by every command
    line tool of the package."""
    parser.add_argument("--config", help="configuration file to read")
    parser.add_argument("--url", help="server URL, e.g. https://host")
    parser.add_argument("-u", "--username", help="user to log in as")
    parser.add_argument("-p", "--password", help="password of the user")
    parser.add_argument("--protocol", choices=PROTOCOLS,
                        help="wire protocol (default: jsonrpc)")
    parser.add_argument("--timeout", type=float,
                        help="seconds to wait for each response")
    parser.add_argument("--ignore-ssl", action="store_true", default=None,
                        help="do not verify the server certificate")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every call to stderr")
    return parser


def get_argparser():
    parser = add_connection_options(argparse.ArgumentParser(
        prog="xenapi-call",
        description="Call a Xen-API server and print the results as JSON"))
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True
    commands.add_parser("session",
                        help="log in and print the session record")
    list_parser = commands.add_parser(
        "list", help="print every object of a class")
    list_parser.add_argument("cls", metavar="CLASS",
                             help="class name, e.g. SR or Repository")
    commands.add_parser("classes", help="print the known class names")
    return parser


def get_config(args):
    """Settings from the configuration layers, overridden by the command
    line."""
    config = load_config(args.config)
    for name in ("url", "username", "password", "protocol", "timeout",
                 "ignore_ssl"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    return config


def open_session(config, originator=ORIGINATOR):
    session = Session(make_transport(config))
    session.login_with_password(config.username, config.password,
                                originator=originator)
    return session


def dump(value):
    print(json.dumps(value, default=_json_default, indent=2, sort_keys=True))


def list_objects(session, cls_name):
    try:
        cls = lookup_class(cls_name)
    except KeyError:
        raise ValueError("unknown class %s" % cls_name)
    if cls.__record__ is None or not cls.__enumerable__:
        raise ValueError("objects of class %s cannot be listed"
                         % cls.__wire_name__)
    records = cls.get_all_records(session)
    codec = MapOf(RefOf(cls.__ref__), RecordOf(cls.__record__))
    return codec.serialize(cls.__wire_name__, records)


def run(args):
    if args.command == "classes":
        for name in sorted(RemoteClass.registry, key=str.lower):
            print(name)
        return

    session = open_session(get_config(args))
    with session:
        if args.command == "session":
            dump(RecordOf(SessionRecord).serialize("session",
                                                   session.get_record()))
        elif args.command == "list":
            dump(list_objects(session, args.cls))


def call_with_exit_codes(func, *args):
    """Run func, turning the errors it raises into an exit status."""
    try:
        func(*args)
    except xenapi_bindings.Failure as e:
        log.info("call failed: %s", e)
        print("Error: %s" % e, file=sys.stderr)
        return EXIT_FAILURE
    except xenapi_bindings.TransportError as e:
        print("Error: %s" % e, file=sys.stderr)
        return EXIT_TRANSPORT
    except (xenapi_bindings.XenAPIError, ValueError, OSError) as e:
        print("Error: %s" % e, file=sys.stderr)
        return EXIT_ERROR
    return 0


def main(argv=None):
    args = get_argparser().parse_args(argv)
    log.configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    sys.excepthook = log.handle_unhandled_exceptions
    return call_with_exit_codes(run, args)


if __name__ == "__main__":
    sys.exit(main())
