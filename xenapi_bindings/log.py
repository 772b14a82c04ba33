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
Logging for the bindings.

The library only ever logs to the "xenapi_bindings" logger, which carries a
NullHandler until an application calls configure_logging(). Arguments of
calls are never logged: they include passwords.
"""

import logging
import logging.handlers
import sys

import xenapi_bindings

LOG_LEVEL = logging.INFO
LOG_SYSLOG_FACILITY = logging.handlers.SysLogHandler.LOG_USER
FORMAT = 'xenapi_bindings: [%(process)d] - %(levelname)s - %(message)s'

_LOGGER = logging.getLogger("xenapi_bindings")
_LOGGER.addHandler(logging.NullHandler())

our_handlers = []


def configure_logging(level=LOG_LEVEL, to_syslog=False, to_stderr=True,
                      syslog_address='/dev/log'):
    """Attach handlers to the package logger; safe to call again."""
    for handler in our_handlers:
        _LOGGER.removeHandler(handler)
    del our_handlers[:]

    _LOGGER.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    if to_syslog:
        our_handlers.append(logging.handlers.SysLogHandler(
            address=syslog_address,
            facility=LOG_SYSLOG_FACILITY))

    if to_stderr:
        our_handlers.append(logging.StreamHandler(sys.stderr))

    for handler in our_handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        _LOGGER.addHandler(handler)


def debug(message, *args, **kwargs):
    _LOGGER.debug(message, *args, **kwargs)


def info(message, *args, **kwargs):
    _LOGGER.info(message, *args, **kwargs)


def error(message, *args, **kwargs):
    _LOGGER.error(message, *args, **kwargs)


def handle_unhandled_exceptions(exception_type, exception_value,
                                exception_traceback):
    if not issubclass(exception_type, KeyboardInterrupt):
        if issubclass(exception_type, xenapi_bindings.Failure):
            info("Failure returned by the server", exc_info=(
                exception_type, exception_value, exception_traceback))
        else:
            error("Unhandled exception", exc_info=(exception_type,
                                                   exception_value,
                                                   exception_traceback))
    sys.__excepthook__(exception_type, exception_value, exception_traceback)
