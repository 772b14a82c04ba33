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
Connection settings for programs built on the bindings.

Settings come from, in increasing order of precedence:
  - the defaults of ClientConfig
  - a key=value file, $XENAPI_CONFIG or ~/.xenapi.conf, e.g.
        url=https://xenserver.example.com
        username=root
        protocol=xmlrpc
  - XENAPI_<KEY> environment variables, e.g. XENAPI_PASSWORD
"""

import configparser
import os
from dataclasses import dataclass, fields
from typing import Optional

from xenapi_bindings.log import debug
from xenapi_bindings.transport import (USER_AGENT, JsonRpcTransport,
                                       XmlRpcTransport, local_transport)

DEFAULT_CONFIG_PATH = "~/.xenapi.conf"
CONFIG_HEADER = "xenapi"
ENV_PREFIX = "XENAPI_"
PROTOCOLS = ("jsonrpc", "xmlrpc")

_TRUE = ("1", "yes", "true", "on")
_FALSE = ("0", "no", "false", "off", "")


@dataclass
class ClientConfig(object):
    # None means the local xapi over its Unix domain socket
    url: Optional[str] = None
    username: str = "root"
    password: str = ""
    protocol: str = "jsonrpc"
    timeout: Optional[float] = None
    ignore_ssl: bool = False
    user_agent: str = USER_AGENT


def read_config(config_path, header=CONFIG_HEADER):
    """Read a config file and return a dictionary of key-value pairs.

    The file may start with a [header] line of its own or be a bare list of
    key=value lines.
    """

    parser = configparser.ConfigParser()
    with open(config_path, encoding="utf-8") as config_file:
        text = config_file.read()
    if not text.lstrip().startswith("["):
        text = "[%s]\n%s" % (header, text)
    try:
        parser.read_string(text)
    except configparser.Error as e:
        raise ValueError("invalid config file %s: %s" % (config_path, e))
    if not parser.has_section(header):
        return {}

    config = dict((k, v.strip("'\"")) for k, v in parser.items(header))
    debug("%s: %s", config_path, sorted(config))
    return config


def _parse_bool(key, value):
    if value.lower() in _TRUE:
        return True
    if value.lower() in _FALSE:
        return False
    raise ValueError("%s: expected a boolean, got %r" % (key, value))


def _apply(config, settings, source):
    for f in fields(ClientConfig):
        if f.name not in settings:
            continue
        value = settings[f.name]
        if f.name == "timeout":
            value = float(value) if value else None
        elif f.name == "ignore_ssl":
            value = _parse_bool(f.name, value)
        elif f.name == "url":
            value = value or None
        setattr(config, f.name, value)
        debug("%s set from %s", f.name, source)
    if config.protocol not in PROTOCOLS:
        raise ValueError("%s: unknown protocol %r, expected one of %s"
                         % (source, config.protocol, ", ".join(PROTOCOLS)))


def load_config(path=None, environ=os.environ):
    """Build a ClientConfig from defaults, a config file and the environment.

    A file named explicitly, by path or by XENAPI_CONFIG, must exist; the
    default ~/.xenapi.conf is optional.
    """
    config = ClientConfig()
    if path is None:
        path = environ.get(ENV_PREFIX + "CONFIG")
    if path is not None:
        _apply(config, read_config(os.path.expanduser(path)), path)
    else:
        default_path = os.path.expanduser(DEFAULT_CONFIG_PATH)
        if os.path.exists(default_path):
            _apply(config, read_config(default_path), default_path)

    settings = {}
    for f in fields(ClientConfig):
        key = ENV_PREFIX + f.name.upper()
        if key in environ:
            settings[f.name] = environ[key]
    _apply(config, settings, "environment")
    return config


def make_transport(config):
    """Build the transport described by config."""
    headers = {"User-Agent": config.user_agent}
    if config.url is None:
        transport = local_transport(config.timeout)
        transport.headers.update(headers)
        return transport
    if config.protocol == "xmlrpc":
        return XmlRpcTransport(config.url, timeout=config.timeout,
                               ignore_ssl=config.ignore_ssl, headers=headers)
    return JsonRpcTransport(config.url, timeout=config.timeout,
                            ignore_ssl=config.ignore_ssl, headers=headers)
