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
xenapi-exporter - serve storage repository gauges of a Xen-API server to
Prometheus.

Usage:
    xenapi-exporter [--url URL] [-u USER] [-p PASSWORD]
                    [--listen-address [HOST]:PORT]

The exporter logs in once and keeps its session until it exits. Every GET
of /metrics reads SR.get_all_records through that session, so the gauges
are never older than the scrape. When the server cannot be read
xenapi_up is 0 and no storage gauges are published.

Every HTTP request is logged at info level.
"""

import argparse
import asyncio
import logging
import sys

from aiohttp import web
from prometheus_client import (CONTENT_TYPE_LATEST, CollectorRegistry,
                               generate_latest)
from prometheus_client.core import GaugeMetricFamily

import xenapi_bindings
from xenapi_bindings import log
from xenapi_bindings.classes import SR
from xenapi_bindings.cli import (add_connection_options, call_with_exit_codes,
                                 get_config, open_session)

DEFAULT_LISTEN_ADDRESS = ":5000"
METRICS_PATH = "/metrics"
ORIGINATOR = "xenapi-exporter"

SR_LABELS = ["instance", "uuid", "name_label", "type"]

# record field, metric name, help text
SR_GAUGES = [
    ("physical_size", "xenapi_sr_physical_size_bytes",
     "Total physical size of the storage repository"),
    ("physical_utilisation", "xenapi_sr_physical_utilisation_bytes",
     "Physical space currently utilised on the storage repository"),
    ("virtual_allocation", "xenapi_sr_virtual_allocation_bytes",
     "Sum of the virtual sizes of all VDIs in the storage repository"),
]


class SRCollector(object):
    """Reads the storage repositories of one server at each collection."""

    def __init__(self, session, instance):
        self.session = session
        self.instance = instance

    def collect(self):
        up = GaugeMetricFamily(
            "xenapi_up", "Whether the last read of the server succeeded",
            labels=["instance"])
        try:
            records = SR.get_all_records(self.session)
        except xenapi_bindings.XenAPIError as e:
            log.error("%s: cannot read SR records: %s", self.instance, e)
            up.add_metric([self.instance], 0)
            yield up
            return
        up.add_metric([self.instance], 1)
        yield up

        for field, name, documentation in SR_GAUGES:
            gauge = GaugeMetricFamily(name, documentation, labels=SR_LABELS)
            for record in records.values():
                gauge.add_metric([self.instance, record.uuid,
                                  record.name_label, record.type],
                                 getattr(record, field))
            yield gauge


@web.middleware
async def log_requests(request, handler):
    log.info("%s %s %s", request.remote, request.method, request.path_qs)
    return await handler(request)


def make_app(registry):
    """The aiohttp application serving registry on /metrics."""

    async def metrics(request):
        # collecting makes blocking Xen-API calls
        loop = asyncio.get_event_loop()
        body = await loop.run_in_executor(None, generate_latest, registry)
        return web.Response(body=body,
                            headers={"Content-Type": CONTENT_TYPE_LATEST})

    app = web.Application(middlewares=[log_requests])
    app.router.add_get(METRICS_PATH, metrics)
    return app


def parse_listen_address(address):
    """Split "[HOST]:PORT" into (host, port); no host means every
    interface."""
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError("listen address %r has no port" % address)
    try:
        port = int(port)
    except ValueError:
        raise ValueError("invalid port in listen address %r" % address)
    return host.strip("[]") or None, port


def get_argparser():
    parser = add_connection_options(argparse.ArgumentParser(
        prog="xenapi-exporter",
        description="Serve Xen-API storage gauges to Prometheus"))
    parser.add_argument("--listen-address", default=DEFAULT_LISTEN_ADDRESS,
                        help="address to listen on for HTTP requests "
                             "(default: %(default)s)")
    return parser


def serve(args):
    host, port = parse_listen_address(args.listen_address)
    config = get_config(args)
    session = open_session(config, originator=ORIGINATOR)
    with session:
        registry = CollectorRegistry()
        registry.register(SRCollector(session, config.url or "localhost"))
        log.info("serving %s on %s", METRICS_PATH, args.listen_address)
        web.run_app(make_app(registry), host=host, port=port, print=None)


def main(argv=None):
    args = get_argparser().parse_args(argv)
    log.configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    sys.excepthook = log.handle_unhandled_exceptions
    return call_with_exit_codes(serve, args)


if __name__ == "__main__":
    sys.exit(main())
