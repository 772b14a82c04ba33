"""Test xenapi_bindings/log.py"""

import logging
import unittest

import mock

from xenapi_bindings import Failure, TransportError, log


# pylint: disable=missing-function-docstring
class TestConfigureLogging(unittest.TestCase):
    def tearDown(self):
        log.configure_logging(logging.INFO, to_stderr=False)

    def test_stderr_handler(self):
        log.configure_logging(logging.DEBUG)
        self.assertEqual(len(log.our_handlers), 1)
        handler = log.our_handlers[0]
        self.assertIsInstance(handler, logging.StreamHandler)
        self.assertEqual(handler.level, logging.DEBUG)
        self.assertEqual(handler.formatter._fmt, log.FORMAT)

    def test_reconfigure_replaces_handlers(self):
        logger = logging.getLogger("xenapi_bindings")
        log.configure_logging(logging.DEBUG)
        log.configure_logging(logging.WARNING)
        ours = [h for h in logger.handlers if h in log.our_handlers]
        self.assertEqual(len(ours), 1)
        self.assertEqual(logger.level, logging.WARNING)

    @mock.patch("logging.handlers.SysLogHandler")
    def test_syslog_handler(self, syslog):
        log.configure_logging(logging.INFO, to_syslog=True, to_stderr=False)
        syslog.assert_called_once_with(
            address="/dev/log", facility=log.LOG_SYSLOG_FACILITY)
        self.assertEqual(log.our_handlers, [syslog.return_value])


class TestUnhandledExceptions(unittest.TestCase):
    @mock.patch("sys.__excepthook__")
    def test_failure_logged_at_info(self, excepthook):
        error = Failure(["SR_HAS_PBD"])
        with self.assertLogs("xenapi_bindings", level="INFO") as logs:
            log.handle_unhandled_exceptions(Failure, error, None)
        self.assertEqual(logs.records[0].levelno, logging.INFO)
        excepthook.assert_called_once_with(Failure, error, None)

    @mock.patch("sys.__excepthook__")
    def test_other_errors_logged_at_error(self, excepthook):
        error = TransportError("https://xenserver.test", "SR.scan",
                               "connection refused")
        with self.assertLogs("xenapi_bindings", level="INFO") as logs:
            log.handle_unhandled_exceptions(TransportError, error, None)
        self.assertEqual(logs.records[0].levelno, logging.ERROR)
        excepthook.assert_called_once()

    @mock.patch("sys.__excepthook__")
    def test_keyboard_interrupt_not_logged(self, excepthook):
        with mock.patch.object(log, "error") as error:
            log.handle_unhandled_exceptions(KeyboardInterrupt,
                                            KeyboardInterrupt(), None)
        error.assert_not_called()
        excepthook.assert_called_once()
