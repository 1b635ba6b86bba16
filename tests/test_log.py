"""Test log."""

import argparse
import logging
import unittest
from unittest import mock

from .context import authorstat  # noqa: F401

from authorstat import log  # noqa: I100


class TestSyslogLevels(unittest.TestCase):
    """Test log.logging_level_to_syslog."""

    def test_levels(self):
        for level, expected in [
            (logging.DEBUG, 7),
            (logging.INFO, 6),
            (logging.WARNING, 4),
            (logging.ERROR, 3),
            (logging.CRITICAL, 2),
        ]:
            with self.subTest(level=level):
                self.assertEqual(expected, log.logging_level_to_syslog(level))

    def test_formatter(self):
        formatter = log.SyslogFormatter('%(message)s')
        record = logging.LogRecord('x', logging.ERROR, 'f.py', 1, 'broken %s', ('here',), None)
        self.assertEqual('<3>broken here', formatter.format(record))


class TestSetup(unittest.TestCase):
    """Test log.setup and log.log_format."""

    def test_formats(self):
        for debug, verbose, level, fmt in [
            (False, False, logging.WARNING, 'authorreport: %(message)s'),
            (False, True, logging.INFO, 'authorreport %(filename)s: %(message)s'),
            (True, True, logging.DEBUG, 'authorreport %(levelno)s %(filename)s: %(message)s'),
        ]:
            with self.subTest(debug=debug, verbose=verbose):
                args = argparse.Namespace(debug=debug, verbose=verbose, level_prefix=False)
                self.assertEqual((level, fmt), log.log_format(args, log.PROGRAM))

    def test_percent_escaped(self):
        args = argparse.Namespace(debug=False, verbose=False, level_prefix=False)
        self.assertEqual((logging.WARNING, '100%% done: %(message)s'),
                         log.log_format(args, '100% done'))

    def test_setup(self):
        for level_prefix, formatter in [(False, logging.Formatter), (True, log.SyslogFormatter)]:
            with self.subTest(level_prefix=level_prefix):
                args = argparse.Namespace(debug=False, verbose=True, level_prefix=level_prefix)
                with mock.patch('logging.basicConfig') as config:
                    log.setup(args)
                self.assertEqual(logging.INFO, config.call_args.kwargs['level'])
                handler = config.call_args.kwargs['handlers'][0]
                self.assertIs(formatter, type(handler.formatter))
                record = logging.LogRecord('x', logging.INFO, 'f.py', 1, 'hello', (), None)
                expected = '<6>authorreport f.py: hello' if level_prefix else 'authorreport f.py: hello'
                self.assertEqual(expected, handler.format(record))
