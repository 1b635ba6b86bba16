"""Functions to set up common argument parsers."""

import argparse
import ast
import datetime
import os
from typing import Optional

from authorstat import config


class ExpandUserFileName:
    """argparsing type that checks if a file is readable.

    User directories with tildes (e.g. ~user/foo) are expanded first. The name - is passed
    through untouched to mean stdin. The file name is returned rather than an open file (unlike
    argparse.FileType) so the caller controls when it is opened and closed.
    """

    def __call__(self, filename: str) -> str:
        if filename == '-':
            return filename
        fn = os.path.expanduser(filename)
        if not os.access(fn, os.R_OK):
            raise argparse.ArgumentTypeError(f'{fn} does not exist or have permission')
        return fn


def parse_datetime(text: str) -> datetime.datetime:
    """argparsing type for a date or date and time.

    Accepts YYYY-MM-DD, YYYY-MM-DD HH:MM:SS or RFC 3339. Times without a zone are local time.
    """
    try:
        ts = datetime.datetime.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f'invalid time: {text}') from e
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts


class StoreMultipleConstAction(argparse.Action):
    """Store the value of the const to multiple attributes.

    const holds the value to store (defaults to True) and attrs is an iterable
    of attribute names to store the value, in addition to dest.
    """

    def __init__(self,
                 option_strings,
                 dest: str,
                 const: bool = True,
                 attrs: Optional[list[str]] = None,
                 default=None,
                 required: bool = False,
                 help=None,     # noqa: A002
                 metavar=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=const,
            default=default,
            required=required,
            help=help)
        self.attrs = attrs if attrs else []

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, self.const)
        for attr in self.attrs:
            setattr(namespace, attr, self.const)


class OverrideConfigAction(argparse.Action):
    """argparsing action that adds a configuration override."""
    def __init__(self,
                 option_strings,
                 dest: str,
                 default=None,
                 required: bool = False,
                 help=None):     # noqa: A002
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=1,
            default=default,
            required=required,
            metavar='NAME=VALUE',
            help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        for assignment in values:
            try:
                name, rawval = assignment.split('=', 1)
            except ValueError:
                parser.error(f'Missing = in {assignment}')
            try:
                val = ast.literal_eval(rawval) if rawval else ''
            except (ValueError, SyntaxError):
                # Treat anything that isn't a Python literal as a plain string
                val = rawval
            config.add_override(name, val)


def arguments_config(parser: argparse.ArgumentParser):
    """Add arguments needed for manipulating the configuration."""
    parser.add_argument(
        '--set',
        action=OverrideConfigAction,
        help='Override a config value')


def arguments_logging(parser: argparse.ArgumentParser):
    """Add arguments needed for logging."""
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show more log messages')
    parser.add_argument(
        '--debug',
        action=StoreMultipleConstAction,
        attrs=['verbose'],
        help='Show debug level log messages')
    parser.add_argument(
        '--level-prefix',
        action='store_true',
        help='Include syslog priority level in log message as <N> prefix')
