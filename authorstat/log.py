"""Logging setup for the report programs
"""

import argparse
import logging

# Name shown at the start of log messages
PROGRAM = 'authorreport'

# Highest logging level that maps onto each syslog priority
SYSLOG_LEVELS = [
    (logging.DEBUG, 7),    # KERN_DEBUG
    (logging.INFO, 6),     # KERN_INFO
    (logging.WARNING, 4),  # KERN_WARNING
    (logging.ERROR, 3),    # KERN_ERR
]


def logging_level_to_syslog(level: int) -> int:
    "Converts a logging level into a syslog-compatible one"
    for highest, priority in SYSLOG_LEVELS:
        if level <= highest:
            return priority
    return 2  # KERN_CRIT


class SyslogFormatter(logging.Formatter):
    "Formats log messages with a syslog-style level prefix"

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        return f'<{logging_level_to_syslog(record.levelno)}>' + super().format(record)


def log_format(args: argparse.Namespace, program: str) -> tuple[int, str]:
    """Return the logging level and message format selected by the logging options."""
    # Escape percents to pass through format()
    program = program.replace('%', '%%')
    if args.debug:
        return logging.DEBUG, program + ' %(levelno)s %(filename)s: %(message)s'
    if args.verbose:
        return logging.INFO, program + ' %(filename)s: %(message)s'
    return logging.WARNING, program + ': %(message)s'


def setup(args: argparse.Namespace, program: str = PROGRAM):
    """Set up the logging subsystem in a consistent way.

    Log messages go to stderr so they never mix with a report on stdout.
    """
    level, fmt = log_format(args, program)
    formatter = SyslogFormatter(fmt) if args.level_prefix else logging.Formatter(fmt)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=[handler])
