"""Summarize the commit history of a git repository by author

Writes one tab-separated line per author: name, e-mail, commits, lines added, lines removed and
how long the author has been contributing.
"""

import argparse
import datetime
import logging
import sys
from typing import Iterator

from authorstat import aggregate
from authorstat import argparsing
from authorstat import config
from authorstat import eventfilter
from authorstat import gitlog
from authorstat import historyread
from authorstat import log
from authorstat import render
from authorstat.authordef import Report
from authorstat.commitdef import RawCommit
from authorstat.errordef import ParseError, SourceUnavailableError


def read_log_file(fn: str) -> Iterator[RawCommit]:
    """Read raw commits from previously captured git log text.

    Undecodable bytes are replaced, the same as when reading from git.
    Raises SourceUnavailableError if the file can't be opened.
    """
    if fn == '-':
        yield from historyread.parse_log_text(sys.stdin)
        return
    try:
        f = open(fn, encoding=config.get('git_log_encoding'), errors='replace')
    except OSError as e:
        raise SourceUnavailableError(f'Could not read {fn}: {e}') from e
    with f:
        yield from historyread.parse_log_text(f)


def build_report(args: argparse.Namespace) -> Report:
    """Read, filter and aggregate the whole history.

    Raises ParseError or SourceUnavailableError; nothing is returned unless every commit was read.
    """
    if args.fold_email_case or config.get('email_fold_case'):
        policy = aggregate.EmailPolicy.FOLD_CASE
    else:
        policy = aggregate.EmailPolicy.EXACT
    bot_patterns = () if args.include_bots else config.get('bot_name_patterns')

    if args.input:
        if args.glob:
            logging.warning('Paths are ignored when reading from --input')
        raws = read_log_file(args.input)
    else:
        reverse = args.reverse or config.get('log_order') == 'oldest'
        raws = gitlog.GitHistorySource(args.repository).read_commits(reverse, args.glob)

    events = eventfilter.filter_events(historyread.parse_commits(raws),
                                       since=args.since, until=args.until,
                                       bot_patterns=bot_patterns)
    return aggregate.aggregate(events, policy)


def run(args: argparse.Namespace, now: datetime.datetime) -> int:
    """Produce the report on stdout and return the program exit code."""
    try:
        report = build_report(args)
    except ParseError as e:
        logging.error('Malformed commit history: %s', e)
        return 1
    except SourceUnavailableError as e:
        logging.error('Commit history unavailable: %s', e)
        return 1

    module = args.module if args.module is not None else config.get('module_name')
    for line in render.render_report(report, now, module):
        print(line)
    return 0


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Summarize commits, lines added and lines removed by author')
    argparsing.arguments_logging(parser)
    argparsing.arguments_config(parser)
    parser.add_argument(
        '-r', '--repository',
        default='.',
        metavar='PATH',
        help='Path to the git repository (default: current directory)')
    parser.add_argument(
        '-s', '--since',
        type=argparsing.parse_datetime,
        metavar='DATETIME',
        help='Only count commits made at or after this time')
    parser.add_argument(
        '-u', '--until',
        type=argparsing.parse_datetime,
        metavar='DATETIME',
        help='Only count commits made at or before this time')
    parser.add_argument(
        '-m', '--module',
        help='Module name to show in a leading column')
    parser.add_argument(
        '--include-bots',
        action='store_true',
        help='Also count commits by bots such as dependabot')
    parser.add_argument(
        '--fold-email-case',
        action='store_true',
        help='Treat e-mail addresses differing only in case as the same author')
    parser.add_argument(
        '--reverse',
        action='store_true',
        help='Read the history oldest commit first')
    parser.add_argument(
        '--input',
        type=argparsing.ExpandUserFileName(),
        metavar='FILE',
        help='Read captured git log output from this file (- for stdin) instead of running git')
    parser.add_argument(
        'glob',
        nargs='*',
        help='Only count commits and lines in these paths')
    return parser.parse_args(args=args)


def main():
    # All spans are relative to the moment the program started
    now = datetime.datetime.now().astimezone()
    args = parse_args()
    log.setup(args)
    sys.exit(run(args, now))


if __name__ == '__main__':
    main()
