"""Read raw commit history into validated commit events.

Raw commits come either from a structured source (RawCommit objects) or from the text output of
git log --numstat in the format requested by authorstat.gitlog.
"""

import datetime
import logging
import re
from typing import Iterable, Iterator

from authorstat.commitdef import CommitEvent, LineCount, RawCommit
from authorstat.errordef import ParseError
from authorstat.filedef import TextIOReadline

# First line of each commit in the log text
COMMIT_RE = re.compile(r'^commit ([0-9a-fA-F]+)$')

# added, removed, path; binary files show - for both counts
NUMSTAT_RE = re.compile(r'^(\d+|-)\t(\d+|-)\t')

# Number of lines following the commit line: name, email, time
HEADER_LINES = 3


def parse_timestamp(text: str) -> datetime.datetime:
    """Parse an ISO-8601 time into an aware UTC datetime.

    Times without a zone are taken to be UTC already.
    Raises ValueError if the time cannot be parsed.
    """
    ts = datetime.datetime.fromisoformat(text.strip())
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=datetime.timezone.utc)
    return ts.astimezone(datetime.timezone.utc)


def line_count(value: LineCount, index: int, commit_hash: str) -> int:
    """Convert one side of a file change into a line count.

    Binary files and files whose diff could not be parsed count as no lines.
    """
    if value is None or value == '-':
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError) as e:
        raise ParseError(index, f'invalid line count {value!r}', commit_hash) from e
    if count < 0:
        raise ParseError(index, f'negative line count {count}', commit_hash)
    return count


def parse_commit(raw: RawCommit, index: int) -> CommitEvent:
    """Validate one raw commit and sum its file changes.

    index is the position of the commit in the history and is only used in errors.
    """
    if raw.author_name is None:
        raise ParseError(index, 'missing author name', raw.commit_hash)
    if not raw.author_email:
        raise ParseError(index, 'missing author email', raw.commit_hash)
    if not raw.timestamp:
        raise ParseError(index, 'missing commit time', raw.commit_hash)
    try:
        timestamp = parse_timestamp(raw.timestamp)
    except ValueError as e:
        raise ParseError(index, f'malformed commit time {raw.timestamp!r}', raw.commit_hash) from e

    added = removed = 0
    for change in raw.file_changes:
        if len(change) != 2:
            raise ParseError(index, f'file change {change!r} is not an (added, removed) pair',
                             raw.commit_hash)
        added += line_count(change[0], index, raw.commit_hash)
        removed += line_count(change[1], index, raw.commit_hash)

    return CommitEvent(author_name=raw.author_name,
                       author_email=raw.author_email,
                       timestamp=timestamp,
                       lines_added=added,
                       lines_removed=removed,
                       commit_hash=raw.commit_hash)


def parse_commits(raws: Iterable[RawCommit]) -> Iterator[CommitEvent]:
    """Returns a generator of validated commit events, one per raw commit."""
    for index, raw in enumerate(raws, start=1):
        yield parse_commit(raw, index)


def parse_log_text(f: TextIOReadline) -> Iterator[RawCommit]:
    """Split git log text into raw commits.

    Returns a generator. Blank lines are ignored anywhere. A truncated header or a line that is
    neither a commit line nor a numstat line raises ParseError.
    """
    index = 0
    raw = None
    while line := f.readline():
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        if m := COMMIT_RE.match(line):
            if raw:
                yield raw
            index += 1
            header = []
            for _ in range(HEADER_LINES):
                if not (l := f.readline()):
                    raise ParseError(index, 'truncated commit header', m.group(1))
                header.append(l.rstrip('\r\n'))
            raw = RawCommit(author_name=header[0],
                            author_email=header[1].strip(),
                            timestamp=header[2].strip(),
                            file_changes=[],
                            commit_hash=m.group(1))
        elif raw and (m := NUMSTAT_RE.match(line)):
            raw.file_changes.append((m.group(1), m.group(2)))
        else:
            raise ParseError(index or 1, f'unexpected line in log: {line!r}',
                             raw.commit_hash if raw else '')
    if raw:
        yield raw
    logging.debug('%d commits read from log text', index)
