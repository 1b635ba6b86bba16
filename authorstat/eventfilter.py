"""Filters to restrict which commits are counted."""

import datetime
import logging
from typing import Iterable, Iterator, Optional, Sequence

from authorstat.commitdef import CommitEvent


def is_bot(name: str, bot_patterns: Sequence[str]) -> bool:
    """Whether the author name looks like an automated committer."""
    return any(p in name for p in bot_patterns)


def filter_events(events: Iterable[CommitEvent],
                  since: Optional[datetime.datetime] = None,
                  until: Optional[datetime.datetime] = None,
                  bot_patterns: Sequence[str] = ()) -> Iterator[CommitEvent]:
    """Returns a generator of the events within the time range and not made by bots.

    since and until are inclusive and must be timezone aware.
    """
    skipped = 0
    for event in events:
        if ((since and event.timestamp < since)
                or (until and event.timestamp > until)
                or is_bot(event.author_name, bot_patterns)):
            skipped += 1
            continue
        yield event
    if skipped:
        logging.info('%d commits skipped by filters', skipped)
