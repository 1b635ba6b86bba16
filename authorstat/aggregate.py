"""Aggregate commit events into per-author statistics."""

import dataclasses
import enum
import logging
from typing import Iterable

from authorstat.authordef import AuthorStats, Report
from authorstat.commitdef import CommitEvent


class EmailPolicy(enum.Enum):
    """How author e-mail addresses are compared when grouping commits."""

    EXACT = 'exact'          # addresses group only when identical
    FOLD_CASE = 'fold-case'  # addresses differing only in case are the same author

    def key(self, email: str) -> str:
        if self is EmailPolicy.FOLD_CASE:
            return email.lower()
        return email


def report_order(stats: AuthorStats) -> tuple[int, int, str]:
    """Sort key: most commits first, then most lines added, then by e-mail address."""
    return (-stats.commit_count, -stats.total_added, stats.email)


class AuthorAggregator:
    """Accumulates commit events into one AuthorStats per author e-mail address.

    The fold is associative per author, so aggregators built over separate parts of a history
    can be combined with merge() into the same result as one built over the whole.
    """

    def __init__(self, policy: EmailPolicy = EmailPolicy.EXACT):
        self.policy = policy
        self.authors = {}  # type: dict[str, AuthorStats]
        self.event_count = 0

    def add(self, event: CommitEvent):
        key = self.policy.key(event.author_email)
        if stats := self.authors.get(key):
            stats.add(event)
        else:
            logging.debug('New author %s <%s>', event.author_name, key)
            self.authors[key] = AuthorStats.from_event(event, key)
        self.event_count += 1

    def add_all(self, events: Iterable[CommitEvent]):
        for event in events:
            self.add(event)

    def merge(self, other: 'AuthorAggregator'):
        """Add the partial results of another aggregator using the same policy."""
        if other.policy is not self.policy:
            raise ValueError(f'Cannot merge {other.policy} results into {self.policy} results')
        for key, stats in other.authors.items():
            if mine := self.authors.get(key):
                mine.merge(stats)
            else:
                self.authors[key] = dataclasses.replace(stats)
        self.event_count += other.event_count

    def report(self) -> Report:
        """Return the authors in report order."""
        return sorted(self.authors.values(), key=report_order)


def aggregate(events: Iterable[CommitEvent], policy: EmailPolicy = EmailPolicy.EXACT) -> Report:
    """Fold all events into a sorted per-author report."""
    agg = AuthorAggregator(policy)
    agg.add_all(events)
    logging.info('%d commits by %d authors', agg.event_count, len(agg.authors))
    return agg.report()
