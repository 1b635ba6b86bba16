"""Per-author statistics structure."""

import datetime
from dataclasses import dataclass

from authorstat.commitdef import CommitEvent


def later_name(a_time: datetime.datetime, a_name: str,
               b_time: datetime.datetime, b_name: str) -> str:
    """Return the name belonging to the chronologically later of two commits.

    Identical times choose the greater name so the result never depends on which came first.
    """
    return max((a_time, a_name), (b_time, b_name))[1]


@dataclass
class AuthorStats:
    """Accumulated commit activity of one author.

    display_name always comes from the commit at last_seen.
    """

    display_name: str
    email: str          # grouping key
    commit_count: int
    total_added: int
    total_removed: int
    first_seen: datetime.datetime
    last_seen: datetime.datetime

    @classmethod
    def from_event(cls, event: CommitEvent, email: str) -> 'AuthorStats':
        return cls(display_name=event.author_name,
                   email=email,
                   commit_count=1,
                   total_added=event.lines_added,
                   total_removed=event.lines_removed,
                   first_seen=event.timestamp,
                   last_seen=event.timestamp)

    def add(self, event: CommitEvent):
        """Fold one more commit by this author into the totals."""
        self.commit_count += 1
        self.total_added += event.lines_added
        self.total_removed += event.lines_removed
        self.first_seen = min(self.first_seen, event.timestamp)
        self.display_name = later_name(self.last_seen, self.display_name,
                                       event.timestamp, event.author_name)
        self.last_seen = max(self.last_seen, event.timestamp)

    def merge(self, other: 'AuthorStats'):
        """Combine a partial result for the same author into this one."""
        self.commit_count += other.commit_count
        self.total_added += other.total_added
        self.total_removed += other.total_removed
        self.first_seen = min(self.first_seen, other.first_seen)
        self.display_name = later_name(self.last_seen, self.display_name,
                                       other.last_seen, other.display_name)
        self.last_seen = max(self.last_seen, other.last_seen)


Report = list[AuthorStats]
