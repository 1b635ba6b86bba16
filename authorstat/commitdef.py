"""Git commit data structures."""

import datetime
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

# Count of lines in one side of a file change; git reports '-' for binary files
LineCount = Union[int, str, None]


@dataclass
class RawCommit:
    """One commit block as obtained from the history source, before validation."""

    author_name: Optional[str] = None
    author_email: Optional[str] = None
    timestamp: Optional[str] = None   # ISO-8601 commit time
    file_changes: Sequence[tuple[LineCount, LineCount]] = field(default_factory=list)
    commit_hash: str = ''             # only used to identify the commit in errors


@dataclass(frozen=True)
class CommitEvent:
    """A validated commit with line counts summed over all files it touches."""

    author_name: str
    author_email: str
    timestamp: datetime.datetime  # always in UTC
    lines_added: int = 0
    lines_removed: int = 0
    commit_hash: str = ''
