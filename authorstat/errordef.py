"""Exceptions raised while producing an author report."""


class AuthorStatError(Exception):
    """Base class of all errors that abort a report run."""


class ParseError(AuthorStatError):
    """A commit block is missing a required field or has a malformed one."""

    def __init__(self, index: int, reason: str, commit_hash: str = ''):
        self.index = index
        self.reason = reason
        self.commit_hash = commit_hash
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f'commit block {self.index}'
        if self.commit_hash:
            where += f' ({self.commit_hash[:12]})'
        return f'{where}: {self.reason}'


class SourceUnavailableError(AuthorStatError):
    """The commit history could not be retrieved."""
