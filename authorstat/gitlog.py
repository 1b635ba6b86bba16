"""Get commit history from a git repository
"""

import logging
import subprocess
from typing import Iterator, Sequence

from authorstat import config
from authorstat import historyread
from authorstat.commitdef import RawCommit
from authorstat.errordef import SourceUnavailableError

# Commit hash, author name, author e-mail (both after .mailmap) and strict ISO-8601 commit time
LOG_FORMAT = 'commit %H%n%aN%n%aE%n%cI'


class GitHistorySource:
    """Reads the commits reachable from HEAD in a local repository."""

    def __init__(self, repo: str = '.'):
        self.repo = repo

    def log_command(self, reverse: bool = False, paths: Sequence[str] = ()) -> list[str]:
        """Returns the git command line that lists commits with per-file line counts.

        Merge commits are diffed against their first parent. When paths are given, only commits
        touching them are listed and only their lines are counted.
        """
        commands = [config.get('git_program'), '-C', self.repo, 'log',
                    '--numstat', '--diff-merges=first-parent',
                    f'--pretty=format:{LOG_FORMAT}']
        if reverse:
            commands.append('--reverse')
        commands.append('HEAD')
        if paths:
            commands.append('--')
            commands.extend(paths)
        return commands

    def read_commits(self, reverse: bool = False,
                     paths: Sequence[str] = ()) -> Iterator[RawCommit]:
        """Returns a generator of raw commits, newest first unless reverse is set.

        Raises SourceUnavailableError if git can't be run or fails.
        """
        commands = self.log_command(reverse, paths)
        logging.debug('Running: %s', ' '.join(commands))
        try:
            p = subprocess.Popen(commands,
                                 stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True,
                                 encoding=config.get('git_log_encoding'), errors='replace')
        except OSError as e:
            raise SourceUnavailableError(f'Could not run {commands[0]}: {e}') from e

        with p:
            assert p.stdout and p.stderr  # satisfy pytype that these aren't None
            count = 0
            for raw in historyread.parse_log_text(p.stdout):
                count += 1
                yield raw
            errors = p.stderr.read().strip()

        if p.returncode:
            raise SourceUnavailableError(
                f'git log failed in {self.repo} (exit {p.returncode}): {errors}')
        logging.info('%d commits read from %s', count, self.repo)
