"""Type definitions for files."""

import io
from typing import Protocol


class TextIOReadline(Protocol):
    """A typing.TextIO class that provides only the readline method."""

    def readline(self, size: int = -1) -> str:
        raise io.UnsupportedOperation
