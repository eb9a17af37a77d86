"""Source units: the loadable chunks of text the resolver works on."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union


class Source(ABC):
    """A single source unit that can report its bytes and its location."""

    @abstractmethod
    def contents(self) -> bytes:
        """Read the contents of the source unit."""

    @abstractmethod
    def directory(self) -> str:
        """Return the directory relative include references are resolved against."""


class SourceBuffer(Source):
    """
    A source unit kept in memory.

    A buffer has no location of its own, so the current working directory
    stands in for its parent directory.
    """

    def __init__(self, text: Union[str, bytes]):
        if isinstance(text, str):
            text = text.encode("utf-8")
        self._text = text

    def contents(self) -> bytes:
        return self._text

    def directory(self) -> str:
        return os.getcwd()

    def __repr__(self) -> str:
        return f"SourceBuffer({len(self._text)} bytes)"


@dataclass(frozen=True)
class SourceFile(Source):
    """A source unit backed by a file on disk."""

    filename: str

    def contents(self) -> bytes:
        """
        Read the file.

        The file is opened, read fully and closed on every call; nothing
        is cached.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        with open(self.filename, "rb") as fd:
            return fd.read()

    def directory(self) -> str:
        return os.path.dirname(self.filename)
