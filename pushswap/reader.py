"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    The stream is read in chunks of at most ``buffer_size`` characters
    (or bytes). Each line keeps its trailing newline; the last line may
    lack one. Text read past a newline is kept for the next call.
    """

    def __init__(
        self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _fill(self) -> None:
        # At least one read happens per call; reading stops at a chunk
        # holding a newline or at end of stream.
        while True:
            try:
                chunk = self.stream.read(self.buffer_size)
            except Exception:
                self._stash = None
                raise
            if not chunk:
                return
            self._stash = chunk if self._stash is None else self._stash + chunk
            newline = "\n" if isinstance(chunk, str) else b"\n"
            if newline in chunk:
                return

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        newline = "\n" if isinstance(stash, str) else b"\n"
        head, found, rest = stash.partition(newline)
        if not found:
            self._stash = None
            return head
        self._stash = rest
        return head + found

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line