"""Stream-backed console used for the drawing trace."""
import sys
from typing import Optional, TextIO


class StreamConsole:
    """
    Writes trace lines to a text stream.

    When no stream is given the current ``sys.stdout`` is looked up on every
    write, so redirections made after construction are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str) -> None:
        stream = self.stream
        stream.write(f"{line}\n")
        stream.flush()
