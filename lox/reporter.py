"""
Error reporter shared by the scanner and the driver.

The scanner only needs a ``(line, message)`` callable; ``ErrorReporter.error``
is that callable. The reporter prints each diagnostic and remembers that an
error happened until the driver resets it.
"""

import sys
from typing import Optional, TextIO


class ErrorReporter:
    """Prints diagnostics as ``[line N] Error <where>: <message>``."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.had_error = False
        self.error_count = 0

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def error(self, line: int, message: str) -> None:
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str) -> None:
        print(f"[line {line}] Error {where}: {message}", file=self.stream)
        self.had_error = True
        self.error_count += 1

    def reset(self) -> None:
        self.had_error = False
