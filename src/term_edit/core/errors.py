"""Fatal error raised when the terminal or a file cannot be used."""

from __future__ import annotations


class TermEditError(Exception):
    """
    An unrecoverable failure.

    Carries the name of the operation that failed (``tcgetattr``,
    ``tcsetattr``, ``read``, ``getWindowSize``, ``fopen``) and, when there
    is one, the OS error behind it. ``str()`` reads like ``perror``.
    """

    def __init__(self, operation: str, cause: OSError | None = None) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.cause is None:
            return self.operation
        detail = self.cause.strerror or str(self.cause)
        return f"{self.operation}: {detail}"
