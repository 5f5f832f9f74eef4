"""
Exception hierarchy for mdbaccess.

Every error carries an optional ``context`` (the table name or query text being
processed) so that a failed export can be located from the message alone.
"""

from __future__ import annotations

from typing import Optional, Sequence


class MdbAccessError(Exception):
    """Base class for all mdbaccess errors."""

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        super().__init__(self._render())

    def _render(self) -> str:
        if self.context:
            return f"{self.message} (context: {self.context})"
        return self.message


class DatabaseFileNotFound(MdbAccessError):
    """The database file handed to the client does not exist."""


class MalformedExport(MdbAccessError):
    """Raw export output is too short or empty to hold the expected rows."""


class RowShapeMismatch(MalformedExport):
    """A data row's field count disagrees with the column count."""

    def __init__(
        self,
        row_number: int,
        expected: int,
        actual: int,
        context: Optional[str] = None,
    ) -> None:
        self.row_number = row_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_number} has {actual} field(s), expected {expected}",
            context=context,
        )


class ExternalToolFailure(MdbAccessError):
    """An mdbtools executable could not be run or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        exit_status: Optional[int] = None,
        stderr: str = "",
        context: Optional[str] = None,
    ) -> None:
        self.command = list(command)
        self.exit_status = exit_status
        self.stderr = stderr
        super().__init__(message, context=context)


__all__ = [
    "MdbAccessError",
    "DatabaseFileNotFound",
    "MalformedExport",
    "RowShapeMismatch",
    "ExternalToolFailure",
]
