"""
Abstract export-source interfaces for mdbaccess.

An export source knows which mdbtools command produces delimited text for some
slice of a database (a whole table, an ad-hoc query) and how many leading
parsed rows precede the data. Concrete sources implement the ExportSource
protocol so the client can fetch and decode them uniformly.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from mdbaccess.infrastructure.runner import ToolRunner


@runtime_checkable
class ExportSource(Protocol):
    """
    Common interface all export sources must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the export path.
    offset : int
        Parsed rows to skip before data rows begin.
    """

    name: str
    description: str
    offset: int

    @property
    def context(self) -> str:
        """Table name or query text identifying this export in errors."""
        ...

    def fetch(self, runner: ToolRunner, database: str, include_headers: bool = True) -> List[str]:
        """
        Run the export and return its raw output lines.

        Parameters
        ----------
        runner : ToolRunner
            Invoker for the mdbtools executables.
        database : str
            Path of the Access database file.
        include_headers : bool
            Whether the header line is printed.
        """
        ...


class AbstractExportSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `name`, `description`, `offset` and implement `fetch`.
    """

    name: str
    description: str
    offset: int

    @property
    @abc.abstractmethod
    def context(self) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def fetch(
        self, runner: ToolRunner, database: str, include_headers: bool = True
    ) -> List[str]:  # pragma: no cover - interface only
        """Run the export and return raw output lines."""
        raise NotImplementedError


__all__ = [
    "ExportSource",
    "AbstractExportSource",
]
