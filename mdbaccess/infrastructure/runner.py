"""
Subprocess runner for the mdbtools executables.

Runs one toolkit command synchronously, captures stdout as a list of lines,
and turns every failure mode (missing executable, timeout, non-zero exit) into
an ExternalToolFailure. Callers never see output from a failed invocation.

Timeouts are retried with exponential backoff using tenacity.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from mdbaccess.config import Settings, get_settings
from mdbaccess.errors import ExternalToolFailure
from mdbaccess.utils.logging import get_logger
from mdbaccess.utils.text import split_lines

log = get_logger(__name__)


@dataclass(frozen=True)
class ToolOutput:
    """
    Captured result of one toolkit invocation.
    """

    command: List[str]
    lines: List[str] = field(default_factory=list)
    exit_status: int = 0
    duration_seconds: float = 0.0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ToolRunner:
    """
    Invoke mdbtools executables, optionally from an explicit install directory.

    Parameters
    ----------
    tool_path : str, optional
        Directory holding the executables. When unset, PATH lookup applies.
    timeout_seconds : float
        Wall-clock limit for a single attempt.
    retry_attempts : int
        Total attempts made when a command times out.
    """

    def __init__(
        self,
        tool_path: Optional[str] = None,
        timeout_seconds: float = 60.0,
        retry_attempts: int = 1,
    ) -> None:
        self.tool_path = tool_path
        self.timeout_seconds = timeout_seconds
        self.retry_attempts = max(1, retry_attempts)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ToolRunner":
        settings = settings or get_settings()
        return cls(
            tool_path=settings.mdbtools_path,
            timeout_seconds=settings.command_timeout_seconds,
            retry_attempts=settings.retry_attempts,
        )

    def executable(self, command: str) -> str:
        """Resolve the program path for ``command``."""
        if self.tool_path:
            return os.path.join(self.tool_path, command)
        return command

    def which(self, command: str) -> Optional[str]:
        """Return the full path of ``command`` if it can be executed, else None."""
        return shutil.which(self.executable(command))

    def _invoke(self, argv: List[str], input_text: Optional[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            argv,
            input=input_text,
            capture_output=True,
            text=True,
            timeout=self.timeout_seconds,
            check=False,
        )

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        input_text: Optional[str] = None,
        context: Optional[str] = None,
    ) -> ToolOutput:
        """
        Run ``command`` with ``args`` and return its stdout lines.

        Parameters
        ----------
        command : str
            Executable name, e.g. ``mdb-export``.
        args : sequence of str
            Argument vector (no shell quoting involved).
        input_text : str, optional
            Text written to the process' stdin.
        context : str, optional
            Table name or query text, carried into any error raised.

        Raises
        ------
        ExternalToolFailure
            If the executable is missing, every attempt timed out, or the
            process exited with a non-zero status.
        """
        argv = [self.executable(command), *args]
        start = time.perf_counter()
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.retry_attempts),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(subprocess.TimeoutExpired),
                reraise=True,
            ):
                with attempt:
                    completed = self._invoke(argv, input_text)
        except FileNotFoundError as exc:
            log.error("mdbtools executable not found", extra={"command": argv[0]})
            raise ExternalToolFailure(
                f"Executable '{argv[0]}' not found; is mdbtools installed?",
                command=argv,
                context=context,
            ) from exc
        except subprocess.TimeoutExpired as exc:
            log.error(
                "mdbtools command timed out",
                extra={"command": argv[0], "timeout_seconds": self.timeout_seconds},
            )
            raise ExternalToolFailure(
                f"Command '{command}' timed out after {self.timeout_seconds}s",
                command=argv,
                context=context,
            ) from exc
        duration = time.perf_counter() - start

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            log.error(
                "mdbtools command failed",
                extra={"command": argv[0], "exit_status": completed.returncode, "stderr": stderr},
            )
            raise ExternalToolFailure(
                f"Command '{command}' exited with status {completed.returncode}"
                + (f": {stderr}" if stderr else ""),
                command=argv,
                exit_status=completed.returncode,
                stderr=stderr,
                context=context,
            )

        lines = split_lines(completed.stdout or "")
        log.debug(
            "mdbtools command completed",
            extra={
                "command": argv[0],
                "lines": len(lines),
                "duration_seconds": round(duration, 4),
            },
        )
        return ToolOutput(
            command=argv,
            lines=lines,
            exit_status=completed.returncode,
            duration_seconds=duration,
        )


__all__ = ["ToolOutput", "ToolRunner"]
