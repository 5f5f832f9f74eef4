"""
Text helpers shared by the subprocess runner and the decoder.
"""

from __future__ import annotations

from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split tool output on ``\\n`` only.

    ``str.splitlines`` also breaks on form feeds, ``\\x1c``-``\\x1e``, ``\\x85``
    and the Unicode line/paragraph separators, all of which may appear inside
    Access text cells. A single trailing newline does not produce an empty
    final line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


__all__ = ["split_lines"]
