"""Helpers for producing Markdown text."""

from __future__ import annotations

from os import PathLike
from pathlib import PurePosixPath


def _starts_with(path: PurePosixPath, prefix: PurePosixPath) -> bool:
    return path.parts[: len(prefix.parts)] == prefix.parts


def relative_link(doc_path: str | PathLike, target_path: str | PathLike) -> str:
    """Return a link to `target_path` usable from the document at `doc_path`.

    Both paths are relative to the same source root.
    """
    doc = PurePosixPath(doc_path)
    target = PurePosixPath(target_path)

    dotdot = -1
    for parent in (doc, *doc.parents):
        if _starts_with(target, parent):
            break
        dotdot += 1
    if dotdot > 0:
        return "../" * dotdot + target.as_posix()
    return f"./{target.as_posix()}"


def duration(minutes: int) -> str:
    """Describe a number of minutes in words.

    Times longer than 5 minutes are rounded up to a multiple of 5.
    """
    if minutes < 0:
        raise ValueError("duration cannot be negative")
    if minutes > 5:
        minutes += 4
        minutes -= minutes % 5

    hours, minutes = divmod(minutes, 60)
    match (hours, minutes):
        case (0, 1):
            return "1 minute"
        case (0, m):
            return f"{m} minutes"
        case (1, 0):
            return "1 hour"
        case (1, m):
            return f"1 hour and {m} minutes"
        case (h, 0):
            return f"{h} hours"
        case (h, m):
            return f"{h} hours and {m} minutes"
    raise AssertionError("unreachable")