"""Parsing of the YAML frontmatter at the top of a chapter."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import yaml

from coursebook.book import Chapter

_MATTER = re.compile(r"^\s*---\r?\n(.*?)---\r?\n(.*)$", re.DOTALL)


class FrontmatterError(ValueError):
    """Raised when a chapter's frontmatter cannot be parsed."""


def _minutes(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key!r} must be a non-negative integer, got {value!r}")
    return value


def _text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Frontmatter:
    """Course annotations taken from a chapter's frontmatter."""

    minutes: int | None = None
    target_minutes: int | None = None
    course: str | None = None
    session: str | None = None

    @classmethod
    def _from_yaml(cls, text: str) -> Frontmatter:
        data = yaml.safe_load(text)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("frontmatter must be a mapping")
        return cls(
            minutes=_minutes(data, "minutes"),
            target_minutes=_minutes(data, "target_minutes"),
            course=_text(data, "course"),
            session=_text(data, "session"),
        )


def split_frontmatter(chapter: Chapter) -> tuple[Frontmatter, str]:
    """Split a chapter's content into its frontmatter and the remaining content."""
    match = _MATTER.match(chapter.content)
    if match is None:
        return Frontmatter(), chapter.content
    header, body = match.group(1).strip(), match.group(2).strip()
    try:
        frontmatter = Frontmatter._from_yaml(header)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterError(
            f"error parsing frontmatter in {chapter.source_path}: {exc}"
        ) from exc
    return frontmatter, body