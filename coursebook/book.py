"""In-memory model of a book and its chapters, as exchanged in JSON."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, TextIO

SEPARATOR = "Separator"

_SUMMARY_FILE = "SUMMARY.md"
_DEFAULT_SOURCE_DIR = "src"

_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_HEADING = re.compile(r"^#+\s+(.*?)\s*#*\s*$")
_RULE = re.compile(r"^\s*(-{3,}|\*{3,}|_{3,})\s*$")
_LINK = re.compile(r"^\s*\[(.+?)\]\((.*?)\)\s*$")
_LIST_ITEM = re.compile(r"^(\s*)[-*+]\s+\[(.+?)\]\((.*?)\)\s*$")
_TABLE_HEADER = re.compile(r"^\s*\[([^\]]+)\]\s*$")
_SRC_KEY = re.compile(r"""^\s*src\s*=\s*(["'])(.*)\1\s*(#.*)?$""")


def _optional_path(value: str | None) -> PurePosixPath | None:
    return None if value is None else PurePosixPath(value)


def _optional_str(value: PurePosixPath | None) -> str | None:
    return None if value is None else value.as_posix()


@dataclass
class Chapter:
    """A chapter of a book, possibly holding nested items."""

    name: str
    content: str = ""
    number: list[int] | None = None
    sub_items: list[Any] = field(default_factory=list)
    path: PurePosixPath | None = None
    source_path: PurePosixPath | None = None
    parent_names: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chapter:
        """Build a chapter from its JSON representation."""
        number = data.get("number")
        return cls(
            name=data["name"],
            content=data.get("content", ""),
            number=None if number is None else list(number),
            sub_items=[_item_from_json(item) for item in data.get("sub_items", [])],
            path=_optional_path(data.get("path")),
            source_path=_optional_path(data.get("source_path")),
            parent_names=list(data.get("parent_names", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of this chapter."""
        return {
            "name": self.name,
            "content": self.content,
            "number": None if self.number is None else list(self.number),
            "sub_items": [_item_to_json(item) for item in self.sub_items],
            "path": _optional_str(self.path),
            "source_path": _optional_str(self.source_path),
            "parent_names": list(self.parent_names),
        }

    def _walk(self) -> Iterator[Chapter]:
        yield self
        for item in self.sub_items:
            if isinstance(item, Chapter):
                yield from item._walk()


def _item_from_json(item: Any) -> Any:
    if isinstance(item, dict) and "Chapter" in item:
        return Chapter.from_dict(item["Chapter"])
    return item


def _item_to_json(item: Any) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_dict()}
    return item


@dataclass
class Book:
    """A book: a sequence of chapters, part titles and separators."""

    sections: list[Any] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=lambda: {"__non_exhaustive": None})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Book:
        """Build a book from its JSON representation."""
        if not isinstance(data, dict):
            raise ValueError("a book must be a JSON object")
        sections = [_item_from_json(item) for item in data.get("sections", [])]
        extra = {key: value for key, value in data.items() if key != "sections"}
        return cls(sections=sections, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation of this book."""
        return {"sections": [_item_to_json(item) for item in self.sections], **self.extra}

    def chapters(self) -> Iterator[Chapter]:
        """Yield every chapter, depth first, in reading order."""
        for item in self.sections:
            if isinstance(item, Chapter):
                yield from item._walk()


def _source_dir(config_file: Path) -> str:
    if not config_file.is_file():
        return _DEFAULT_SOURCE_DIR
    table = None
    for line in config_file.read_text(encoding="utf-8").splitlines():
        header = _TABLE_HEADER.match(line)
        if header:
            table = header.group(1).strip()
            continue
        if table == "book":
            key = _SRC_KEY.match(line)
            if key:
                return key.group(2)
    return _DEFAULT_SOURCE_DIR


def _make_chapter(name: str, link: str, src: Path) -> Chapter:
    link = link.strip()
    if not link:
        return Chapter(name=name)
    path = PurePosixPath(link)
    file = src / link
    content = file.read_text(encoding="utf-8") if file.is_file() else ""
    return Chapter(name=name, content=content, path=path, source_path=path)


def _parse_summary(text: str, src: Path) -> list[Any]:
    sections: list[Any] = []
    stack: list[tuple[int, Chapter]] = []
    top_level = 0
    seen_anything = False

    for line in _COMMENT.sub("", text).splitlines():
        if not line.strip():
            continue

        item = _LIST_ITEM.match(line)
        if item:
            indent = len(item.group(1).expandtabs(4))
            chapter = _make_chapter(item.group(2), item.group(3), src)
            while stack and stack[-1][0] >= indent:
                stack.pop()
            if stack:
                parent = stack[-1][1]
                siblings = sum(isinstance(c, Chapter) for c in parent.sub_items)
                chapter.number = [*(parent.number or []), siblings + 1]
                chapter.parent_names = [*parent.parent_names, parent.name]
                parent.sub_items.append(chapter)
            else:
                top_level += 1
                chapter.number = [top_level]
                sections.append(chapter)
            stack.append((indent, chapter))
            seen_anything = True
            continue

        stack.clear()
        heading = _HEADING.match(line)
        if heading:
            if seen_anything:
                sections.append({"PartTitle": heading.group(1)})
            seen_anything = True
        elif _RULE.match(line):
            sections.append(SEPARATOR)
            seen_anything = True
        else:
            link = _LINK.match(line)
            if link:
                sections.append(_make_chapter(link.group(1), link.group(2), src))
                seen_anything = True
    return sections


def load_book(root: str | Path = ".") -> Book:
    """Load the book rooted at `root`, reading its summary and chapter files."""
    root = Path(root)
    src = root / _source_dir(root / "book.toml")
    summary = (src / _SUMMARY_FILE).read_text(encoding="utf-8")
    return Book(sections=_parse_summary(summary, src))


def read_preprocessor_input(stream: TextIO) -> tuple[dict[str, Any], Book]:
    """Read the `[context, book]` pair handed to a preprocessor."""
    data = json.load(stream)
    if not isinstance(data, list) or len(data) != 2:
        raise ValueError("preprocessor input must be a [context, book] array")
    context, book = data
    return context, Book.from_dict(book)


def read_render_context(stream: TextIO) -> tuple[dict[str, Any], Book]:
    """Read the context handed to a renderer; return it without the book, and the book."""
    data = json.load(stream)
    if not isinstance(data, dict) or "book" not in data:
        raise ValueError("render context must be an object holding a book")
    context = {key: value for key, value in data.items() if key != "book"}
    return context, Book.from_dict(data["book"])