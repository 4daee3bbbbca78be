"""Dump of the full text of every course, in order."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

from coursebook.book import load_book
from coursebook.course import Courses


def course_content(courses: Courses, src_dir: str | PathLike) -> str:
    """Return the headings and source text of every slide in `courses`."""
    src = Path(src_dir)
    parts: list[str] = []
    for course in courses:
        parts.append(f"# COURSE: {course.name}\n")
        for session in course:
            parts.append(f"# SESSION: {session.name}\n")
            for segment in session:
                parts.append(f"# SEGMENT: {segment.name}\n")
                for slide in segment:
                    parts.append(f"# SLIDE: {slide.name}\n")
                    for path in slide.source_paths:
                        text = (src / path).read_text(encoding="utf-8")
                        parts.append(f"{text}\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Print the content of every course in the book in the current directory."""
    courses, _ = Courses.extract_structure(load_book("."))
    print(course_content(courses, Path("src")), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())