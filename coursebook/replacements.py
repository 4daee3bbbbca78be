"""Expansion of `{{%...}}` directives in chapter content."""

from __future__ import annotations

import re

from coursebook.book import Chapter
from coursebook.course import Course, Courses, Segment, Session

DIRECTIVE = re.compile(r"\{\{%([^}]*)}}")


def replace(
    courses: Courses,
    course: Course | None,
    session: Session | None,
    segment: Segment | None,
    chapter: Chapter,
) -> None:
    """Replace the first directive in `chapter` with the content it asks for.

    Supported directives are `session outline`, `segment outline`,
    `course outline` and `course outline <name>`. An unknown directive is
    replaced by its own text; a named course that does not exist leaves the
    directive untouched.
    """
    source_path = chapter.source_path
    if source_path is None:
        return

    def expand(match: re.Match[str]) -> str:
        directive_str = match.group(1).strip()
        match directive_str.split():
            case ["session", "outline"] if session is not None:
                return session.outline(source_path)
            case ["segment", "outline"] if segment is not None:
                return segment.outline(source_path)
            case ["course", "outline"] if course is not None:
                return course.schedule(source_path)
            case ["course", "outline", course_name]:
                found = courses.find_course(course_name)
                if found is None:
                    return match.group(0)
                return found.schedule(source_path)
            case _:
                return directive_str

    chapter.content = DIRECTIVE.sub(expand, chapter.content, count=1)