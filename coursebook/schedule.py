"""Summaries of course timing, for review of course changes."""

from __future__ import annotations

import argparse
import sys

from coursebook.book import load_book
from coursebook.course import Courses
from coursebook.markdown import duration


def timediff(actual: int, target: int, slop: int) -> str:
    """Describe `actual` relative to `target`, tolerating a difference of `slop`."""
    if actual > target + slop:
        return f"{duration(actual)} (\u23f0 *{duration(actual - target)} too long*)"
    if actual < target - slop:
        return f"{duration(actual)}: ({duration(target - actual)} short)"
    return duration(actual)


def _text(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def session_summary(courses: Courses) -> str:
    """Markdown summary of every session and its segments."""
    lines: list[str] = []
    for course in courses:
        if course.target_minutes() == 0:
            break
        for session in course:
            lines.append(f"### {course.name} // {session.name}")
            lines.append(f"_{timediff(session.minutes(), session.target_minutes(), 15)}_")
            lines.append("")
            for segment in session:
                lines.append(f"* {segment.name} - _{duration(segment.minutes())}_")
            lines.append("")
    return _text(lines)


def pr_summary(courses: Courses) -> str:
    """Markdown summary of course and session timing, for a change review."""
    lines = [
        "## Course Schedule",
        "With this pull request applied, the course schedule is as follows:",
    ]
    for course in courses:
        if course.target_minutes() == 0:
            break
        lines.append(f"### {course.name}")
        lines.append(f"_{timediff(course.minutes(), course.target_minutes(), 15)}_")
        for session in course:
            lines.append(
                f"* {session.name} - "
                f"_{timediff(session.minutes(), session.target_minutes(), 5)}_"
            )
    return _text(lines)


def main(argv: list[str] | None = None) -> int:
    """Print a timing summary of the book in the current directory."""
    parser = argparse.ArgumentParser(
        prog="course-schedule", description="Summarise the timing of a course book"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("sessions", help="Show session summary (default)")
    commands.add_parser("pr", help="Show summary for a PR")
    args = parser.parse_args(argv)

    courses, _ = Courses.extract_structure(load_book("."))
    if args.command == "pr":
        print(pr_summary(courses), end="")
    else:
        print(session_summary(courses), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())