"""Book preprocessor that adds course outlines and timing notes."""

from __future__ import annotations

import argparse
import json
import sys

from coursebook.book import Book, read_preprocessor_input
from coursebook.course import Courses
from coursebook.replacements import replace
from coursebook.timing_info import insert_timing_info


def preprocess(book: Book) -> Book:
    """Strip frontmatter, add timing notes and expand directives throughout `book`."""
    courses, book = Courses.extract_structure(book)
    for chapter in book.chapters():
        found = courses.find_slide(chapter)
        if found is not None:
            course, session, segment, slide = found
            insert_timing_info(slide, chapter)
            replace(courses, course, session, segment, chapter)
        else:
            replace(courses, None, None, None, chapter)
    return book


def main(argv: list[str] | None = None) -> int:
    """Run the preprocessor, reading a book from stdin and writing it to stdout."""
    parser = argparse.ArgumentParser(
        prog="coursebook", description="Book preprocessor for course material"
    )
    commands = parser.add_subparsers(dest="command")
    supports = commands.add_parser("supports", help="Check support for a renderer")
    supports.add_argument("renderer")
    args = parser.parse_args(argv)

    if args.command == "supports":
        return 0

    try:
        _, book = read_preprocessor_input(sys.stdin)
        book = preprocess(book)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1

    json.dump(book.to_dict(), sys.stdout, ensure_ascii=False, separators=(",", ":"))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())