"""Extraction of exercise files from the code blocks of a book."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from os import PathLike
from pathlib import Path

from markdown_it import MarkdownIt

from coursebook.book import Book, read_render_context

FILENAME_START = "<!-- File "
FILENAME_END = " -->"

_log = logging.getLogger(__name__)


class ExerciserError(Exception):
    """Raised when exercises cannot be written out."""


def _filename_from_html(html: str) -> str | None:
    html = html.strip()
    if (
        len(html) >= len(FILENAME_START) + len(FILENAME_END)
        and html.startswith(FILENAME_START)
        and html.endswith(FILENAME_END)
    ):
        return html[len(FILENAME_START) : len(html) - len(FILENAME_END)]
    return None


def process(output_directory: str | PathLike, input_contents: str) -> None:
    """Write each code block preceded by a `<!-- File name -->` comment to that file.

    Code blocks without such a comment are ignored, as are comments that are
    not followed by a code block. Files are placed under `output_directory`.
    """
    output = Path(output_directory)
    next_filename: str | None = None
    for token in MarkdownIt("commonmark").parse(input_contents):
        if token.type == "html_block":
            for line in token.content.splitlines():
                filename = _filename_from_html(line)
                if filename is not None:
                    next_filename = filename
                    _log.info("Next file: %r", next_filename)
        elif token.type in ("fence", "code_block"):
            _log.info("Code block %r", token.info)
            if next_filename is None:
                continue
            full_filename = output / next_filename
            _log.info("Opening %s", full_filename)
            full_filename.parent.mkdir(parents=True, exist_ok=True)
            with full_filename.open("w", encoding="utf-8", newline="") as file:
                file.write(token.content)
            next_filename = None


def process_all(book: Book, output_directory: str | PathLike) -> None:
    """Extract the exercises of every chapter into a directory named after its file."""
    output = Path(output_directory)
    for chapter in book.chapters():
        _log.debug("Chapter %s / %s", chapter.path, chapter.source_path)
        if chapter.path is None:
            continue
        stem = chapter.path.stem
        if not stem:
            raise ExerciserError(f"Chapter {chapter.path} has no file stem")
        process(output / stem, chapter.content)


def _output_directory(context: dict) -> Path:
    config = context.get("config")
    renderer = None
    if isinstance(config, dict):
        output = config.get("output")
        if isinstance(output, dict):
            renderer = output.get("exerciser")
    if not isinstance(renderer, dict):
        raise ExerciserError("Missing output.exerciser configuration")
    if "output-directory" not in renderer:
        raise ExerciserError(
            "Missing output.exerciser.output-directory configuration value"
        )
    value = renderer["output-directory"]
    if not isinstance(value, str):
        raise ExerciserError("Expected a string for output.exerciser.output-directory")
    return Path(value)


def main(argv: list[str] | None = None) -> int:
    """Render the book read from stdin as a directory of exercise files."""
    argparse.ArgumentParser(
        prog="exerciser", description="Write the exercises of a book to files"
    ).parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    try:
        try:
            context, book = read_render_context(sys.stdin)
        except ValueError as exc:
            raise ExerciserError(f"Parsing stdin: {exc}") from exc
        output_directory = _output_directory(context)
        shutil.rmtree(output_directory, ignore_errors=True)
        try:
            output_directory.mkdir()
        except OSError as exc:
            raise ExerciserError(
                f"Failed to create output directory {output_directory}: {exc}"
            ) from exc
        process_all(book, output_directory)
    except (ExerciserError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())