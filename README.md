# coursebook

Tools for training material written as an mdBook. The book's chapters are
grouped into courses, sessions, segments and slides using YAML frontmatter,
and the tools use that structure to time the course, write outlines and
schedules into the pages, and pull exercise files out of the text.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Describing the course

Each top-level chapter listed in `SUMMARY.md` is a segment; its sub-chapters
are the slides of that segment, and anything nested below a slide belongs to
that slide. Frontmatter at the top of a chapter tells the tools how the
material fits together:

```markdown
---
course: Fundamentals
session: Day 1 Morning
target_minutes: 180
minutes: 5
---

# Welcome
```

- `course` starts a new course (`none` marks material outside any course).
  Whenever `course` is given, `session` must be given too.
- `session` starts a new session within the current course.
- `target_minutes` adds to the session's planned length.
- `minutes` is how long the slide takes to teach.

Sub-slides may not set `course` or `session`. A structure that breaks these
rules raises `coursebook.course.CourseStructureError`; frontmatter that is not
valid YAML, or whose values have the wrong type, raises
`coursebook.frontmatter.FrontmatterError`.

Between timed segments a 10-minute break is counted. Durations are shown in
words, rounded up to a multiple of five once they exceed five minutes, e.g.
"1 hour and 5 minutes".

## The preprocessor

`mdbook-course` is an mdBook preprocessor. Register it in `book.toml`:

```toml
[preprocessor.course]
command = "mdbook-course"
```

It reads the `[context, book]` JSON pair from standard input and writes the
processed book to standard output. It strips frontmatter from every chapter,
adds a timing note ("This slide should take about 5 minutes.") after the
`<details>` tag of slides that have speaker notes, and replaces the first of
these directives in each chapter:

- `{{%session outline}}` - the segments of the current session
- `{{%segment outline}}` - the slides of the current segment
- `{{%course outline}}` - the schedule of the current course
- `{{%course outline NAME}}` - the schedule of the named course

An unknown directive is replaced by its bare text; a named course that does
not exist leaves the directive as it was.

`mdbook-course supports <renderer>` succeeds for every renderer.

## Reports

Run these from the book's root directory. The book is found through
`SUMMARY.md` in the source directory named by `src` in the `[book]` table of
`book.toml` (`src` by default).

```
course-schedule           # timing summary per session (same as "sessions")
course-schedule sessions  # timing summary per session
course-schedule pr        # summary suitable for a pull-request comment
course-content            # every slide's source, in course order
```

`course-schedule` reports each session's length against its target and
flags sessions that run too long or too short. `course-content` reads the
slide files from `src/` below the current directory.

## Extracting exercises

`mdbook-exerciser` is an mdBook renderer. A code block preceded by a comment
of the form

```markdown
<!-- File src/main.py -->
```

is written to that file below a directory named after the chapter's file.
Configure the output location in `book.toml`:

```toml
[output.exerciser]
output-directory = "exercises"
```

The output directory is removed and created afresh on each run.

## Using it from Python

```python
from coursebook.book import load_book
from coursebook.course import Courses
from coursebook.schedule import session_summary

courses, book = Courses.extract_structure(load_book("."))
print(session_summary(courses))
```

`coursebook.preprocessor.preprocess(book)` runs the whole preprocessing step
on a `Book`, and `coursebook.exerciser.process(directory, text)` extracts the
exercises of one piece of Markdown.

## Small examples

The package also carries two small exercise programs:

```
collatz        # prints the length of the Collatz sequence starting at 11
expression     # tokenizes and parses "10+foo+20-30" and prints the tree
```

From Python:

```python
from coursebook.collatz import collatz_length
from coursebook.expression import parse

collatz_length(11)        # 15
parse("10+foo+20-30")
```

## What it does not do

The package does not build or render books itself; the preprocessor and the
exerciser are meant to be run by mdBook. `load_book` reads `SUMMARY.md` with a
simple line-based reader of its own: chapter links, nested list items, part
headings and separator rules, nothing more.