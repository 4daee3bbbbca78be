from pathlib import PurePosixPath

import pytest

from coursebook.book import Book, Chapter
from coursebook.course import (
    BREAK_DURATION,
    Course,
    Courses,
    CourseStructureError,
    Segment,
    Session,
    Slide,
)
from coursebook.frontmatter import FrontmatterError
from coursebook.markdown import duration, relative_link


def chapter(name, path, front=None, body="Body", subs=()):
    if front:
        header = "".join(f"{key}: {value}\n" for key, value in front.items())
        content = f"---\n{header}---\n{body}"
    else:
        content = body
    p = PurePosixPath(path)
    return Chapter(name=name, content=content, path=p, source_path=p, sub_items=list(subs))


def sample_book():
    deep = chapter("Deep", "a/deep.md", {"minutes": 3})
    sub = chapter("Sub", "a/sub.md", {"minutes": 10}, subs=[deep])
    return Book(
        sections=[
            chapter("Welcome", "welcome.md", {"course": "none"}),
            chapter(
                "Basics",
                "basics.md",
                {"course": "Fundamentals", "session": "Morning", "minutes": 5, "target_minutes": 180},
                subs=[sub],
            ),
            "Separator",
            chapter("Types", "types.md", {"minutes": 20}),
            chapter("Traits", "traits.md", {"session": "Afternoon", "minutes": 15}),
            {"PartTitle": "Android"},
            chapter("Setup", "android.md", {"course": "Android", "session": "Morning", "minutes": 30}),
        ]
    )


def test_structure_names():
    courses, _ = Courses.extract_structure(sample_book())
    assert [c.name for c in courses] == ["Fundamentals", "Android"]
    fundamentals = courses.find_course("Fundamentals")
    assert [s.name for s in fundamentals] == ["Morning", "Afternoon"]
    morning = fundamentals.sessions[0]
    assert [seg.name for seg in morning] == ["Basics", "Types"]
    assert [slide.name for slide in morning.segments[0]] == ["Basics", "Sub"]


def test_sub_slides_accumulate():
    courses, _ = Courses.extract_structure(sample_book())
    sub = courses.find_course("Fundamentals").sessions[0].segments[0].slides[1]
    assert sub.minutes == 10 + 3
    assert sub.source_paths == [PurePosixPath("a/sub.md"), PurePosixPath("a/deep.md")]


def test_frontmatter_is_stripped():
    _, book = Courses.extract_structure(sample_book())
    assert all(ch.content == "Body" for ch in book.chapters())


def test_outside_course_not_included():
    courses, _ = Courses.extract_structure(sample_book())
    assert courses.find_course("none") is None
    assert courses.find_slide(Chapter(name="W", source_path=PurePosixPath("welcome.md"))) is None


def test_course_requires_session():
    book = Book(sections=[chapter("X", "x.md", {"course": "C"})])
    with pytest.raises(CourseStructureError):
        Courses.extract_structure(book)


def test_sub_slide_may_not_set_course():
    deep = chapter("Deep", "deep.md", {"course": "Other"})
    sub = chapter("Sub", "sub.md", subs=[deep])
    book = Book(sections=[chapter("X", "x.md", {"course": "C", "session": "S"}, subs=[sub])])
    with pytest.raises(CourseStructureError):
        Courses.extract_structure(book)


def test_bad_frontmatter():
    bad = Chapter(name="X", content="---\nminutes: [\n---\nbody", source_path=PurePosixPath("x.md"))
    with pytest.raises(FrontmatterError):
        Courses.extract_structure(Book(sections=[bad]))


def test_session_minutes_skip_empty_segments():
    session = Session(
        name="S",
        segments=[
            Segment("A", [Slide("a", 5, [PurePosixPath("a.md")])]),
            Segment("B", [Slide("b", 0, [PurePosixPath("b.md")])]),
            Segment("C", [Slide("c", 20, [PurePosixPath("c.md")])]),
        ],
    )
    assert session.minutes() == 5 + 20 + BREAK_DURATION
    assert session.target_minutes() == session.minutes()


def test_empty_session_is_zero():
    assert Session(name="S").minutes() == 0


def test_target_minutes_from_frontmatter():
    courses, _ = Courses.extract_structure(sample_book())
    fundamentals = courses.find_course("Fundamentals")
    assert fundamentals.sessions[0].target_minutes() == 180
    afternoon = fundamentals.sessions[1]
    assert afternoon.target_minutes() == afternoon.minutes()
    assert fundamentals.target_minutes() == sum(s.target_minutes() for s in fundamentals)
    assert fundamentals.minutes() == sum(s.minutes() for s in fundamentals)


def test_find_slide_and_sub_chapter():
    book = sample_book()
    courses, book = Courses.extract_structure(book)
    chapters = {ch.name: ch for ch in book.chapters()}
    found = courses.find_slide(chapters["Deep"])
    assert found is not None
    course, session, segment, slide = found
    assert (course.name, session.name, segment.name, slide.name) == (
        "Fundamentals",
        "Morning",
        "Basics",
        "Sub",
    )
    assert slide.is_sub_chapter(chapters["Deep"])
    assert not slide.is_sub_chapter(chapters["Sub"])


def test_find_slide_without_source_path():
    courses, _ = Courses.extract_structure(sample_book())
    assert courses.find_slide(Chapter(name="Draft")) is None


def test_segment_outline():
    courses, _ = Courses.extract_structure(sample_book())
    segment = courses.find_course("Fundamentals").sessions[0].segments[0]
    at = "basics.md"
    expected = (
        "In this segment:\n"
        f" * [Basics]({relative_link(at, 'basics.md')}) ({duration(5)})\n"
        f" * [Sub]({relative_link(at, 'a/sub.md')}) ({duration(13)})\n"
        f"\nThis segment should take about {duration(segment.minutes())}\n"
    )
    assert segment.outline(at) == expected


def test_session_outline_skips_empty_segments():
    session = Session(
        name="S",
        segments=[
            Segment("Welcome", [Slide("w", 0, [PurePosixPath("w.md")])]),
            Segment("Work", [Slide("k", 30, [PurePosixPath("dir/k.md")])]),
        ],
    )
    out = session.outline("dir/page.md")
    assert out.startswith("In this session:\n")
    assert "Welcome" not in out
    assert f" * [Work](./dir/k.md) ({duration(30)})\n" in out
    assert out.endswith(
        f"\nIncluding {BREAK_DURATION} minute breaks, this session should take about "
        f"{duration(session.minutes())}\n"
    )


def test_course_schedule():
    course = Course(
        name="C",
        sessions=[
            Session("Morning", [Segment("Work", [Slide("k", 30, [PurePosixPath("k.md")])])]),
        ],
    )
    assert course.schedule("index.md") == (
        "Course schedule:\n"
        f" * Morning ({duration(30)}, including breaks)\n"
        f"   * [Work](./k.md) ({duration(30)})\n"
    )


def test_same_session_name_reuses_session():
    book = Book(
        sections=[
            chapter("A", "a.md", {"course": "C", "session": "S", "minutes": 5}),
            chapter("B", "b.md", {"course": "C", "session": "S", "minutes": 5}),
        ]
    )
    courses, _ = Courses.extract_structure(book)
    assert len(courses.courses) == 1
    assert [seg.name for seg in courses.courses[0].sessions[0]] == ["A", "B"]