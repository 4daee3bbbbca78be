import io
import json
from pathlib import PurePosixPath

from coursebook.book import Book, Chapter
from coursebook.preprocessor import main, preprocess


def _chapter(name, path, content, sub_items=()):
    p = PurePosixPath(path)
    return Chapter(name=name, content=content, path=p, source_path=p, sub_items=list(sub_items))


def _book():
    details = _chapter("Details", "hello/details.md", "---\nminutes: 2\n---\nDeep")
    hello = _chapter(
        "Hello",
        "hello.md",
        "---\nminutes: 10\n---\nHello\n<details>\nnotes\n</details>",
        [details],
    )
    welcome = _chapter(
        "Welcome",
        "welcome.md",
        "---\ncourse: Fundamentals\nsession: Morning\nminutes: 5\n---\n"
        "Intro\n<details>\nnotes\n</details>\n{{%session outline}}",
        [hello],
    )
    intro = _chapter("Preface", "index.md", "---\ncourse: none\n---\n{{%course outline Fundamentals}}")
    return Book(sections=[intro, welcome])


def test_preprocess_strips_frontmatter_and_expands():
    book = preprocess(_book())
    welcome = book.sections[1]
    assert not welcome.content.startswith("---")
    assert "This slide should take about 5 minutes. " in welcome.content
    assert "In this session:" in welcome.content
    assert "{{%" not in welcome.content


def test_preprocess_notes_sub_slides():
    book = preprocess(_book())
    hello = book.sections[1].sub_items[0]
    assert "This slide and its sub-slides should take about" in hello.content


def test_preprocess_expands_outside_courses():
    book = preprocess(_book())
    preface = book.sections[0]
    assert preface.content.startswith("Course schedule:\n")


def test_main_supports_any_renderer():
    assert main(["supports", "html"]) == 0


def test_main_round_trips_book(monkeypatch, capsys):
    payload = json.dumps([{"root": "."}, _book().to_dict()])
    monkeypatch.setattr("sys.stdin", io.StringIO(payload))
    assert main([]) == 0
    out = capsys.readouterr().out
    result = Book.from_dict(json.loads(out))
    assert result.to_dict() == preprocess(_book()).to_dict()


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("not json"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip()


def test_main_reports_structure_error(monkeypatch, capsys):
    bad = Book(sections=[_chapter("X", "x.md", "---\ncourse: Fundamentals\n---\nX")])
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps([{}, bad.to_dict()])))
    assert main([]) == 1
    assert "'session' must appear" in capsys.readouterr().err