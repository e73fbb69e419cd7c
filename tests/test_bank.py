import logging

import pytest

from bank import append_completion_marker, load_questions
from schemas.questions import PlainQuestion


def _write_lines(path, n):
    path.write_text("".join(f"Question {i}?\n" for i in range(n)), encoding="utf-8")


def test_empty_file_loads_nothing(tmp_path, caplog):
    p = tmp_path / "q.txt"
    p.write_bytes(b"")
    with caplog.at_level(logging.WARNING):
        res = load_questions(p, 50)
    assert res.ok is True
    assert res.questions == []
    assert res.truncated is False
    assert caplog.records == []


def test_cap_is_enforced_with_warning(tmp_path, caplog):
    p = tmp_path / "q.txt"
    _write_lines(p, 100)
    with caplog.at_level(logging.WARNING):
        res = load_questions(p, 50)
    assert res.ok
    assert len(res.questions) == 50
    assert res.truncated is True
    assert any("dropped" in r.getMessage() for r in caplog.records)


def test_exactly_max_lines_is_not_truncated(tmp_path):
    p = tmp_path / "q.txt"
    _write_lines(p, 50)
    res = load_questions(p, 50)
    assert len(res.questions) == 50
    assert res.truncated is False


def test_trailing_blank_lines_do_not_count_as_dropped(tmp_path):
    p = tmp_path / "q.txt"
    p.write_text("a\nb\n\n   \n", encoding="utf-8")
    res = load_questions(p, 2)
    assert [q.prompt for q in res.questions] == ["a", "b"]
    assert res.truncated is False


def test_zero_max_with_content_truncates(tmp_path):
    p = tmp_path / "q.txt"
    _write_lines(p, 1)
    res = load_questions(p, 0)
    assert res.questions == []
    assert res.truncated is True


def test_negative_max_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_questions(tmp_path / "q.txt", -1)


def test_order_is_preserved(tmp_path):
    p = tmp_path / "q.txt"
    _write_lines(p, 7)
    res = load_questions(p, 50)
    assert [q.prompt for q in res.questions] == [f"Question {i}?" for i in range(7)]
    assert all(isinstance(q, PlainQuestion) for q in res.questions)


def test_missing_file_is_reported_not_raised(tmp_path):
    res = load_questions(tmp_path / "nope.txt", 50)
    assert res.ok is False
    assert "nope.txt" in res.error
    assert res.questions == []


def test_directory_is_reported(tmp_path):
    res = load_questions(tmp_path, 50)
    assert res.ok is False


def test_undecodable_bytes_are_replaced(tmp_path):
    p = tmp_path / "q.txt"
    p.write_bytes(b"caf\xe9?\n")
    res = load_questions(p, 50)
    assert len(res.questions) == 1


def test_append_marker(tmp_path):
    p = tmp_path / "q.txt"
    p.write_text("one\n", encoding="utf-8")
    assert append_completion_marker(p, "# done") is None
    assert p.read_text(encoding="utf-8") == "one\n# done\n"


def test_append_marker_bad_path(tmp_path):
    err = append_completion_marker(tmp_path / "missing" / "q.txt", "# done")
    assert err and "marker" in err
