"""
Tests for deadline normalization, lenient and strict.
Run with: python -m pytest tests/test_deadline.py -v
"""
from __future__ import annotations

import pytest

from tasklist.deadline import normalize_deadline, split_deadline
from tasklist.errors import MalformedDeadlineError, ValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2/12/2019 1800", "2019-12-2T18:00:00"),
        ("2/12/2019", "2019-12-2T00:00:00"),
        ("  2-12-2019  ", "2019-12-2T00:00:00"),
        ("02/12/2019 0930", "2019-12-02T09:30:00"),
        ("2 12 2019", "2019-12-2T00:00:00"),
        ("2//12--2019   1800", "2019-12-2T18:00:00"),
        ("2/12/2019 1800 extra", "2019-12-2T18:00:00"),
    ],
)
def test_normalize_deadline_cases(raw, expected):
    result = normalize_deadline(raw, strict=False)
    assert result == expected, f"{raw!r} should normalize to {expected!r}, got {result!r}"


@pytest.mark.parametrize("raw", ["2/12", "", "   ", "2019", "-/-"])
def test_normalize_deadline_rejects_incomplete_date(raw):
    with pytest.raises(MalformedDeadlineError) as exc_info:
        normalize_deadline(raw, strict=False)
    assert exc_info.value.raw == raw
    assert "dd/MM/yyyy" in str(exc_info.value)


def test_malformed_deadline_is_a_validation_error():
    with pytest.raises(ValidationError):
        normalize_deadline("2/12", strict=False)


def test_lenient_mode_copies_bad_time_tokens():
    """Without strict mode, odd time tokens pass through unchecked."""
    assert normalize_deadline("2/12/2019 9", strict=False) == "2019-12-2T9::00"
    assert normalize_deadline("2/12/2019 abcd", strict=False) == "2019-12-2Tab:cd:00"
    assert normalize_deadline("2/12/2019 2561", strict=False) == "2019-12-2T25:61:00"


@pytest.mark.parametrize("token", ["9", "18000", "abcd", "2400", "1860", "１８００"])
def test_strict_mode_rejects_bad_time_tokens(token):
    with pytest.raises(MalformedDeadlineError):
        normalize_deadline(f"2/12/2019 {token}", strict=True)


def test_strict_mode_accepts_valid_time():
    assert normalize_deadline("2/12/2019 2359", strict=True) == "2019-12-2T23:59:00"
    assert normalize_deadline("2/12/2019", strict=True) == "2019-12-2T00:00:00"


def test_strict_mode_default_comes_from_settings(monkeypatch):
    monkeypatch.setenv("TASKLIST_STRICT_DEADLINE_TIME", "1")
    with pytest.raises(MalformedDeadlineError):
        normalize_deadline("2/12/2019 abcd")

    monkeypatch.setenv("TASKLIST_STRICT_DEADLINE_TIME", "0")
    assert normalize_deadline("2/12/2019 abcd") == "2019-12-2Tab:cd:00"


def test_split_deadline_drops_empty_tokens():
    assert split_deadline(" 2 / 12 - 2019 ") == ["2", "12", "2019"]


def test_invalid_log_level_does_not_affect_deadlines(monkeypatch):
    """Only MalformedDeadlineError may come out of normalization."""
    monkeypatch.setenv("TASKLIST_LOG_LEVEL", "verbose")
    monkeypatch.delenv("TASKLIST_STRICT_DEADLINE_TIME", raising=False)
    assert normalize_deadline("2/12/2019 1800") == "2019-12-2T18:00:00"


def test_no_break_space_is_not_a_deadline_separator():
    with pytest.raises(MalformedDeadlineError):
        normalize_deadline("2\xa012/2019", strict=False)
    assert split_deadline("\t2/12/2019\n") == ["2", "12", "2019"]
