import pytest

from turnkeeper.models import Speech, SpeechNotFound
from turnkeeper.renderer import parse_speeches_text
from turnkeeper.speech_log import SpeechLog


def test_totals_and_counts_per_category():
    log = SpeechLog()
    log.record(10.0, "A")
    log.record(2.5, "B")
    log.record(5.0, "A")
    assert log.total_for("A") == 15.0
    assert log.count_for("A") == 2
    assert log.total_for("B") == 2.5
    assert log.count_for("B") == 1
    assert log.total_for("C") == 0
    assert log.count_for("C") == 0


def test_category_match_is_exact():
    log = SpeechLog()
    log.record(3.0, "a")
    log.record(4.0, "A ")
    assert log.count_for("A") == 0
    assert log.total_for("a") == 3.0


def test_reassign_category_moves_time_between_totals():
    log = SpeechLog()
    log.record(10.0, "A")
    log.reassign_category(0, "B")
    assert log.total_for("A") == 0
    assert log.total_for("B") == 10.0
    assert log[0].duration == 10.0


def test_remove_and_out_of_range():
    log = SpeechLog()
    log.record(1.0, "A")
    log.record(2.0, "B")
    removed = log.remove(0)
    assert removed.category == "A"
    assert len(log) == 1
    with pytest.raises(SpeechNotFound):
        log.remove(5)
    with pytest.raises(SpeechNotFound):
        log.reassign_category(1, "C")


def test_totals_rows():
    log = SpeechLog()
    log.record(61.0, "A")
    rows = log.totals(["A", "B"])
    assert [(r.category, r.count, r.total_seconds) for r in rows] == [
        ("A", 1, 61.0),
        ("B", 0, 0),
    ]


def test_export_lines_are_duration_then_category():
    log = SpeechLog()
    log.record(12.5, "Women")
    log.record(3.0, "Men, others")
    text = log.export_as_text()
    assert text.splitlines()[0] == "12.500,Women"
    assert text.endswith("\n")
    assert parse_speeches_text(text) == log.speeches


def test_export_reads_back_clock_precision_durations():
    log = SpeechLog()
    log.record(42.1234567, "A")
    log.record(0.0004, "B")
    assert parse_speeches_text(log.export_as_text()) == log.speeches
    assert log.total_for("A") == 42.123


def test_loaded_speeches_use_export_precision():
    log = SpeechLog([Speech(duration=7.98765, category="A")])
    assert log[0].duration == 7.988
    assert parse_speeches_text(log.export_as_text()) == log.speeches
