import logging
from datetime import datetime

import pytest

from moodflow.journal import COLUMNS, EmptyMoodError, Journal, band_color_styles


class FakeClock:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return datetime(2024, 5, 1, 9, self.calls)


@pytest.fixture
def journal():
    return Journal(clock=FakeClock())


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_add_rejects_blank_text(journal, text):
    with pytest.raises(EmptyMoodError, match="Please enter some text about your mood"):
        journal.add(text)
    assert len(journal) == 0


def test_empty_mood_error_is_value_error():
    assert issubclass(EmptyMoodError, ValueError)


def test_add_records_sentiment(journal):
    entry = journal.add("Feeling happy and grateful")
    assert entry.text == "Feeling happy and grateful"
    assert entry.sentiment.title == "Positive"
    assert entry.sentiment.score == 7
    assert entry.timestamp == datetime(2024, 5, 1, 9, 1)
    assert journal.latest == entry


def test_entries_newest_first(journal):
    first = journal.add("sad")
    second = journal.add("happy")
    assert journal.entries == (second, first)
    assert list(journal) == [second, first]
    assert first.id != second.id


def test_limit_drops_oldest():
    journal = Journal(clock=FakeClock(), limit=2)
    journal.add("one")
    journal.add("two")
    journal.add("three")
    assert [e.text for e in journal] == ["three", "two"]


def test_clear(journal):
    journal.add("happy")
    journal.clear()
    assert len(journal) == 0
    assert journal.latest is None


def test_custom_analyzer_is_used():
    calls = []

    def analyzer(text):
        calls.append(text)
        from moodflow.scorer import classify
        return classify(42)

    journal = Journal(clock=FakeClock(), analyzer=analyzer)
    entry = journal.add("anything")
    assert calls == ["anything"]
    assert entry.sentiment.title == "Extremely Positive"


def test_add_logs_result(journal, caplog):
    with caplog.at_level(logging.INFO, logger="moodflow.journal"):
        journal.add("awful dreadful")
    assert "Extremely Negative" in caplog.text
    assert "-10" in caplog.text


def test_to_frame(journal):
    journal.add("sad")
    journal.add("wonderful day")
    df = journal.to_frame()
    assert list(df.columns) == COLUMNS
    assert list(df["text"]) == ["wonderful day", "sad"]
    assert list(df["score"]) == [5, -3]
    assert list(df["title"]) == ["Positive", "Very Negative"]
    assert df["timestamp"].iloc[0] == "2024-05-01T09:02:00"


def test_to_frame_empty(journal):
    df = journal.to_frame()
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_to_csv(journal):
    journal.add("happy")
    csv = journal.to_csv().decode("utf-8")
    header, row = csv.strip().splitlines()
    assert header == ",".join(COLUMNS)
    assert "happy" in row
    assert "Good vibes! Keep it up!" in row


def test_band_color_styles_tint_each_row(journal):
    journal.add("sad")
    journal.add("happy")
    df = journal.to_frame()
    assert band_color_styles(df.iloc[0]) == ["color: #FEF7C3"] * len(COLUMNS)
    assert band_color_styles(df.iloc[1]) == ["color: #FF9500"] * len(COLUMNS)
