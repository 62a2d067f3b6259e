import io
import logging

import pytest

from charfreq.histogram import reader


def test_read_chunks_preserves_order():
    stream = io.StringIO("abcdefg")
    assert list(reader.read_chunks(stream, chunk_size=3)) == ["abc", "def", "g"]


def test_histogram_from_stream_tracks_stats():
    stats = {}
    histogram = reader.histogram_from_stream(io.StringIO("Hello, World!"), stats, chunk_size=4)
    assert histogram.total == 12
    assert histogram.count("L") == 3
    assert stats == {"chunks_read": 4, "characters_read": 13}


def test_empty_stream():
    stats = {}
    histogram = reader.histogram_from_stream(io.StringIO(""), stats)
    assert histogram.total == 0
    assert stats == {}


def test_chunk_size_does_not_change_counts():
    text = "Ünïcödé text, split anywhere 😀😀"
    small = reader.histogram_from_stream(io.StringIO(text), chunk_size=1)
    large = reader.histogram_from_stream(io.StringIO(text), chunk_size=1024)
    assert small.counts == large.counts
    assert small.total == large.total


def test_decode_errors_propagate():
    stream = io.TextIOWrapper(io.BytesIO(b"ok \xff"), encoding="utf-8")
    with pytest.raises(UnicodeDecodeError):
        reader.histogram_from_stream(stream)


def test_logs_run_summary(caplog):
    caplog.set_level(logging.DEBUG, logger="charfreq.histogram.reader")
    reader.histogram_from_stream(io.StringIO("aa b"), chunk_size=2)
    assert "Stream exhausted: 2 chunks, 4 characters read, 3 counted, 2 distinct" in caplog.text
