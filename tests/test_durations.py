from datetime import timedelta

import pytest

from daprsidecar.durations import format_duration, parse_duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1s", timedelta(seconds=1)),
        ("100ms", timedelta(milliseconds=100)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("1.5h", timedelta(hours=1.5)),
        ("-2m", timedelta(minutes=-2)),
        ("+5s", timedelta(seconds=5)),
        ("0", timedelta(0)),
        ("250us", timedelta(microseconds=250)),
        ("250\u00b5s", timedelta(microseconds=250)),
        ("1.s", timedelta(seconds=1)),
        ("2h3m4s", timedelta(hours=2, minutes=3, seconds=4)),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


def test_parse_truncates_nanoseconds():
    assert parse_duration("1500ns") == timedelta(microseconds=1)
    assert parse_duration("999ns") == timedelta(0)


@pytest.mark.parametrize("text", ["", "1", "abc", "1x", ".s", "-", "1s2", "3000000h"])
def test_parse_duration_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_duration(text)


@pytest.mark.parametrize(
    "text", ["1h0m0s", "1m30s", "1.5s", "100ms", "0s", "-2m0s", "2h3m4s", "250\u00b5s"]
)
def test_format_round_trip(text):
    assert format_duration(parse_duration(text)) == text


def test_format_hour():
    assert format_duration(timedelta(minutes=60)) == "1h0m0s"


def test_format_zero():
    assert format_duration(timedelta(0)) == "0s"


def test_parse_of_format_is_identity():
    for delta in (timedelta(days=2, seconds=7), timedelta(milliseconds=1234), timedelta(microseconds=-17)):
        assert parse_duration(format_duration(delta)) == delta