"""Tests for the serialization adapter."""

import datetime
import json

import pytest

from measure.core.errors import DecodeError, Underflow
from measure.core.measurement import Measurement
from measure.serialization.codec import decode, encode, encode_parts, from_json, to_json


@pytest.fixture
def three_hours_three_minutes():
    return Measurement.from_duration(datetime.timedelta(hours=3, minutes=3))


class TestEncode:
    def test_nanosecond_string(self, three_hours_three_minutes):
        assert encode(three_hours_three_minutes) == "10980000000000"

    def test_json(self, three_hours_three_minutes):
        assert to_json(three_hours_three_minutes) == '"10980000000000"'

    def test_parts(self):
        assert encode_parts(Measurement(3_000_000_007)) == {"secs": 3, "nanos": 7}


class TestDecode:
    def test_string(self, three_hours_three_minutes):
        assert decode("10980000000000") == three_hours_three_minutes

    def test_json(self, three_hours_three_minutes):
        assert from_json('"10980000000000"') == three_hours_three_minutes

    def test_int_and_parts(self):
        assert decode(42) == Measurement(42)
        assert decode({"secs": 3, "nanos": 7}) == Measurement(3_000_000_007)

    def test_round_trip(self):
        for n in [0, 1, 999, 10**9, 2**63 - 1, 2**80]:
            m = Measurement(n)
            assert decode(encode(m)) == m
            assert decode(encode_parts(m)) == m
            assert from_json(to_json(m)) == m

    def test_list_round_trip(self):
        sample = [Measurement(5), Measurement(10**12)]
        text = to_json(sample)
        assert json.loads(text) == ["5", "1000000000000"]
        assert from_json(text) == sample

    @pytest.mark.parametrize("text", ["", "-1", "+1", " 1", "1.5", "1e9", "abc", "1_000", "١٢"])
    def test_malformed_string(self, text):
        with pytest.raises(DecodeError, match="parse"):
            decode(text)

    def test_overflow_sentinel(self):
        with pytest.raises(DecodeError, match="overflow"):
            decode("overflow")

    @pytest.mark.parametrize("value", [True, 1.5, None, [1], -1])
    def test_bad_values(self, value):
        with pytest.raises(DecodeError):
            decode(value)

    @pytest.mark.parametrize(
        "parts",
        [
            {"secs": 1},
            {"secs": 1, "nanos": 0, "extra": 1},
            {"secs": 1, "nanos": 10**9},
            {"secs": 1, "nanos": -1},
            {"secs": -1, "nanos": 0},
            {"secs": "1", "nanos": 0},
            {"secs": 1, "nanos": False},
        ],
    )
    def test_bad_parts(self, parts):
        with pytest.raises(DecodeError):
            decode(parts)

    def test_too_many_digits(self):
        # beyond the interpreter's integer string conversion limit
        with pytest.raises(DecodeError):
            decode("1" * 5000)
        with pytest.raises(DecodeError):
            from_json("1" * 5000)

    def test_malformed_json(self):
        with pytest.raises(DecodeError, match="Malformed JSON"):
            from_json("{")

    def test_decode_error_distinct_from_underflow(self):
        with pytest.raises(DecodeError) as exc_info:
            decode("-5")
        assert not isinstance(exc_info.value, Underflow)
        assert isinstance(exc_info.value, ValueError)
