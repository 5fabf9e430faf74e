"""Encode and decode Measurements at a serialization boundary.

The wire form is the decimal nanosecond count as a string, e.g. a Measurement
of 3h3m encodes to "10980000000000". A ``{"secs": ..., "nanos": ...}`` mapping
is also accepted. Decoding never produces a partial or clamped value.
"""

import json
from collections.abc import Mapping

from ..core.errors import DecodeError
from ..core.formatting import NS_PER_SEC
from ..core.measurement import Measurement


def encode(measurement: Measurement) -> str:
    return str(measurement.elapsed_ns)


def encode_parts(measurement: Measurement) -> dict:
    secs, nanos = measurement.seconds_nanos()
    return {"secs": secs, "nanos": nanos}


def decode(value) -> Measurement:
    """Decode the string, integer or parts form back into a Measurement.

    Raises:
        DecodeError: value is malformed, has the wrong type, or is out of range.
    """
    if isinstance(value, str):
        return Measurement(_parse_nanos(value))
    if isinstance(value, bool):
        raise DecodeError("Failed to decode Measurement: got a boolean")
    if isinstance(value, int):
        if value < 0:
            raise DecodeError(f"Failed to decode Measurement: negative value {value}")
        return Measurement(value)
    if isinstance(value, Mapping):
        return _decode_parts(value)
    raise DecodeError(f"Failed to decode Measurement from {type(value).__name__}")


def _parse_nanos(text: str) -> int:
    if text == "overflow":
        raise DecodeError("Failed to decode Measurement: duration overflowed when encoded")
    # isdecimal() rejects signs, whitespace, underscores and the empty string
    if not (text.isascii() and text.isdecimal()):
        raise DecodeError(f"Failed to parse Measurement: {text!r}")
    try:
        return int(text)
    except ValueError as e:
        # int() caps string conversion length (sys.set_int_max_str_digits)
        raise DecodeError(f"Failed to parse Measurement: {e}") from e


def _decode_parts(parts: Mapping) -> Measurement:
    if set(parts) != {"secs", "nanos"}:
        raise DecodeError(
            f"Expected keys 'secs' and 'nanos', got {sorted(map(str, parts))}"
        )
    secs, nanos = parts["secs"], parts["nanos"]
    for name, field in (("secs", secs), ("nanos", nanos)):
        if isinstance(field, bool) or not isinstance(field, int):
            raise DecodeError(f"'{name}' must be an integer, got {field!r}")
    if secs < 0:
        raise DecodeError(f"'secs' out of range: {secs}")
    if not 0 <= nanos < NS_PER_SEC:
        raise DecodeError(f"'nanos' out of range: {nanos}")
    return Measurement(secs * NS_PER_SEC + nanos)


def to_json(value: Measurement | list[Measurement]) -> str:
    """Serialize a Measurement, or a list of them, to JSON."""
    if isinstance(value, Measurement):
        return json.dumps(encode(value))
    return json.dumps([encode(m) for m in value])


def from_json(text: str) -> Measurement | list[Measurement]:
    try:
        data = json.loads(text)
    except ValueError as e:
        # JSONDecodeError, or the int digit limit hit while parsing a number
        raise DecodeError(f"Malformed JSON: {e}") from e
    if isinstance(data, list):
        return [decode(item) for item in data]
    return decode(data)
