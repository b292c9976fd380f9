"""JSON serialization for ``Seconds``.

This adapter is optional: ``unisecs`` itself never imports it. A
``Seconds`` value is written as a bare JSON number with no wrapping
object, and only a JSON number is accepted back.

Example:
    >>> from unisecs import Seconds
    >>> from unisecs.serde import dumps, loads
    >>> dumps(Seconds(1545136342.711932))
    '1545136342.711932'
    >>> loads("1545136342.711932")
    Seconds(value=1545136342.711932)
"""

import json
import re
from typing import IO, Any

from typing_extensions import override

from unisecs.seconds import Seconds

EXPECTED = "floating point seconds"
OUT_OF_RANGE = "number out of range"

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_decoder = json.JSONDecoder()


class SecondsDecodeError(ValueError):
    """A JSON value that is not a number was decoded as ``Seconds``.

    Attributes:
        found: Description of the offending value (``map``, ``sequence``,
            ``string "..."``, ...)
        line: 1-based line of the offending value, None if decoded from an
            already-parsed object
        column: 0-based offset of the value within its line, or None
    """

    def __init__(self, found: str, line: int | None = None, column: int | None = None):
        self.found: str = found
        self.line: int | None = line
        self.column: int | None = column
        message = f"invalid type: {found}, expected {EXPECTED}"
        if line is not None and column is not None:
            message += f" at line {line} column {column}"
        super().__init__(message)


def _describe(obj: Any) -> str:
    if obj is None:
        return "unit value"
    if isinstance(obj, bool):
        return f"boolean `{'true' if obj else 'false'}`"
    if isinstance(obj, str):
        return f"string {json.dumps(obj, ensure_ascii=False)}"
    if isinstance(obj, dict):
        return "map"
    if isinstance(obj, (list, tuple)):
        return "sequence"
    return type(obj).__name__


def encode(seconds: Seconds) -> float:
    """Return the JSON-ready representation: the raw float."""
    return seconds.value


def decode(obj: Any) -> Seconds:
    """Build ``Seconds`` from an already-parsed JSON value.

    Integers are accepted as floating point compatible. No range or sign
    checks are made.

    Raises:
        SecondsDecodeError: If ``obj`` is not a number
        ValueError: If ``obj`` is an integer too large for a float
    """
    if isinstance(obj, bool) or not isinstance(obj, (int, float)):
        raise SecondsDecodeError(_describe(obj))
    try:
        return Seconds(float(obj))
    except OverflowError:
        raise ValueError(OUT_OF_RANGE) from None


def dumps(seconds: Seconds) -> str:
    return json.dumps(encode(seconds))


def loads(s: str | bytes | bytearray) -> Seconds:
    """Decode a JSON document holding a single number.

    Raises:
        SecondsDecodeError: If the document holds anything but a number;
            the message names the line and column of the offending value
        json.JSONDecodeError: If the document is not valid JSON, or holds
            an integer too large for a float
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode(json.detect_encoding(s), "surrogatepass")

    start = _WHITESPACE.match(s, 0).end()
    obj, end = _decoder.raw_decode(s, start)
    end = _WHITESPACE.match(s, end).end()
    if end != len(s):
        raise json.JSONDecodeError("Extra data", s, end)

    try:
        return decode(obj)
    except SecondsDecodeError as e:
        line = s.count("\n", 0, start) + 1
        column = start - (s.rfind("\n", 0, start) + 1)
        raise SecondsDecodeError(e.found, line, column) from None
    except ValueError:
        raise json.JSONDecodeError(OUT_OF_RANGE, s, start) from None


def dump(seconds: Seconds, fp: IO[str]) -> None:
    fp.write(dumps(seconds))


def load(fp: IO[str] | IO[bytes]) -> Seconds:
    return loads(fp.read())


class SecondsEncoder(json.JSONEncoder):
    """JSON encoder that writes nested ``Seconds`` values as bare numbers.

    Example:
        >>> json.dumps({"at": Seconds(1.5)}, cls=SecondsEncoder)
        '{"at": 1.5}'
    """

    @override
    def default(self, o: Any) -> Any:
        if isinstance(o, Seconds):
            return encode(o)
        return super().default(o)
