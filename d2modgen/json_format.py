"""Reading and writing JSON documents as plain Python values."""

from __future__ import annotations

import json
from typing import Any

from d2modgen.logger import Logger, LogLevel

_BOM = "\ufeff"
_INT64_MIN = -(2**63)
_INT64_LIMIT = 2**63
_UINT64_LIMIT = 2**64


def _parse_int(text: str) -> int | float:
    value = int(text)
    if _INT64_LIMIT <= value < _UINT64_LIMIT:
        # Unsigned 64-bit values are stored as signed.
        return value - _UINT64_LIMIT
    if value >= _UINT64_LIMIT or value < _INT64_MIN:
        return float(value)
    return value


def read_json(buffer: bytes | str) -> dict | list:
    """Parse a JSON document whose top level is an object or an array.

    A leading UTF-8 byte order mark is ignored. Raises ValueError when the
    text is not valid JSON or its top level is a scalar.
    """
    if isinstance(buffer, (bytes, bytearray)):
        buffer = bytes(buffer).decode("utf-8")
    if buffer.startswith(_BOM):
        buffer = buffer[len(_BOM):]
    try:
        document = json.loads(buffer, parse_int=_parse_int)
    except json.JSONDecodeError as exc:
        with Logger(LogLevel.ERR) as log:
            log.write(str(exc))
        raise
    if not isinstance(document, (dict, list)):
        raise ValueError("JSON document must be an object or an array")
    return document


def write_json(data: Any) -> str:
    """Serialise ``data`` as compact JSON text.

    Raises ValueError when ``data`` is None.
    """
    if data is None:
        raise ValueError("cannot write an empty document")
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))