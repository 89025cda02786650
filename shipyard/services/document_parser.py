"""Syntax-only gate: raw text -> loosely typed document dict."""

import json

from shipyard.services.report import ParseError


def _reject_constant(name: str) -> float:
    raise ParseError(f"File could not be read: {name} is not a valid JSON value")


def parse(raw: str | bytes) -> dict:
    """Parse a saved design.

    Raises ParseError when the input is not JSON or its top level is not an
    object.  NaN and Infinity are rejected as well.  Nothing beyond syntax is
    checked here.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ParseError(f"File is not valid UTF-8 text: {exc}") from exc
    elif raw.startswith("\ufeff"):
        raw = raw[1:]

    try:
        doc = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(f"File could not be read: {exc.msg} (line {exc.lineno})") from exc

    if not isinstance(doc, dict):
        raise ParseError("File could not be read: expected a JSON object at the top level")
    return doc
