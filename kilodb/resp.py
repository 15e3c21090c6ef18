"""Parsing of RESP arrays of bulk strings, the form in which clients send commands."""

from __future__ import annotations

_TERMINATOR = "\r\n"


class RespError(ValueError):
    """Raised when input is not a well-formed RESP array of bulk strings."""


def _parse_length(text: str) -> int | None:
    """Parse an unsigned decimal length, allowing an optional leading '+'."""
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def _split_lines(text: str) -> list[str]:
    lines = text.split(_TERMINATOR)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_resp_array(text: str) -> list[str]:
    """Return the bulk strings of a RESP array such as ``*1\\r\\n$4\\r\\nPING\\r\\n``.

    Lines after the declared elements are ignored. Raises RespError on
    malformed input.
    """
    lines = iter(_split_lines(text))

    header = next(lines, None)
    if header is None:
        raise RespError("Empty input")
    if not header.startswith("*"):
        raise RespError("Expected RESP Array")

    count = _parse_length(header[1:])
    if count is None:
        raise RespError("Invalid array length")

    result: list[str] = []
    for _ in range(count):
        length_line = next(lines, None)
        if length_line is None:
            raise RespError("Missing $length")
        if not length_line.startswith("$"):
            raise RespError("Expected Bulk String")

        length = _parse_length(length_line[1:])
        if length is None:
            raise RespError("Invalid bulk string length")

        data = next(lines, None)
        if data is None:
            raise RespError("Missing data")
        if len(data.encode("utf-8", errors="surrogatepass")) != length:
            raise RespError("Bulk string length mismatch")

        result.append(data)

    return result