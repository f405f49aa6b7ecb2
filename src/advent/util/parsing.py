"""Small text-parsing helpers shared by the daily solvers.

``parse_decimal`` behaves like a parser combinator: it consumes a leading
run of digits and hands back the unparsed remainder, so it can be chained
with other prefix parsers.
"""

from __future__ import annotations

import re

_DECIMAL = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


class ParseError(ValueError):
    """Raised when puzzle input does not match the expected format."""


def parse_decimal(text: str) -> tuple[int, str]:
    """Consume a leading run of ASCII digits.

    Returns ``(value, rest)``.  Leading zeros are accepted (``"0456"`` is
    456) and separators are not (``"1_000"`` gives ``(1, "_000")``).
    """
    match = _DECIMAL.match(text)
    if match is None:
        raise ParseError(f"expected a decimal number at {text[:20]!r}")
    return int(match.group()), text[match.end():]


def expect(text: str, literal: str) -> str:
    """Consume *literal* from the start of *text* and return the rest."""
    if not text.startswith(literal):
        raise ParseError(f"expected {literal!r} at {text[:20]!r}")
    return text[len(literal):]


def parse_ints(line: str) -> list[int]:
    """All signed integers in *line*, in order."""
    return [int(m) for m in _SIGNED.findall(line)]


def lines(text: str) -> list[str]:
    """Non-empty lines with surrounding whitespace removed."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def split_blocks(text: str) -> list[str]:
    """Split *text* into blank-line separated sections."""
    blocks = re.split(r"\n\s*\n", text.strip().replace("\r\n", "\n"))
    return [block.strip("\n") for block in blocks if block.strip()]
