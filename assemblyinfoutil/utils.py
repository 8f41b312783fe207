"""Assorted utility methods for use in rewriting attribute lines."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import re

_re_integer = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_integer(text: str) -> int | None:
    """Parse a decimal integer, tolerating surrounding white space and a sign.

    Args:
        text: Text to parse.

    Returns:
        Optional[int]: The parsed value, or None if text is not an integer.

    """
    if not _re_integer.fullmatch(text):
        return None
    return int(text)


def find_quoted_span(line: str, start: int) -> tuple[int, int] | None:
    """Find the text between the first pair of double quotes at or after start.

    Args:
        line: Line to search.
        start: Position to start searching from.

    Returns:
        Optional[tuple[int, int]]: Start and end offsets of the enclosed text, or None.

    """
    opening = line.find('"', start)
    if opening < 0:
        return None
    closing = line.find('"', opening + 1)
    if closing < 0:
        return None
    return opening + 1, closing


def splice(line: str, span: tuple[int, int], replacement: str) -> str:
    """Replace the text covered by span with replacement."""
    start, end = span
    return f"{line[:start]}{replacement}{line[end:]}"
