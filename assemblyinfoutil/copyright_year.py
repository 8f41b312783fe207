"""Bump the end of a copyright year range to the current year."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import logging

from assemblyinfoutil import messages
from assemblyinfoutil.messages import translate
from assemblyinfoutil.utils import parse_integer

log = logging.getLogger("assemblyinfoutil")

COPYRIGHT_ATTRIBUTE = "AssemblyCopyright"
COPYRIGHT_WORD = "Copyright"


def fix_copyright_year(line: str, current_year: int, marker: str = COPYRIGHT_ATTRIBUTE) -> str:
    """Replace the end year of a hyphenated copyright range with current_year.

    The line is only touched when it contains marker followed by the word
    "Copyright", the year field is a range like 2019-2022 terminated by a comma
    or a space, and the end year is older than current_year. Single years are
    left alone.

    Args:
        line: Line to inspect.
        current_year: Year the range should end with.
        marker: Text that identifies the copyright attribute.

    Returns:
        str: The line with an updated year range, or the unchanged line.

    """
    if not line or line.isspace():
        return line

    pos_marker = line.find(marker)
    if pos_marker < 0:
        return line
    pos_copyright = line.find(COPYRIGHT_WORD, pos_marker + len(marker))
    if pos_copyright < 0:
        return line

    pos_hyphen = line.find("-", pos_copyright)
    if pos_hyphen < 0:
        log.info(translate(messages.COPYRIGHT_YEAR_IS_SINGLE_YEAR), line)
        return line

    delimiters = [pos for pos in (line.find(",", pos_hyphen), line.find(" ", pos_hyphen)) if pos >= 0]
    if not delimiters:
        log.info(translate(messages.COPYRIGHT_YEAR_UNRECOGNIZED), line)
        return line
    pos_end = min(delimiters)

    last_year = parse_integer(line[pos_hyphen + 1 : pos_end])
    if last_year is None:
        log.info(translate(messages.COPYRIGHT_YEAR_UNRECOGNIZED), line)
        return line

    if last_year >= current_year:
        log.info(translate(messages.COPYRIGHT_YEAR_UNCHANGED), line)
        return line

    new_line = f"{line[: pos_hyphen + 1]}{current_year}{line[pos_end:]}"
    log.info(translate(messages.COPYRIGHT_YEAR_CHANGE), line, new_line)
    return new_line
