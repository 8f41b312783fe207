"""Read an AssemblyInfo file and replace it with rewritten lines."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import codecs
import os
import re
import stat
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

TEMP_FILENAME_EXTENSION = ".out"

# only CR, LF and CRLF end a line; form feeds and Unicode separators stay inside it
_re_line_break = re.compile(r"\r\n|\r|\n")


class AssemblyInfoFile:
    """An AssemblyInfo file on disk.

    Attributes:
        file_name: Path of the file.
        temp_file_name: Sibling path the new content is written to before the swap.
        lines: Lines of the file, without line terminators.
        newline: Line terminator used by the file.
        has_bom: True if the file starts with a UTF-8 byte order mark.

    Methods:
        load: Read the file.
        save: Write new lines and swap them into place.

    """

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        self.temp_file_name = f"{file_name}{TEMP_FILENAME_EXTENSION}"
        self.lines: list[str] = []
        self.newline = os.linesep
        self.has_bom = False

    def load(self) -> list[str]:
        """Read the file, remembering its byte order mark and newline convention.

        Returns:
            list[str]: Lines of the file.

        Raises:
            OSError: The file cannot be read.
            UnicodeDecodeError: The file is not UTF-8 encoded.

        """
        with open(self.file_name, "rb") as f:
            raw = f.read()
        self.has_bom = raw.startswith(codecs.BOM_UTF8)
        text = raw.decode("utf-8-sig")
        if "\r\n" in text:
            self.newline = "\r\n"
        elif "\n" in text:
            self.newline = "\n"
        elif "\r" in text:
            self.newline = "\r"
        self.lines = _re_line_break.split(text)
        if self.lines[-1] == "":
            self.lines.pop()
        return self.lines

    def save(self, lines: Iterable[str]) -> None:
        """Write lines to the temporary file and replace the original with it.

        A read-only original is made writable for the swap; the replacement
        gets the original's permission bits, read-only included.

        Args:
            lines: Lines to write, without line terminators.

        Raises:
            OSError: Writing, deleting or renaming failed.

        """
        encoding = "utf-8-sig" if self.has_bom else "utf-8"
        with open(self.temp_file_name, "w", encoding=encoding, newline="") as f:
            f.writelines(f"{line}{self.newline}" for line in lines)

        mode = stat.S_IMODE(os.stat(self.file_name).st_mode)
        read_only = not mode & stat.S_IWRITE
        if read_only:
            os.chmod(self.file_name, mode | stat.S_IWRITE)
        os.remove(self.file_name)
        os.rename(self.temp_file_name, self.file_name)
        os.chmod(self.file_name, mode)
