"""Decide whether a project changed since its AssemblyInfo file was written."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import os
import stat
from pathlib import Path


def is_modified(file_path: Path, reference_mtime: float) -> bool:
    """Check whether a file has its Archive flag set or is newer than reference_mtime.

    Args:
        file_path: File to check.
        reference_mtime: Modification time to compare against.

    Returns:
        bool: True if the file counts as modified.

    """
    st = file_path.stat()
    # st_file_attributes only exists on Windows
    if getattr(st, "st_file_attributes", 0) & stat.FILE_ATTRIBUTE_ARCHIVE:
        return True
    return st.st_mtime > reference_mtime


def has_modified_files(file_name: str | os.PathLike[str]) -> bool:
    """Check the directory of file_name and its parent for modified files.

    Only the top level of both directories is scanned; grandparents and
    subdirectories are never considered.

    Args:
        file_name: The AssemblyInfo file.

    Returns:
        bool: True as soon as one modified file is found.

    """
    target = Path(file_name).resolve()
    reference_mtime = target.stat().st_mtime
    directories = list(dict.fromkeys([target.parent, target.parent.parent]))
    for directory in directories:
        for file in directory.iterdir():
            if file.is_file() and is_modified(file, reference_mtime):
                return True
    return False
