"""Process exit codes"""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes reported to the calling build step."""

    SUCCESS = 0
    RUNTIME = 1
    NO_FILENAME = 2
    FILE_NOT_FOUND = 3
    INCREMENT_MUST_BE_NUMERIC = 4
    INCREMENT_OUT_OF_RANGE = 5
    INVALID_VERSION_SUBSTRING = 6
