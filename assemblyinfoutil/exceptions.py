"""Exceptions raised by assemblyinfoutil."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from assemblyinfoutil.exit_code import ExitCode


class AssemblyInfoError(Exception):
    """Base class for all errors raised by assemblyinfoutil."""


class ParameterError(AssemblyInfoError):
    """Invalid command line configuration, detected before any file is touched.

    Attributes:
        exit_code: Exit code the process should terminate with.
    """

    def __init__(self, message: str, exit_code: ExitCode) -> None:
        super().__init__(message)
        self.exit_code = exit_code
