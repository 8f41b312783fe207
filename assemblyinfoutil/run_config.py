"""Settings of a single run, built once from the command line."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass

from assemblyinfoutil import messages
from assemblyinfoutil.exceptions import ParameterError
from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.messages import translate
from assemblyinfoutil.utils import parse_integer
from assemblyinfoutil.version_string import MAX_POSITION, MIN_POSITION

log = logging.getLogger("assemblyinfoutil")


@dataclass(frozen=True)
class RunConfig:
    """Settings of a single run.

    At most one version strategy is active: a literal set_version wins over
    increment_position.

    Attributes:
        file_name: AssemblyInfo file to rewrite.
        fix_assembly_version: Update the AssemblyVersion attribute.
        fix_file_version: Update the AssemblyFileVersion attribute.
        fix_copyright_year: Bump the end of the copyright year range.
        set_version: Literal replacement for the whole version string.
        increment_position: 1-based position of the component to increment.
        only_when_modified: Skip the run unless nearby files were modified.
        stop_when_done: Wait for the Return key before exiting.
    """

    file_name: str
    fix_assembly_version: bool = True
    fix_file_version: bool = True
    fix_copyright_year: bool = False
    set_version: str | None = None
    increment_position: int | None = None
    only_when_modified: bool = False
    stop_when_done: bool = False

    @property
    def increments(self) -> bool:
        """Return True if a single component is incremented instead of replacing the version."""
        return self.set_version is None and self.increment_position is not None

    @staticmethod
    def create_args(args_parser: argparse.ArgumentParser) -> None:
        """Add arguments to the parser.

        Args:
            args_parser: ArgumentParser

        """
        args_parser.add_argument(
            "file_name",
            metavar="FILE",
            nargs="?",
            help="Path of the AssemblyInfo.cs or AssemblyInfo.vb file to update.",
        )
        group = args_parser.add_argument_group("Version Options")
        group.add_argument(
            "--set",
            dest="set_version",
            metavar="VERSION",
            type=str,
            help="Set a new version number (in NN.NN.NN.NN format).",
        )
        group.add_argument(
            "--inc",
            dest="increment_position",
            metavar="INDEX",
            type=str,
            help=f"Increase the version part with the given index (from {MIN_POSITION} to {MAX_POSITION}).",
        )
        group.add_argument(
            "--av",
            dest="fix_assembly_version",
            action="store_true",
            help="Set the AssemblyVersion, leaving AssemblyFileVersion as is.",
        )
        group.add_argument(
            "--fv",
            dest="fix_file_version",
            action="store_true",
            help="Set the AssemblyFileVersion, leaving AssemblyVersion as is.",
        )
        group = args_parser.add_argument_group("Other Options")
        group.add_argument(
            "--cy",
            dest="fix_copyright_year",
            action="store_true",
            help="Update the copyright year when hyphenated.",
        )
        group.add_argument(
            "--only-when-modified",
            dest="only_when_modified",
            action="store_true",
            help="Do nothing unless at least one file is newer than the AssemblyInfo file or has its Archive flag set.",
        )
        group.add_argument(
            "--stop",
            dest="stop_when_done",
            action="store_true",
            help="Stop and await RETURN key when done.",
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> RunConfig:
        """Build the run configuration from parsed arguments and validate it.

        Args:
            args: Namespace

        Returns:
            RunConfig: The validated configuration.

        Raises:
            ParameterError: The file name is missing or does not exist, or the
                increment index is not a number between 1 and 4.

        """
        increment_position = None
        if args.increment_position is not None:
            increment_position = parse_integer(args.increment_position)
            if increment_position is None:
                raise ParameterError(
                    translate(messages.INCREMENT_MUST_BE_NUMERIC) % f'"{args.increment_position}"',
                    ExitCode.INCREMENT_MUST_BE_NUMERIC,
                )
            if increment_position < MIN_POSITION or increment_position > MAX_POSITION:
                raise ParameterError(
                    translate(messages.INCREMENT_OUT_OF_RANGE) % (MIN_POSITION, MAX_POSITION, increment_position),
                    ExitCode.INCREMENT_OUT_OF_RANGE,
                )

        if not args.file_name:
            raise ParameterError(translate(messages.NO_FILENAME), ExitCode.NO_FILENAME)
        if not os.path.isfile(args.file_name):
            raise ParameterError(
                translate(messages.FILE_NOT_FOUND) % f'"{args.file_name}"',
                ExitCode.FILE_NOT_FOUND,
            )

        if args.set_version is not None and increment_position is not None:
            log.warning(translate(messages.SET_OVERRIDES_INCREMENT), args.set_version, increment_position)
            increment_position = None

        # fix both if neither is specified
        fix_both = not args.fix_assembly_version and not args.fix_file_version
        return cls(
            file_name=args.file_name,
            fix_assembly_version=fix_both or args.fix_assembly_version,
            fix_file_version=fix_both or args.fix_file_version,
            fix_copyright_year=args.fix_copyright_year,
            set_version=args.set_version,
            increment_position=increment_position,
            only_when_modified=args.only_when_modified,
            stop_when_done=args.stop_when_done,
        )

    def report(self) -> None:
        """Write the settings of this run to the transcript."""
        log.info(translate(messages.PROCESSING_BEGIN), f'"{self.file_name}"')
        if self.fix_assembly_version and self.fix_file_version:
            log.info(translate(messages.UPDATING_ASMVER_AND_ASMFVER))
        elif self.fix_assembly_version:
            log.info(translate(messages.UPDATING_ASMVER))
        else:
            log.info(translate(messages.UPDATING_ASMFVER))
        if self.fix_copyright_year:
            log.info(translate(messages.UPDATING_COPYRIGHT_YEAR))
