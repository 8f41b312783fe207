"""Command line entry point of assemblyinfoutil."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import argparse
import datetime
import logging
import os
import sys
import traceback
from typing import TYPE_CHECKING

from assemblyinfoutil import __app_name__, __version__, messages
from assemblyinfoutil.assembly_info import rewrite_lines
from assemblyinfoutil.assembly_info_file import AssemblyInfoFile
from assemblyinfoutil.dialect import Dialect
from assemblyinfoutil.exceptions import ParameterError
from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.messages import translate
from assemblyinfoutil.modification import has_modified_files
from assemblyinfoutil.run_config import RunConfig

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

log = logging.getLogger("assemblyinfoutil")

# switches of the original Windows tool, e.g. "-inc:3" or "-onlywhenmodified"
LEGACY_VALUE_SWITCHES = {"-inc:": "--inc", "-set:": "--set"}
LEGACY_FLAG_SWITCHES = {
    "-av": "--av",
    "-fv": "--fv",
    "-cy": "--cy",
    "-stop": "--stop",
    "-onlywhenmodified": "--only-when-modified",
}


def normalize_legacy_args(argv: Sequence[str]) -> list[str]:
    """Translate legacy "-switch:value" arguments into argparse options.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        list[str]: Arguments argparse understands.

    """
    normalized = []
    for arg in argv:
        lower = arg.lower()
        for switch, option in LEGACY_VALUE_SWITCHES.items():
            if lower.startswith(switch):
                normalized.append(f"{option}={arg[len(switch) :]}")
                break
        else:
            normalized.append(LEGACY_FLAG_SWITCHES.get(lower, arg))
    return normalized


def create_args_parser() -> argparse.ArgumentParser:
    """Create the parser for all command line options."""
    args_parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Update the version attributes and copyright year of an AssemblyInfo.cs or AssemblyInfo.vb file.",
    )
    RunConfig.create_args(args_parser)
    group = args_parser.add_argument_group("Transcript Options")
    group.add_argument(
        "--language",
        metavar="LANGUAGE",
        type=str,
        default="",
        help="Language of the transcript (default: english).",
    )
    group.add_argument(
        "--localedir",
        metavar="DIR",
        type=str,
        help="The directory where the translation files can be found (default: the system's locale directory).",
    )
    group.add_argument("--verbose", dest="verbose", action="store_true", help="Verbose logging.")
    group.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return args_parser


def startup_banner(started: datetime.datetime) -> str:
    """Return the banner printed when the program starts.

    Args:
        started: UTC start time.

    """
    major, minor = (int(part) for part in __version__.split(".")[:2])
    return translate(messages.START) % (
        __app_name__,
        major,
        minor,
        started.astimezone().strftime("%Y-%m-%d %H:%M:%S"),
        started.strftime("%Y-%m-%d %H:%M:%S"),
    )


def shutdown_banner(started: datetime.datetime, stopped: datetime.datetime) -> str:
    """Return the banner printed when the program stops.

    Args:
        started: UTC start time.
        stopped: UTC stop time.

    """
    return translate(messages.STOP) % (
        __app_name__,
        stopped.astimezone().strftime("%Y-%m-%d %H:%M:%S"),
        stopped.strftime("%Y-%m-%d %H:%M:%S"),
        stopped - started,
    )


def process(config: RunConfig, clock: Callable[[], datetime.date] = datetime.date.today) -> ExitCode:
    """Rewrite the AssemblyInfo file named by config.

    Args:
        config: Settings of the run.
        clock: Returns today's date; used for the copyright year.

    Returns:
        ExitCode: SUCCESS, or the code of a per-line error.

    Raises:
        OSError: Reading or replacing the file failed.

    """
    if config.only_when_modified and not has_modified_files(config.file_name):
        log.info(translate(messages.SOURCE_UNCHANGED), os.path.basename(config.file_name))
        return ExitCode.SUCCESS

    info_file = AssemblyInfoFile(config.file_name)
    dialect = Dialect.from_path(config.file_name)
    log.debug("Treating %s as %s source", config.file_name, dialect.name)
    result = rewrite_lines(info_file.load(), dialect, config, clock)
    info_file.save(result.lines)
    return result.exit_code


def report_runtime_error(e: Exception) -> None:
    """Write the diagnostics of an unexpected exception to the transcript."""
    tb = e.__traceback__
    target_site = source = "unknown"
    if tb is not None:
        while tb.tb_next is not None:
            tb = tb.tb_next
        target_site = f"{tb.tb_frame.f_code.co_name} ({tb.tb_frame.f_code.co_filename}:{tb.tb_lineno})"
        source = tb.tb_frame.f_globals.get("__name__", source)
    stack = "".join(traceback.format_tb(e.__traceback__))
    log.error(
        translate(messages.ERR_RUNTIME),
        f"{type(e).__module__}.{type(e).__qualname__}",
        str(e),
        target_site,
        source,
        stack,
    )


def main(argv: Sequence[str] | None = None, clock: Callable[[], datetime.date] = datetime.date.today) -> int:
    """Handle command line arguments, rewrite the file and return the exit code.

    Args:
        argv: Command line arguments without the program name; defaults to sys.argv[1:].
        clock: Returns today's date; used for the copyright year.

    Returns:
        int: Process exit code.

    """
    started = datetime.datetime.now(datetime.timezone.utc)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.INFO)

    try:
        args_parser = create_args_parser()
        args = args_parser.parse_args(normalize_legacy_args(sys.argv[1:] if argv is None else argv))
        if args.verbose:
            log.setLevel(logging.DEBUG)
        messages.set_language(args.language, args.localedir)

        log.info(startup_banner(started))
        exit_code = ExitCode.SUCCESS
        try:
            config = RunConfig.from_args(args)
        except ParameterError as e:
            log.error(str(e))
            log.info(args_parser.format_help())
            exit_code = e.exit_code
        else:
            config.report()
            try:
                exit_code = process(config, clock)
            except Exception as e:  # pylint: disable=broad-except
                report_runtime_error(e)
                exit_code = ExitCode.RUNTIME
            log.info(translate(messages.PROCESSING_DONE))

        log.info(shutdown_banner(started, datetime.datetime.now(datetime.timezone.utc)))
        if args.stop_when_done:
            print(translate(messages.AWAIT_CARBON_UNIT), file=sys.stderr)
            try:
                input()
            except EOFError:
                pass
        return int(exit_code)
    finally:
        log.removeHandler(handler)


def run() -> None:
    """Run main() and exit with its exit code."""
    sys.exit(main())


if __name__ == "__main__":
    run()
