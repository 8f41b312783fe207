"""Rewrite all lines of an AssemblyInfo file in a single pass."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from assemblyinfoutil import messages
from assemblyinfoutil.copyright_year import fix_copyright_year
from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.line_rewriter import LineEdit, rewrite_attribute
from assemblyinfoutil.messages import translate
from assemblyinfoutil.version_string import semantic_version

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from assemblyinfoutil.dialect import AttributeSyntax, Dialect
    from assemblyinfoutil.run_config import RunConfig

log = logging.getLogger("assemblyinfoutil")


@dataclass
class RewriteResult:
    """Outcome of rewriting an AssemblyInfo file.

    Attributes:
        lines: The output lines, possibly with an informational version appended.
        file_version: The new AssemblyFileVersion value, if it was changed.
        informational_version_index: Index of the existing AssemblyInformationalVersion line, if any.
        exit_code: SUCCESS, or the code of the last per-line error.
    """

    lines: list[str]
    file_version: str | None = None
    informational_version_index: int | None = None
    exit_code: ExitCode = ExitCode.SUCCESS


def is_comment(line: str, syntax: AttributeSyntax) -> bool:
    """Return True if line is a comment in the given dialect."""
    return line.lstrip().startswith(syntax.line_comment)


def rewrite_lines(
    lines: Sequence[str],
    dialect: Dialect,
    config: RunConfig,
    clock: Callable[[], datetime.date] = datetime.date.today,
) -> RewriteResult:
    """Rewrite the version attributes of an AssemblyInfo file.

    Each line is offered to the AssemblyVersion rewrite first and, if that
    left it unchanged, to the AssemblyFileVersion rewrite. Comment lines are
    passed through untouched. Afterwards the informational version is derived
    from the new file version.

    Args:
        lines: Lines of the file, without line terminators.
        dialect: Dialect of the file.
        config: Settings of the run.
        clock: Returns today's date; used for the copyright year.

    Returns:
        RewriteResult: The rewritten lines and what was found on the way.

    """
    syntax = dialect.syntax
    current_year = clock().year
    result = RewriteResult(lines=[])

    for index, line in enumerate(lines):
        if not line or is_comment(line, syntax):
            result.lines.append(line)
            continue

        edit = LineEdit(line)
        if config.fix_assembly_version:
            edit = _rewrite(line, syntax.assembly_version, config, result)
        if not edit.changed and config.fix_file_version:
            edit = _rewrite(line, syntax.file_version, config, result)
            if edit.changed:
                result.file_version = edit.new_value
        if (
            not edit.changed
            and result.informational_version_index is None
            and line.lstrip().startswith(syntax.informational_version)
        ):
            result.informational_version_index = index

        new_line = edit.line
        if config.fix_copyright_year:
            new_line = fix_copyright_year(new_line, current_year)
        result.lines.append(new_line)

    reconcile_informational_version(result, syntax)
    return result


def _rewrite(line: str, prefix: str, config: RunConfig, result: RewriteResult) -> LineEdit:
    edit = rewrite_attribute(line, prefix, config)
    if edit.error is not None:
        result.exit_code = edit.error
    return edit


def reconcile_informational_version(result: RewriteResult, syntax: AttributeSyntax) -> None:
    """Update or append the AssemblyInformationalVersion line from the new file version.

    Nothing happens unless the file version changed during the pass. An
    existing informational version line is overwritten in place, otherwise a
    new line is appended, so there is never more than one.

    Args:
        result: Result of the line pass; its lines are modified in place.
        syntax: Attribute syntax of the file's dialect.

    """
    if not result.file_version:
        return
    version = semantic_version(result.file_version)
    if version is None:
        return

    new_line = syntax.informational_version_line(version)
    if result.informational_version_index is not None:
        result.lines[result.informational_version_index] = new_line
        log.info(translate(messages.INFORMATIONAL_VERSION_UPDATED), new_line)
    else:
        result.lines.append(new_line)
        log.info(translate(messages.INFORMATIONAL_VERSION_ADDED), new_line)
