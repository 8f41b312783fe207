"""Locate an attribute on a line and rewrite its quoted version value."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import logging
from dataclasses import dataclass

from assemblyinfoutil import messages
from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.messages import translate
from assemblyinfoutil.run_config import RunConfig
from assemblyinfoutil.utils import find_quoted_span, splice
from assemblyinfoutil.version_string import IncrementOutcome, increment_component

log = logging.getLogger("assemblyinfoutil")


@dataclass(frozen=True)
class LineEdit:
    """Outcome of rewriting one attribute on one line.

    Attributes:
        line: The resulting line.
        changed: True if the version value was replaced.
        new_value: The new version value, if changed.
        error: Exit code of a per-line error, if any.
    """

    line: str
    changed: bool = False
    new_value: str | None = None
    error: ExitCode | None = None


def rewrite_attribute(line: str, prefix: str, config: RunConfig) -> LineEdit:
    """Rewrite the quoted version value of the attribute starting with prefix.

    The value is the text between the first pair of double quotes after the
    prefix. With an increment position only that component is bumped,
    otherwise a literal set version replaces the whole value. Malformed values
    are reported and left alone, nothing is raised.

    Args:
        line: Line of the AssemblyInfo file.
        prefix: Attribute prefix, e.g. "[assembly: AssemblyFileVersion".
        config: Settings of the run.

    Returns:
        LineEdit: The rewritten line, or the original one if nothing changed.

    """
    pos_prefix = line.find(prefix)
    if pos_prefix < 0:
        return LineEdit(line)

    span = find_quoted_span(line, pos_prefix + len(prefix))
    if span is None:
        log.info(translate(messages.VERSION_VALUE_NOT_FOUND), line)
        return LineEdit(line)
    old_value = line[span[0] : span[1]]

    new_value: str | None = None
    if config.increments and config.increment_position is not None:
        result = increment_component(old_value, config.increment_position)
        if result.outcome is IncrementOutcome.INVALID:
            log.error(translate(messages.INVALID_VERSION_SUBSTRING), config.increment_position, result.component)
            log.info(translate(messages.VERSION_UNCHANGED), line)
            return LineEdit(line, error=ExitCode.INVALID_VERSION_SUBSTRING)
        if result.incremented:
            new_value = result.version
    elif config.set_version is not None:
        # counts as a change even when equal, so the informational version is reconciled
        new_value = config.set_version

    if new_value is None:
        log.info(translate(messages.VERSION_UNCHANGED), line)
        return LineEdit(line)

    new_line = splice(line, span, new_value)
    log.info(translate(messages.VERSION_CHANGE), line, new_line)
    return LineEdit(new_line, changed=True, new_value=new_value)
