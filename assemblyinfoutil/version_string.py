"""Dot-delimited version strings such as 1.2.*.4"""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from assemblyinfoutil import messages
from assemblyinfoutil.messages import translate
from assemblyinfoutil.utils import parse_integer

log = logging.getLogger("assemblyinfoutil")

DELIMITER = "."
WILDCARD = "*"
FULL_VERSION_COMPONENTS = 4
SEMANTIC_VERSION_COMPONENTS = 3
MIN_POSITION = 1
MAX_POSITION = FULL_VERSION_COMPONENTS


class IncrementOutcome(Enum):
    """What happened when incrementing a version component."""

    INCREMENTED = "incremented"
    SKIPPED = "skipped"
    INVALID = "invalid"


@dataclass(frozen=True)
class IncrementResult:
    """Result of increment_component.

    Attributes:
        outcome: Whether the component was incremented, skipped or invalid.
        version: The new version string, or the old one unless incremented.
        component: The component found at the requested position, if any.
    """

    outcome: IncrementOutcome
    version: str
    component: str | None = None

    @property
    def incremented(self) -> bool:
        """Return True if the version string changed."""
        return self.outcome is IncrementOutcome.INCREMENTED


def increment_component(version: str, position: int) -> IncrementResult:
    """Increment the component at a 1-based position of a version string.

    Positions past the last component and wildcard components are skipped.
    A component that is not an integer makes the result INVALID.

    Args:
        version: Version string, e.g. "1.0.3.0".
        position: 1-based position of the component to increment.

    Returns:
        IncrementResult: Outcome and resulting version string.

    """
    components = version.split(DELIMITER)
    if position < MIN_POSITION or position > len(components):
        return IncrementResult(IncrementOutcome.SKIPPED, version)

    component = components[position - 1]
    if component == WILDCARD:
        return IncrementResult(IncrementOutcome.SKIPPED, version, component)

    value = parse_integer(component)
    if value is None:
        return IncrementResult(IncrementOutcome.INVALID, version, component)

    components[position - 1] = str(value + 1)
    return IncrementResult(IncrementOutcome.INCREMENTED, DELIMITER.join(components), component)


def semantic_version(file_version: str) -> str | None:
    """Return the first three components of a four component version string.

    Args:
        file_version: Version string with exactly four components.

    Returns:
        Optional[str]: Semantic version, or None if file_version is blank or malformed.

    """
    if not file_version or file_version.isspace():
        return None
    components = file_version.split(DELIMITER)
    if len(components) != FULL_VERSION_COMPONENTS:
        log.error(
            translate(messages.VERSION_STRING_PARTS_COUNT),
            file_version,
            FULL_VERSION_COMPONENTS,
            len(components),
        )
        return None
    return DELIMITER.join(components[:SEMANTIC_VERSION_COMPONENTS])
