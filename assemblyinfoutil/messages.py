"""Transcript messages, looked up through gettext."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import gettext
import locale
import logging

log = logging.getLogger("assemblyinfoutil")

_translation: gettext.NullTranslations = gettext.NullTranslations()

# logging style format strings; arguments are passed to the logger lazily
START = "%s, version %d.%d, %s (%s UTC)"
STOP = "%s Done, %s (%s UTC)\nRunning time = %s"
AWAIT_CARBON_UNIT = "Please press Return to fully stop the program."

PROCESSING_BEGIN = "Processing %s:"
PROCESSING_DONE = "    Done!"
UPDATING_ASMVER_AND_ASMFVER = "    Updating both AssemblyVersion and AssemblyFileVersion"
UPDATING_ASMVER = "    Updating AssemblyVersion"
UPDATING_ASMFVER = "    Updating AssemblyFileVersion"
UPDATING_COPYRIGHT_YEAR = "    Updating the Copyright year if needed"
SET_OVERRIDES_INCREMENT = "    Both a new version (%s) and an increment position (%d) were given; the increment is ignored"
SOURCE_UNCHANGED = "Since the project is unchanged, %s remains unchanged and unexamined."

NO_FILENAME = "Error: You must specify the name of the file to process."
FILE_NOT_FOUND = "Error: Can not find file %s"
INCREMENT_MUST_BE_NUMERIC = "Error: Increment value must be numeric.\n       Specified value = %s"
INCREMENT_OUT_OF_RANGE = "Error: Increment value must be between %d and %d.\n       Specified value = %d"

VERSION_CHANGE = "Version Changed: Old Value = %s\n                 New Value = %s"
VERSION_UNCHANGED = "Version Unchanged: Current Value = %s"
VERSION_VALUE_NOT_FOUND = "Version value is not enclosed in quotes: %s"
INVALID_VERSION_SUBSTRING = "Error: The version substring at position %d is invalid.\n       Version substring = %s"
VERSION_STRING_PARTS_COUNT = (
    "The format of the version string %s is invalid.\n"
    "    The expected number of version substrings is %d.\n"
    "    The actual number of substrings is %d."
)

COPYRIGHT_YEAR_CHANGE = "Copyright Year Changed: Old Value = %s\n                        New Value = %s"
COPYRIGHT_YEAR_UNCHANGED = "Copyright Year Unchanged: Current Value = %s"
COPYRIGHT_YEAR_IS_SINGLE_YEAR = "The copyright year is a single year: %s"
COPYRIGHT_YEAR_UNRECOGNIZED = "The copyright year range is not in a recognized format: %s"

INFORMATIONAL_VERSION_ADDED = "AssemblyInformationalVersion added: %s"
INFORMATIONAL_VERSION_UPDATED = "AssemblyInformationalVersion updated: %s"

ERR_RUNTIME = (
    "An %s exception arose.\n"
    "    Message   : %s\n"
    "    TargetSite: %s\n"
    "    Source    : %s\n"
    "    StackTrace:\n%s"
)


def set_language(language: str | None, localedir: str | None) -> None:
    """Set the language of the transcript.

    Args:
        language: language code, e.g. "de_DE"
        localedir: directory for locale files

    """
    global _translation  # pylint: disable=global-statement

    if language:
        try:
            locale.setlocale(locale.LC_ALL, f"{language}.utf8")
        except locale.Error as e:
            log.warning("Unable to set the locale to %s (%s)", language, str(e))
            language = None

    # Fall-back to NullTranslations, if the specified language translation cannot be found.
    if language:
        _translation = gettext.translation("assemblyinfoutil", localedir=localedir, languages=[language], fallback=True)
        if len(_translation.info()) == 0:
            log.warning(
                "Unable to load translations for %s from %s; falling back to the default translation.",
                language,
                localedir if localedir else "the system's default locale directory",
            )
    else:
        _translation = gettext.NullTranslations()


def translate(s: str) -> str:
    """Translate a string.

    Args:
        s: string to be translated.

    Returns:
        str: translated string.

    """
    return _translation.gettext(s)
