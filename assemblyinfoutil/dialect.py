"""Attribute syntax of the two supported source languages."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class AttributeSyntax:
    """Fixed attribute prefixes and comment marker of one dialect.

    Attributes:
        assembly_version: Prefix of the AssemblyVersion attribute.
        file_version: Prefix of the AssemblyFileVersion attribute.
        informational_version: Prefix of the AssemblyInformationalVersion attribute.
        copyright: Prefix of the AssemblyCopyright attribute.
        line_comment: Marker that starts a comment line.
        informational_version_template: Complete line for a synthesized informational version.
    """

    assembly_version: str
    file_version: str
    informational_version: str
    copyright: str
    line_comment: str
    informational_version_template: str

    def informational_version_line(self, semantic_version: str) -> str:
        """Return a complete AssemblyInformationalVersion line for the given version."""
        return self.informational_version_template.format(version=semantic_version)


class Dialect(Enum):
    """Source language of an AssemblyInfo file."""

    CSHARP = "cs"
    VISUAL_BASIC = "vb"

    @classmethod
    def from_path(cls, file_name: str | os.PathLike[str]) -> Dialect:
        """Select the dialect by file extension; anything but .vb is C#.

        Args:
            file_name: Path of the AssemblyInfo file.

        Returns:
            Dialect: Dialect of the file.

        """
        _, extension = os.path.splitext(os.fspath(file_name))
        if extension.lower() == ".vb":
            return cls.VISUAL_BASIC
        return cls.CSHARP

    @property
    def syntax(self) -> AttributeSyntax:
        """Return the attribute syntax of this dialect."""
        return _SYNTAX[self]


_SYNTAX: dict[Dialect, AttributeSyntax] = {
    Dialect.CSHARP: AttributeSyntax(
        assembly_version="[assembly: AssemblyVersion",
        file_version="[assembly: AssemblyFileVersion",
        informational_version="[assembly: AssemblyInformationalVersion",
        copyright="[assembly: AssemblyCopyright",
        line_comment="//",
        informational_version_template='[assembly: AssemblyInformationalVersion ( "{version}" )]',
    ),
    Dialect.VISUAL_BASIC: AttributeSyntax(
        assembly_version="<Assembly: AssemblyVersion",
        file_version="<Assembly: AssemblyFileVersion",
        informational_version="<Assembly: AssemblyInformationalVersion",
        copyright="<Assembly: AssemblyCopyright",
        line_comment="'",
        informational_version_template='<Assembly: AssemblyInformationalVersion ( "{version}" )>',
    ),
}
