"""Fixtures for assemblyinfoutil tests"""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import datetime
from collections.abc import Callable
from pathlib import Path

import pytest

CS_ASSEMBLY_INFO = """\
using System.Reflection;
using System.Runtime.InteropServices;

// General Information about an assembly is controlled through the following
// [assembly: AssemblyVersion("9.9.9.9")]
[assembly: AssemblyTitle ( "AssemblyInfoUtil" )]
[assembly: AssemblyCopyright ( "Copyright 2010-2022, David A. Gray" )]
[assembly: ComVisible ( false )]
[assembly: AssemblyVersion ( "3.2.0.0" )]
[assembly: AssemblyFileVersion ( "3.2.1.14" )]
"""

VB_ASSEMBLY_INFO = """\
Imports System.Reflection

' [assembly: AssemblyVersion("9.9.9.9")]
<Assembly: AssemblyTitle("WizardWrx")>
<Assembly: AssemblyCopyright("Copyright 2014-2021, David A. Gray")>
<Assembly: AssemblyVersion("1.0.*")>
<Assembly: AssemblyFileVersion("1.0.7.0")>
<Assembly: AssemblyInformationalVersion("1.0.6")>
"""


def write_file(path: Path, content: str) -> str:
    path.write_text(content, encoding="utf-8", newline="")
    return str(path)


@pytest.fixture
def cs_file(tmp_path: Path) -> str:
    """AssemblyInfo.cs without an informational version, two levels deep"""
    properties = tmp_path / "project" / "Properties"
    properties.mkdir(parents=True)
    return write_file(properties / "AssemblyInfo.cs", CS_ASSEMBLY_INFO)


@pytest.fixture
def vb_file(tmp_path: Path) -> str:
    """AssemblyInfo.vb with an informational version"""
    my_project = tmp_path / "project" / "My Project"
    my_project.mkdir(parents=True)
    return write_file(my_project / "AssemblyInfo.vb", VB_ASSEMBLY_INFO)


@pytest.fixture
def clock_2023() -> Callable[[], datetime.date]:
    """Clock that always returns a day in 2023"""
    return lambda: datetime.date(2023, 6, 1)
