"""Tests for rewrite_attribute"""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import logging

import pytest

from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.line_rewriter import LineEdit, rewrite_attribute
from assemblyinfoutil.run_config import RunConfig

CS_FILE_VERSION = "[assembly: AssemblyFileVersion"
CS_VERSION = "[assembly: AssemblyVersion"
VB_VERSION = "<Assembly: AssemblyVersion"


def test_set_version() -> None:
    """Test replacing the whole version string"""
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="2.1.0.7")
    edit = rewrite_attribute('[assembly: AssemblyFileVersion("1.0.0.0")]', CS_FILE_VERSION, config)
    assert edit.line == '[assembly: AssemblyFileVersion("2.1.0.7")]'
    assert edit.changed
    assert edit.new_value == "2.1.0.7"
    assert edit.error is None


def test_set_version_keeps_surrounding_text() -> None:
    """Test that white space and trailing comments survive"""
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="4.0.0.0")
    edit = rewrite_attribute('  [assembly: AssemblyVersion ( "3.2.0.0" )] // bumped by CI', CS_VERSION, config)
    assert edit.line == '  [assembly: AssemblyVersion ( "4.0.0.0" )] // bumped by CI'


def test_increment() -> None:
    """Test incrementing a single component"""
    config = RunConfig(file_name="AssemblyInfo.cs", increment_position=4)
    edit = rewrite_attribute('[assembly: AssemblyVersion ( "3.2.0.0" )]', CS_VERSION, config)
    assert edit == LineEdit('[assembly: AssemblyVersion ( "3.2.0.1" )]', changed=True, new_value="3.2.0.1")


def test_set_version_wins_over_increment() -> None:
    """Test that a literal version takes precedence over an increment"""
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="2.0.0.0", increment_position=1)
    edit = rewrite_attribute('[assembly: AssemblyVersion("1.0.0.0")]', CS_VERSION, config)
    assert edit.line == '[assembly: AssemblyVersion("2.0.0.0")]'


def test_missing_attribute_is_unchanged() -> None:
    """Test a line without the attribute"""
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="2.1.0.7")
    line = '[assembly: AssemblyTitle("AssemblyInfoUtil")]'
    assert rewrite_attribute(line, CS_VERSION, config) == LineEdit(line)


def test_wildcard_is_skipped_without_error() -> None:
    """Test that wildcards and missing positions are skipped, not errors"""
    line = '<Assembly: AssemblyVersion("1.0.*")>'
    for position in (3, 4):
        config = RunConfig(file_name="AssemblyInfo.vb", increment_position=position)
        edit = rewrite_attribute(line, VB_VERSION, config)
        assert edit == LineEdit(line)
        assert edit.error is None


def test_non_numeric_component_is_an_error(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a non-numeric component is reported and skipped"""
    line = '[assembly: AssemblyVersion("1.0.beta.0")]'
    config = RunConfig(file_name="AssemblyInfo.cs", increment_position=3)
    with caplog.at_level(logging.INFO, logger="assemblyinfoutil"):
        edit = rewrite_attribute(line, CS_VERSION, config)
    assert edit.line == line
    assert not edit.changed
    assert edit.error is ExitCode.INVALID_VERSION_SUBSTRING
    assert "The version substring at position 3 is invalid" in caplog.text


def test_no_strategy_is_unchanged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that nothing happens without a set version or increment"""
    line = '[assembly: AssemblyVersion("1.0.0.0")]'
    with caplog.at_level(logging.INFO, logger="assemblyinfoutil"):
        edit = rewrite_attribute(line, CS_VERSION, RunConfig(file_name="AssemblyInfo.cs"))
    assert edit == LineEdit(line)
    assert "Version Unchanged" in caplog.text


def test_unquoted_value_is_unchanged() -> None:
    """Test that a value without quotes is left alone"""
    line = "[assembly: AssemblyVersion(ThisAssembly.Version)]"
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="2.1.0.7")
    assert rewrite_attribute(line, CS_VERSION, config) == LineEdit(line)


def test_change_is_reported(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the old and new line are written to the transcript"""
    config = RunConfig(file_name="AssemblyInfo.cs", set_version="2.1.0.7")
    with caplog.at_level(logging.INFO, logger="assemblyinfoutil"):
        rewrite_attribute('[assembly: AssemblyFileVersion("1.0.0.0")]', CS_FILE_VERSION, config)
    assert 'Old Value = [assembly: AssemblyFileVersion("1.0.0.0")]' in caplog.text
    assert 'New Value = [assembly: AssemblyFileVersion("2.1.0.7")]' in caplog.text
