"""Tests for RunConfig"""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

import argparse
import logging
from pathlib import Path

import pytest

from assemblyinfoutil.exceptions import ParameterError
from assemblyinfoutil.exit_code import ExitCode
from assemblyinfoutil.run_config import RunConfig


def config_from(argv: list[str]) -> RunConfig:
    args_parser = argparse.ArgumentParser()
    RunConfig.create_args(args_parser)
    return RunConfig.from_args(args_parser.parse_args(argv))


def test_defaults(cs_file: str) -> None:
    """Test that both versions are fixed when neither is selected"""
    config = config_from([cs_file])
    assert config.file_name == cs_file
    assert config.fix_assembly_version
    assert config.fix_file_version
    assert not config.fix_copyright_year
    assert config.set_version is None
    assert config.increment_position is None
    assert not config.increments
    assert not config.only_when_modified
    assert not config.stop_when_done


def test_select_single_version(cs_file: str) -> None:
    """Test restricting the update to one of the versions"""
    config = config_from([cs_file, "--av"])
    assert config.fix_assembly_version
    assert not config.fix_file_version

    config = config_from([cs_file, "--fv"])
    assert not config.fix_assembly_version
    assert config.fix_file_version

    config = config_from([cs_file, "--av", "--fv"])
    assert config.fix_assembly_version
    assert config.fix_file_version


def test_flags(cs_file: str) -> None:
    """Test the remaining switches"""
    config = config_from([cs_file, "--cy", "--only-when-modified", "--stop", "--inc", "2"])
    assert config.fix_copyright_year
    assert config.only_when_modified
    assert config.stop_when_done
    assert config.increment_position == 2
    assert config.increments


def test_set_version_wins_over_increment(cs_file: str, caplog: pytest.LogCaptureFixture) -> None:
    """Test that the increment is dropped when a literal version is given"""
    with caplog.at_level(logging.WARNING, logger="assemblyinfoutil"):
        config = config_from([cs_file, "--set", "2.1.0.7", "--inc", "3"])
    assert config.set_version == "2.1.0.7"
    assert config.increment_position is None
    assert not config.increments
    assert "the increment is ignored" in caplog.text


def test_no_file_name() -> None:
    """Test that a missing file name is rejected"""
    with pytest.raises(ParameterError, match="You must specify the name of the file") as excinfo:
        config_from([])
    assert excinfo.value.exit_code is ExitCode.NO_FILENAME


def test_file_not_found(tmp_path: Path) -> None:
    """Test that a file that does not exist is rejected"""
    with pytest.raises(ParameterError, match="Can not find file") as excinfo:
        config_from([str(tmp_path / "AssemblyInfo.cs")])
    assert excinfo.value.exit_code is ExitCode.FILE_NOT_FOUND


def test_increment_must_be_numeric(cs_file: str) -> None:
    """Test that a non-numeric increment index is rejected"""
    with pytest.raises(ParameterError, match="must be numeric") as excinfo:
        config_from([cs_file, "--inc", "minor"])
    assert excinfo.value.exit_code is ExitCode.INCREMENT_MUST_BE_NUMERIC


@pytest.mark.parametrize("position", ["0", "5", "-1"])
def test_increment_out_of_range(cs_file: str, position: str) -> None:
    """Test that increment indices outside 1 to 4 are rejected"""
    with pytest.raises(ParameterError, match="must be between 1 and 4") as excinfo:
        config_from([cs_file, f"--inc={position}"])
    assert excinfo.value.exit_code is ExitCode.INCREMENT_OUT_OF_RANGE


def test_increment_is_checked_before_file_name() -> None:
    """Test that the increment index is validated first"""
    with pytest.raises(ParameterError) as excinfo:
        config_from(["--inc", "9"])
    assert excinfo.value.exit_code is ExitCode.INCREMENT_OUT_OF_RANGE


def test_report(cs_file: str, caplog: pytest.LogCaptureFixture) -> None:
    """Test that the settings are written to the transcript"""
    with caplog.at_level(logging.INFO, logger="assemblyinfoutil"):
        config_from([cs_file, "--fv", "--cy"]).report()
    assert f'Processing "{cs_file}":' in caplog.text
    assert "Updating AssemblyFileVersion" in caplog.text
    assert "Updating the Copyright year if needed" in caplog.text
