# topmark:header:start
#
#   project      : XmlSource
#   file         : test_dump_command.py
#   file_relpath : tests/cli/test_dump_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `dump` output formats, layering and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import tomlkit

from tests.cli.conftest import assert_exit_code, assert_SUCCESS, run_cli
from xmlsource.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from click.testing import Result

    WriteFile = Callable[[str, str], Path]

pytestmark = pytest.mark.cli

EXPECTED_SAMPLE: dict[str, str] = {
    "Bob:(Default)": "John",
    "Bob:AnotherProfile": "Johanna",
    "Foo:(Default)": "Joe",
}


def _dump(*args: str) -> Result:
    return run_cli(["--no-color", "dump", *args])


def test_text_output(write_file: WriteFile, sample_settings: str) -> None:
    """Default output is sorted ``key = value`` lines."""
    path: Path = write_file("app.settings", sample_settings)
    result: Result = _dump("--settings", str(path))

    assert_SUCCESS(result)
    assert result.output == (
        "Bob:(Default) = John\nBob:AnotherProfile = Johanna\nFoo:(Default) = Joe\n"
    )


def test_json_output(write_file: WriteFile, sample_settings: str) -> None:
    """``--format json`` emits a JSON object."""
    path: Path = write_file("app.settings", sample_settings)
    result: Result = _dump("--settings", str(path), "--format", "json")

    assert_SUCCESS(result)
    assert json.loads(result.output) == EXPECTED_SAMPLE


def test_toml_output(write_file: WriteFile, sample_settings: str) -> None:
    """``--format TOML`` is accepted case-insensitively and parses back."""
    path: Path = write_file("app.settings", sample_settings)
    result: Result = _dump("--settings", str(path), "--format", "TOML")

    assert_SUCCESS(result)
    assert tomlkit.parse(result.output).unwrap() == EXPECTED_SAMPLE


def test_section_filter(write_file: WriteFile, sample_settings: str) -> None:
    """``--section`` keeps entries below the prefix and strips it."""
    path: Path = write_file("app.settings", sample_settings)
    result: Result = _dump("--settings", str(path), "--section", "Bob", "--format", "json")

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"(Default)": "John", "AnotherProfile": "Johanna"}


def test_config_overrides_settings(
    write_file: WriteFile,
    sample_settings: str,
) -> None:
    """Config files are applied after settings files, whatever the option order."""
    settings: Path = write_file("app.settings", sample_settings)
    config: Path = write_file(
        "app.config",
        '<configuration><Bob><add key="(Default)" value="FromConfig"/></Bob></configuration>',
    )
    result: Result = _dump("--config", str(config), "--settings", str(settings), "--format", "json")

    assert_SUCCESS(result)
    data: dict[str, str] = json.loads(result.output)
    assert data["Bob:(Default)"] == "FromConfig"
    assert data["Foo:(Default)"] == "Joe"


def test_nothing_to_dump_prints_nothing() -> None:
    """Without sources the command succeeds with empty output."""
    result: Result = _dump()

    assert_SUCCESS(result)
    assert result.output == ""


def test_missing_required_file(tmp_path: Path) -> None:
    """A missing required file exits with FILE_NOT_FOUND and names the file."""
    missing: str = str(tmp_path / "absent.settings")
    result: Result = _dump("--settings", missing)

    assert_exit_code(result, ExitCode.FILE_NOT_FOUND)
    assert missing in result.output


def test_missing_optional_file(tmp_path: Path) -> None:
    """``--optional`` tolerates missing files."""
    result: Result = _dump("--optional", "--settings", str(tmp_path / "absent.settings"))

    assert_SUCCESS(result)
    assert result.output == ""


def test_empty_path_is_a_config_error() -> None:
    """An empty path exits with CONFIG_ERROR."""
    result: Result = _dump("--settings", "")

    assert_exit_code(result, ExitCode.CONFIG_ERROR)
    assert "cannot be null/empty" in result.output


def test_duplicate_key_is_a_config_error(
    write_file: WriteFile,
    settings_document: Callable[..., str],
) -> None:
    """A duplicate Name:Profile pair exits with CONFIG_ERROR."""
    path: Path = write_file(
        "dup.settings",
        settings_document(
            '<Setting Name="Bob"><Value Profile="P">1</Value></Setting>',
            '<Setting Name="bob"><Value Profile="P">2</Value></Setting>',
        ),
    )
    result: Result = _dump("--settings", str(path))

    assert_exit_code(result, ExitCode.CONFIG_ERROR)
    assert "same key" in result.output


def test_malformed_xml_is_a_data_error(write_file: WriteFile) -> None:
    """A document that is not well-formed exits with DATA_ERROR."""
    path: Path = write_file("broken.settings", "<SettingsFile><Setting")
    result: Result = _dump("--settings", str(path))

    assert_exit_code(result, ExitCode.DATA_ERROR)
    assert "Malformed XML" in result.output


def test_verbose_and_quiet_are_exclusive() -> None:
    """Passing both -v and -q is a usage error."""
    result: Result = run_cli(["-v", "-q", "dump"])

    assert_exit_code(result, ExitCode.USAGE_ERROR)


def test_entity_declaration_is_a_data_error(write_file: WriteFile) -> None:
    """Entity declarations are refused by the XML parser and exit with DATA_ERROR."""
    path: Path = write_file(
        "entity.settings",
        '<!DOCTYPE SettingsFile [<!ENTITY who "John">]>'
        '<SettingsFile><Setting Name="Bob"><Value Profile="P">&who;</Value></Setting>'
        "</SettingsFile>",
    )
    result: Result = _dump("--settings", str(path))

    assert_exit_code(result, ExitCode.DATA_ERROR)
    assert "Forbidden XML construct" in result.output
