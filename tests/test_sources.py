# topmark:header:start
#
#   project      : XmlSource
#   file         : test_sources.py
#   file_relpath : tests/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for source registration and eager path validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from xmlsource.builder import ConfigurationBuilder
from xmlsource.core.errors import ConfigFileNotFoundError, InvalidConfigPathError
from xmlsource.parsers.keyvalue import KeyValueParser
from xmlsource.sources import (
    ConfigFileConfigurationSource,
    FileConfigurationSource,
    SettingsFileConfigurationSource,
    add_config_file,
    add_settings_file,
    validate_source_path,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    WriteFile = Callable[[str, str], Path]


@pytest.mark.parametrize("path", [None, ""])
@pytest.mark.parametrize("optional", [True, False])
def test_empty_path_is_rejected(path: str | None, optional: bool) -> None:
    """None and empty paths are rejected whatever the optional flag."""
    with pytest.raises(InvalidConfigPathError, match="cannot be null/empty"):
        validate_source_path(path, optional)


@pytest.mark.parametrize("register", [add_config_file, add_settings_file])
def test_empty_path_leaves_builder_untouched(
    register: Callable[..., ConfigurationBuilder],
) -> None:
    """A rejected registration does not add a source."""
    builder = ConfigurationBuilder()
    with pytest.raises(InvalidConfigPathError):
        register(builder, "", False)
    assert builder.sources == ()


def test_invalid_path_error_is_a_value_error() -> None:
    """Callers catching ValueError also catch the empty path error."""
    with pytest.raises(ValueError):
        ConfigurationBuilder().add_settings_file(None, optional=True)


def test_required_missing_file_raises_at_registration(tmp_path: Path) -> None:
    """A required path that does not exist fails immediately, naming the path."""
    missing: str = str(tmp_path / "absent.settings")
    with pytest.raises(ConfigFileNotFoundError) as excinfo:
        ConfigurationBuilder().add_settings_file(missing, optional=False)

    assert str(excinfo.value) == f"Could not find configuration file. File: [{missing}]"
    assert excinfo.value.filename == missing
    assert isinstance(excinfo.value, FileNotFoundError)


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    """A directory does not satisfy a required file path."""
    with pytest.raises(ConfigFileNotFoundError):
        ConfigurationBuilder().add_config_file(str(tmp_path), False)


def test_optional_missing_file_is_registered(tmp_path: Path) -> None:
    """An optional path may point at nothing."""
    missing: str = str(tmp_path / "absent.config")
    builder: ConfigurationBuilder = ConfigurationBuilder().add_config_file(missing, True)
    assert builder.sources == (ConfigFileConfigurationSource(path=missing, optional=True),)


def test_registration_does_not_parse(write_file: WriteFile) -> None:
    """Malformed XML is only detected when the builder loads the source."""
    path: Path = write_file("broken.settings", "<SettingsFile><Setting")
    builder: ConfigurationBuilder = ConfigurationBuilder().add_settings_file(str(path), False)
    assert builder.sources == (SettingsFileConfigurationSource(path=str(path), optional=False),)


def test_registration_chains_and_keeps_order(write_file: WriteFile) -> None:
    """Registration returns the builder so calls chain in precedence order."""
    settings: Path = write_file("a.settings", "<SettingsFile/>")
    config: Path = write_file("b.config", "<configuration/>")
    parser = KeyValueParser()

    builder = ConfigurationBuilder()
    returned: ConfigurationBuilder = builder.add_settings_file(str(settings), False)
    returned = returned.add_config_file(str(config), False, parser)

    assert returned is builder
    assert builder.sources == (
        SettingsFileConfigurationSource(path=str(settings), optional=False),
        ConfigFileConfigurationSource(path=str(config), optional=False, parsers=(parser,)),
    )


def test_sources_are_immutable() -> None:
    """Sources are frozen value objects."""
    source = SettingsFileConfigurationSource(path="x.settings")
    with pytest.raises(AttributeError):
        source.path = "y.settings"  # type: ignore[misc]


def test_base_source_cannot_be_instantiated() -> None:
    """Only concrete sources know which provider to build."""
    with pytest.raises(TypeError):
        FileConfigurationSource(path="x.config")  # type: ignore[abstract]
