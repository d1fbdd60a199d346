# topmark:header:start
#
#   project      : XmlSource
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the XmlSource test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from xmlsource.constants import DEFAULT_PROFILE
from xmlsource.core import logging

if TYPE_CHECKING:
    from pathlib import Path

SETTINGS_NAMESPACE = "http://schemas.microsoft.com/VisualStudio/2004/01/settings"

SAMPLE_SETTINGS: str = f"""<?xml version="1.0" encoding="utf-8"?>
<SettingsFile xmlns="{SETTINGS_NAMESPACE}" CurrentProfile="{DEFAULT_PROFILE}"
              GeneratedClassNamespace="TestGeneratedNamespace" GeneratedClassName="Settings">
  <Profiles />
  <Settings>
    <Setting Name="Bob" Type="System.String" Scope="User">
      <Value Profile="{DEFAULT_PROFILE}">John</Value>
      <Value Profile="AnotherProfile">Johanna</Value>
    </Setting>
    <Setting Name="Foo" Type="System.String" Scope="Application">
      <Value Profile="{DEFAULT_PROFILE}">Joe</Value>
    </Setting>
  </Settings>
</SettingsFile>
"""

SAMPLE_CONFIG: str = """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <appSettings>
    <add key="Greeting" value="Hello"/>
    <add key="Retries" value="3"/>
  </appSettings>
  <startup>
    <supportedRuntime version="v4.0"/>
  </startup>
</configuration>
"""

WriteFile = Callable[[str, str], "Path"]


@pytest.fixture(autouse=True)
def silence_xmlsource_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def write_file(tmp_path: Path) -> WriteFile:
    """Return a helper that writes ``text`` to ``tmp_path / name`` and returns the path."""

    def _write(name: str, text: str) -> Path:
        path: Path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_settings() -> str:
    """Settings document with ``Bob`` (two profiles) and ``Foo`` (one profile)."""
    return SAMPLE_SETTINGS


@pytest.fixture
def sample_config() -> str:
    """Generic config document with an ``appSettings`` section and an unrelated element."""
    return SAMPLE_CONFIG


@pytest.fixture
def settings_document() -> Callable[..., str]:
    """Return a helper that wraps ``<Setting>`` fragments in a namespaced settings document."""

    def _document(*settings: str, namespace: str = SETTINGS_NAMESPACE) -> str:
        xmlns: str = f' xmlns="{namespace}"' if namespace else ""
        body: str = "\n    ".join(settings)
        return f"<SettingsFile{xmlns}>\n  <Settings>\n    {body}\n  </Settings>\n</SettingsFile>\n"

    return _document


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set TRACE logging so provider decisions show up in failing test output.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
