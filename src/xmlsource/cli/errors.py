# topmark:header:start
#
#   project      : XmlSource
#   file         : errors.py
#   file_relpath : src/xmlsource/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the XmlSource CLI.

Usage:
    Commands translate library errors into these exceptions so that Click
    prints a one-line message and exits with the matching `ExitCode`.
"""

from __future__ import annotations

import click

from xmlsource.cli.exit_codes import ExitCode


class XmlSourceCliError(click.ClickException):
    """Base class for all XmlSource CLI errors."""

    exit_code = ExitCode.FAILURE


class XmlSourceUsageError(XmlSourceCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class XmlSourceDataError(XmlSourceCliError):
    """Error for malformed XML input."""

    exit_code = ExitCode.DATA_ERROR


class XmlSourceFileNotFoundError(XmlSourceCliError):
    """Error when a required configuration file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class XmlSourceIOError(XmlSourceCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class XmlSourceConfigError(XmlSourceCliError):
    """Error for invalid configuration (empty paths, duplicate keys)."""

    exit_code = ExitCode.CONFIG_ERROR
