# topmark:header:start
#
#   project      : XmlSource
#   file         : __main__.py
#   file_relpath : src/xmlsource/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running XmlSource via ``python -m xmlsource``.

Examples:
    Flatten a settings file::

        python -m xmlsource dump --settings Settings.settings
"""

from __future__ import annotations

from xmlsource.cli.main import cli

if __name__ == "__main__":
    cli()
