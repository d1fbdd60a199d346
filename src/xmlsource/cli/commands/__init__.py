# topmark:header:start
#
#   project      : XmlSource
#   file         : __init__.py
#   file_relpath : src/xmlsource/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource CLI subcommands."""
