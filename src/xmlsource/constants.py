# topmark:header:start
#
#   project      : XmlSource
#   file         : constants.py
#   file_relpath : src/xmlsource/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XmlSource Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    XMLSOURCE_VERSION: str = get_version("xmlsource")
except PackageNotFoundError:  # running from a source checkout without install
    XMLSOURCE_VERSION = "0.0.0"

# Profile name written by settings designers for the default value of a setting.
DEFAULT_PROFILE: str = "(Default)"

# Element and attribute names of the *.settings schema.
SETTINGS_ELEMENT: str = "Setting"
SETTINGS_VALUE_ELEMENT: str = "Value"
SETTINGS_NAME_ATTRIBUTE: str = "Name"
SETTINGS_PROFILE_ATTRIBUTE: str = "Profile"

# Attribute names understood by the built-in key/value parser.
KEYVALUE_KEY_ATTRIBUTE: str = "key"
KEYVALUE_VALUE_ATTRIBUTE: str = "value"
