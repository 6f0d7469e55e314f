"""macmunge models.

This package contains:
- address: the fixed six byte MacAddress value type
- options: parse/format options for hex text
- interface: interface records supplied by a directory
- common: Settings and YAML loading
"""

from .address import NIL_ADDRESS, MacAddress, make_address
from .common import Settings, load_settings
from .interface import InterfaceRecord
from .options import DEFAULT_SEPARATORS, FormatOptions, ParseOptions


__all__ = [
    "DEFAULT_SEPARATORS",
    "NIL_ADDRESS",
    "FormatOptions",
    "InterfaceRecord",
    "MacAddress",
    "ParseOptions",
    "Settings",
    "load_settings",
    "make_address",
]
