"""macmunge - MAC address conversion and munging."""

__version__ = "0.1.0"

from .core.hexcodec import format_hex, parse_hex, parse_hex_strict
from .core.interfaces import find_interface, find_interface_strict, list_interfaces
from .core.mac import Randomizer, SystemRandomizer, broadcast_address, munge, random_bytes
from .errors import EntropyUnavailable, InvalidLength, MacAddressError, MalformedHex, NotFound, PlatformError
from .models import NIL_ADDRESS, FormatOptions, InterfaceRecord, MacAddress, ParseOptions, make_address
from .result import Err, Ok, Result


__all__ = [
    "__version__",
    "NIL_ADDRESS",
    "EntropyUnavailable",
    "Err",
    "FormatOptions",
    "InterfaceRecord",
    "InvalidLength",
    "MacAddress",
    "MacAddressError",
    "MalformedHex",
    "NotFound",
    "Ok",
    "ParseOptions",
    "PlatformError",
    "Randomizer",
    "Result",
    "SystemRandomizer",
    "broadcast_address",
    "find_interface",
    "find_interface_strict",
    "format_hex",
    "list_interfaces",
    "make_address",
    "munge",
    "parse_hex",
    "parse_hex_strict",
    "random_bytes",
]
