"""macmunge controllers."""

from .address import AddressController
from .interfaces import InterfaceController


__all__ = [
    "AddressController",
    "InterfaceController",
]
