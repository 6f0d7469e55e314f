"""Host interface lookup with nil and missing address filtering."""

import logging

from ..errors import NotFound, PlatformError
from ..models.address import MAC_LENGTH, NIL_ADDRESS, MacAddress
from ..models.interface import InterfaceRecord
from ..providers.base import InterfaceDirectory
from ..providers.factory import default_directory
from ..result import Err, Ok, Result


_LOGGER = logging.getLogger(__name__)


def _usable(address: bytes | None) -> MacAddress | None:
    if address is None or len(address) != MAC_LENGTH:
        return None
    if address == NIL_ADDRESS:
        return None
    return MacAddress(address)


def _resolve(directory: InterfaceDirectory | None) -> InterfaceDirectory:
    if directory is not None:
        return directory

    return default_directory()


def list_interfaces(directory: InterfaceDirectory | None = None) -> Result[list[InterfaceRecord], PlatformError]:
    """List interfaces that have a usable hardware address, in directory order."""

    directory = _resolve(directory)
    try:
        entries = directory.interfaces()
    except PlatformError as e:
        return Err(e)

    records = []
    for name, raw in entries:
        address = _usable(raw)
        if address is None:
            _LOGGER.debug("Skipping interface %s: no usable hardware address", name)
            continue
        records.append(InterfaceRecord(name=name, address=address))
    return Ok(records)


def find_interface(
    name: str,
    directory: InterfaceDirectory | None = None,
) -> Result[MacAddress, NotFound | PlatformError]:
    """Return the hardware address of the interface called ``name``."""

    directory = _resolve(directory)
    try:
        entries = directory.interfaces()
    except PlatformError as e:
        return Err(e)

    for if_name, raw in entries:
        if if_name != name:
            continue
        address = _usable(raw)
        if address is not None:
            return Ok(address)
    return Err(NotFound(name))


def find_interface_strict(name: str, directory: InterfaceDirectory | None = None) -> MacAddress:
    """Like :func:`find_interface` but raises the failure."""

    return find_interface(name, directory).unwrap()
