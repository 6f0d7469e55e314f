"""Randomized MAC address transforms.

``munge`` hides a real hardware address behind a random XOR mask while keeping
it usable as a unique node id (e.g. for Snowflake-style generators), and
``broadcast_address`` synthesizes a random address with the group bit set.
"""

import logging
import os
from collections.abc import Iterable
from typing import Protocol

from ..errors import EntropyUnavailable
from ..models.address import GROUP_BIT, MAC_LENGTH, MacAddress
from ..providers.base import InterfaceDirectory
from .interfaces import list_interfaces


_LOGGER = logging.getLogger(__name__)


class Randomizer(Protocol):
    def random_bytes(self, n: int) -> bytes: ...


class SystemRandomizer:
    """Cryptographically strong bytes from the operating system."""

    def random_bytes(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except (NotImplementedError, OSError) as e:
            raise EntropyUnavailable(f"OS random source unavailable: {e}") from e


_SYSTEM_RANDOMIZER = SystemRandomizer()


def random_bytes(n: int, randomizer: Randomizer | None = None) -> bytes:
    """Draw ``n`` random bytes, raising ``EntropyUnavailable`` on a short read."""

    data = (randomizer or _SYSTEM_RANDOMIZER).random_bytes(n)
    if len(data) != n:
        raise EntropyUnavailable(f"random source returned {len(data)} bytes, expected {n}")
    return data


def _set_group_bit(mac_bytes: bytearray) -> None:
    """Set the IEEE-802 group (broadcast) bit."""

    mac_bytes[0] |= GROUP_BIT


def broadcast_address(*, randomizer: Randomizer | None = None) -> MacAddress:
    """Generate a random MAC address with the broadcast bit set."""

    mac_bytes = bytearray(random_bytes(MAC_LENGTH, randomizer))
    _set_group_bit(mac_bytes)
    return MacAddress(mac_bytes)


def _xor(address: MacAddress, mask: bytes) -> MacAddress:
    return MacAddress(bytes(a ^ b for a, b in zip(address, mask, strict=True)))


def munge(
    address: MacAddress | bytes | Iterable[int] | None = None,
    *,
    directory: InterfaceDirectory | None = None,
    randomizer: Randomizer | None = None,
) -> MacAddress:
    """Munge a MAC address with a fresh random mask.

    Without an address, the first interface of ``directory`` is used, falling
    back to :func:`broadcast_address` when none is available.
    """

    if address is None:
        address = _first_address(directory, randomizer)
    else:
        address = MacAddress(address)

    return _xor(address, random_bytes(MAC_LENGTH, randomizer))


def _first_address(directory: InterfaceDirectory | None, randomizer: Randomizer | None) -> MacAddress:
    found = list_interfaces(directory)
    if found.is_ok() and found.value:
        record = found.value[0]
        _LOGGER.debug("Munging address of interface %s", record.name)
        return record.address

    reason = "no interfaces with a hardware address" if found.is_ok() else found.error
    _LOGGER.debug("Falling back to a broadcast address: %s", reason)
    return broadcast_address(randomizer=randomizer)
