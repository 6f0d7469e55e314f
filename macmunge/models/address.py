"""Fixed six byte MAC address value type."""

from collections.abc import Iterable
from typing import Self

from ..errors import InvalidLength
from ..result import Err, Ok, Result


MAC_LENGTH = 6

GROUP_BIT = 0x01
LOCAL_BIT = 0x02


class MacAddress(bytes):
    """Immutable MAC address, always exactly 6 bytes.

    Accepts anything ``bytes()`` accepts (bytes, bytearray, a list of ints).
    Compares equal to plain ``bytes`` with the same content.
    """

    __slots__ = ()

    def __new__(cls, data: bytes | bytearray | Iterable[int]) -> Self:
        if isinstance(data, cls):
            return data
        if isinstance(data, int):
            raise TypeError("MacAddress expects a byte sequence, not an int")
        value = super().__new__(cls, data)
        if len(value) != MAC_LENGTH:
            raise InvalidLength(len(value))
        return value

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    @property
    def is_group(self) -> bool:
        """Whether the IEEE-802 group (broadcast/multicast) bit is set."""

        return bool(self[0] & GROUP_BIT)

    @property
    def is_local(self) -> bool:
        """Whether the locally administered bit is set."""

        return bool(self[0] & LOCAL_BIT)

    @property
    def is_nil(self) -> bool:
        return self == NIL_ADDRESS


NIL_ADDRESS = MacAddress(bytes(MAC_LENGTH))


def make_address(data: bytes | bytearray | Iterable[int]) -> Result[MacAddress, InvalidLength]:
    """Build a MacAddress, returning the length failure instead of raising it."""

    try:
        return Ok(MacAddress(data))
    except InvalidLength as e:
        return Err(e)
