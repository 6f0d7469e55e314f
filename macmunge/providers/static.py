"""In-memory interface directory."""

from collections.abc import Iterable, Mapping, Sequence

from ..core.hexcodec import parse_hex_strict
from .base import RawInterface


class StaticDirectory:
    """Directory backed by a fixed list of entries.

    Used for configured interface tables and as a fake in tests.
    """

    name = "static"

    def __init__(self, entries: Iterable[RawInterface] = ()) -> None:
        self._entries: list[RawInterface] = [(name, bytes(addr) if addr is not None else None) for name, addr in entries]

    @classmethod
    def from_mapping(
        cls,
        interfaces: Mapping[str, str | None],
        separators: Sequence[str] | None = None,
    ) -> "StaticDirectory":
        """Build from ``{name: "aa:bb:cc:dd:ee:ff"}``; ``None`` means no address."""

        return cls(
            (name, parse_hex_strict(text, separators) if text else None) for name, text in interfaces.items()
        )

    def interfaces(self) -> list[RawInterface]:
        return list(self._entries)
