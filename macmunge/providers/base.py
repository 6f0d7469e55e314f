from __future__ import annotations

from typing import Protocol


RawInterface = tuple[str, bytes | None]


class InterfaceDirectory(Protocol):
    """Source of ``(name, hardware address)`` pairs for the host.

    Implementations return entries in their own enumeration order and raise
    ``PlatformError`` when the host facility fails. Filtering of missing or nil
    addresses happens in ``macmunge.core.interfaces``, not here.
    """

    name: str

    def interfaces(self) -> list[RawInterface]: ...
