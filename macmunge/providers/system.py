"""Host interface directory backed by psutil."""

import logging

import psutil

from ..core.hexcodec import parse_hex
from ..errors import PlatformError
from .base import RawInterface


_LOGGER = logging.getLogger(__name__)


class SystemDirectory:
    """Reads link-layer addresses of the host's interfaces.

    psutil reports them as text, ``aa:bb:..`` on POSIX and ``AA-BB-..`` on
    Windows. Addresses that do not decode to 6 bytes (e.g. InfiniBand) are
    reported as missing.
    """

    name = "system"

    def __init__(self, family: int | None = None) -> None:
        self.family = psutil.AF_LINK if family is None else family

    def interfaces(self) -> list[RawInterface]:
        try:
            if_addrs = psutil.net_if_addrs()
        except (OSError, psutil.Error) as e:
            raise PlatformError(getattr(e, "errno", None), f"unable to enumerate interfaces: {e}") from e

        entries: list[RawInterface] = []
        for if_name, addrs in if_addrs.items():
            hwaddr = None
            for addr in addrs:
                if addr.family != self.family or not addr.address:
                    continue
                parsed = parse_hex(addr.address)
                if parsed.is_ok():
                    hwaddr = bytes(parsed.unwrap())
                    break
                _LOGGER.debug("Skipping hardware address %r of %s: %s", addr.address, if_name, parsed.error)
            entries.append((if_name, hwaddr))

        _LOGGER.debug("Enumerated %d interfaces", len(entries))
        return entries
