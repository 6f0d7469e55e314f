"""Error kinds raised or returned by macmunge."""


class MacAddressError(Exception):
    """Base class for all macmunge errors."""


class InvalidLength(MacAddressError, ValueError):
    """A byte sequence other than 6 bytes was used as a MAC address."""

    def __init__(self, length: int) -> None:
        super().__init__(f"MAC address must be exactly 6 bytes, got {length}")
        self.length = length


class MalformedHex(MacAddressError, ValueError):
    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid MAC address {text!r}: {reason}")
        self.text = text
        self.reason = reason


class NotFound(MacAddressError, LookupError):
    """Interface is missing or has no usable hardware address."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no usable MAC address for interface {name!r}")
        self.name = name


class PlatformError(MacAddressError, OSError):
    """Interface enumeration failed on the host."""

    def __init__(self, errno: int | None, message: str) -> None:
        super().__init__(errno, message)


class EntropyUnavailable(MacAddressError, RuntimeError):
    """The OS random source could not supply bytes."""
