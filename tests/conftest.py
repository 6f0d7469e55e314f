import pytest

from macmunge.core.application import Application
from macmunge.errors import PlatformError
from macmunge.providers import StaticDirectory


SAMPLE = bytes([0x75, 0xDF, 0x40, 0x2C, 0x60, 0xA2])


class FixedRandomizer:
    """Returns the same bytes on every draw."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.calls = 0

    def random_bytes(self, n: int) -> bytes:
        self.calls += 1
        return self.data[:n]


class FailingDirectory:
    name = "failing"

    def interfaces(self):
        raise PlatformError(13, "permission denied")


@pytest.fixture
def sample() -> bytes:
    return SAMPLE


@pytest.fixture
def directory() -> StaticDirectory:
    return StaticDirectory(
        [
            ("lo", bytes(6)),
            ("eth0", bytes([0x02, 0x42, 0xAC, 0x11, 0x00, 0x02])),
            ("tun0", None),
            ("wlan0", SAMPLE),
        ]
    )


@pytest.fixture
def failing_directory() -> FailingDirectory:
    return FailingDirectory()


@pytest.fixture
def app(directory):
    Application.reset()
    app = Application.current()
    app.directory = directory
    yield app
    Application.reset()
