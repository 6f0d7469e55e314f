"""Interface directories: where hardware addresses come from."""

from .base import InterfaceDirectory, RawInterface
from .factory import default_directory, make_directory
from .static import StaticDirectory
from .system import SystemDirectory


__all__ = [
    "InterfaceDirectory",
    "RawInterface",
    "StaticDirectory",
    "SystemDirectory",
    "default_directory",
    "make_directory",
]
