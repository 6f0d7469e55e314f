from typing import Literal

from .base import InterfaceDirectory
from .static import StaticDirectory
from .system import SystemDirectory


def make_directory(name: Literal["system", "static"], **kwargs) -> InterfaceDirectory:
    match name:
        case "system":
            return SystemDirectory(family=kwargs.get("family"))
        case "static":
            return StaticDirectory.from_mapping(kwargs.get("interfaces") or {}, kwargs.get("separators"))
        case _:
            raise NotImplementedError(f"Interface directory {name!r} is not implemented yet")


def default_directory() -> InterfaceDirectory:
    return SystemDirectory()
