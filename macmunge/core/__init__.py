"""macmunge core: hex codec, randomized transforms and interface lookup."""

from .controller import BaseController
from .model import DisplayModel


__all__ = [
    "BaseController",
    "DisplayModel",
]
