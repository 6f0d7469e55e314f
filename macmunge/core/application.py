"""Application singleton with dependency injection for controllers."""

from pathlib import Path
from typing import Any, Self

from rich.console import Console

from ..controllers.address import AddressController
from ..controllers.interfaces import InterfaceController
from ..models.common import Settings, load_settings
from ..providers import InterfaceDirectory, make_directory


class Application:
    """Main application."""

    _instance: Self | None = None

    def __init__(self) -> None:
        self._console = Console()
        self._controllers: dict[str, Any] = {}

        self._settings: Settings = Settings()
        self._directory: InterfaceDirectory | None = None

    @classmethod
    def current(cls) -> Self:
        """Get current application instance."""

        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance."""

        cls._instance = None

    @property
    def console(self) -> "Console":
        """Get rich console for displaying messages."""

        return self._console

    @property
    def settings(self) -> Settings:
        """Get the active settings."""

        return self._settings

    @settings.setter
    def settings(self, value: Settings) -> None:
        """Replace settings and drop the directory built from the old ones."""

        self._settings = value
        self._directory = None

    def load_settings(self, path: str | Path) -> Settings:
        """Load settings from a YAML file and make them active."""

        self.settings = load_settings(path)
        return self._settings

    @property
    def directory(self) -> InterfaceDirectory:
        """Get the interface directory selected by the settings."""

        if self._directory is None:
            self._directory = make_directory(
                self._settings.directory,
                interfaces=self._settings.interfaces,
                separators=self._settings.parse.separators,
            )
        return self._directory

    @directory.setter
    def directory(self, value: InterfaceDirectory | None) -> None:
        """Inject an interface directory."""

        self._directory = value

    @property
    def address(self) -> AddressController:
        """Get address controller."""

        if "address" not in self._controllers:
            self._controllers["address"] = AddressController(self)
        return self._controllers["address"]

    @property
    def interfaces(self) -> InterfaceController:
        """Get interface controller."""

        if "interfaces" not in self._controllers:
            self._controllers["interfaces"] = InterfaceController(self)
        return self._controllers["interfaces"]
