"""Interface controller for the configured interface directory."""

from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..core.interfaces import find_interface, list_interfaces
from ..errors import NotFound, PlatformError
from ..models.address import MacAddress
from ..models.interface import InterfaceRecord
from ..result import Result


if TYPE_CHECKING:
    from ..core.application import Application


class InterfaceController(BaseController["Application"]):
    def records(self) -> Result[list[InterfaceRecord], PlatformError]:
        return list_interfaces(self.app.directory)

    def find(self, name: str) -> Result[MacAddress, NotFound | PlatformError]:
        return find_interface(name, self.app.directory)

    def names(self) -> list[str]:
        """Names of interfaces with a usable address; empty if enumeration fails."""

        return [record.name for record in self.records().unwrap_or([])]
