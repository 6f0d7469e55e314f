"""Address controller: parsing, formatting and randomized transforms."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..core.controller import BaseController
from ..core.hexcodec import format_hex, parse_hex
from ..core.mac import broadcast_address, munge
from ..errors import MalformedHex
from ..models.address import MacAddress
from ..models.options import FormatOptions, ParseOptions
from ..result import Result


if TYPE_CHECKING:
    from ..core.application import Application


class AddressController(BaseController["Application"]):
    """Controller for address operations, applying the configured options."""

    def parse_options(self, separators: Sequence[str] | None = None) -> ParseOptions:
        """Configured parse options, with ``separators`` overriding when given."""

        if separators:
            return ParseOptions(separators=list(separators))
        return self.settings.parse

    def format_options(self, case: str | None = None, separator: str | None = None) -> FormatOptions:
        """Configured format options with per-call overrides."""

        overrides = {}
        if case is not None:
            overrides["case"] = case
        if separator is not None:
            overrides["separator"] = separator
        if not overrides:
            return self.settings.format
        return FormatOptions(**{**self.settings.format.model_dump(), **overrides})

    def parse(self, text: str, separators: Sequence[str] | None = None) -> Result[MacAddress, MalformedHex]:
        return parse_hex(text, self.parse_options(separators))

    def format(self, address: MacAddress, case: str | None = None, separator: str | None = None) -> str:
        return format_hex(address, self.format_options(case, separator))

    def munge(self, address: MacAddress | None = None) -> MacAddress:
        """Munge ``address``, or the first interface of the app's directory."""

        return munge(address, directory=self.app.directory)

    def broadcast(self, count: int = 1) -> list[MacAddress]:
        return [broadcast_address() for _ in range(count)]
