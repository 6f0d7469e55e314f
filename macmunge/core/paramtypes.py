"""Custom Click paramtypes with shell completion support."""

import click
from click.shell_completion import CompletionItem

from ..models.address import MacAddress


def _app_from(ctx: click.Context | None):
    if ctx and ctx.obj and "app" in ctx.obj:
        return ctx.obj["app"]

    from .application import Application

    return Application.current()


class MacAddressType(click.ParamType):
    """A MAC address in hex text, using the configured separators."""

    name = "mac_address"

    def convert(self, value, param: click.Parameter | None, ctx: click.Context | None) -> MacAddress:
        """Parse the address text."""

        if isinstance(value, MacAddress):
            return value

        parsed = _app_from(ctx).address.parse(value)
        if not parsed.is_ok():
            self.fail(str(parsed.error), param, ctx)
        return parsed.value


class InterfaceNameType(click.ParamType):
    name = "interface"

    def shell_complete(self, ctx: click.Context, param: click.Parameter, incomplete: str) -> list[CompletionItem]:
        """Provide shell completion for interface names."""

        try:
            names = _app_from(ctx).interfaces.names()
        except Exception:  # noqa: BLE001
            return []
        return [CompletionItem(name) for name in names if name.startswith(incomplete)]
