"""macmunge CLI."""

import logging
from pathlib import Path

import click
import rich_click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core.application import Application
from .core.paramtypes import InterfaceNameType, MacAddressType
from .models.interface import InterfaceRecord


# Configure rich-click
rich_click.rich_click.USE_RICH_MARKUP = True
rich_click.rich_click.SHOW_ARGUMENTS = True
rich_click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
rich_click.rich_click.USE_MARKDOWN = False
rich_click.rich_click.STYLE_ERRORS_SUGGESTION = "dim italic"
rich_click.rich_click.MAX_WIDTH = 100

CASE_CHOICE = click.Choice(["lower", "upper"], case_sensitive=False)

COMPLETION_LINES = {
    "bash": (".bashrc", 'eval "$(_MACMUNGE_COMPLETE=bash_source macmunge)"'),
    "zsh": (".zshrc", 'eval "$(_MACMUNGE_COMPLETE=zsh_source macmunge)"'),
    "fish": (".config/fish/config.fish", "eval (env _MACMUNGE_COMPLETE=fish_source macmunge)"),
}


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on stderr."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    default=None,
    envvar="MACMUNGE_CONFIG",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML settings file.",
)
@click.option(
    "--directory",
    default=None,
    type=click.Choice(["system", "static"]),
    help="Interface directory to read addresses from. Overrides the settings file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, directory: str | None, verbose: bool):
    """MAC address conversion and munging."""

    configure_logging(verbose)

    app = Application.current()
    if config_path:
        app.load_settings(config_path)
    if directory:
        app.settings = app.settings.model_copy(update={"directory": directory})

    ctx.obj = {"app": app}


@cli.command()
@click.argument("text")
@click.option(
    "-s",
    "--separator",
    "separators",
    multiple=True,
    help="Separator to strip from TEXT. Repeatable; defaults to the configured set.",
)
@click.option("--case", type=CASE_CHOICE, default=None, help="Output character case.")
@click.option("--output-separator", default=None, help="Separator between output bytes.")
@click.pass_obj
def parse(obj, text: str, separators: tuple[str, ...], case: str | None, output_separator: str | None):
    """Parse hex TEXT and print the normalised address."""

    app: Application = obj["app"]
    parsed = app.address.parse(text, separators)
    if not parsed.is_ok():
        raise click.ClickException(str(parsed.error))
    click.echo(app.address.format(parsed.value, case, output_separator))


@cli.command("format")
@click.argument("address", type=MacAddressType())
@click.option("--case", type=CASE_CHOICE, default=None, help="Output character case.")
@click.option("--separator", default=None, help="Separator between output bytes; may be empty.")
@click.pass_obj
def format_address(obj, address, case: str | None, separator: str | None):
    """Reformat ADDRESS."""

    app: Application = obj["app"]
    click.echo(app.address.format(address, case, separator))


@cli.command()
@click.argument("address", type=MacAddressType(), required=False)
@click.pass_obj
def munge(obj, address):
    """Munge ADDRESS, or the first interface address, with a random mask."""

    app: Application = obj["app"]
    click.echo(app.address.format(app.address.munge(address)))


@cli.command()
@click.option("-n", "--count", default=1, show_default=True, type=click.IntRange(min=1), help="Addresses to print.")
@click.pass_obj
def broadcast(obj, count: int):
    """Generate random broadcast addresses."""

    app: Application = obj["app"]
    for address in app.address.broadcast(count):
        click.echo(app.address.format(address))


@cli.command("list")
@click.pass_obj
def list_interfaces(obj):
    """List interfaces with a hardware address."""

    app: Application = obj["app"]
    found = app.interfaces.records()
    if not found.is_ok():
        raise click.ClickException(str(found.error))

    if not found.value:
        app.console.print("[yellow]No interfaces with a hardware address found.[/yellow]")
        return

    table = Table(title="Interfaces", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="green")
    table.add_column("Group")
    table.add_column("Local")
    for record in found.value:
        table.add_row(
            record.name,
            app.address.format(record.address),
            "yes" if record.group else "no",
            "yes" if record.local else "no",
        )
    app.console.print(table)


@cli.command("show")
@click.argument("name", type=InterfaceNameType())
@click.pass_obj
def show_interface(obj, name: str):
    """Display the hardware address of interface NAME."""

    app: Application = obj["app"]
    found = app.interfaces.find(name)
    if not found.is_ok():
        raise click.ClickException(str(found.error))
    record = InterfaceRecord(name=name, address=found.value)
    record.display(app.console, title=name, values={"address": app.address.format(record.address)})


@cli.command("install-completion")
@click.option(
    "--install",
    "install_shell",
    type=click.Choice(sorted(COMPLETION_LINES), case_sensitive=False),
    help="Install completion script for the specified shell.",
)
@click.pass_obj
def install_completion(obj, install_shell: str | None):
    """Generate or install shell completion scripts for macmunge."""

    app: Application = obj["app"]

    if not install_shell:
        app.console.print("[bold]Shell Completion Setup[/bold]\n")
        app.console.print("To enable tab completion, add one of the following to your shell config:\n")
        for shell, (rc_file, line) in COMPLETION_LINES.items():
            app.console.print(f"[cyan]{shell} (~/{rc_file}):[/cyan]")
            app.console.print(f"  {line}", markup=False)
        return

    rc_file, completion_line = COMPLETION_LINES[install_shell.lower()]
    config_file = Path.home() / rc_file
    config_file.parent.mkdir(parents=True, exist_ok=True)

    if config_file.exists() and "_MACMUNGE_COMPLETE" in config_file.read_text(encoding="utf-8"):
        app.console.print(f"[yellow]Completion already installed in {config_file}[/yellow]")
        return

    with open(config_file, "a", encoding="utf-8") as f:
        f.write(f"\n# macmunge completion\n{completion_line}\n")

    app.console.print(f"[green]Completion script installed for {install_shell.lower()}[/green]")
    app.console.print(f"[dim]Added to: {config_file}[/dim]")
