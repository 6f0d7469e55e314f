import click
import pytest
from click.testing import CliRunner

from macmunge.cli import cli
from macmunge.core.application import Application
from macmunge.core.paramtypes import InterfaceNameType
from macmunge.providers import StaticDirectory


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_parse(runner, app):
    result = runner.invoke(cli, ["parse", "75-df-40:2c:60-a2"])
    assert result.exit_code == 0, result.output
    assert result.output == "75:df:40:2c:60:a2\n"


def test_parse_with_options(runner, app):
    result = runner.invoke(
        cli,
        ["parse", "75$df$40$2c$60$a2", "-s", "$", "--case", "upper", "--output-separator", ""],
    )
    assert result.exit_code == 0, result.output
    assert result.output == "75DF402C60A2\n"


def test_parse_malformed(runner, app):
    result = runner.invoke(cli, ["parse", "F"])
    assert result.exit_code == 1
    assert "odd number of hex digits" in result.output


def test_format(runner, app):
    result = runner.invoke(cli, ["format", "75df402c60a2", "--case", "upper", "--separator", "-"])
    assert result.exit_code == 0, result.output
    assert result.output == "75-DF-40-2C-60-A2\n"


def test_format_rejects_bad_address(runner, app):
    result = runner.invoke(cli, ["format", "75:df"])
    assert result.exit_code == 2
    assert "decodes to 2 bytes" in result.output


def test_munge_address(runner, app):
    result = runner.invoke(cli, ["munge", "75:df:40:2c:60:a2"])
    assert result.exit_code == 0, result.output
    munged = result.output.strip()
    assert len(munged.split(":")) == 6
    assert munged != "75:df:40:2c:60:a2"


def test_munge_uses_directory(runner, app):
    result = runner.invoke(cli, ["munge"])
    assert result.exit_code == 0, result.output
    assert len(result.output.strip()) == 17


def test_munge_without_interfaces(runner, app):
    app.directory = StaticDirectory()
    result = runner.invoke(cli, ["-v", "munge"])
    assert result.exit_code == 0, result.output


def test_broadcast(runner, app):
    result = runner.invoke(cli, ["broadcast", "-n", "5"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 5
    for line in lines:
        assert int(line[:2], 16) & 0x01


def test_list(runner, app):
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0, result.output
    assert "eth0" in result.output
    assert "75:df:40:2c:60:a2" in result.output
    assert "lo " not in result.output
    assert "tun0" not in result.output


def test_list_platform_error(runner, app, failing_directory):
    app.directory = failing_directory
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 1
    assert "permission denied" in result.output


def test_show(runner, app):
    result = runner.invoke(cli, ["show", "wlan0"])
    assert result.exit_code == 0, result.output
    assert "75:df:40:2c:60:a2" in result.output


def test_show_missing(runner, app):
    result = runner.invoke(cli, ["show", "tun0"])
    assert result.exit_code == 1
    assert "no usable MAC address" in result.output


def test_config_file(runner, tmp_path):
    Application.reset()
    config = tmp_path / "macmunge.yaml"
    config.write_text(
        "parse:\n  separators: ['.']\nformat:\n  case: upper\n  separator: '-'\n"
        "directory: static\ninterfaces:\n  eth9: '02.00.00.00.00.01'\n",
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["--config", str(config), "parse", "75.df.40.2c.60.a2"])
    assert result.exit_code == 0, result.output
    assert result.output == "75-DF-40-2C-60-A2\n"

    result = runner.invoke(cli, ["--config", str(config), "show", "eth9"])
    assert result.exit_code == 0, result.output
    assert "02-00-00-00-00-01" in result.output
    Application.reset()


def test_install_completion_prints_instructions(runner, app):
    result = runner.invoke(cli, ["install-completion"])
    assert result.exit_code == 0, result.output
    assert "_MACMUNGE_COMPLETE=bash_source" in result.output


def test_install_completion_writes_rc_file(runner, app, tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    result = runner.invoke(cli, ["install-completion", "--install", "zsh"])
    assert result.exit_code == 0, result.output
    assert "_MACMUNGE_COMPLETE=zsh_source" in (tmp_path / ".zshrc").read_text(encoding="utf-8")

    result = runner.invoke(cli, ["install-completion", "--install", "zsh"])
    assert "already installed" in result.output


def test_interface_name_completion(app):
    items = InterfaceNameType().shell_complete(None, None, "w")
    assert [item.value for item in items] == ["wlan0"]


def test_interface_name_completion_survives_platform_error(app, failing_directory):
    app.directory = failing_directory
    assert InterfaceNameType().shell_complete(None, None, "") == []


def test_show_uses_configured_format(runner, tmp_path):
    Application.reset()
    config = tmp_path / "macmunge.yaml"
    config.write_text(
        "format:\n  case: upper\n  separator: '-'\ndirectory: static\ninterfaces:\n  eth0: '75:df:40:2c:60:a2'\n",
        encoding="utf-8",
    )

    shown = runner.invoke(cli, ["--config", str(config), "show", "eth0"])
    assert shown.exit_code == 0, shown.output
    assert "75-DF-40-2C-60-A2" in shown.output
    assert "75:df:40:2c:60:a2" not in shown.output

    listed = runner.invoke(cli, ["--config", str(config), "list"])
    assert listed.exit_code == 0, listed.output
    assert "75-DF-40-2C-60-A2" in listed.output
    Application.reset()


def test_interface_name_completion_from_context(app):
    ctx = click.Context(cli, obj={"app": app})
    items = InterfaceNameType().shell_complete(ctx, None, "e")
    assert [item.value for item in items] == ["eth0"]
