"""CLI smoke tests."""

from click.testing import CliRunner
from docmodel_openapi.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "convert" in result.output
    assert "export" in result.output
    assert "generate-config" in result.output


def test_convert_help_lists_conversion_options() -> None:
    result = CliRunner().invoke(cli, ["convert", "-h"])

    assert result.exit_code == 0
    for option in ("--metadata-prop", "--omit-field", "--keep-internals", "--max-depth"):
        assert option in result.output
