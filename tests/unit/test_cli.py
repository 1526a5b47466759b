"""Tests for CLI commands."""

import io
import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lazytable.cli import cli, detect_format, read_rows
from lazytable.config import WIDTH_ENV_VAR
from lazytable.exceptions import InputError

TITLED = (
    " who    | what       \n"
    "--------+------------\n"
    " a      | b          \n"
    " c      | d          \n"
    " foobar | foobar2000 \n"
)

WRAPPED = (
    " da | foobar  | bar \n"
    "    | foobar  |     \n"
    " da | foobar! | bar \n"
)


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


class TestCLI:
    """Test top-level CLI behaviour."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "fixed-width text tables" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--width" in result.output
        assert "--padding" in result.output
        assert "--border" in result.output
        assert "--header" in result.output

    def test_verbose_flag_accepted(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--verbose", "render"], input="a,b\n")
        assert result.exit_code == 0


class TestRender:
    """Tests for `lazytable render`."""

    def test_csv_from_stdin_with_header(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["render", "--header"],
            input="who,what\na,b\nc,d\nfoobar,foobar2000\n",
        )
        assert result.exit_code == 0
        assert result.output == TITLED

    def test_csv_without_header(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render"], input="a,b\n")
        assert result.exit_code == 0
        assert result.output == " a | b \n"

    def test_json_file_with_width(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([["da", "foobar foobar", "bar"], ["da", "foobar!", "bar"]]))
        result = runner.invoke(cli, ["render", "--width", "20", str(path)])
        assert result.exit_code == 0
        assert result.output == WRAPPED

    def test_yaml_file(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "rows.yml"
        path.write_text("- [who, what]\n- [1, 2]\n")
        result = runner.invoke(cli, ["render", "--header", str(path)])
        assert result.exit_code == 0
        assert result.output == " who | what \n-----+------\n 1   | 2    \n"

    def test_tsv_format_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-f", "tsv"], input="a b\tc\n")
        assert result.exit_code == 0
        assert result.output == " a b | c \n"

    def test_border_and_padding(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["render", "--header", "-p", "0", "-b", "#=*"], input="x,y\n1,2\n"
        )
        assert result.exit_code == 0
        assert result.output == "x#y\n=*=\n1#2\n"

    def test_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "lazytable.yaml"
        config.write_text("width: 20\n")
        result = runner.invoke(
            cli,
            ["render", "-c", str(config)],
            input="da,foobar foobar,bar\nda,foobar!,bar\n",
        )
        assert result.exit_code == 0
        assert result.output == WRAPPED

    def test_width_from_env(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(WIDTH_ENV_VAR, "20")
        result = runner.invoke(cli, ["render"], input="da,foobar foobar,bar\nda,foobar!,bar\n")
        assert result.exit_code == 0
        assert result.output == WRAPPED

    def test_empty_input(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--header"], input="")
        assert result.exit_code == 0
        assert result.output == ""

    def test_invalid_border(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-b", "||"], input="a\n")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-f", "json"], input="[[1, 2]")
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_zero_width_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "-w", "0"], input="a\n")
        assert result.exit_code == 2


class TestConfigCommand:
    """Tests for `lazytable config`."""

    def test_defaults(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 0
        assert "width: 80" in result.output
        assert "padding: 1" in result.output
        assert "|-+" in result.output

    def test_overrides(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "-w", "40", "-b", "#=*"])
        assert result.exit_code == 0
        assert "width: 40" in result.output
        assert "#=*" in result.output

    def test_invalid_env(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(WIDTH_ENV_VAR, "wide")
        result = runner.invoke(cli, ["config"])
        assert result.exit_code == 1
        assert WIDTH_ENV_VAR in result.output


class TestReadRows:
    """Tests for read_rows and detect_format helpers."""

    @pytest.mark.parametrize(
        "name,fmt",
        [
            ("rows.csv", "csv"),
            ("rows.TSV", "tsv"),
            ("rows.json", "json"),
            ("rows.yaml", "yaml"),
            ("rows.yml", "yaml"),
            ("<stdin>", "csv"),
            ("rows.txt", "csv"),
        ],
    )
    def test_detect_format(self, name: str, fmt: str) -> None:
        assert detect_format(name) == fmt

    def test_json_null_cells_are_empty(self) -> None:
        assert read_rows(io.StringIO('[["a", null, 3]]'), "json") == [["a", "", "3"]]

    def test_empty_yaml(self) -> None:
        assert read_rows(io.StringIO(""), "yaml") == []

    def test_json_object_raises(self) -> None:
        with pytest.raises(InputError) as exc_info:
            read_rows(io.StringIO('{"a": 1}'), "json")
        assert "list of rows" in exc_info.value.reason

    def test_row_not_list_raises(self) -> None:
        with pytest.raises(InputError) as exc_info:
            read_rows(io.StringIO("- [a]\n- b\n"), "yaml")
        assert "Row 1" in exc_info.value.reason
