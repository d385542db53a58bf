"""CLI tests for the check command."""

from pathlib import Path

from click.testing import CliRunner

from sdkui.cli.cli import cli
from tests.fakes.context import create_test_context
from tests.fakes.listings import CANDIDATE_LIST, SEPARATOR
from tests.fakes.sdkman_api import FakeSdkmanApi


def test_check_well_formed_file(tmp_path: Path) -> None:
    listing = tmp_path / "listing.txt"
    listing.write_text(CANDIDATE_LIST, encoding="utf-8")

    result = CliRunner().invoke(cli, ["check", str(listing)], obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert "Listing is well formed (3 records)" in result.output


def test_check_reads_stdin() -> None:
    result = CliRunner().invoke(cli, ["check"], input=CANDIDATE_LIST, obj=create_test_context())

    assert result.exit_code == 0, result.output
    assert "3 records" in result.output


def test_check_reports_problems() -> None:
    listing = f"{SEPARATOR}\nAnt (1.10.13)   https://ant.apache.org/\n{SEPARATOR}\n"

    result = CliRunner().invoke(cli, ["check", "-"], input=listing, obj=create_test_context())

    assert result.exit_code == 1
    assert "record 1 (Ant): missing install command" in result.output
    assert "1 problem(s) found" in result.output


def test_check_empty_input() -> None:
    result = CliRunner().invoke(cli, ["check"], input="", obj=create_test_context())

    assert result.exit_code == 1
    assert "listing has no records" in result.output


def test_check_accepts_saved_list_output() -> None:
    ctx = create_test_context(sdkman_api=FakeSdkmanApi(candidate_list=CANDIDATE_LIST))
    runner = CliRunner()
    saved = runner.invoke(cli, ["list", "--no-pager"], obj=ctx)
    assert saved.exit_code == 0, saved.output

    result = runner.invoke(cli, ["check"], input=saved.output, obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Listing is well formed (3 records)" in result.output
