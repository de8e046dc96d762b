"""Integration tests for the command-line entry point."""
from datetime import datetime, timedelta

import pytest
from click.testing import CliRunner

from app import main, run_demo
from src.services.registry import Registry
from src.utils.date_utils import format_datetime


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def script_file(tmp_path):
    """Write a script whose events lie in the future."""
    soon = format_datetime(datetime.now() + timedelta(days=1))
    later = format_datetime(datetime.now() + timedelta(days=8))
    path = tmp_path / "calendar.txt"
    path.write_text(
        "# launch week\n"
        f'create Org "Launch Party" "{soon}"\n'
        f'create Org "Launch Party" "{later}"\n'
        f'create Org Workshop "{later}" 1\n'
        '\n'
        'register Alice "Launch Party"\n'
        "register Alice Workshop\n"
        "register Bob Workshop\n"
        'register Bob "Launch Party"\n'
        'participants "Launch Party"\n'
        "count Alice\n"
        "bogus line\n",
        encoding="utf-8"
    )
    return path


def test_run_script(cli_runner, script_file):
    result = cli_runner.invoke(main, ["run", str(script_file)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[:7] == ["true", "false", "true", "true", "true", "false", "true"]
    assert lines[7] == "Alice, Bob"
    assert lines[8] == "2"
    assert lines[9] == "error: line 12: unknown command 'bogus'"


def test_run_script_from_stdin(cli_runner):
    result = cli_runner.invoke(main, ["run", "-"], input="count Alice\n")

    assert result.exit_code == 0
    assert result.stdout.strip() == "0"


def test_run_missing_file(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ["run", str(tmp_path / "missing.txt")])
    assert result.exit_code != 0


def test_demo_command(cli_runner):
    result = cli_runner.invoke(main, ["demo"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "create Launch tomorrow: true",
        "create Launch next week: false",
        "register Alice: true",
        "register Alice again: false",
        "count Alice: 1",
    ]


def test_invalid_log_level(cli_runner):
    result = cli_runner.invoke(main, ["--log-level", "loud", "demo"])
    assert result.exit_code == 2


def test_run_demo_results():
    steps = dict(run_demo(Registry()))
    assert steps["create Launch tomorrow"] is True
    assert steps["count Alice"] == 1
