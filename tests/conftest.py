"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from prompt_env.cli import cli

from tests.helpers import TEST_VARIABLES


@pytest.fixture(autouse=True)
def unset_test_variables(monkeypatch):
    """Make sure the variable names used by tests start out unset.

    Resolution depends on whether a variable is defined at all, so a stray
    FOO in the developer's shell would silently skip prompting.
    """
    for name in TEST_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args, optional stdin and environment.

    Usage:
        result = invoke(["FOO", "BAZ"], input_data="bar\\nqux\\n")
        result = invoke(["FOO"], env={"FOO": ""})

    ``result.stdout`` holds the env lines, ``result.stderr`` the prompts and
    ``result.output`` both, interleaved in the order they were written.
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke
