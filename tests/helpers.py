"""Shared helpers for tests that run the CLI in a child process."""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

PROMPT_ENV_CLI = [sys.executable, "-m", "prompt_env.cli.main"]

# Variable names tests rely on being unset unless a test sets them
TEST_VARIABLES = ("FOO", "BAZ", "QUUX", "API_TOKEN", "DB_PASSWORD")


def subprocess_env(**overrides: str) -> dict[str, str]:
    """Return an environment for spawning the CLI.

    - The test variables are removed so each one is prompted for unless
      given in *overrides*.
    - ``src`` and the project root go on PYTHONPATH: the first so the
      package imports without an install, the second so sitecustomize.py
      starts coverage when COVERAGE_PROCESS_START is set.
    """
    env = {
        key: value
        for key, value in os.environ.items()
        if key not in TEST_VARIABLES
    }
    env.update(overrides)

    paths = [str(ROOT / "src"), str(ROOT)]
    if env.get("PYTHONPATH"):
        paths.append(env["PYTHONPATH"])
    env["PYTHONPATH"] = os.pathsep.join(paths)

    if env.get("COVERAGE_PROCESS_START"):
        env.setdefault("COVERAGE_RCFILE", str(ROOT / "pyproject.toml"))
        env.setdefault("COVERAGE_FILE", str(ROOT / ".coverage"))

    return env
