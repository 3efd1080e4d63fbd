"""Start coverage.py inside CLI processes spawned by the test suite.

``tests/helpers.subprocess_env`` puts the project root on PYTHONPATH, so
every ``python -m prompt_env.cli.main`` child imports this module and
records into the shared ``.coverage`` data when COVERAGE_PROCESS_START is
set.
"""

import importlib.util
import os

if os.getenv("COVERAGE_PROCESS_START") and importlib.util.find_spec(
    "coverage"
):
    import coverage

    coverage.process_startup()
