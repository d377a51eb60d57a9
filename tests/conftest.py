"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local typegraph package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of typegraph modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("typegraph"):
        del sys.modules[module_name]

from typegraph.core.logging import clear_run_id  # noqa: E402
from typegraph.oracle import ProgramBuilder  # noqa: E402


@pytest.fixture
def builder() -> ProgramBuilder:
    """A fresh in-memory program rooted at src/index.ts."""
    return ProgramBuilder()


@pytest.fixture(autouse=True)
def _reset_run_id() -> None:
    clear_run_id()
