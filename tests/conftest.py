import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'tmplfuncs'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from tmplfuncs.core.config import clear_all_caches
from tmplfuncs.core.stdlib_logging import reset_logging_for_tests
from tmplfuncs.data import clear_caches as clear_data_caches


@pytest.fixture(autouse=True)
def _reset_tmplfuncs_caches():
    """Every test starts from freshly loaded configuration."""
    clear_all_caches()
    clear_data_caches()
    yield
    clear_all_caches()
    reset_logging_for_tests()


@pytest.fixture
def isolated_project(tmp_path, monkeypatch):
    """Project directory with no TMPLFUNCS_* overrides, used as the working directory."""
    for key in list(os.environ):
        if key.startswith("TMPLFUNCS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
