"""Root test configuration: shared builders and session-level cleanup"""

import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["sites"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove site trees accidentally built under the project root."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)


@pytest.fixture(name="sites_root")
def sites_root_fixture(tmp_path):
    return tmp_path / "sites"
