from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Factories for sourcemap files and a throwaway package layout.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_sourcemap() -> Callable[..., Path]:
    """
    Return a factory writing a minimal sourcemap JSON file.

    The 'version' and 'mappings' fields are included so tests can check
    they survive a rewrite untouched.
    """
    def _write(path: Path, sources: List[str], **extra: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload: Dict[str, Any] = {
            "version": 3,
            "file": path.name.replace(".map", ""),
            "sources": sources,
            "mappings": "AAAA;AACA",
        }
        payload.update(extra)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def package_root(tmp_path: Path) -> Path:
    """
    Create a package directory with a package.json named 'mylib'.

    Structure:
    /proj
      package.json
      /lib
      /src
    """
    root = tmp_path / "proj"
    (root / "lib").mkdir(parents=True)
    (root / "src").mkdir()
    (root / "package.json").write_text(json.dumps({"name": "mylib", "version": "1.0.0"}),
                                       encoding="utf-8")
    return root


@pytest.fixture
def in_package(package_root: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the package root as working directory."""
    monkeypatch.chdir(package_root)
    return package_root
