from __future__ import annotations

import sys
from pathlib import Path

_PACKAGE_MARKER = Path("keysmith") / "core" / "random_source.py"


def resolve_repo_root(script_file: str | Path) -> Path:
    """The checkout root is the parent of ``scripts/``; ancestors are never searched."""
    repo_root = Path(script_file).resolve().parent.parent
    if not (repo_root / _PACKAGE_MARKER).is_file():
        raise RuntimeError(
            "unable to resolve repository root from wrapper location; "
            f"expected wrapper under '<repo>/scripts/' with '<repo>/{_PACKAGE_MARKER.as_posix()}' present"
        )
    return repo_root


def bootstrap_repo_path(script_file: str | Path | None = None) -> Path:
    root = resolve_repo_root(__file__ if script_file is None else script_file)
    entry = str(root)
    if entry not in sys.path:
        sys.path.insert(0, entry)
    return root
