"""Architecture enforcement tests for the code_feedback layering.

This module provides lightweight, repository-local invariants that keep the
provider-agnostic core decoupled from outer layers. It focuses on import
boundaries only and is designed to fail fast if a forbidden dependency is
introduced.

Rules validated here:
1) ``code_feedback/base`` must not import the service layer or any provider
   adapter package. Adapters are reached only through the factory's lazy,
   string-based ``import_module`` lookup.
2) Provider adapters must not import the service layer or each other.

These tests are intentionally static-file scans to avoid import-time side
effects, and they emit clear failure messages for quick remediation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

import pytest

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_ROOT = REPO_ROOT / "code_feedback"
ADAPTER_PACKAGES = ("openai", "gemini", "claude")


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all non-test Python source files under a root directory.

    Parameters
    ----------
    root: Path
        The directory to scan recursively.
    """

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    """Read a file as UTF-8 text, replacing undecodable bytes."""

    return path.read_text(encoding="utf-8", errors="replace")


def _import_lines(src: str) -> List[str]:
    return [
        line.strip()
        for line in src.splitlines()
        if line.strip().startswith(("from ", "import "))
    ]


def _offenders(root: Path, forbidden: Sequence[str]) -> List[str]:
    found: List[str] = []
    for py in _iter_python_files(root):
        for line in _import_lines(_read_text(py)):
            found.extend(f"{py}: '{line}'" for snippet in forbidden if snippet in line)
    return found


def _require(root: Path) -> None:
    if not root.is_dir():
        pytest.skip(f"{root} not found; skipping boundary check")


def test_base_does_not_import_outer_layers() -> None:
    """The core layer stays independent of the service layer and adapters."""

    base_root = PACKAGE_ROOT / "base"
    _require(base_root)

    forbidden = ["code_feedback.service", "from ..service", "from ...service"]
    for name in ADAPTER_PACKAGES:
        forbidden += [f"code_feedback.{name}", f"from ..{name}", f"from ...{name}"]

    offenders = _offenders(base_root, forbidden)
    if offenders:
        pytest.fail("Core modules must not import service or adapter packages.\n" + "\n".join(offenders))


def test_adapters_do_not_import_service_or_siblings() -> None:
    """Adapters depend on the core only."""

    offenders: List[str] = []
    for name in ADAPTER_PACKAGES:
        root = PACKAGE_ROOT / name
        _require(root)
        siblings = [s for s in ADAPTER_PACKAGES if s != name]
        forbidden = ["code_feedback.service", "from ..service"]
        forbidden += [f"from ..{s}" for s in siblings] + [f"code_feedback.{s}" for s in siblings]
        offenders.extend(_offenders(root, forbidden))

    if offenders:
        pytest.fail("Adapters must not import the service layer or sibling adapters.\n" + "\n".join(offenders))
