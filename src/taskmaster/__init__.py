"""taskmaster Python package.

Hosts the ``task-master`` command-line entrypoint and the project clean-up
helpers that remove Task Master scaffolding from a repository.
"""

from __future__ import annotations

from pathlib import Path


def _read_version(package_file: str = __file__) -> str:
    """Resolve the project VERSION file beside the package, its src/ dir or the repo root."""
    for parent in Path(package_file).resolve().parents[:3]:
        version_file = parent / "VERSION"
        if version_file.is_file():
            return version_file.read_text(encoding="utf-8").strip()
    return "0.0.0"


__all__ = ["__version__"]
__version__ = _read_version()
