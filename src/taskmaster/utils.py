"""Shared utilities for the task-master Python CLI."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Iterable, List, Optional

from .config import PROJECT_MARKERS, PROJECT_ROOT_ENV


class TaskMasterError(RuntimeError):
    """Raised when a command should exit with a non-zero status."""


class ConfigurationError(TaskMasterError):
    """Raised when no usable Task Master project root can be resolved."""


def _env_root() -> Optional[Path]:
    root = os.environ.get(PROJECT_ROOT_ENV)
    if not root:
        return None
    path = Path(root).expanduser().resolve()
    if not path.is_dir():
        raise ConfigurationError(
            f"{PROJECT_ROOT_ENV} does not exist or is not a directory: {path}"
        )
    return path


def find_project_root(
    start: Path | None = None, *, markers: Iterable[str] = PROJECT_MARKERS
) -> Optional[Path]:
    """Return the nearest directory holding a Task Master marker, if any."""
    if cached := _env_root():
        return cached
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return None


def resolve_project_root(explicit: str | os.PathLike[str] | None = None) -> Optional[Path]:
    if explicit is None:
        return find_project_root()
    if not os.fspath(explicit):
        raise ConfigurationError("Project root must not be empty")
    path = Path(explicit).expanduser().resolve()
    if not path.is_dir():
        raise ConfigurationError(f"Project root does not exist or is not a directory: {path}")
    return path


def ansi_palette() -> SimpleNamespace:
    disable = bool(os.environ.get("NO_COLOR")) or not sys.stdout.isatty()
    if disable:
        return SimpleNamespace(
            success="",
            warning="",
            error="",
            label="",
            dim="",
            bold="",
            reset="",
        )
    return SimpleNamespace(
        success="\x1b[32m",
        warning="\x1b[33m",
        error="\x1b[31m",
        label="\x1b[36m",
        dim="\x1b[2m",
        bold="\x1b[1m",
        reset="\x1b[0m",
    )


def boxed(
    text: str,
    *,
    padding: int = 1,
    border: str = "",
    style: str = "",
    reset: str = "",
) -> List[str]:
    """Render ``text`` inside a double-line box, one string per output line.

    Widths are measured on the plain text; ``border`` and ``style`` are escape
    sequences wrapped around the frame and the body respectively.
    """
    body = text.splitlines() or [""]
    width = max(len(line) for line in body) + padding * 2
    edge = f"{border}║{reset}"
    lines = [f"{border}╔{'═' * width}╗{reset}"]
    blank = f"{edge}{' ' * width}{edge}"
    lines.extend([blank] * padding)
    for line in body:
        inner = line.ljust(width - padding * 2)
        lines.append(f"{edge}{' ' * padding}{style}{inner}{reset}{' ' * padding}{edge}")
    lines.extend([blank] * padding)
    lines.append(f"{border}╚{'═' * width}╝{reset}")
    return lines


def print_banner(title: str) -> None:
    palette = ansi_palette()
    for line in boxed(
        title,
        border=palette.warning,
        style=f"{palette.warning}{palette.bold}",
        reset=palette.reset,
    ):
        print(line)
    print()


def prompt(message: str) -> str:
    try:
        return input(message)
    except EOFError:
        return ""


def ask_yes_no(message: str, *, default: bool = False) -> bool:
    suffix = "(Y/n)" if default else "(y/N)"
    response = prompt(f"{message} {suffix} ").strip().lower()
    if not response:
        return default
    return response in {"y", "yes"}
