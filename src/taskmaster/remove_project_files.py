"""Implementation of `task-master remove`."""

from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .config import REMOVABLE_ARTIFACTS, ROO_DIR, ROO_RULES_PREFIX
from .events import emit_event
from .utils import ansi_palette, ask_yes_no, print_banner

CONFIRM_MESSAGE = "Are you sure you want to proceed with the deletion?"

STATUS_NOT_CONFIGURED = "not-configured"
STATUS_NOTHING_FOUND = "nothing-found"
STATUS_REMOVED = "removed"
STATUS_FAILED = "failed"
STATUS_CANCELLED = "cancelled"

Confirm = Callable[[str], bool]


@dataclass
class RemovalOptions:
    yes: bool = False


@dataclass
class RemovalResult:
    status: str
    candidates: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    error: Optional[str] = None


def find_fixed_candidates(root: Path) -> List[str]:
    return [name for name in REMOVABLE_ARTIFACTS if (root / name).exists()]


def discover_roo_rules_dirs(root: Path) -> List[str]:
    """List ``.roo/rules-*`` directories under ``root``.

    Best-effort: a missing or unreadable ``.roo`` (or an entry that vanishes
    mid-scan) yields an empty list rather than an error.
    """
    roo_dir = root / ROO_DIR
    try:
        return [
            f"{ROO_DIR}/{entry.name}"
            for entry in sorted(roo_dir.iterdir(), key=lambda p: p.name)
            if entry.name.startswith(ROO_RULES_PREFIX) and entry.is_dir()
        ]
    except OSError:
        return []


def collect_candidates(root: Path) -> List[str]:
    return find_fixed_candidates(root) + discover_roo_rules_dirs(root)


def remove_path(path: Path) -> None:
    """Delete ``path`` recursively; an already-missing path is not an error."""
    if path.is_symlink() or path.is_file():
        path.unlink(missing_ok=True)
    elif path.is_dir():
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            pass
    elif path.exists():
        path.unlink(missing_ok=True)


def remove_project_files(
    options: RemovalOptions,
    project_root: Path | str | None,
    *,
    confirm: Confirm | None = None,
) -> RemovalResult:
    """Remove Task Master scaffolding from ``project_root`` after confirmation.

    Returns a :class:`RemovalResult` describing the outcome instead of exiting
    so the caller decides the process exit status. ``confirm`` receives the
    prompt text and returns the user's answer; it defaults to an interactive
    yes/no question whose default answer is "no".
    """
    palette = ansi_palette()
    if not project_root:
        print(
            f"{palette.error}Error: Not inside a Task Master project.{palette.reset}",
            file=sys.stderr,
        )
        return RemovalResult(status=STATUS_NOT_CONFIGURED, error="project root not found")

    root = Path(project_root)
    print_banner("⚠️  Remove Task Master Files ⚠️")
    print(
        "This command will remove all Task Master-related files and directories "
        "from your project."
    )
    print("This action cannot be undone.\n")

    candidates = collect_candidates(root)
    emit_event("remove", "candidates", root=root, paths=candidates)
    if not candidates:
        print(f"{palette.success}✅ No Task Master files found in this project.{palette.reset}")
        return RemovalResult(status=STATUS_NOTHING_FOUND)

    print(f"{palette.warning}The following files and directories will be deleted:{palette.reset}")
    for item in candidates:
        print(f"{palette.label}  - {item}{palette.reset}")
    print()

    if options.yes:
        confirmed = True
    else:
        confirm = confirm or ask_yes_no
        confirmed = confirm(CONFIRM_MESSAGE)

    if not confirmed:
        print(f"{palette.dim}Operation cancelled. No files were deleted.{palette.reset}")
        emit_event("remove", "cancelled", root=root)
        return RemovalResult(status=STATUS_CANCELLED, candidates=candidates)

    removed: List[str] = []
    print("Deleting files...")
    try:
        for item in candidates:
            print(f"[remove] Removing {item}...")
            remove_path(root / item)
            removed.append(item)
    except Exception as exc:
        print(f"{palette.error}✖ An error occurred during deletion.{palette.reset}")
        print(exc, file=sys.stderr)
        emit_event("remove", "failed", root=root, removed=removed, error=str(exc))
        return RemovalResult(
            status=STATUS_FAILED, candidates=candidates, removed=removed, error=str(exc)
        )

    print(f"{palette.success}✔ Successfully removed all Task Master files.{palette.reset}")
    emit_event("remove", "removed", root=root, removed=removed)
    return RemovalResult(status=STATUS_REMOVED, candidates=candidates, removed=removed)
