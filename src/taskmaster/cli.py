"""Command-line interface for task-master."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import CODENAME
from .remove_project_files import STATUS_NOT_CONFIGURED, RemovalOptions, remove_project_files
from .utils import ConfigurationError, resolve_project_root


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CODENAME, description="Task Master project scaffolding tools"
    )
    parser.add_argument(
        "--version", action="version", version=f"{CODENAME} {__version__}"
    )
    sub = parser.add_subparsers(dest="command")

    remove_parser = sub.add_parser(
        "remove",
        aliases=["uninstall"],
        help="Remove Task Master files from the current project",
    )
    remove_parser.add_argument(
        "-y", "--yes", action="store_true", help="Skip confirmation"
    )
    remove_parser.add_argument(
        "--project-root",
        default=None,
        help="Project directory (defaults to the nearest Task Master project)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in {"remove", "uninstall"}:
        try:
            project_root = resolve_project_root(args.project_root)
        except ConfigurationError as exc:
            print(f"[remove] {exc}", file=sys.stderr)
            return 1
        result = remove_project_files(RemovalOptions(yes=args.yes), project_root)
        return 1 if result.status == STATUS_NOT_CONFIGURED else 0

    parser.print_help()
    return 1


def app() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
