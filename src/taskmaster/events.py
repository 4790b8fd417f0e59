"""Structured event log for task-master commands."""

from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Mapping

from .config import EVENTS_FILE_ENV


def events_path() -> Path | None:
    """Return the configured events log path, or ``None`` when logging is off."""

    raw = os.environ.get(EVENTS_FILE_ENV)
    if not raw:
        return None
    return Path(raw).expanduser()


def _json_default(value: Any) -> Any:
    if isinstance(value, Path):
        return value.as_posix()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return repr(value)


def emit_event(phase: str, type_: str, **data: Any) -> None:
    """Append a structured event to the JSONL log named by the environment.

    Best-effort: serialisation and write failures are dropped so the event
    log never changes the outcome of the command being recorded.
    """

    target = events_path()
    if target is None:
        return
    record: Mapping[str, Any] = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "phase": phase,
        "type": type_,
        "data": data,
    }
    try:
        payload = json.dumps(record, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError):
        return
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("a", encoding="utf-8") as fh:
            fh.write(payload)
            fh.write("\n")
    except OSError:
        return
