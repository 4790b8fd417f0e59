"""Centralised configuration defaults for task-master."""

from __future__ import annotations

CODENAME = "task-master"

CONFIG_DIR = ".taskmaster"
LEGACY_CONFIG_FILE = ".taskmasterconfig"
ROO_DIR = ".roo"
ROO_RULES_PREFIX = "rules-"

# Order matters: candidates are listed and deleted in this order.
REMOVABLE_ARTIFACTS = (
    CONFIG_DIR,
    ".cursor",
    ROO_DIR,
    ".windsurfrules",
    ".roomodes",
    LEGACY_CONFIG_FILE,
)

PROJECT_MARKERS = (CONFIG_DIR, LEGACY_CONFIG_FILE)

PROJECT_ROOT_ENV = "TASKMASTER_PROJECT_ROOT"
EVENTS_FILE_ENV = "TASKMASTER_EVENTS_FILE"
