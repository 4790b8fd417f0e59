import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if SRC_ROOT.exists() and str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("TASKMASTER_PROJECT_ROOT", raising=False)
    monkeypatch.delenv("TASKMASTER_EVENTS_FILE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
