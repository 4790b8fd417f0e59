from __future__ import annotations

from pathlib import Path

import pytest

from taskmaster import utils


def test_find_project_root_walks_up_to_marker(tmp_path: Path) -> None:
    (tmp_path / ".taskmaster").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert utils.find_project_root(nested) == tmp_path.resolve()


def test_find_project_root_accepts_legacy_marker(tmp_path: Path) -> None:
    (tmp_path / ".taskmasterconfig").write_text("{}", encoding="utf-8")
    assert utils.find_project_root(tmp_path) == tmp_path.resolve()


def test_find_project_root_without_marker(tmp_path: Path) -> None:
    assert utils.find_project_root(tmp_path, markers=(".definitely-not-a-marker",)) is None


def test_find_project_root_prefers_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    override = tmp_path / "elsewhere"
    override.mkdir()
    monkeypatch.setenv("TASKMASTER_PROJECT_ROOT", str(override))

    assert utils.find_project_root(tmp_path) == override.resolve()


def test_resolve_project_root_rejects_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(utils.ConfigurationError, match="does not exist"):
        utils.resolve_project_root(tmp_path / "missing")


def test_resolve_project_root_explicit(tmp_path: Path) -> None:
    assert utils.resolve_project_root(str(tmp_path)) == tmp_path.resolve()


@pytest.mark.parametrize(
    ("answer", "expected"),
    [("", False), ("y", True), ("YES", True), ("n", False), ("maybe", False)],
)
def test_ask_yes_no(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool) -> None:
    monkeypatch.setattr("builtins.input", lambda message: answer)
    assert utils.ask_yes_no("Proceed?") is expected


def test_ask_yes_no_eof_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    def eof(message: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert utils.ask_yes_no("Proceed?") is False
    assert utils.ask_yes_no("Proceed?", default=True) is True


def test_boxed_frames_text() -> None:
    lines = utils.boxed("Hi")
    assert lines == [
        "╔════╗",
        "║    ║",
        "║ Hi ║",
        "║    ║",
        "╚════╝",
    ]


def test_palette_disabled_by_no_color() -> None:
    palette = utils.ansi_palette()
    assert palette.warning == ""
    assert palette.reset == ""


def test_find_project_root_rejects_missing_env_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TASKMASTER_PROJECT_ROOT", str(tmp_path / "typo"))
    with pytest.raises(utils.ConfigurationError, match="TASKMASTER_PROJECT_ROOT"):
        utils.find_project_root(tmp_path)


def test_resolve_project_root_rejects_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".taskmaster").mkdir()
    monkeypatch.chdir(tmp_path)
    with pytest.raises(utils.ConfigurationError, match="must not be empty"):
        utils.resolve_project_root("")
