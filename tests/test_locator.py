from __future__ import annotations

from pathlib import Path

from briefcase_kv.config import BriefcaseConfig
from briefcase_kv.locator import (
    NOT_APPLICABLE,
    locate,
    resolve_root,
    resolve_storage_dir,
    resolve_subdir_name,
)


def test_root_and_dirname_overrides(tmp_path) -> None:
    env = {
        "BRIEFCASE_DIR": str(tmp_path),
        "BRIEFCASE_DIRNAME": "test",
        "TEMP": "/should/not/win",
    }

    assert resolve_root(env) == (tmp_path, "BRIEFCASE_DIR")
    assert resolve_subdir_name(env) == "test"
    assert resolve_storage_dir(env) == tmp_path / "test"


def test_root_priority_skips_empty_values() -> None:
    env = {"BRIEFCASE_DIR": "", "TEMP": "", "TMPDIR": "/var/scratch"}

    assert resolve_root(env) == (Path("/var/scratch"), "TMPDIR")


def test_temp_wins_over_tmpdir() -> None:
    env = {"TEMP": "/a", "TMPDIR": "/b"}

    assert resolve_root(env) == (Path("/a"), "TEMP")


def test_defaults_when_environment_is_empty() -> None:
    config = BriefcaseConfig(default_root=Path("/fallback"))

    root, source = resolve_root({}, config)
    assert root == Path("/fallback")
    assert source == NOT_APPLICABLE
    assert resolve_subdir_name({"BRIEFCASE_DIRNAME": ""}, config) == "briefcase"
    assert resolve_storage_dir({}, config) == Path("/fallback/briefcase")


def test_locate_reads_process_environment_each_call(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BRIEFCASE_DIR", str(tmp_path / "one"))
    monkeypatch.setenv("BRIEFCASE_DIRNAME", "store")
    first = locate()

    monkeypatch.setenv("BRIEFCASE_DIR", str(tmp_path / "two"))
    second = locate()

    assert first.directory == tmp_path / "one" / "store"
    assert second.directory == tmp_path / "two" / "store"
    assert second.source == "BRIEFCASE_DIR"
    assert second.dirname == "store"
