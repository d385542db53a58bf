"""Tests for FilesystemLocalCandidates using a real directory tree."""

from pathlib import Path

import pytest

from sdkui.core.errors import CandidatesDirNotFound
from sdkui.core.local_candidates import FilesystemLocalCandidates


def _make_versions(candidates_dir: Path, name: str, versions: list[str]) -> Path:
    candidate_dir = candidates_dir / name
    for version in versions:
        (candidate_dir / version).mkdir(parents=True)
    return candidate_dir


def test_lists_candidates_and_versions_sorted(tmp_path: Path) -> None:
    _make_versions(tmp_path, "kotlin", ["1.9.0"])
    _make_versions(tmp_path, "gradle", ["8.1.1", "7.6"])

    local = FilesystemLocalCandidates(tmp_path).list_local_candidates()

    assert [c.binary_name for c in local] == ["gradle", "kotlin"]
    assert local[0].version_names() == ["7.6", "8.1.1"]
    assert all(v.installed for v in local[0].versions)


def test_current_symlink_marks_version_current(tmp_path: Path) -> None:
    gradle = _make_versions(tmp_path, "gradle", ["8.1.1", "7.6"])
    (gradle / "current").symlink_to(gradle / "8.1.1", target_is_directory=True)

    local = FilesystemLocalCandidates(tmp_path).list_local_candidates()

    assert local[0].version_names() == ["7.6", "8.1.1"]
    assert local[0].current_version == "8.1.1"


def test_relative_current_symlink(tmp_path: Path) -> None:
    java = _make_versions(tmp_path, "java", ["17.0.7-tem"])
    (java / "current").symlink_to("17.0.7-tem", target_is_directory=True)

    local = FilesystemLocalCandidates(tmp_path).list_local_candidates()

    assert local[0].current_version == "17.0.7-tem"


def test_files_are_skipped(tmp_path: Path) -> None:
    gradle = _make_versions(tmp_path, "gradle", ["8.1.1"])
    (gradle / "notes.txt").write_text("not a version", encoding="utf-8")
    (tmp_path / "README").write_text("not a candidate", encoding="utf-8")

    local = FilesystemLocalCandidates(tmp_path).list_local_candidates()

    assert [c.binary_name for c in local] == ["gradle"]
    assert local[0].version_names() == ["8.1.1"]


def test_candidate_without_versions(tmp_path: Path) -> None:
    (tmp_path / "ant").mkdir()

    local = FilesystemLocalCandidates(tmp_path).list_local_candidates()

    assert local[0].versions == ()
    assert local[0].current_version is None


def test_unconfigured_directory_raises() -> None:
    with pytest.raises(CandidatesDirNotFound, match="not configured"):
        FilesystemLocalCandidates(None).list_local_candidates()


def test_missing_directory_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    with pytest.raises(CandidatesDirNotFound) as exc_info:
        FilesystemLocalCandidates(missing).list_local_candidates()

    assert exc_info.value.path == missing
