import os

import pytest

from repo_import.discovery.manifest_locator import ManifestLocator, locate_manifests


def test_root_manifest_selects_flat_window(tmp_path, make_manifest):
    make_manifest(tmp_path, name="root")

    assert ManifestLocator(tmp_path).depth_window() == (1, 2)


def test_missing_root_manifest_selects_owner_window(tmp_path, make_manifest):
    make_manifest(tmp_path / "owner" / "proj", name="proj")

    assert ManifestLocator(tmp_path).depth_window() == (2, 3)


def test_flat_layout_finds_root_and_workspace_members(tmp_path, make_manifest):
    make_manifest(tmp_path, name="root")
    make_manifest(tmp_path / "member", name="member")
    make_manifest(tmp_path / "crates" / "too-deep", name="too-deep")

    found = locate_manifests(tmp_path)

    assert sorted(p.relative_to(tmp_path).as_posix() for p in found) == [
        "Cargo.toml",
        "member/Cargo.toml",
    ]


def test_owner_layout_searches_depths_two_and_three(tmp_path, make_manifest):
    make_manifest(tmp_path / "tokio-rs" / "tokio", name="tokio")
    make_manifest(tmp_path / "tokio-rs" / "tokio" / "tokio-util", name="tokio-util")
    make_manifest(tmp_path / "serde", name="serde")

    found = locate_manifests(tmp_path)

    assert sorted(p.relative_to(tmp_path).as_posix() for p in found) == [
        "serde/Cargo.toml",
        "tokio-rs/tokio/Cargo.toml",
    ]


def test_other_files_are_ignored(tmp_path, make_manifest):
    make_manifest(tmp_path, name="root")
    (tmp_path / "Cargo.lock").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "cargo.toml.bak").write_text("", encoding="utf-8")

    assert locate_manifests(tmp_path) == [tmp_path / "Cargo.toml"]


def test_directory_named_like_manifest_is_skipped(tmp_path, make_manifest):
    make_manifest(tmp_path, name="root")
    (tmp_path / "weird" / "Cargo.toml").mkdir(parents=True)

    assert locate_manifests(tmp_path) == [tmp_path / "Cargo.toml"]


def test_iteration_is_lazy(tmp_path, make_manifest):
    make_manifest(tmp_path, name="root")

    manifests = ManifestLocator(tmp_path).iter_manifests()

    assert next(manifests) == tmp_path / "Cargo.toml"


def test_empty_tree(tmp_path):
    assert locate_manifests(tmp_path) == []


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_unreadable_directory_does_not_abort_walk(tmp_path, make_manifest):
    make_manifest(tmp_path / "owner" / "good", name="good")
    locked = tmp_path / "owner" / "locked"
    make_manifest(locked, name="locked")
    locked.chmod(0)
    try:
        found = locate_manifests(tmp_path)
    finally:
        locked.chmod(0o755)

    assert found == [tmp_path / "owner" / "good" / "Cargo.toml"]


def test_broken_symlink_is_skipped(tmp_path, make_manifest):
    make_manifest(tmp_path / "owner" / "good", name="good")
    broken = tmp_path / "owner" / "broken"
    broken.mkdir()
    try:
        (broken / "Cargo.toml").symlink_to(tmp_path / "missing.toml")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    assert locate_manifests(tmp_path) == [tmp_path / "owner" / "good" / "Cargo.toml"]


def test_custom_manifest_name(tmp_path):
    (tmp_path / "owner" / "proj").mkdir(parents=True)
    (tmp_path / "owner" / "proj" / "Manifest.toml").write_text("", encoding="utf-8")

    assert locate_manifests(tmp_path, manifest_name="Manifest.toml") == [
        tmp_path / "owner" / "proj" / "Manifest.toml"
    ]
