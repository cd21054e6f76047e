"""Shared fixtures for repo-import tests."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from repo_import.core.errors import ClassificationError
from repo_import.discovery.target_classifier import BuildTarget, TargetClassifier


def manifest_text(name: Optional[str] = "demo", version: Optional[str] = "0.1.0",
                  description: Optional[str] = None) -> str:
    lines = ["[package]"]
    if name is not None:
        lines.append(f'name = "{name}"')
    if version is not None:
        lines.append(f'version = "{version}"')
    if description is not None:
        lines.append(f'description = "{description}"')
    lines.append('edition = "2021"')
    return "\n".join(lines) + "\n"


def write_manifest(directory: Path, **kwargs) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "Cargo.toml"
    path.write_text(manifest_text(**kwargs), encoding="utf-8")
    return path


class FakeMetadataProvider:
    """Stands in for cargo: maps crate directory names to target kinds."""

    def __init__(self, kinds: Optional[Dict[str, List[List[str]]]] = None, failing: Optional[set] = None):
        self.kinds = kinds or {}
        self.failing = failing or set()
        self.calls: List[Path] = []

    def targets(self, manifest_dir, manifest_name="Cargo.toml") -> List[BuildTarget]:
        manifest_dir = Path(manifest_dir)
        self.calls.append(manifest_dir)
        if manifest_dir.name in self.failing:
            raise ClassificationError(manifest_dir, "cargo metadata exited with 101")
        return [
            BuildTarget(name=f"{manifest_dir.name}-{i}", kind=kind)
            for i, kind in enumerate(self.kinds.get(manifest_dir.name, [["lib"]]))
        ]


@pytest.fixture
def fake_provider():
    return FakeMetadataProvider()


@pytest.fixture
def fake_classifier(fake_provider):
    return TargetClassifier(provider=fake_provider)


@pytest.fixture
def make_manifest():
    return write_manifest
