"""Library vs. application classification through cargo metadata."""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError  # type: ignore

from ..core.errors import ClassificationError

logger = logging.getLogger(__name__)

BIN_KIND = "bin"


class BuildTarget(BaseModel):
    """One target (lib, bin, example, test, ...) of a cargo package."""

    name: str
    kind: List[str] = Field(default_factory=list)
    src_path: Optional[str] = None


class CargoMetadataProvider:
    """Ask ``cargo metadata`` for the targets of a crate's root package."""

    def __init__(self, cargo_bin: str = "cargo"):
        self.cargo_bin = cargo_bin

    def targets(self, manifest_dir: Union[str, Path], manifest_name: str = "Cargo.toml") -> List[BuildTarget]:
        """
        Return the build targets of the package rooted at ``manifest_dir``.

        Raises:
            ClassificationError: If cargo fails or reports no root package
        """
        manifest_path = Path(manifest_dir) / manifest_name
        metadata = self._run(manifest_dir, manifest_path)
        package = self._root_package(manifest_dir, manifest_path, metadata)

        try:
            return [BuildTarget(**target) for target in package.get("targets", [])]
        except (TypeError, ValidationError) as e:
            raise ClassificationError(manifest_dir, f"unexpected target layout: {e}") from e

    def _run(self, manifest_dir: Union[str, Path], manifest_path: Path) -> Dict[str, Any]:
        command = [
            self.cargo_bin, "metadata",
            "--format-version", "1",
            "--no-deps",
            "--offline",
            "--manifest-path", str(manifest_path),
        ]
        logger.debug(f"Running {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise ClassificationError(manifest_dir, f"'{self.cargo_bin}' not found") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise ClassificationError(manifest_dir, f"cargo metadata exited with {e.returncode}: {stderr}") from e

        try:
            metadata = json.loads(completed.stdout)
        except json.JSONDecodeError as e:
            raise ClassificationError(manifest_dir, f"invalid cargo metadata output: {e}") from e

        if not isinstance(metadata, dict):
            raise ClassificationError(manifest_dir, "invalid cargo metadata output")
        return metadata

    def _root_package(self, manifest_dir: Union[str, Path], manifest_path: Path,
                      metadata: Dict[str, Any]) -> Dict[str, Any]:
        packages = metadata.get("packages") or []

        # Prefer the package declared by the queried manifest
        wanted = manifest_path.resolve()
        for package in packages:
            declared = package.get("manifest_path")
            if declared and Path(declared).resolve() == wanted:
                return package

        root_id = (metadata.get("resolve") or {}).get("root")
        if root_id:
            for package in packages:
                if package.get("id") == root_id:
                    return package

        if len(packages) == 1:
            return packages[0]

        # A virtual workspace manifest has members but no package of its own
        raise ClassificationError(manifest_dir, "no root package in cargo metadata")


def classify_targets(targets: Iterable[BuildTarget]) -> bool:
    """
    Return True when the targets describe a library.

    Any ``bin`` target makes the crate an application, even when a ``lib``
    target is also present.
    """
    for target in targets:
        if BIN_KIND in target.kind:
            return False
    return True


class TargetClassifier:
    """Decide whether a crate is a library or an application."""

    def __init__(self, provider: Optional[CargoMetadataProvider] = None, manifest_name: str = "Cargo.toml"):
        self.provider = provider or CargoMetadataProvider()
        self.manifest_name = manifest_name

    def is_library(self, manifest_dir: Union[str, Path]) -> bool:
        """
        Classify the crate in ``manifest_dir``.

        Raises:
            ClassificationError: If the metadata query fails
        """
        targets = self.provider.targets(manifest_dir, self.manifest_name)
        logger.debug(f"{manifest_dir}: targets {[(t.name, t.kind) for t in targets]}")
        return classify_targets(targets)
