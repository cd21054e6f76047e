"""Locate build manifests inside a repository checkout."""

import os
import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"

# Depth is counted in path components below the root: root/Cargo.toml is 1.
FLAT_LAYOUT_WINDOW = (1, 2)
OWNER_LAYOUT_WINDOW = (2, 3)


class ManifestLocator:
    """Walk a checkout and yield manifests within a bounded depth window."""

    def __init__(self, root: Union[str, Path], manifest_name: str = MANIFEST_NAME):
        """
        Initialize manifest locator.

        Args:
            root: Repository checkout, or a directory of owner/project checkouts
            manifest_name: File name that marks a crate
        """
        self.root = Path(root)
        self.manifest_name = manifest_name

    def has_root_manifest(self) -> bool:
        return (self.root / self.manifest_name).is_file()

    def depth_window(self) -> Tuple[int, int]:
        """
        Pick the depth window for this checkout.

        A manifest at the root means a plain crate or a workspace whose
        members sit one level down. Without one, the checkout is assumed to
        follow an owner/project layout.
        """
        if self.has_root_manifest():
            return FLAT_LAYOUT_WINDOW
        return OWNER_LAYOUT_WINDOW

    def iter_manifests(self) -> Iterator[Path]:
        """
        Lazily yield manifest paths in traversal order.

        Entries that fail during the walk are logged and skipped.
        """
        min_depth, max_depth = self.depth_window()
        logger.debug(f"Walking {self.root} for {self.manifest_name} at depths {min_depth}..{max_depth}")

        for dirpath, dirnames, filenames in os.walk(self.root, onerror=self._on_walk_error):
            current = Path(dirpath)
            dir_depth = len(current.relative_to(self.root).parts)

            # Files here are one level deeper than their directory
            if dir_depth + 1 >= max_depth:
                dirnames[:] = []
            else:
                dirnames.sort()

            file_depth = dir_depth + 1
            if file_depth < min_depth or file_depth > max_depth:
                continue

            if self.manifest_name in filenames:
                candidate = current / self.manifest_name
                if candidate.is_file():
                    yield candidate
                else:
                    logger.debug(f"Skipping {candidate}: not a regular file")

    def _on_walk_error(self, error: OSError) -> None:
        logger.debug(f"Skipping unreadable entry {error.filename}: {error.strerror}")


def locate_manifests(root: Union[str, Path], manifest_name: str = MANIFEST_NAME) -> List[Path]:
    """Return every manifest the locator finds under ``root``."""
    return list(ManifestLocator(root, manifest_name).iter_manifests())
