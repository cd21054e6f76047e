"""Discovery layer for repo-import."""

from .manifest_locator import ManifestLocator, locate_manifests
from .manifest_parser import ManifestParser
from .target_classifier import BuildTarget, CargoMetadataProvider, TargetClassifier, classify_targets

__all__ = [
    "ManifestLocator",
    "locate_manifests",
    "ManifestParser",
    "BuildTarget",
    "CargoMetadataProvider",
    "TargetClassifier",
    "classify_targets",
]
