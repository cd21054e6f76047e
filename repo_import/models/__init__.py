"""Data models for repo-import."""

from .program import (
    Program,
    Library,
    Application,
    UProgram,
    ExtractionResult,
    SkippedManifest,
    UNKNOWN_DOWNLOADS,
    is_library,
)

__all__ = [
    "Program",
    "Library",
    "Application",
    "UProgram",
    "ExtractionResult",
    "SkippedManifest",
    "UNKNOWN_DOWNLOADS",
    "is_library",
]
