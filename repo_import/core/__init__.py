"""Core pipeline for repo-import."""

from .errors import RepoImportError, ParseError, ClassificationError, FormatError, ConfigError
from .config import ExtractorConfig

__all__ = [
    "RepoImportError",
    "ParseError",
    "ClassificationError",
    "FormatError",
    "ConfigError",
    "ExtractorConfig",
]
