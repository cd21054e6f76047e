"""Exceptions raised by repo-import."""

from pathlib import Path
from typing import Union


class RepoImportError(Exception):
    """Base class for every error raised by this package."""


class ParseError(RepoImportError):
    """A manifest could not be read, is not valid TOML, or lacks a package name."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class ClassificationError(RepoImportError):
    """The build-metadata provider failed for a crate directory."""

    def __init__(self, manifest_dir: Union[str, Path], message: str):
        self.manifest_dir = Path(manifest_dir)
        super().__init__(f"{self.manifest_dir}: {message}")


class FormatError(RepoImportError, ValueError):
    """A URL is malformed or does not name an owner and a repository."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class ConfigError(RepoImportError, ValueError):
    """A configuration file does not hold a mapping of settings."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")
