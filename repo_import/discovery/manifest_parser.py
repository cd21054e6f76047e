"""Cargo manifest parsing."""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..core.errors import ParseError
from ..models.program import Program

logger = logging.getLogger(__name__)

DESCRIPTION_KEY = "description"


class ManifestParser:
    """Read package metadata out of Cargo.toml files."""

    def __init__(self, description_key: str = DESCRIPTION_KEY):
        """
        Initialize manifest parser.

        Args:
            description_key: Key under [package] holding the description.
                Older exports read ``decription``; pass it here for parity.
        """
        self.description_key = description_key

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Parse a manifest into a plain dictionary.

        Raises:
            ParseError: If the file cannot be read or is not valid TOML
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(path, f"cannot read manifest: {e}") from e

        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ParseError(path, f"invalid TOML: {e}") from e

    def parse_crate_name(self, path: Union[str, Path]) -> str:
        """Return ``package.name``, whether the crate is a lib or a bin."""
        document = self.load(path)
        return self.package_name(path, document)

    def to_program(self, path: Union[str, Path], run_id: str,
                   document: Optional[Dict[str, Any]] = None) -> Program:
        """
        Build a Program record from a manifest.

        Missing description and version do not fail: the description
        becomes an empty string and the version stays unset.

        Args:
            path: Path to the Cargo.toml
            run_id: Identifier of the current extraction run
            document: Parsed manifest, loaded from ``path`` when omitted

        Returns:
            Program for the manifest's package
        """
        if document is None:
            document = self.load(path)
        name = self.package_name(path, document)
        package = document["package"]

        return Program(
            id=run_id,
            name=name,
            description=self._as_text(package.get(self.description_key, "")),
            namespace=None,
            version=self._as_text(package.get("version")),
        )

    def package_name(self, path: Union[str, Path], document: Dict[str, Any]) -> str:
        """Return ``package.name`` from an already loaded document."""
        package = document.get("package")
        if not isinstance(package, dict):
            raise ParseError(path, "no [package] table")

        name = package.get("name")
        if not isinstance(name, str) or not name:
            raise ParseError(path, "failed to find package name")
        return name

    @staticmethod
    def _as_text(value: Any) -> Optional[str]:
        # `version.workspace = true` and similar inherited keys are tables
        return value if isinstance(value, str) else None
