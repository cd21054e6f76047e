"""Pairing of Program and UProgram records."""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ..discovery.manifest_parser import ManifestParser
from ..models.program import Application, Library, Program, UNKNOWN_DOWNLOADS


def assemble_records(manifest_path: Union[str, Path],
                     run_id: str,
                     is_library: bool,
                     parser: Optional[ManifestParser] = None,
                     document: Optional[Dict[str, Any]] = None) -> Tuple[Program, Union[Library, Application]]:
    """
    Build the Program / UProgram pair for one manifest.

    Both records carry the same run id and crate name.

    Args:
        manifest_path: Path to the Cargo.toml
        run_id: Identifier of the current extraction run
        is_library: Classifier verdict for the crate
        parser: Parser to read the manifest with
        document: Already parsed manifest, to avoid reading it twice

    Returns:
        Tuple of (Program, Library) or (Program, Application)
    """
    parser = parser or ManifestParser()
    program = parser.to_program(manifest_path, run_id, document)

    uprogram: Union[Library, Application]
    if is_library:
        uprogram = Library(id=run_id, name=program.name, downloads=UNKNOWN_DOWNLOADS, cratesio=None)
    else:
        uprogram = Application(id=run_id, name=program.name)

    return program, uprogram
