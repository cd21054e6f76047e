"""
repo-import - crate discovery and classification for local repository checkouts.

This package finds Cargo manifests in a checkout, classifies each crate as a
library or an application, and exports the records as CSV.
"""

from .core.extractor import RepoExtractor, extract_info_local
from .core.csv_writer import write_into_csv, append_to_csv
from .models.program import Program, Library, Application, UProgram, ExtractionResult
from .utils.namespace import extract_namespace

__version__ = "1.0.0"
__author__ = "repo-import Team"

__all__ = [
    "RepoExtractor",
    "extract_info_local",
    "write_into_csv",
    "append_to_csv",
    "Program",
    "Library",
    "Application",
    "UProgram",
    "ExtractionResult",
    "extract_namespace",
]
