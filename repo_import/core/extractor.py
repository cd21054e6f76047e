"""Batch extraction of crate records from a repository checkout."""

import logging
import uuid
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .assembler import assemble_records
from .errors import ClassificationError, ParseError
from ..discovery.manifest_locator import ManifestLocator, MANIFEST_NAME
from ..discovery.manifest_parser import ManifestParser
from ..discovery.target_classifier import TargetClassifier
from ..models.program import Application, ExtractionResult, Library, Program, SkippedManifest

logger = logging.getLogger(__name__)


def new_run_id() -> str:
    """Generate the identifier grouping every record of one run."""
    return str(uuid.uuid4())


class RepoExtractor:
    """Find, parse and classify every crate in a checkout."""

    def __init__(self,
                 parser: Optional[ManifestParser] = None,
                 classifier: Optional[TargetClassifier] = None,
                 manifest_name: str = MANIFEST_NAME):
        """
        Initialize the extractor.

        Args:
            parser: Manifest parser, defaults to one reading ``description``
            classifier: Target classifier, defaults to one backed by cargo
            manifest_name: File name that marks a crate
        """
        self.parser = parser or ManifestParser()
        self.classifier = classifier or TargetClassifier(manifest_name=manifest_name)
        self.manifest_name = manifest_name

    def extract(self, repo_path: Union[str, Path], run_id: Optional[str] = None) -> ExtractionResult:
        """
        Extract a (Program, UProgram) pair for every manifest found.

        A manifest that fails to parse or classify is logged and skipped;
        the batch itself never fails because of one crate.

        Args:
            repo_path: Root of the checkout to scan
            run_id: Identifier to stamp on the records, generated if omitted

        Returns:
            ExtractionResult with pairs in traversal order
        """
        repo_path = Path(repo_path)
        run_id = run_id or new_run_id()
        logger.debug(f"Parse repo {repo_path} (run {run_id})")

        result = ExtractionResult(run_id=run_id)
        locator = ManifestLocator(repo_path, self.manifest_name)

        for manifest_path in locator.iter_manifests():
            try:
                pair = self._extract_one(manifest_path, run_id)
            except (ParseError, ClassificationError) as e:
                logger.error(f"Skipping {manifest_path}: {e}")
                result.skipped.append(SkippedManifest(path=str(manifest_path), reason=str(e)))
                continue
            result.pairs.append(pair)

        summary = result.get_summary()
        logger.info(
            f"Extracted {summary['total']} crate(s) from {repo_path}: "
            f"{summary['libraries']} libraries, {summary['applications']} applications, "
            f"{summary['skipped']} skipped"
        )
        return result

    def _extract_one(self, manifest_path: Path, run_id: str) -> Tuple[Program, Union[Library, Application]]:
        document = self.parser.load(manifest_path)
        name = self.parser.package_name(manifest_path, document)
        islib = self.classifier.is_library(manifest_path.parent)
        logger.debug(f"Found crate: {name}, islib: {islib}")

        program, uprogram = assemble_records(manifest_path, run_id, islib, self.parser, document)
        logger.debug(f"program: {program!r}, uprogram: {uprogram!r}")
        return program, uprogram


def extract_info_local(repo_path: Union[str, Path],
                       extractor: Optional[RepoExtractor] = None) -> List[Tuple[Program, Union[Library, Application]]]:
    """Scan ``repo_path`` and return its (Program, UProgram) pairs."""
    extractor = extractor or RepoExtractor()
    return list(extractor.extract(repo_path).pairs)
