"""Crate record data models."""

from pydantic import BaseModel, ConfigDict, Field  # type: ignore
from typing import Annotated, Optional, Literal, Union, Dict, List, Iterator, Tuple


UNKNOWN_DOWNLOADS = -1


class Program(BaseModel):
    """Generic descriptor of a buildable unit found in a manifest."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Run identifier shared by every record of one extraction")
    name: str = Field(..., min_length=1, description="Package name declared in the manifest")
    description: Optional[str] = Field(None, description="Package description")
    namespace: Optional[str] = Field(None, description="owner/repo of the hosting repository")
    version: Optional[str] = Field(None, description="Declared package version")

    # Provenance, filled in by later import stages
    github_url: Optional[str] = Field(None, description="Remote repository URL")
    mega_url: Optional[str] = Field(None, description="Mirror URL")
    doc_url: Optional[str] = Field(None, description="Documentation URL")


class Library(BaseModel):
    """A crate that only produces non-executable artifacts."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["library"] = Field("library", exclude=True)
    id: str = Field(..., description="Run identifier")
    name: str = Field(..., min_length=1, description="Crate name")
    downloads: int = Field(UNKNOWN_DOWNLOADS, description="Usage counter, -1 when unknown")
    cratesio: Optional[str] = Field(None, description="Registry page, if published")


class Application(BaseModel):
    """A crate that produces at least one executable."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["application"] = Field("application", exclude=True)
    id: str = Field(..., description="Run identifier")
    name: str = Field(..., min_length=1, description="Crate name")


UProgram = Annotated[Union[Library, Application], Field(discriminator="kind")]


def is_library(uprogram: Union[Library, Application]) -> bool:
    """Return True when the variant is a Library."""
    return uprogram.kind == "library"


class SkippedManifest(BaseModel):
    """A manifest that was dropped during extraction."""

    path: str
    reason: str


class ExtractionResult(BaseModel):
    """Everything one extraction run produced."""

    run_id: str
    pairs: List[Tuple[Program, UProgram]] = Field(default_factory=list)
    skipped: List[SkippedManifest] = Field(default_factory=list)

    def __len__(self) -> int:
        """Return number of extracted crates."""
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple[Program, Union[Library, Application]]]:  # type: ignore[override]
        """Iterate over (Program, UProgram) pairs."""
        return iter(self.pairs)

    def programs(self) -> List[Program]:
        return [program for program, _ in self.pairs]

    def libraries(self) -> List[Library]:
        return [u for _, u in self.pairs if isinstance(u, Library)]

    def applications(self) -> List[Application]:
        return [u for _, u in self.pairs if isinstance(u, Application)]

    def get_summary(self) -> Dict[str, int]:
        """Get summary statistics."""
        return {
            "total": len(self.pairs),
            "libraries": len(self.libraries()),
            "applications": len(self.applications()),
            "skipped": len(self.skipped),
        }
