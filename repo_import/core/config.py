"""Configuration management for repo-import."""

import json
from pathlib import Path
from typing import Union

import yaml  # type: ignore
from pydantic import Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError


class ExtractorConfig(BaseSettings):
    """Configuration for an extraction run.

    Values are read from REPO_IMPORT_* environment variables when not given
    explicitly, e.g. REPO_IMPORT_CARGO_BIN or REPO_IMPORT_OUTPUT_DIR.
    """

    # Discovery
    manifest_name: str = Field(default="Cargo.toml", description="File name that marks a crate")
    cargo_bin: str = Field(default="cargo", description="cargo executable used for metadata queries")
    description_key: str = Field(
        default="description",
        description="Key under [package] read as the description ('decription' reproduces older exports)",
    )

    # Output
    output_dir: str = Field(default=".", description="Directory receiving the CSV files")
    program_csv: str = Field(default="programs.csv", description="File name for Program records")
    library_csv: str = Field(default="libraries.csv", description="File name for Library records")
    application_csv: str = Field(default="applications.csv", description="File name for Application records")

    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="REPO_IMPORT_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ExtractorConfig":
        """
        Load settings from a YAML (``.yaml``/``.yml``) or JSON file.

        An empty YAML file yields the defaults. Keys the file leaves out
        still fall back to REPO_IMPORT_* variables.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file holds something other than a mapping
        """
        path = Path(config_path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        text = path.read_text(encoding="utf-8")
        if _is_yaml(path):
            payload = yaml.safe_load(text)
            if payload is None:
                payload = {}
        else:
            payload = json.loads(text)

        if not isinstance(payload, dict):
            raise ConfigError(path, f"expected a mapping of settings, got {type(payload).__name__}")
        return cls(**payload)

    def save(self, config_path: Union[str, Path]) -> None:
        """Write every setting to ``config_path``, YAML or JSON by suffix."""
        path = Path(config_path)
        settings = self.model_dump()
        if _is_yaml(path):
            text = yaml.safe_dump(settings, default_flow_style=False, sort_keys=False)
        else:
            text = json.dumps(settings, indent=2) + "\n"
        path.write_text(text, encoding="utf-8")

    def output_path(self, file_name: str) -> Path:
        return Path(self.output_dir) / file_name


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")
