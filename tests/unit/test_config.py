import json

import pytest

from repo_import.core.config import ExtractorConfig
from repo_import.core.errors import ConfigError


def test_defaults(monkeypatch):
    monkeypatch.delenv("REPO_IMPORT_CARGO_BIN", raising=False)
    config = ExtractorConfig()

    assert config.manifest_name == "Cargo.toml"
    assert config.cargo_bin == "cargo"
    assert config.description_key == "description"
    assert config.output_path(config.program_csv).name == "programs.csv"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("REPO_IMPORT_CARGO_BIN", "/opt/cargo/bin/cargo")

    assert ExtractorConfig().cargo_bin == "/opt/cargo/bin/cargo"


def test_yaml_round_trip(tmp_path):
    path = tmp_path / "repo_import.yaml"
    ExtractorConfig(output_dir="out", description_key="decription").save(path)

    loaded = ExtractorConfig.from_file(path)

    assert loaded.output_dir == "out"
    assert loaded.description_key == "decription"


def test_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"library_csv": "libs.csv"}), encoding="utf-8")

    assert ExtractorConfig.from_file(path).library_csv == "libs.csv"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ExtractorConfig.from_file(tmp_path / "nope.yaml")


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "repo_import.yml"
    path.write_text("", encoding="utf-8")

    assert ExtractorConfig.from_file(path).manifest_name == "Cargo.toml"


@pytest.mark.parametrize(
    "name, content",
    [
        ("list.yaml", "- output_dir: out\n"),
        ("scalar.yaml", "just a string\n"),
        ("array.json", "[1, 2]"),
    ],
)
def test_non_mapping_payload_raises(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match="expected a mapping") as exc_info:
        ExtractorConfig.from_file(path)

    assert exc_info.value.path == path
