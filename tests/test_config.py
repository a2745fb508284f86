"""Tests for config layering and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pinsorter.config import OrganizerConfig, load_config
from pinsorter.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path: Path):
    for var in ("PINSORTER_CONFIG", "PINSORTER_STAGING_ROOT", "PINSORTER_OUTPUT_ROOT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config()

        assert config.staging_root == tmp_path.resolve() / "files" / "stage" / "stageFiles"
        assert config.output_root == tmp_path.resolve() / "files" / "finished"
        assert config.pdf_extension == ".pdf"
        assert config.no_pdf_dir_name == "A-NoPDFSFound"
        assert config.session_prefix == "Sorted-"
        assert config.write_manifest is True

    def test_json_file_overrides_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "staging_root": str(tmp_path / "in"),
            "output_root": str(tmp_path / "out"),
            "ignore_hidden": True,
        }), encoding="utf-8")
        config = load_config(path)

        assert config.staging_root == (tmp_path / "in").resolve()
        assert config.output_root == (tmp_path / "out").resolve()
        assert config.ignore_hidden is True

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"staging_root": str(tmp_path / "in")}), encoding="utf-8")
        monkeypatch.setenv("PINSORTER_CONFIG", str(path))
        monkeypatch.setenv("PINSORTER_STAGING_ROOT", str(tmp_path / "env-in"))
        config = load_config()

        assert config.staging_root == (tmp_path / "env-in").resolve()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope.json")

    def test_unknown_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"stage": "x"}), encoding="utf-8")
        with pytest.raises(ConfigError, match="stage"):
            load_config(path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)


class TestValidate:
    def test_output_inside_staging_rejected(self, tmp_path: Path) -> None:
        config = OrganizerConfig(staging_root=tmp_path / "stage", output_root=tmp_path / "stage" / "out")
        with pytest.raises(ConfigError):
            config.validate()

    def test_same_root_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            OrganizerConfig(staging_root=tmp_path, output_root=tmp_path).validate()

    def test_empty_extension_rejected(self, tmp_path: Path) -> None:
        config = OrganizerConfig(staging_root=tmp_path / "a", output_root=tmp_path / "b", pdf_extension="")
        with pytest.raises(ConfigError):
            config.validate()
