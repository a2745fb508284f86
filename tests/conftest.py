"""Shared fixtures: build staging trees and configs under tmp_path."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest

from pinsorter.config import OrganizerConfig


@pytest.fixture
def staging(tmp_path: Path) -> Path:
    root = tmp_path / "stage" / "stageFiles"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    return tmp_path / "finished"


@pytest.fixture
def make_pinmaps(staging: Path) -> Callable[[Dict[str, Dict[str, str]]], Path]:
    """Create {folder: {file: content}} under the staging root."""

    def _make(layout: Dict[str, Dict[str, str]]) -> Path:
        for folder, files in layout.items():
            folder_path = staging / folder
            folder_path.mkdir(parents=True, exist_ok=True)
            for name, content in files.items():
                (folder_path / name).write_text(content, encoding="utf-8")
        return staging

    return _make


@pytest.fixture
def config(staging: Path, output_root: Path) -> OrganizerConfig:
    return OrganizerConfig(staging_root=staging, output_root=output_root)
