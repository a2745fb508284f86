from dataclasses import dataclass, fields, replace
from pathlib import Path
import json
import os

from .defaults import (
    DEFAULT_OUTPUT_ROOT, DEFAULT_STAGING_ROOT, NO_PDF_DIR_NAME, PDF_EXTENSION, SESSION_PREFIX,
)
from .errors import ConfigError
from .utils import resolve_path, validate_roots

ENV_CONFIG = "PINSORTER_CONFIG"
ENV_STAGING_ROOT = "PINSORTER_STAGING_ROOT"
ENV_OUTPUT_ROOT = "PINSORTER_OUTPUT_ROOT"

@dataclass(frozen=True)
class OrganizerConfig:
    """Value-style settings for one organize call. Nothing here is bound to a session."""
    staging_root: Path
    output_root: Path
    pdf_extension: str = PDF_EXTENSION
    no_pdf_dir_name: str = NO_PDF_DIR_NAME
    session_prefix: str = SESSION_PREFIX
    ignore_hidden: bool = False
    write_manifest: bool = True

    def validate(self) -> "OrganizerConfig":
        if not self.pdf_extension:
            raise ConfigError("pdf_extension must not be empty.")
        if not self.no_pdf_dir_name or "/" in self.no_pdf_dir_name:
            raise ConfigError(f"Invalid no-PDF folder name: {self.no_pdf_dir_name!r}")
        validate_roots(self.staging_root, self.output_root)
        return self


def default_config() -> OrganizerConfig:
    return OrganizerConfig(
        staging_root=resolve_path(DEFAULT_STAGING_ROOT),
        output_root=resolve_path(DEFAULT_OUTPUT_ROOT),
    )


def _load_file(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file is not valid JSON: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must hold a JSON object: {path}")

    known = {f.name for f in fields(OrganizerConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
    return data


def load_config(path: Path | None = None) -> OrganizerConfig:
    """Defaults, then an optional JSON file, then environment overrides."""
    config = default_config()

    if path is None and os.getenv(ENV_CONFIG):
        path = Path(os.environ[ENV_CONFIG])
    if path is not None:
        data = _load_file(resolve_path(path))
        for key in ("staging_root", "output_root"):
            if key in data:
                data[key] = resolve_path(data[key])
        config = replace(config, **data)

    staging = os.getenv(ENV_STAGING_ROOT)
    if staging:
        config = replace(config, staging_root=resolve_path(staging))
    output = os.getenv(ENV_OUTPUT_ROOT)
    if output:
        config = replace(config, output_root=resolve_path(output))

    return config.validate()
