from pathlib import Path
from .errors import ConfigError, DirectoryAccessError

def resolve_path(path_str: str | Path) -> Path:
    """Return an expanded, absolute Path. Existence is not required."""
    return Path(path_str).expanduser().resolve()


def ensure_dir(path: Path) -> Path:
    """Create path (and parents) if missing; raise DirectoryAccessError on failure."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryAccessError(f"Failed to create directory {path}: {e}") from e
    return path


def strip_extension(name: str, ext: str) -> str:
    """Drop a trailing ext from name. Only the suffix is removed, never an inner match."""
    if ext and name.endswith(ext):
        return name[:-len(ext)]
    return name


def prefixed_name(folder_name: str, file_name: str) -> str:
    return f"{folder_name}_{file_name}"


def validate_roots(staging_root: Path, output_root: Path) -> None:
    # An output root inside staging would be scanned as a pinmap folder on the next run.
    staging_root, output_root = resolve_path(staging_root), resolve_path(output_root)
    if staging_root == output_root:
        raise ConfigError("Output root cannot be the staging root.")
    try:
        output_root.relative_to(staging_root)
    except ValueError:
        return
    raise ConfigError("Output root cannot be inside the staging root.")
