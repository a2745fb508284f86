from pathlib import Path
from typing import List
import logging

from .errors import DirectoryAccessError
from .models import SourceFolder

logger = logging.getLogger(__name__)

class FolderScanner:
    """Lists pinmap folders under the staging root and the direct files inside each one."""

    def __init__(self, root: Path, ignore_hidden: bool = False):
        self.root = root
        self.ignore_hidden = ignore_hidden

    def _visible(self, p: Path) -> bool:
        return not (self.ignore_hidden and p.name.startswith("."))

    def list_folders(self) -> List[str]:
        if not self.root.is_dir():
            raise DirectoryAccessError(f"Failed to read stage directory: {self.root} is not a directory")
        try:
            entries = list(self.root.iterdir())
        except OSError as e:
            raise DirectoryAccessError(f"Failed to read stage directory: {e}") from e

        names = sorted(p.name for p in entries if p.is_dir() and self._visible(p))
        logger.info("Found %d pinmap folders in %s", len(names), self.root)
        return names

    def list_files(self, name: str) -> List[str]:
        """Direct regular files of one folder, sorted. OSError propagates."""
        folder = self.root / name
        return sorted(p.name for p in folder.iterdir() if p.is_file() and self._visible(p))

    def read_folder(self, name: str) -> SourceFolder:
        return SourceFolder(name=name, path=self.root / name, files=tuple(self.list_files(name)))
