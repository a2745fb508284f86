from typing import Iterable, Optional
import logging

from .defaults import PDF_EXTENSION
from .models import FileError, GroupingResult, PdfGroup, SourceFolder
from .scanner import FolderScanner

logger = logging.getLogger(__name__)

def find_pdf(files: Iterable[str], ext: str = PDF_EXTENSION) -> Optional[str]:
    """First name ending in ext, in listing order. The match is case-sensitive."""
    for name in files:
        if name.endswith(ext):
            return name
    return None


class PdfGrouper:
    """Partitions pinmap folders by the PDF they contain; folders without one become orphans."""
    def __init__(self, scanner: FolderScanner, pdf_extension: str = PDF_EXTENSION):
        self.scanner = scanner
        self.ext = pdf_extension

    def group(self, folder_names: Iterable[str]) -> GroupingResult:
        result = GroupingResult()
        for name in folder_names:
            try:
                folder = self.scanner.read_folder(name)
            except OSError as e:
                logger.warning("Error processing folder %s: %s", name, e)
                result.skipped.append(FileError(source=name, message=str(e)))
                continue
            self._place(folder, result)

        logger.info("Organized into %d PDF groups", len(result.groups))
        logger.info("Found %d folders without PDFs", len(result.orphans))
        return result

    def _place(self, folder: SourceFolder, result: GroupingResult) -> None:
        pdf = find_pdf(folder.files, self.ext)
        if pdf is None:
            logger.warning("No PDF found in folder: %s", folder.name)
            result.orphans.append(folder)
            return
        group = result.groups.get(pdf)
        if group is None:
            group = result.groups[pdf] = PdfGroup(pdf_name=pdf)
        group.folders.append(folder)
