from pathlib import Path
from typing import List
import logging
import shutil

from .defaults import PDF_EXTENSION
from .errors import GroupCopyError
from .models import CopyRecord, FileError, GroupResult, OrphanResult, PdfGroup, SourceFolder
from .utils import prefixed_name, strip_extension

logger = logging.getLogger(__name__)

def copy_file(src: Path, dst: Path) -> CopyRecord:
    # Never replaces an existing dst; a prefix collision is reported as a failed copy.
    if dst.exists():
        raise FileExistsError(f"Destination exists: {dst}")
    shutil.copyfile(src, dst)
    return CopyRecord(source=src, destination=dst)


class FlatteningCopier:
    """Copies every member folder of a PDF group into one flat folder named after the PDF."""

    def __init__(self, session_root: Path, pdf_extension: str = PDF_EXTENSION):
        self.session_root = session_root
        self.ext = pdf_extension

    def destination_for(self, group: PdfGroup) -> Path:
        folder_name = strip_extension(group.pdf_name, self.ext)
        if folder_name in ("", ".", ".."):
            raise GroupCopyError(f"PDF name {group.pdf_name!r} gives no usable folder name")
        dest = self.session_root / folder_name
        # The group folder must be a direct child of the session root.
        if dest.resolve().parent != self.session_root.resolve():
            raise GroupCopyError(f"PDF folder {folder_name!r} falls outside {self.session_root}")
        try:
            dest.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GroupCopyError(f"Failed to create PDF folder {folder_name}: {e}") from e
        return dest

    def copy_group(self, group: PdfGroup) -> GroupResult:
        result = GroupResult(
            pdf_name=group.pdf_name,
            folder_name=strip_extension(group.pdf_name, self.ext),
            folder_count=len(group.folders),
        )
        try:
            dest_dir = self.destination_for(group)
        except GroupCopyError as e:
            logger.error("Error creating PDF folder for %s: %s", group.pdf_name, e)
            result.error = str(e)
            return result

        pdf_copied = False
        for folder in group.folders:
            for name in folder.files:
                is_pdf = name.endswith(self.ext)
                if is_pdf and pdf_copied:
                    continue
                dest_name = name if is_pdf else prefixed_name(folder.name, name)
                src = folder.path / name
                dst = dest_dir / dest_name
                try:
                    result.copies.append(copy_file(src, dst))
                except OSError as e:
                    logger.warning("Error copying %s to %s: %s", src, dst, e)
                    result.errors.append(FileError(source=str(src), destination=str(dst), message=str(e)))
                    continue
                if is_pdf:
                    pdf_copied = True
                result.files_copied += 1
            logger.info("Copied files from %s to %s", folder.name, result.folder_name)
        return result

    def copy_many(self, groups: List[PdfGroup]) -> List[GroupResult]:
        return [self.copy_group(g) for g in groups]


class OrphanCopier:
    """Flattens folders without a PDF into the shared no-PDF folder, prefixing each file."""

    def __init__(self, no_pdf_dir: Path):
        self.no_pdf_dir = no_pdf_dir

    def copy_folder(self, folder: SourceFolder) -> OrphanResult:
        result = OrphanResult(folder_name=folder.name, destination=self.no_pdf_dir.name)
        for name in folder.files:
            src = folder.path / name
            dst = self.no_pdf_dir / prefixed_name(folder.name, name)
            try:
                result.copies.append(copy_file(src, dst))
            except OSError as e:
                logger.warning("Error copying %s to %s: %s", src, dst, e)
                result.errors.append(FileError(source=str(src), destination=str(dst), message=str(e)))
                continue
            result.files_copied += 1

        logger.info("Copied %d loose files from %s to %s",
                    result.files_copied, folder.name, result.destination)
        return result

    def copy_many(self, folders: List[SourceFolder]) -> List[OrphanResult]:
        return [self.copy_folder(f) for f in folders]
