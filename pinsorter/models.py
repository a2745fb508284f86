from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

@dataclass(frozen=True)
class Session:
    session_id: str
    root: Path
    no_pdf_dir: Path

@dataclass(frozen=True)
class SourceFolder:
    name: str
    path: Path
    files: Tuple[str, ...]  # direct children only, listing order

@dataclass
class PdfGroup:
    pdf_name: str  # grouping key, extension included
    folders: List[SourceFolder] = field(default_factory=list)

@dataclass(frozen=True)
class FileError:
    source: str
    message: str
    destination: Optional[str] = None

    def to_dict(self) -> dict:
        return {"source": self.source, "destination": self.destination, "message": self.message}

@dataclass(frozen=True)
class CopyRecord:
    source: Path
    destination: Path

@dataclass
class GroupingResult:
    groups: Dict[str, PdfGroup] = field(default_factory=dict)
    orphans: List[SourceFolder] = field(default_factory=list)
    skipped: List[FileError] = field(default_factory=list)

    @property
    def folder_count(self) -> int:
        return sum(len(g.folders) for g in self.groups.values()) + len(self.orphans)

@dataclass
class GroupResult:
    pdf_name: str
    folder_name: str
    files_copied: int = 0
    folder_count: int = 0
    errors: List[FileError] = field(default_factory=list)
    error: Optional[str] = None  # set when the destination folder could not be created
    copies: List[CopyRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        if self.error is not None:
            return {"pdfName": self.pdf_name, "folderName": self.folder_name, "error": self.error}
        return {
            "pdfName": self.pdf_name,
            "folderName": self.folder_name,
            "filesProcessed": self.files_copied,
            "totalPinmaps": self.folder_count,
            "errors": [e.to_dict() for e in self.errors],
        }

@dataclass
class OrphanResult:
    folder_name: str
    destination: str
    files_copied: int = 0
    errors: List[FileError] = field(default_factory=list)
    copies: List[CopyRecord] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "folderName": self.folder_name,
            "filesProcessed": self.files_copied,
            "destination": self.destination,
            "errors": [e.to_dict() for e in self.errors],
        }

@dataclass
class OrganizeSummary:
    """Aggregate report of one organize run, handed back to the caller."""
    session_id: str
    total_folders: int
    pdf_group_count: int
    orphan_folder_count: int
    destination_root: Path
    group_results: List[GroupResult] = field(default_factory=list)
    orphan_results: List[OrphanResult] = field(default_factory=list)
    skipped_folders: List[FileError] = field(default_factory=list)
    success: bool = True

    @property
    def files_copied(self) -> int:
        return (sum(r.files_copied for r in self.group_results)
                + sum(r.files_copied for r in self.orphan_results))

    @property
    def error_count(self) -> int:
        count = len(self.skipped_folders)
        for r in self.group_results:
            count += len(r.errors) + (1 if r.error is not None else 0)
        for o in self.orphan_results:
            count += len(o.errors)
        return count

    def copies(self) -> List[CopyRecord]:
        out: List[CopyRecord] = []
        for r in self.group_results:
            out.extend(r.copies)
        for o in self.orphan_results:
            out.extend(o.copies)
        return out

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "sessionId": self.session_id,
            "totalFolders": self.total_folders,
            "pdfGroupCount": self.pdf_group_count,
            "orphanFolderCount": self.orphan_folder_count,
            "destinationRoot": str(self.destination_root),
            "filesCopied": self.files_copied,
            "errorCount": self.error_count,
            "perGroupResults": [r.to_dict() for r in self.group_results],
            "orphanResults": [o.to_dict() for o in self.orphan_results],
            "skippedFolders": [e.to_dict() for e in self.skipped_folders],
        }
