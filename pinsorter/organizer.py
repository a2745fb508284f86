"""
Runs one organize pass: ensure directories, scan staging, group by PDF,
copy groups and orphans, then report.

Only directory setup and the staging scan can fail the run. Everything after
that is collected into the returned summary.
"""
from datetime import datetime
import logging

from .config import OrganizerConfig, load_config
from .copier import FlatteningCopier, OrphanCopier
from .grouper import PdfGrouper
from .manifest import CopyManifest
from .models import OrganizeSummary
from .scanner import FolderScanner
from .session import new_session
from .utils import ensure_dir

logger = logging.getLogger(__name__)

def organize(config: OrganizerConfig | None = None, now: datetime | None = None) -> OrganizeSummary:
    config = (config or load_config()).validate()
    session = new_session(config, now)
    logger.info("Starting file organization, session %s", session.session_id)

    ensure_dir(config.output_root)
    ensure_dir(session.root)
    ensure_dir(session.no_pdf_dir)

    scanner = FolderScanner(config.staging_root, ignore_hidden=config.ignore_hidden)
    folder_names = scanner.list_folders()

    grouping = PdfGrouper(scanner, config.pdf_extension).group(folder_names)

    groups = [grouping.groups[k] for k in sorted(grouping.groups)]
    group_results = FlatteningCopier(session.root, config.pdf_extension).copy_many(groups)

    orphans = sorted(grouping.orphans, key=lambda f: f.name)
    orphan_results = OrphanCopier(session.no_pdf_dir).copy_many(orphans)

    summary = OrganizeSummary(
        session_id=session.session_id,
        total_folders=len(folder_names),
        pdf_group_count=len(grouping.groups),
        orphan_folder_count=len(grouping.orphans),
        destination_root=session.root,
        group_results=group_results,
        orphan_results=orphan_results,
        skipped_folders=list(grouping.skipped),
    )

    if config.write_manifest:
        try:
            CopyManifest(config.output_root).record(summary)
        except OSError as e:
            logger.error("Failed to write manifest for session %s: %s", session.session_id, e)

    logger.info("Done. Copied %d files into %s (%d errors)",
                summary.files_copied, session.root, summary.error_count)
    return summary


class Organizer:
    """Holds a config; every run() starts a fresh session."""
    def __init__(self, config: OrganizerConfig):
        self.config = config

    def run(self, now: datetime | None = None) -> OrganizeSummary:
        return organize(self.config, now)
