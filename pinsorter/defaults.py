# Fixed names used when no config overrides them.
PDF_EXTENSION = ".pdf"
NO_PDF_DIR_NAME = "A-NoPDFSFound"
SESSION_PREFIX = "Sorted-"

DEFAULT_STAGING_ROOT = "files/stage/stageFiles"
DEFAULT_OUTPUT_ROOT = "files/finished"

MANIFEST_DIR_NAME = ".pinsorter"
MANIFEST_CSV_NAME = "copies.csv"
