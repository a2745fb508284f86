from datetime import datetime, timezone
import re

from .config import OrganizerConfig
from .models import Session

_UNSAFE = re.compile(r"[:.]")

def session_id(now: datetime | None = None) -> str:
    """Sortable, filesystem-safe stamp at second precision, e.g. 2025-03-04T10-20-30."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    stamp = now.isoformat(timespec="milliseconds")
    return _UNSAFE.sub("-", stamp)[:19]


def new_session(config: OrganizerConfig, now: datetime | None = None) -> Session:
    # Two runs in the same second share a root; directory creation tolerates that.
    sid = session_id(now)
    root = config.output_root / f"{config.session_prefix}{sid}"
    return Session(session_id=sid, root=root, no_pdf_dir=root / config.no_pdf_dir_name)
