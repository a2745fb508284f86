import csv
import json
from pathlib import Path
from datetime import datetime
from typing import Iterable, Iterator, List

from .defaults import MANIFEST_CSV_NAME, MANIFEST_DIR_NAME
from .models import CopyRecord, OrganizeSummary

CSV_FIELDS = ["session_id", "src", "dst", "timestamp"]

class CopyManifest:
    """
    Per-output-root record of what each session copied.

    Lives in <output_root>/.pinsorter: copies.csv gets one row per copy across
    all sessions, <session_id>.json holds that session's summary. Nothing is
    created on disk until the first write.
    """
    def __init__(self, output_root: Path):
        self.meta_dir = output_root / MANIFEST_DIR_NAME
        self.csv_path = self.meta_dir / MANIFEST_CSV_NAME

    def _summary_path(self, session_id: str) -> Path:
        return self.meta_dir / f"{session_id}.json"

    def write_copies(self, session_id: str, copies: Iterable[CopyRecord],
                     when: datetime | None = None) -> int:
        rows = [
            {"session_id": session_id, "src": str(c.source), "dst": str(c.destination)}
            for c in copies
        ]
        if not rows:
            return 0
        stamp = (when or datetime.now()).isoformat()
        self.meta_dir.mkdir(parents=True, exist_ok=True)
        new_file = not self.csv_path.exists()
        with self.csv_path.open("a", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            if new_file:
                writer.writeheader()
            writer.writerows({**row, "timestamp": stamp} for row in rows)
        return len(rows)

    def write_summary(self, summary: OrganizeSummary) -> Path:
        self.meta_dir.mkdir(parents=True, exist_ok=True)
        path = self._summary_path(summary.session_id)
        path.write_text(json.dumps(summary.to_dict(), indent=2), encoding="utf-8")
        return path

    def record(self, summary: OrganizeSummary) -> Path:
        self.write_copies(summary.session_id, summary.copies())
        return self.write_summary(summary)

    def list_sessions(self) -> List[str]:
        """Session ids, newest first. Ids are timestamps, so name order is time order."""
        if not self.meta_dir.is_dir():
            return []
        return sorted((p.stem for p in self.meta_dir.glob("*.json")), reverse=True)

    def load_summary(self, session_id: str) -> dict:
        path = self._summary_path(session_id)
        if not path.exists():
            return {}
        return json.loads(path.read_text(encoding="utf-8"))

    def _rows(self) -> Iterator[dict]:
        if not self.csv_path.exists():
            return
        with self.csv_path.open("r", newline="", encoding="utf-8") as f:
            yield from csv.DictReader(f)

    def load_copies(self, session_id: str) -> List[CopyRecord]:
        return [
            CopyRecord(source=Path(row["src"]), destination=Path(row["dst"]))
            for row in self._rows() if row["session_id"] == session_id
        ]
