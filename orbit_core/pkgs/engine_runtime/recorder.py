"""
Recording of orbit tracks with CSV and JSONL output.
"""
import csv
import json
import os
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..geometry import Position

logger = logging.getLogger(__name__)

FIELDS = ["turn", "id", "name", "x", "y"]


class TrackRecorder:
    """Collects one row per (turn, object) position."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.rows: List[Dict[str, Any]] = []
        self._metadata = {
            'created_at': datetime.now(timezone.utc).isoformat(),
        }

    def set_metadata(self, **kwargs):
        """Set metadata that will be included in JSONL output."""
        self._metadata.update(kwargs)

    def log(self, turn: int, orbit_id: int, position: Position, name: Optional[str] = None):
        if not self.enabled:
            return
        self.rows.append({
            'turn': int(turn),
            'id': int(orbit_id),
            'name': name,
            'x': float(position.x),
            'y': float(position.y),
        })

    def dump_csv(self, path: str):
        if not self.enabled or not self.rows:
            return

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=FIELDS)
            writer.writeheader()
            writer.writerows(self.rows)
        logger.info(f"Saved {len(self.rows)} rows to CSV: {path}")

    def dump_jsonl(self, path: str):
        """Metadata goes on the first line, then one JSON object per row."""
        if not self.enabled or not self.rows:
            return

        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, 'w') as f:
            f.write(json.dumps({'_metadata': self._metadata}) + '\n')
            for row in self.rows:
                f.write(json.dumps(row) + '\n')
        logger.info(f"Saved {len(self.rows)} rows to JSONL: {path}")

    def dump(self, path_prefix: str, fmt: str = "csv") -> str:
        if fmt == "csv":
            path = f"{path_prefix}.csv"
            self.dump_csv(path)
        elif fmt == "jsonl":
            path = f"{path_prefix}.jsonl"
            self.dump_jsonl(path)
        else:
            raise ValueError(f"Unsupported format: {fmt}")
        return path

    def clear(self):
        self.rows.clear()

    def get_summary(self) -> Dict[str, Any]:
        if not self.rows:
            return {'row_count': 0}
        turns = [row['turn'] for row in self.rows]
        return {
            'row_count': len(self.rows),
            'objects': len({row['id'] for row in self.rows}),
            'first_turn': min(turns),
            'last_turn': max(turns),
        }
