# JSON-file history of generated descriptions, newest first.

from __future__ import annotations
import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ProductRecord(BaseModel):
    """One stored generation: inputs, output and provenance."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, protected_namespaces=())

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    product_name: str
    product_details: str
    keywords: str
    description: str
    model: str
    created_at: str = Field(default_factory=_utc_now_iso)


class HistoryStore:
    def __init__(self, path: Path | str, limit: int = 50):
        self.path = Path(path)
        self.limit = limit
        self._lock = threading.Lock()

    def _ensure_file(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text(json.dumps([], indent=2), encoding="utf-8")

    def _read(self) -> List[ProductRecord]:
        self._ensure_file()
        raw = json.loads(self.path.read_text(encoding="utf-8"))
        return [ProductRecord.model_validate(item) for item in raw]

    def _write(self, records: List[ProductRecord]) -> None:
        self._ensure_file()
        data = [r.model_dump(by_alias=True) for r in records]
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def list_records(self) -> List[ProductRecord]:
        with self._lock:
            return self._read()

    def add(self, record: ProductRecord) -> ProductRecord:
        """Prepend ``record`` and drop anything past the history limit."""
        with self._lock:
            records = self._read()
            records.insert(0, record)
            self._write(records[: self.limit])
        logger.debug("Stored description %s (%s)", record.id, self.path)
        return record
