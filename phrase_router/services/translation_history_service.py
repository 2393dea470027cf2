"""Translation history log: a capped, newest-first list of resolved translations."""
import logging
import threading
from typing import List, Optional

from phrase_router.models.internal_models import HistoryRecord, TranslationResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY_SIZE = 20


class HistoryLog:
    def __init__(self, max_size: int = DEFAULT_MAX_HISTORY_SIZE):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._max_size = max_size
        self._records: List[HistoryRecord] = []
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    @max_size.setter
    def max_size(self, size: int) -> None:
        """Change the cap, trimming the oldest records if needed."""
        if size < 1:
            raise ValueError("max_size must be at least 1")
        with self._lock:
            self._max_size = size
            del self._records[size:]

    def record(self, source_text: str, result: TranslationResult) -> HistoryRecord:
        entry = HistoryRecord(
            source_text=source_text,
            target_text=result.translated_text,
            source_language=result.source_language,
            target_language=result.target_language,
            is_offline=result.is_offline,
            romanization=result.romanization,
        )
        with self._lock:
            self._records.insert(0, entry)
            del self._records[self._max_size:]
        return entry

    def list(self, limit: Optional[int] = None) -> List[HistoryRecord]:
        with self._lock:
            records = list(self._records)
        return records[:limit] if limit is not None else records

    def delete(self, record_id: str) -> bool:
        with self._lock:
            before = len(self._records)
            self._records = [r for r in self._records if r.id != record_id]
            return len(self._records) < before

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
        logger.info("Translation history cleared")

    def stats(self) -> dict:
        with self._lock:
            total = len(self._records)
            offline = sum(1 for r in self._records if r.is_offline)
        return {
            "total_translations": total,
            "offline_translations": offline,
            "online_translations": total - offline,
            "offline_rate": offline / total if total > 0 else 0.0,
            "max_history_size": self._max_size,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
