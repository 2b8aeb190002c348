"""JSON file storage for the watchlist, briefing history and settings."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List

from pydantic import ValidationError

from briefing.schemas.briefing import AppSettings, BriefingRecord

logger = logging.getLogger(__name__)

WATCHLIST_KEY = "stock_watchlist"
HISTORY_KEY = "stock_briefing_history"
SETTINGS_KEY = "stock_settings"

# Stores are built per request, so read-modify-write cycles share one process-wide lock.
_WRITE_LOCK = threading.RLock()


def _base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = ""
    while value:
        value, remainder = divmod(value, 36)
        result = digits[remainder] + result
    return result or "0"


def simple_id() -> str:
    """Short time-ordered identifier for history records."""

    return _base36(int(time.time() * 1000)) + uuid.uuid4().hex[:6]


class KeyValueStore:
    """One JSON document per key inside ``root``."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def get(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable document '%s': %s", path, exc)
            return None

    def set(self, key: str, value: Any) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.root,
            prefix=f".{key}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            try:
                json.dump(value, handle, ensure_ascii=False, indent=2)
            except (TypeError, ValueError):
                handle.close()
                os.unlink(tmp_name)
                raise
        try:
            os.replace(tmp_name, self._path(key))
        except OSError:
            os.unlink(tmp_name)
            raise


class BriefingStore:
    """Watchlist, history and settings persisted through a :class:`KeyValueStore`."""

    def __init__(
        self,
        store: KeyValueStore,
        *,
        default_watchlist: Iterable[str],
        history_limit: int = 50,
    ) -> None:
        self._store = store
        self._default_watchlist = list(default_watchlist)
        self._history_limit = history_limit

    # ------------------------------------------------------------------
    # Watchlist
    # ------------------------------------------------------------------
    def load_watchlist(self) -> List[str]:
        data = self._store.get(WATCHLIST_KEY)
        if not isinstance(data, list):
            if data is not None:
                logger.warning("Stored watchlist is not a list; using defaults")
            return list(self._default_watchlist)
        return [str(item) for item in data]

    def save_watchlist(self, tickers: Iterable[str]) -> List[str]:
        cleaned: List[str] = []
        for ticker in tickers:
            normalized = str(ticker).strip().upper()
            if normalized and normalized not in cleaned:
                cleaned.append(normalized)
        with _WRITE_LOCK:
            self._store.set(WATCHLIST_KEY, cleaned)
        return cleaned

    def add_ticker(self, ticker: str) -> List[str]:
        normalized = ticker.strip().upper()
        with _WRITE_LOCK:
            tickers = self.load_watchlist()
            if normalized and normalized not in tickers:
                tickers.append(normalized)
                self._store.set(WATCHLIST_KEY, tickers)
        return tickers

    def remove_ticker(self, ticker: str) -> List[str]:
        normalized = ticker.strip().upper()
        with _WRITE_LOCK:
            tickers = [item for item in self.load_watchlist() if item != normalized]
            self._store.set(WATCHLIST_KEY, tickers)
        return tickers

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------
    def load_history(self) -> List[BriefingRecord]:
        data = self._store.get(HISTORY_KEY)
        if not isinstance(data, list):
            return []
        records: List[BriefingRecord] = []
        for item in data:
            try:
                records.append(BriefingRecord.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping malformed history entry: %s", exc)
        return records

    def _save_history(self, records: List[BriefingRecord]) -> None:
        self._store.set(HISTORY_KEY, [record.model_dump() for record in records])

    def add_to_history(self, content: str, stocks: Iterable[str]) -> BriefingRecord:
        record = BriefingRecord(
            id=simple_id(),
            date=datetime.now(timezone.utc).isoformat(),
            content=content,
            stocks=list(stocks),
        )
        with _WRITE_LOCK:
            records = [record, *self.load_history()][: self._history_limit]
            self._save_history(records)
        return record

    def remove_entry(self, record_id: str) -> bool:
        with _WRITE_LOCK:
            records = self.load_history()
            remaining = [record for record in records if record.id != record_id]
            if len(remaining) == len(records):
                return False
            self._save_history(remaining)
        return True

    def clear_history(self) -> None:
        with _WRITE_LOCK:
            self._save_history([])

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def load_settings(self) -> AppSettings:
        defaults = AppSettings()
        data = self._store.get(SETTINGS_KEY)
        if not isinstance(data, dict):
            return defaults

        merged = {**defaults.model_dump(), **data}
        for nested in ("analysis_prefs", "schedule"):
            stored = data.get(nested)
            merged[nested] = {
                **getattr(defaults, nested).model_dump(),
                **(stored if isinstance(stored, dict) else {}),
            }
        try:
            return AppSettings.model_validate(merged)
        except ValidationError as exc:
            logger.warning("Stored settings are invalid; using defaults: %s", exc)
            return defaults

    def save_settings(self, app_settings: AppSettings) -> AppSettings:
        with _WRITE_LOCK:
            self._store.set(SETTINGS_KEY, app_settings.model_dump())
        return app_settings


def open_store(root: Path, *, default_watchlist: Iterable[str], history_limit: int) -> BriefingStore:
    return BriefingStore(
        KeyValueStore(root),
        default_watchlist=default_watchlist,
        history_limit=history_limit,
    )


__all__ = [
    "BriefingStore",
    "HISTORY_KEY",
    "KeyValueStore",
    "SETTINGS_KEY",
    "WATCHLIST_KEY",
    "open_store",
    "simple_id",
]
