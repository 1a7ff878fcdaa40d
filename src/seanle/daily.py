# src/seanle/daily.py
# Day numbering and the "played today" record.
# The record lives in a small key-value store with three keys, read at session
# start and written once at session end.

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Dict, Optional

from .config import REFERENCE_DATE

logger = logging.getLogger(__name__)

LAST_PLAYED_KEY = "lastPlayedDate"
RESULT_KEY = "gameResult"
TIME_KEY = "gameTime"

MS_PER_DAY = 1000 * 60 * 60 * 24


def day_index(now: Optional[datetime] = None, reference: date = REFERENCE_DATE) -> int:
    """
    Puzzle number: whole days since local midnight of `reference`, plus one.

    Both ends are pinned to real instants (naive values are read as local time)
    and subtracted as elapsed milliseconds, so an aware `now` in any zone works.
    """
    now = (now or datetime.now()).astimezone()
    ref = datetime.combine(reference, time()).astimezone()
    elapsed_ms = (now - ref).total_seconds() * 1000
    return int(elapsed_ms // MS_PER_DAY) + 1


def today_key(today: Optional[date] = None) -> str:
    return (today or date.today()).isoformat()


# ---------- Stores ----------

class MemoryStore:
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore(MemoryStore):
    """MemoryStore persisted to a JSON object on disk after every write."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(self._load())

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable state file %s: %s", self.path, e)
            return {}
        if not isinstance(raw, dict):
            logger.warning("ignoring state file %s: not a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def _save(self) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2, sort_keys=True)

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        self._save()

    def remove(self, key: str) -> None:
        super().remove(key)
        self._save()


# ---------- Daily lock ----------

@dataclass
class DailyStatus:
    played_today: bool
    result: Optional[str] = None   # "win" / "lose"
    game_time: Optional[str] = None


def daily_status(store: MemoryStore, today: Optional[date] = None) -> DailyStatus:
    if store.get(LAST_PLAYED_KEY) != today_key(today):
        return DailyStatus(played_today=False)
    return DailyStatus(
        played_today=True,
        result=store.get(RESULT_KEY),
        game_time=store.get(TIME_KEY),
    )


def has_played_today(store: MemoryStore, today: Optional[date] = None) -> bool:
    return daily_status(store, today).played_today


def record_result(store: MemoryStore, won: bool, elapsed: float, today: Optional[date] = None) -> None:
    store.set(LAST_PLAYED_KEY, today_key(today))
    store.set(RESULT_KEY, "win" if won else "lose")
    store.set(TIME_KEY, f"{elapsed:.2f}")
    logger.info("recorded %s in %.2fs for %s", "win" if won else "loss", elapsed, today_key(today))


def reset(store: MemoryStore) -> None:
    for key in (LAST_PLAYED_KEY, RESULT_KEY, TIME_KEY):
        store.remove(key)
