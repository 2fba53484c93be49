# leaderboard.py
from __future__ import annotations
import json
import logging
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_SCORES_PATH = os.path.join("data", "best_scores.json")


@dataclass
class ScoreEntry:
    name: str
    score: int
    date: str


class Leaderboard:
    """
    Top-N scores persisted as a JSON list of {name, score, date}.

    The in-memory list is authoritative for the session: a failed write is
    logged and the new entry still shows up in list_top().
    """

    def __init__(self, path: str = DEFAULT_SCORES_PATH, size: int = 10):
        self.path = path
        self.size = size
        self._entries: Optional[List[ScoreEntry]] = None

    def list_top(self, n: Optional[int] = None) -> List[ScoreEntry]:
        entries = self._load()
        return list(entries[: self.size if n is None else min(n, self.size)])

    def submit_score(self, name: str, score: int, when: Optional[datetime] = None) -> List[ScoreEntry]:
        stamp = (when or datetime.now()).strftime("%x, %X")
        entries = self._load() + [ScoreEntry(name=name, score=int(score), date=stamp)]
        entries.sort(key=lambda e: e.score, reverse=True)
        self._entries = entries[: self.size]
        self._save()
        return list(self._entries)

    # ---------- Storage ----------
    def _load(self) -> List[ScoreEntry]:
        if self._entries is not None:
            return self._entries
        self._entries = []
        if not os.path.exists(self.path):
            return self._entries
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read leaderboard %s: %s", self.path, exc)
            return self._entries
        if not isinstance(raw, list):
            logger.warning("Ignoring leaderboard %s: expected a list", self.path)
            return self._entries
        for item in raw:
            try:
                self._entries.append(ScoreEntry(str(item["name"]), int(item["score"]), str(item.get("date", ""))))
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed leaderboard entry: %r", item)
        self._entries.sort(key=lambda e: e.score, reverse=True)
        return self._entries

    def _save(self) -> None:
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([asdict(e) for e in self._entries], f, indent=2)
        except OSError as exc:
            logger.warning("Could not write leaderboard %s: %s", self.path, exc)
