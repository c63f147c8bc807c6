"""
Gameplay telemetry.

Appends one JSON object per line to a .jsonl file. Only session milestones
are recorded (start, end, save, load); the frame loop is never sampled.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any

_log = logging.getLogger("dungeon.telemetry")

SESSION_START = "session_start"
SESSION_END = "session_end"
SAVE = "save"
LOAD = "load"


class TelemetryLogger:
    """
    Records session milestones for one run.

    Writing is best effort: the first failed write logs a warning and turns
    telemetry off for the rest of the run.
    """

    def __init__(self, path: Path, enabled: bool = True) -> None:
        self.path = Path(path)
        self.enabled = enabled
        self._started_at = time.monotonic()

        if self.enabled:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self._disable(e)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def session_start(self, enemies: int) -> None:
        self._record(SESSION_START, frame=0, enemies=enemies)

    def session_end(self, frame: int, result: str, *, score: int, health: int, keys: int) -> None:
        self._record(SESSION_END, frame=frame, result=result, score=score, health=health, keys=keys)

    def saved(self, frame: int) -> None:
        self._record(SAVE, frame=frame)

    def loaded(self, frame: int) -> None:
        self._record(LOAD, frame=frame)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _record(self, event: str, **fields: Any) -> None:
        if not self.enabled:
            return

        row = {
            "event": event,
            "ts": time.strftime("%Y-%m-%dT%H:%M:%S"),
            "elapsed": round(time.monotonic() - self._started_at, 3),
            **fields,
        }
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(row) + "\n")
        except OSError as e:
            self._disable(e)

    def _disable(self, error: OSError) -> None:
        _log.warning("Telemetry disabled, cannot write %s: %s", self.path, error)
        self.enabled = False
