from __future__ import annotations


class MessageLog:
    """
    Player-facing notices ("Game saved!", "No saved game.", ...).

    Holds the latest message, which the HUD shows in its bottom band until
    ``ttl`` seconds have passed.
    """

    def __init__(self, ttl: float = 2.5) -> None:
        self.ttl: float = ttl
        self._last_message: str = ""
        self._age: float = 0.0

    def add_entry(self, value: str) -> None:
        """Show a message; for multi-line strings the last line wins."""
        raw = "" if value is None else str(value)
        raw = raw.replace("\r\n", "\n").replace("\r", "\n")
        lines = [ln.strip() for ln in raw.split("\n") if ln.strip()]
        if not lines:
            return

        self._last_message = lines[-1]
        self._age = 0.0

    def update(self, dt: float) -> None:
        """Age the visible message; it disappears after ``ttl`` seconds."""
        if not self._last_message:
            return
        self._age += dt
        if self._age >= self.ttl:
            self._last_message = ""

    @property
    def last_message(self) -> str:
        """Message currently shown, or "" when nothing is visible."""
        return self._last_message
