"""Per-key sliding window counter using monotonic timestamps."""

import time


class SlidingWindowCounter:
    """Tracks per-key hit counts within a sliding time window.

    Stale keys are pruned every ``cleanup_interval`` seconds so memory stays
    bounded by the number of clients seen in the last window.
    """

    def __init__(self, window: float = 60.0, cleanup_interval: float = 60.0) -> None:
        self.window = window
        self._hits: dict[str, list[float]] = {}
        self._last_cleanup = time.monotonic()
        self._cleanup_interval = cleanup_interval

    def __len__(self) -> int:
        return len(self._hits)

    def _prune(self, now: float) -> None:
        if now - self._last_cleanup < self._cleanup_interval:
            return
        self._last_cleanup = now
        cutoff = now - self.window
        for key in list(self._hits):
            recent = [t for t in self._hits[key] if t > cutoff]
            if recent:
                self._hits[key] = recent
            else:
                del self._hits[key]

    def hit(self, key: str, limit: int) -> tuple[bool, int]:
        """Record a hit for *key* if it is under *limit*.

        Returns ``(allowed, retry_after_seconds)``; ``retry_after`` is 0 when allowed.
        """
        now = time.monotonic()
        self._prune(now)
        cutoff = now - self.window

        recent = [t for t in self._hits.get(key, []) if t > cutoff]
        if len(recent) >= limit:
            self._hits[key] = recent
            retry_after = int(recent[0] - cutoff) + 1
            return False, max(retry_after, 1)

        recent.append(now)
        self._hits[key] = recent
        return True, 0
