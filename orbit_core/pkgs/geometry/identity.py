"""Process-wide identity generation for orbital objects."""
import threading


class IdGenerator:
    """Monotonically increasing integer ids, safe to share across threads."""

    def __init__(self, start: int = 0):
        self._last = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._last += 1
            return self._last

    @property
    def last(self) -> int:
        return self._last


_default = IdGenerator()


def next_id() -> int:
    """Return the next id from the shared generator."""
    return _default.next()
