"""Request sequencing so superseded results are discarded.

Each completion request is tagged with a monotonically increasing number
per session (typically the document URI). When the result arrives, it is
only used if no newer request was issued for that session meanwhile.

HTTP sessions are never closed explicitly, so only the most recently used
sessions are tracked; an evicted session's in-flight request is treated as
superseded.
"""

from collections import OrderedDict
from itertools import count

DEFAULT_MAX_SESSIONS = 1024


class RequestSequencer:
    """Issues sequence numbers and checks whether one is still the latest."""

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._counter = count(1)
        self._latest: OrderedDict[str, int] = OrderedDict()
        self._max_sessions = max_sessions

    def issue(self, session: str) -> int:
        """Tag a new request for ``session`` and return its sequence number."""
        seq = next(self._counter)
        self._latest[session] = seq
        self._latest.move_to_end(session)
        while len(self._latest) > self._max_sessions:
            self._latest.popitem(last=False)
        return seq

    def is_current(self, session: str, seq: int) -> bool:
        """True if ``seq`` is the latest number issued for ``session``."""
        return self._latest.get(session) == seq

    def forget(self, session: str) -> None:
        """Drop the state kept for ``session`` (e.g. when a document closes)."""
        self._latest.pop(session, None)

    def __len__(self) -> int:
        return len(self._latest)
