"""
ScanLingo — Latest-Request Gate

Each request takes a ticket before its first await; when its response
arrives it may only touch screen state if its ticket is still the newest.
Responses that lose the race are dropped, whatever order they arrive in.
"""

from __future__ import annotations


class LatestRequestGate:
    def __init__(self) -> None:
        self._issued = 0

    def issue(self) -> int:
        self._issued += 1
        return self._issued

    def invalidate(self) -> None:
        """Make every outstanding ticket stale without starting a request."""
        self._issued += 1

    def is_current(self, ticket: int) -> bool:
        return ticket == self._issued
