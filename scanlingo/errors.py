"""
ScanLingo — Error Taxonomy

Every failure the pipeline can report derives from ScanLingoError so call
sites can convert them into screen error state in one place.
"""

from __future__ import annotations

from typing import Optional


class ScanLingoError(Exception):
    """Base class for all pipeline errors."""


class CaptureError(ScanLingoError):
    """Camera unavailable, permission denied or OCR produced nothing."""


class BackendError(ScanLingoError):
    """A remote backend call did not produce a usable answer."""


class TransportError(BackendError):
    """Network failure, timeout or non-2xx status from a backend."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidResponseError(BackendError):
    """Backend answered, but not in the expected JSON shape."""


class NoSectionsError(ScanLingoError):
    """Generated text contained no recognizable section markers."""


class SpeechBackendError(ScanLingoError):
    """Speech engine failed to start or reported an error mid-utterance."""
