"""
ScanLingo — Capture Surface Contract
=====================================
The camera / OCR layer is external. Whatever drives it only has to
return the recognized plain text, or raise CaptureError when the camera is
unavailable, permission was denied, or nothing was recognized.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from scanlingo.errors import CaptureError


class CaptureSurface(ABC):
    @abstractmethod
    async def capture_text(self) -> str:
        """Return OCR text for the current frame; raise CaptureError on failure."""


def normalize_captured_text(text: str) -> str:
    """
    Tidy raw OCR output: trim each line, drop blank lines.

    Raises CaptureError when nothing readable is left.
    """
    lines = [re.sub(r"[ \t]+", " ", ln).strip() for ln in (text or "").splitlines()]
    cleaned = "\n".join(ln for ln in lines if ln)
    if not cleaned:
        raise CaptureError("No text detected")
    return cleaned


__all__ = ["CaptureSurface", "CaptureError", "normalize_captured_text"]
