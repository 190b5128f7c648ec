"""
ScanLingo — Text Pipeline Internal Schemas

Lightweight dataclasses used as contracts between the prompt builder, the
response segmenter and the result assembler. The HTTP response models live
in scanlingo/schemas/__init__.py.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Tuple


# ── Inputs ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Query:
    """
    One submitted request.

    Attributes:
        raw_text      : Typed or OCR-captured text, used verbatim in the prompt.
        language_code : Screen language at submit time, e.g. "en", "hi".
    """
    raw_text:      str
    language_code: str


@dataclass(frozen=True)
class GeneratedAnswer:
    """Opaque text returned by the generative backend for one Query."""
    raw_text: str


# ── Outputs ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Section:
    """
    One titled, cleaned fragment of a generated answer.

    Attributes:
        index     : Position in the answer; also the image pairing position.
        title     : Never empty (localized positional default when unmarked).
        body      : Cleaned single-line text.
        image_url : Paired image link, None when the lookup had no entry.
    """
    index:     int
    title:     str
    body:      str
    image_url: Optional[str] = None

    def with_image(self, image_url: Optional[str]) -> "Section":
        return replace(self, image_url=image_url)


# A ResultSet is replaced wholesale, never patched, so an immutable tuple fits.
ResultSet = Tuple[Section, ...]
