"""
ScanLingo — Pydantic Schemas

Defines all request / response data contracts used across the API.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field


# ── Search ────────────────────────────────────────────────────────────────

class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, description="Typed or OCR-captured text to look up.")
    language: str = Field(default="en", description="Answer language, e.g. 'en', 'hi', 'es'.")


class SectionOut(BaseModel):
    index: int = Field(..., ge=0)
    title: str
    body: str
    image_url: Optional[str] = None


class SearchResponse(BaseModel):
    query: str
    language: str
    sections: list[SectionOut]
    share_text: str = Field(default="", description="All sections, formatted for sharing.")


# ── Translation ───────────────────────────────────────────────────────────

class TranslateRequest(BaseModel):
    text: str = Field(..., description="Source text; blank text is echoed back.")
    target_language: str = Field(default="hi")


class TranslateResponse(BaseModel):
    text: str = Field(..., description="Translation, or the source text when it could not be translated.")
    target_language: str
    source_language: str
    source_language_confidence: float = 0.0
    translated: bool = Field(..., description="False on short-circuit or failure.")
    error: Optional[str] = None


# ── Camera helpers ────────────────────────────────────────────────────────

class FindRequest(BaseModel):
    search_query: str = Field(..., min_length=1)
    detected_text: str = Field(..., min_length=1, description="Text previously captured by OCR.")


class FindResponse(BaseModel):
    excerpts: list[str]


class ImageAnalysisResponse(BaseModel):
    content: str
    mime_type: str


# ── Languages ─────────────────────────────────────────────────────────────

class LanguageOut(BaseModel):
    code: str
    label: str
    native_name: str
    tts_tag: str
    placeholder: str
    structured_answers: bool = Field(
        ...,
        description="True when search answers use a language-specific section template.",
    )
