"""
ScanLingo — Text Pipeline
==========================
Pure, synchronous transforms between raw text and presentation sections.

Exports
-------
build_prompt       — language-specific search prompt
segment            — generated answer → ordered Sections
assemble           — Sections + image links → ResultSet
clean_translation  — strip quotes / labels from a translation
"""

from scanlingo.text_pipeline.prompt_builder import (
    build_prompt,
    build_translation_prompt,
    build_find_prompt,
    IMAGE_ANALYSIS_PROMPT,
)
from scanlingo.text_pipeline.segmenter import segment
from scanlingo.text_pipeline.assembler import assemble, format_share_text, format_share_all
from scanlingo.text_pipeline.translation import clean_translation
from scanlingo.text_pipeline.schemas import Query, GeneratedAnswer, Section, ResultSet

__all__ = [
    "build_prompt",
    "build_translation_prompt",
    "build_find_prompt",
    "IMAGE_ANALYSIS_PROMPT",
    "segment",
    "assemble",
    "format_share_text",
    "format_share_all",
    "clean_translation",
    "Query",
    "GeneratedAnswer",
    "Section",
    "ResultSet",
]
