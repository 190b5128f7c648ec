"""
ScanLingo — Search Pipeline
============================
One query in, one ResultSet (or one localized error) out.

  Query ──► build_prompt ──► Gemini ────────────┐
        └──────────────────► image lookup ──────┤  asyncio.gather (join)
                                                ▼
                                segment ──► assemble ──► SearchOutcome

Both requests are issued together and joined before assembly: a slow image
lookup delays the outcome, it never truncates it, and a failed lookup only
means the sections carry no images.

Public API
----------
    pipeline = SearchPipeline(llm, images)
    outcome  = await pipeline.run(Query("black holes", "en"))
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from scanlingo.errors import (
    BackendError,
    InvalidResponseError,
    NoSectionsError,
    TransportError,
)
from scanlingo.image_search import ImageSearchClient
from scanlingo.languages import message
from scanlingo.llm_engine import GeminiClient
from scanlingo.text_pipeline import GeneratedAnswer, Query, ResultSet, assemble, build_prompt, segment


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one query.

    Attributes:
        query      : The query that produced this outcome.
        results    : Sections with images; empty whenever error is set.
        error      : Localized user-facing message, None on success.
        error_kind : "network" | "backend" | "unexpected_format" | "no_results".
        stale      : True when a newer query superseded this one on its screen.
    """
    query:      Query
    results:    ResultSet = ()
    error:      Optional[str] = None
    error_kind: Optional[str] = None
    stale:      bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def classify_error(exc: Exception) -> str:
    """Map a pipeline exception onto a localized message key."""
    if isinstance(exc, NoSectionsError):
        return "no_results"
    if isinstance(exc, InvalidResponseError):
        return "unexpected_format"
    if isinstance(exc, TransportError) and exc.status_code is not None:
        return "backend"
    return "network"


class SearchPipeline:
    def __init__(self, llm: GeminiClient, images: ImageSearchClient):
        self.llm = llm
        self.images = images

    async def fetch_answer(self, query: Query) -> GeneratedAnswer:
        prompt = build_prompt(query.raw_text, query.language_code)
        raw = await self.llm.generate(prompt, relax_safety=True)
        return GeneratedAnswer(raw_text=raw)

    async def run(self, query: Query) -> SearchOutcome:
        logger.info(
            f"[Search] ▶ query_len={len(query.raw_text)} | lang={query.language_code!r}"
        )

        answer, image_urls = await asyncio.gather(
            self.fetch_answer(query),
            self.images.fetch_image_links(query.raw_text),
            return_exceptions=True,
        )

        if isinstance(image_urls, BaseException):
            logger.warning(f"[Search] Image lookup raised (non-fatal): {image_urls}")
            image_urls = []

        try:
            if isinstance(answer, BaseException):
                raise answer
            sections = segment(answer.raw_text, query.language_code)
        except (BackendError, NoSectionsError) as exc:
            kind = classify_error(exc)
            logger.error(f"[Search] Failed ({kind}): {exc}")
            return SearchOutcome(
                query=query,
                error=message(query.language_code, kind),
                error_kind=kind,
            )

        results = assemble(sections, image_urls)
        logger.info(
            f"[Search] ✅ {len(results)} sections | "
            f"{sum(1 for s in results if s.image_url)} with images"
        )
        return SearchOutcome(query=query, results=results)
