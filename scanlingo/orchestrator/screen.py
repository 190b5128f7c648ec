"""
ScanLingo — Screen Session
Module : scanlingo/orchestrator/screen.py

One object per screen holding everything that screen owns:

  • language          — the LanguagePreference (changed only by the user)
  • speech            — SpeechController (voice follows the language)
  • translation       — TranslationOrchestrator for captured / typed text
  • results / error   — the ResultSet of the latest query, replaced wholesale

Nothing here is shared between screens, so no locking is needed: every
mutation happens on the screen's own event loop, and superseded requests
are filtered out by ticket instead.

Usage
-----
async with ScreenSession(llm, images, speech_backend, language="hi") as screen:
    await screen.submit_query("monsoon")
    await screen.toggle_speak()
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Optional

from loguru import logger

from scanlingo.capture import CaptureError, CaptureSurface, normalize_captured_text
from scanlingo.config import Settings, get_settings
from scanlingo.image_search import ImageSearchClient
from scanlingo.languages import message, tts_tag
from scanlingo.llm_engine import GeminiClient
from scanlingo.orchestrator.gate import LatestRequestGate
from scanlingo.orchestrator.translation import TranslationOrchestrator, TranslationResult
from scanlingo.search import SearchOutcome, SearchPipeline
from scanlingo.speech_pipeline import SpeechBackend, SpeechController, SpeechStatus, VoiceParams
from scanlingo.text_pipeline import Query, ResultSet
from scanlingo.text_pipeline.assembler import format_share_all, format_share_text, share_all_title


class ScreenSession:
    def __init__(
        self,
        llm: GeminiClient,
        images: ImageSearchClient,
        speech_backend: SpeechBackend,
        language: str = "en",
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.language = language

        self.search = SearchPipeline(llm, images)
        self.translation = TranslationOrchestrator(llm, language, settings=self.settings)
        self.speech = SpeechController(
            speech_backend,
            voice=VoiceParams(tts_tag(language), self.settings.tts_rate, self.settings.tts_pitch),
            on_error=self._on_speech_error,
        )

        self.results: ResultSet = ()
        self.last_query: Optional[Query] = None
        self.error: Optional[str] = None
        self.is_loading = False
        self._search_gate = LatestRequestGate()

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def __aenter__(self) -> "ScreenSession":
        self.speech.subscribe()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        self._search_gate.invalidate()
        await self.speech.close()
        logger.debug("[Screen] closed")

    # ── Search ────────────────────────────────────────────────────────────

    async def submit_query(self, text: str) -> Optional[SearchOutcome]:
        if not text or not text.strip():
            return None

        query = Query(raw_text=text.strip(), language_code=self.language)
        ticket = self._search_gate.issue()
        self.last_query = query
        self.is_loading = True
        self.error = None

        outcome = await self.search.run(query)

        if not self._search_gate.is_current(ticket):
            logger.info(f"[Screen] Dropping superseded search ({query.language_code!r})")
            return replace(outcome, stale=True)

        self.is_loading = False
        self.results = outcome.results
        self.error = outcome.error
        return outcome

    # ── Capture / translation ─────────────────────────────────────────────

    async def on_text_captured(self, text: str) -> TranslationResult:
        return await self.translation.on_source_text_changed(text)

    async def capture(self, surface: CaptureSurface) -> Optional[TranslationResult]:
        try:
            text = normalize_captured_text(await surface.capture_text())
        except CaptureError as e:
            logger.warning(f"[Screen] Capture failed: {e}")
            self.error = str(e)
            return None
        return await self.on_text_captured(text)

    async def change_language(self, language: str) -> None:
        """Switch language: re-voice, retranslate, and redo the last query."""
        if language == self.language:
            return

        logger.info(f"[Screen] Language {self.language!r} → {language!r}")
        self.language = language
        self.speech.set_language(tts_tag(language))
        self._search_gate.invalidate()
        self.is_loading = False

        jobs = [self.translation.on_language_changed(language)]
        if self.last_query is not None:
            jobs.append(self.submit_query(self.last_query.raw_text))
        await asyncio.gather(*jobs)

    # ── Speech ────────────────────────────────────────────────────────────

    def speakable_text(self) -> str:
        if self.translation.translated_text:
            return self.translation.translated_text
        return " ".join(f"{s.title}. {s.body}" for s in self.results)

    async def toggle_speak(self, text: Optional[str] = None) -> SpeechStatus:
        return await self.speech.toggle(text if text is not None else self.speakable_text())

    def _on_speech_error(self, error: Exception) -> None:
        self.error = message(self.language, "speech_failed")

    # ── Sharing ───────────────────────────────────────────────────────────

    def share_text(self, index: int) -> str:
        return format_share_text(self.results[index])

    def share_all(self) -> tuple[str, str]:
        """(title, message) for sharing every section of the current results."""
        query = self.last_query.raw_text if self.last_query else ""
        return share_all_title(query), format_share_all(self.results)
