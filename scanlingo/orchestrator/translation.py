"""
ScanLingo — Translation Orchestrator
Module : scanlingo/orchestrator/translation.py

Keeps one screen's displayed translation in step with the latest source
text and the latest selected language.

  on_language_changed(lang) ─┐
                             ├─► retranslate()
  on_source_text_changed(t) ─┘

retranslate():
  1. target == base language (or blank text) → show source text, no request
  2. otherwise ask the backend, clean quotes / labels, show the result
  3. on failure → show the untranslated source text and set `error`

Only the most recently issued retranslate() may update the screen; a
response for an older call is discarded even if it arrives last.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from loguru import logger

from scanlingo.config import Settings, get_settings
from scanlingo.errors import BackendError, InvalidResponseError
from scanlingo.languages import message
from scanlingo.llm_engine import GeminiClient
from scanlingo.orchestrator.gate import LatestRequestGate
from scanlingo.text_pipeline import build_translation_prompt, clean_translation


@dataclass(frozen=True)
class TranslationResult:
    """
    Outcome of one retranslate() call.

    Attributes:
        text     : Translation, or the source text on short-circuit / failure.
        language : Target language the call was issued for.
        error    : Localized message when the backend call failed.
        detail   : Underlying exception text behind `error`.
        applied  : False when a newer call superseded this one.
    """
    text:     str
    language: str
    error:    Optional[str] = None
    detail:   Optional[str] = None
    applied:  bool = True


class TranslationOrchestrator:
    def __init__(
        self,
        llm: GeminiClient,
        language: str,
        source_text: str = "",
        settings: Optional[Settings] = None,
    ):
        self.llm = llm
        self.settings = settings or get_settings()
        self.base_language = self.settings.base_language

        # displayed state
        self.language = language
        self.source_text = source_text
        self.translated_text = ""
        self.error: Optional[str] = None
        self.error_detail: Optional[str] = None
        self.is_translating = False

        self._gate = LatestRequestGate()

    # ── Triggers ──────────────────────────────────────────────────────────

    async def on_language_changed(self, language: str) -> TranslationResult:
        self.language = language
        return await self.retranslate()

    async def on_source_text_changed(self, text: str) -> TranslationResult:
        self.source_text = text
        return await self.retranslate()

    # ── Core ──────────────────────────────────────────────────────────────

    async def translate(self, text: str, language: str) -> str:
        """One backend round-trip; raises BackendError subclasses on failure."""
        raw = await self.llm.generate(
            build_translation_prompt(text, language),
            temperature=self.settings.translation_temperature,
            max_output_tokens=self.settings.translation_max_output_tokens,
        )
        cleaned = clean_translation(raw, language)
        if not cleaned:
            raise InvalidResponseError("Translation was empty after cleanup")
        return cleaned

    async def retranslate(self) -> TranslationResult:
        text, language = self.source_text, self.language
        ticket = self._gate.issue()

        if not text.strip() or language == self.base_language:
            self.is_translating = False
            return self._apply(ticket, TranslationResult(text=text, language=language))

        self.is_translating = True
        try:
            translated = await self.translate(text, language)
            result = TranslationResult(text=translated, language=language)
        except BackendError as e:
            logger.error(f"[Translate] {language!r} failed: {e} — showing source text")
            result = TranslationResult(
                text=text,
                language=language,
                error=message(self.base_language, "translation_failed"),
                detail=str(e),
            )
        finally:
            if self._gate.is_current(ticket):
                self.is_translating = False

        return self._apply(ticket, result)

    def _apply(self, ticket: int, result: TranslationResult) -> TranslationResult:
        if not self._gate.is_current(ticket):
            logger.info(f"[Translate] Discarding stale response for {result.language!r}")
            return replace(result, applied=False)

        self.translated_text = result.text
        self.error = result.error
        self.error_detail = result.detail
        return result
