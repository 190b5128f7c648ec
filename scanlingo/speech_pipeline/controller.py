"""
ScanLingo — Speech Controller
Module : scanlingo/speech_pipeline/controller.py

State machine around one SpeechBackend:

    idle ──start()──────────────► speaking
    speaking ──stop()───────────► idle
    speaking ──finish / cancel──► idle
    speaking ──error────────────► idle   (+ on_error callback, last_error)

At most one utterance is active per controller: start() while speaking
stops the current utterance first. Each utterance gets an id; backend
events carrying any other id (a superseded or explicitly stopped utterance)
are ignored, so a late "finish" can never flip state after a stop. A start()
whose session is replaced while it is still pushing voice parameters gives
up before speak(), so overlapping starts leave only the newest utterance.

Voice parameters (language, rate, pitch) are stored on the controller and
pushed to the backend only inside start(); changing them mid-utterance does
not touch the utterance in flight.
"""

from __future__ import annotations

import itertools
from dataclasses import replace
from typing import Callable, Optional

from loguru import logger

from scanlingo.errors import SpeechBackendError
from scanlingo.speech_pipeline.backend import SpeechBackend
from scanlingo.speech_pipeline.schemas import (
    SpeechEvent,
    SpeechEventKind,
    SpeechSession,
    SpeechStatus,
    VoiceParams,
)

ErrorCallback = Callable[[SpeechBackendError], None]


class SpeechController:
    def __init__(
        self,
        backend: SpeechBackend,
        voice: Optional[VoiceParams] = None,
        on_error: Optional[ErrorCallback] = None,
    ):
        self.backend = backend
        self.voice = voice or VoiceParams()
        self.on_error = on_error

        self.session: Optional[SpeechSession] = None
        self.last_error: Optional[SpeechBackendError] = None
        self._ids = itertools.count(1)
        self._subscribed = False

    # ── Event stream lifecycle ────────────────────────────────────────────

    def subscribe(self) -> None:
        if not self._subscribed:
            self.backend.add_listener(self._on_event)
            self._subscribed = True

    def unsubscribe(self) -> None:
        if self._subscribed:
            self.backend.remove_listener(self._on_event)
            self._subscribed = False

    async def close(self) -> None:
        """Stop any utterance and release the backend event stream."""
        try:
            if self.is_speaking:
                await self.stop()
        finally:
            self.unsubscribe()

    async def __aenter__(self) -> "SpeechController":
        self.subscribe()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ── State ─────────────────────────────────────────────────────────────

    @property
    def status(self) -> SpeechStatus:
        return self.session.status if self.session else SpeechStatus.idle

    @property
    def is_speaking(self) -> bool:
        return self.status is SpeechStatus.speaking

    # ── Voice parameters (applied at next start) ──────────────────────────

    def set_rate(self, rate: float) -> None:
        self.voice = VoiceParams(self.voice.language_tag, rate, self.voice.pitch)

    def set_pitch(self, pitch: float) -> None:
        self.voice = VoiceParams(self.voice.language_tag, self.voice.rate, pitch)

    def set_language(self, language_tag: str) -> None:
        self.voice = VoiceParams(language_tag, self.voice.rate, self.voice.pitch)

    # ── Transitions ───────────────────────────────────────────────────────

    async def start(
        self,
        text: str,
        language_tag: Optional[str] = None,
        rate: Optional[float] = None,
        pitch: Optional[float] = None,
    ) -> SpeechStatus:
        """Speak *text*; explicit arguments override the stored voice for this utterance only."""
        if not text or not text.strip():
            logger.warning("[Speech] Ignoring start() with empty text")
            return self.status

        # another start() may begin speaking while stop() is awaited
        while self.is_speaking:
            await self.stop()

        session = SpeechSession(
            utterance_id=f"utt-{next(self._ids)}",
            utterance_text=text,
            language_tag=language_tag or self.voice.language_tag,
            rate=self.voice.rate if rate is None else rate,
            pitch=self.voice.pitch if pitch is None else pitch,
        )
        self.session = session
        logger.info(
            f"[Speech] ▶ {session.utterance_id} | lang={session.language_tag} | "
            f"rate={session.rate} | pitch={session.pitch} | chars={len(text)}"
        )

        try:
            await self.backend.set_language(session.language_tag)
            if self._superseded(session):
                return self.status
            await self.backend.set_rate(session.rate)
            if self._superseded(session):
                return self.status
            await self.backend.set_pitch(session.pitch)
            if self._superseded(session):
                return self.status
            await self.backend.speak(text, session.language_tag, utterance_id=session.utterance_id)
        except Exception as e:
            self._fail(session.utterance_id, f"Speech backend failed to start: {e}")

        return self.status

    def _superseded(self, session: SpeechSession) -> bool:
        """True once stop() or a newer start() replaced *session* during setup."""
        if self.session is session:
            return False
        logger.info(f"[Speech] {session.utterance_id} superseded before speak, not sent")
        return True

    async def stop(self) -> SpeechStatus:
        session = self.session
        if session is None or session.status is SpeechStatus.idle:
            return SpeechStatus.idle

        # Flip first so events still in flight for this utterance are ignored.
        self._end(session.utterance_id)
        logger.info(f"[Speech] ■ stop {session.utterance_id}")
        try:
            await self.backend.stop()
        except Exception as e:
            logger.warning(f"[Speech] Backend stop failed (non-fatal): {e}")
        return SpeechStatus.idle

    async def toggle(self, text: str) -> SpeechStatus:
        """Speak button: stop when speaking, otherwise start with the current voice."""
        if self.is_speaking:
            return await self.stop()
        return await self.start(text)

    # ── Backend notifications ─────────────────────────────────────────────

    def _is_current(self, utterance_id: Optional[str]) -> bool:
        session = self.session
        if session is None or session.status is not SpeechStatus.speaking:
            return False
        return utterance_id is None or utterance_id == session.utterance_id

    def _on_event(self, event: SpeechEvent) -> None:
        if not self._is_current(event.utterance_id):
            logger.debug(f"[Speech] Ignoring stale {event.kind.value} for {event.utterance_id}")
            return

        if event.kind is SpeechEventKind.start:
            logger.debug(f"[Speech] backend started {event.utterance_id}")
        elif event.kind in (SpeechEventKind.finish, SpeechEventKind.cancel):
            self._end(self.session.utterance_id)
            logger.info(f"[Speech] {event.kind.value} {event.utterance_id}")
        elif event.kind is SpeechEventKind.error:
            self._fail(self.session.utterance_id, event.message or "Speech backend error")

    def _end(self, utterance_id: str) -> None:
        if self.session and self.session.utterance_id == utterance_id:
            self.session = replace(self.session, status=SpeechStatus.idle)

    def _fail(self, utterance_id: str, reason: str) -> None:
        self._end(utterance_id)
        error = SpeechBackendError(reason)
        self.last_error = error
        logger.warning(f"[Speech] {reason}")
        if self.on_error is not None:
            try:
                self.on_error(error)
            except Exception as e:
                logger.error(f"[Speech] on_error callback failed: {e}")
