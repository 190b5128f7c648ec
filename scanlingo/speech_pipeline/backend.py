"""
ScanLingo — Speech Backend Contract

Any text-to-speech engine (device TTS bridge, cloud voice, test double)
plugs into the SpeechController through this interface. Engines report
progress by calling _emit() with SpeechEvents; listeners are registered
and released explicitly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from loguru import logger

from scanlingo.speech_pipeline.schemas import SpeechEvent

SpeechListener = Callable[[SpeechEvent], None]


class SpeechBackend(ABC):
    def __init__(self) -> None:
        self._listeners: List[SpeechListener] = []

    # ---- engine operations ----
    @abstractmethod
    async def speak(self, text: str, language_tag: str, *, utterance_id: Optional[str] = None) -> None:
        """Begin speaking *text*; progress is reported through events tagged with utterance_id."""

    @abstractmethod
    async def stop(self) -> None:
        """Cancel whatever is being spoken."""

    @abstractmethod
    async def set_rate(self, rate: float) -> None: ...

    @abstractmethod
    async def set_pitch(self, pitch: float) -> None: ...

    @abstractmethod
    async def set_language(self, language_tag: str) -> None: ...

    # ---- notifications ----
    def add_listener(self, listener: SpeechListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: SpeechListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _emit(self, event: SpeechEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.error(f"[SpeechBackend] Listener failed on {event.kind.value}: {e}")
