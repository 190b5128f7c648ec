"""
ScanLingo — Speech Pipeline Schemas

Small value types shared by the speech backend contract and the
SpeechController state machine.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpeechStatus(str, Enum):
    idle = "idle"
    speaking = "speaking"


class SpeechEventKind(str, Enum):
    start = "start"
    finish = "finish"
    cancel = "cancel"
    error = "error"


# ── Backend notification ───────────────────────────────────────────────────

@dataclass(frozen=True)
class SpeechEvent:
    """
    Notification emitted by a speech backend.

    Attributes:
        kind         : start | finish | cancel | error
        utterance_id : Id passed to speak(); None for engine-wide errors.
        message      : Error description (error events only).
    """
    kind:         SpeechEventKind
    utterance_id: Optional[str] = None
    message:      Optional[str] = None


# ── Voice parameters ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class VoiceParams:
    """Parameters applied at the next start(); never to an utterance in flight."""
    language_tag: str   = "en-US"
    rate:         float = 0.5
    pitch:        float = 1.0


# ── Active utterance ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class SpeechSession:
    """
    One text-to-speech utterance and the voice it was started with.

    Attributes:
        utterance_id   : Controller-issued id, matched against backend events.
        utterance_text : Text being spoken.
        language_tag   : e.g. "hi-IN".
        rate / pitch   : Voice parameters in effect for this utterance.
        status         : speaking while active, idle once ended.
    """
    utterance_id:   str
    utterance_text: str
    language_tag:   str
    rate:           float
    pitch:          float
    status:         SpeechStatus = SpeechStatus.speaking
