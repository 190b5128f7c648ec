"""
ScanLingo — Speech Pipeline Module
===================================
Public API surface for scanlingo.speech_pipeline.

Exports
-------
SpeechController — idle/speaking state machine, one per screen
SpeechBackend    — contract every TTS engine implements
SpeechSession    — the active utterance and its voice parameters
SpeechStatus     — idle | speaking
SpeechEvent      — start / finish / cancel / error notification
VoiceParams      — language tag, rate, pitch for the next utterance
"""

from scanlingo.speech_pipeline.backend import SpeechBackend
from scanlingo.speech_pipeline.controller import SpeechController
from scanlingo.speech_pipeline.schemas import (
    SpeechEvent,
    SpeechEventKind,
    SpeechSession,
    SpeechStatus,
    VoiceParams,
)

__all__ = [
    "SpeechBackend",
    "SpeechController",
    "SpeechEvent",
    "SpeechEventKind",
    "SpeechSession",
    "SpeechStatus",
    "VoiceParams",
]
