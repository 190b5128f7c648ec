"""
ScanLingo — Orchestration
==========================
Stateful, per-screen coordination on top of the pure text pipeline.

Exports
-------
ScreenSession            — one screen's language, speech, translation and results
TranslationOrchestrator  — last-request-wins retranslation
TranslationResult        — outcome of one retranslate() call
LatestRequestGate        — ticketing used to drop superseded responses
"""

from scanlingo.orchestrator.gate import LatestRequestGate
from scanlingo.orchestrator.translation import TranslationOrchestrator, TranslationResult
from scanlingo.orchestrator.screen import ScreenSession

__all__ = [
    "LatestRequestGate",
    "TranslationOrchestrator",
    "TranslationResult",
    "ScreenSession",
]
