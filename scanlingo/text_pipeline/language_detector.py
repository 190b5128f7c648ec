"""
Text Pipeline — Language Detector

Uses langdetect (pure-Python) to guess the language of captured or typed
source text before it is translated. The guess is informational: it is
reported alongside translations, it never changes which language a screen
translates into.
"""

from __future__ import annotations

from langdetect import detect_langs, LangDetectException
from loguru import logger


# Seed ensures reproducible results across runs (langdetect uses randomness)
from langdetect import DetectorFactory
DetectorFactory.seed = 42

# langdetect reports Chinese as zh-cn / zh-tw; the registry only knows "zh"
_ALIASES = {"zh-cn": "zh", "zh-tw": "zh"}


def detect_language(text: str) -> tuple[str, float]:
    """
    Detect the primary language of *text*.

    Returns
    -------
    (lang_code, confidence) — e.g. ("en", 0.9999)
    Falls back to ("en", 0.0) on failure.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        return "en", 0.0

    try:
        top = detect_langs(cleaned)[0]
        return _ALIASES.get(top.lang, top.lang), round(top.prob, 4)
    except LangDetectException as exc:
        logger.warning(f"Language detection failed for text snippet: {exc}")
        return "en", 0.0
