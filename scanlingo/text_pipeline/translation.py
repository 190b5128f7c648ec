"""
ScanLingo — Translation Cleanup
Module : scanlingo/text_pipeline/translation.py

The backend is told to return only the translation, but it still tends to
wrap the answer in quotes or prepend a label such as "Translation:".
"""

from __future__ import annotations

import re

from scanlingo.languages import language_label

# opening quote → accepted closing quotes
_QUOTE_PAIRS = {
    "\"": "\"",
    "'": "'",
    "“": "”",
    "‘": "’",
    "«": "»",
    "„": "“”",
}


def _prefix_pattern(language_code: str) -> re.Pattern[str]:
    label = re.escape(language_label(language_code))
    return re.compile(
        rf"^\s*(?:translation|translated text|in {label})\s*:\s*",
        re.IGNORECASE,
    )


def _strip_quotes(text: str) -> str:
    text = text.strip()
    if len(text) >= 2 and text[-1] in _QUOTE_PAIRS.get(text[0], ""):
        text = text[1:-1]
    return text.strip()


def clean_translation(raw: str, language_code: str) -> str:
    """
    Remove wrapping quotes and a leading boilerplate label.

    Handles both orders: '"Hola"' → 'Hola', 'Translation: "Hola"' → 'Hola'.
    """
    text = _strip_quotes(raw)
    text = _prefix_pattern(language_code).sub("", text, count=1)
    return _strip_quotes(text)
