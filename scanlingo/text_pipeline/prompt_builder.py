"""
ScanLingo — Prompt Builder
Module : scanlingo/text_pipeline/prompt_builder.py

Builds the instruction strings sent to the generative backend.

Search prompts ask for a fixed 4-part answer:
  1. Brief overview
  2. Key details
  3. Additional information
  4. Related topics

The numbering in each template is what the ResponseSegmenter later splits
on, so Hindi uses Devanagari numerals (१. २. ३. ४.) and every other
language uses ASCII digits.
"""

from __future__ import annotations

from typing import Callable, Dict

from scanlingo.languages import DEFAULT_LANGUAGE, language_label


def _en(query: str) -> str:
    return f"""Provide comprehensive information about: {query}

Please structure the response in the following format:
1. Brief Overview (2-3 sentences)
2. Key Details (main points and facts)
3. Additional Information (interesting related facts)
4. Related Topics (if applicable)

Make the response detailed but easy to understand."""


def _hi(query: str) -> str:
    return f"""कृपया इस विषय के बारे में विस्तृत जानकारी प्रदान करें: {query}

कृपया उत्तर को निम्नलिखित प्रारूप में संरचित करें:
१. संक्षिप्त अवलोकन (2-3 वाक्य)
२. मुख्य विवरण (प्रमुख बिंदु और तथ्य)
३. अतिरिक्त जानकारी (दिलचस्प संबंधित तथ्य)
४. संबंधित विषय (यदि लागू हो)

उत्तर को विस्तृत लेकिन समझने में आसान बनाएं।"""


def _es(query: str) -> str:
    return f"""Proporcione información completa sobre: {query}

Por favor, estructure la respuesta en el siguiente formato:
1. Descripción General (2-3 oraciones)
2. Detalles Clave (puntos principales y hechos)
3. Información Adicional (hechos interesantes relacionados)
4. Temas Relacionados (si aplica)

Haga la respuesta detallada pero fácil de entender."""


def _fr(query: str) -> str:
    return f"""Fournissez des informations complètes sur : {query}

Veuillez structurer la réponse dans le format suivant :
1. Aperçu Bref (2-3 phrases)
2. Détails Clés (points principaux et faits)
3. Informations Supplémentaires (faits intéressants connexes)
4. Sujets Connexes (si applicable)

Rendez la réponse détaillée mais facile à comprendre."""


def _de(query: str) -> str:
    return f"""Geben Sie umfassende Informationen über: {query}

Bitte strukturieren Sie die Antwort im folgenden Format:
1. Kurzer Überblick (2-3 Sätze)
2. Wichtige Details (Hauptpunkte und Fakten)
3. Zusätzliche Informationen (interessante verwandte Fakten)
4. Verwandte Themen (falls zutreffend)

Machen Sie die Antwort detailliert, aber leicht verständlich."""


_TEMPLATES: Dict[str, Callable[[str], str]] = {
    "en": _en,
    "hi": _hi,
    "es": _es,
    "fr": _fr,
    "de": _de,
}

PROMPT_LANGUAGES = frozenset(_TEMPLATES)

IMAGE_ANALYSIS_PROMPT = "Analyze this image and provide detailed information about what you see."


def build_prompt(query: str, language_code: str) -> str:
    """Search prompt for *query*; unsupported languages get the English template."""
    template = _TEMPLATES.get(language_code, _TEMPLATES[DEFAULT_LANGUAGE])
    return template(query)


def build_translation_prompt(text: str, language_code: str) -> str:
    label = language_label(language_code)
    return (
        f"Translate the following text to {label}. "
        "Only provide the translation without any additional text or explanations: "
        f'"{text}"'
    )


def build_find_prompt(search_query: str, detected_text: str) -> str:
    """Look for *search_query* inside text captured by the camera."""
    return (
        f'Search for "{search_query}" in the following text and provide relevant excerpts: '
        f'"{detected_text}"'
    )
