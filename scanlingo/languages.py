"""
ScanLingo — Language Registry

Single source of truth for the languages a screen can select: display
labels, speech tags, search placeholders, localized default section titles
and localized user-facing error messages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Language:
    code: str
    label: str          # English name, used inside translation prompts
    native_name: str
    tts_tag: str        # BCP-47 tag handed to the speech backend
    placeholder: str


LANGUAGES: List[Language] = [
    Language("en", "English",    "English",   "en-US", "Ask anything..."),
    Language("hi", "Hindi",      "हिंदी",       "hi-IN", "कुछ भी पूछें..."),
    Language("es", "Spanish",    "Español",   "es-ES", "Pregunta algo..."),
    Language("fr", "French",     "Français",  "fr-FR", "Posez une question..."),
    Language("de", "German",     "Deutsch",   "de-DE", "Fragen Sie etwas..."),
    Language("it", "Italian",    "Italiano",  "it-IT", "Chiedi qualcosa..."),
    Language("pt", "Portuguese", "Português", "pt-PT", "Pergunte algo..."),
    Language("ru", "Russian",    "Русский",   "ru-RU", "Спросите что-нибудь..."),
    Language("ja", "Japanese",   "日本語",     "ja-JP", "何でも聞いてください..."),
    Language("ko", "Korean",     "한국어",     "ko-KR", "무엇이든 물어보세요..."),
    Language("zh", "Chinese",    "中文",       "zh-CN", "问任何问题..."),
]

_BY_CODE: Dict[str, Language] = {lang.code: lang for lang in LANGUAGES}

DEFAULT_LANGUAGE = "en"

# (position 0, any later position)
_DEFAULT_TITLES: Dict[str, Tuple[str, str]] = {
    "en": ("Overview", "Additional Information"),
    "hi": ("अवलोकन", "अतिरिक्त जानकारी"),
    "es": ("Descripción General", "Información Adicional"),
    "fr": ("Aperçu", "Informations Supplémentaires"),
    "de": ("Überblick", "Zusätzliche Informationen"),
}

_MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "network": "Network error or invalid API response. Please check your connection and try again.",
        "backend": "Failed to fetch results. Please try again later.",
        "unexpected_format": "Received unexpected response format. Please try again.",
        "no_results": "No results found. Please try a different search term.",
        "translation_failed": "Translation failed. Please try again.",
        "speech_failed": "Text-to-speech error occurred. Please try again.",
    },
    "hi": {
        "network": "नेटवर्क त्रुटि या अमान्य API प्रतिक्रिया। कृपया अपना कनेक्शन जांचें और पुनः प्रयास करें।",
        "backend": "त्रुटि: कृपया बाद में पुनः प्रयास करें",
        "unexpected_format": "अप्रत्याशित प्रतिक्रिया प्रारूप। कृपया पुनः प्रयास करें।",
        "no_results": "कोई परिणाम नहीं मिला। कृपया कोई अन्य खोज शब्द आज़माएं।",
        "translation_failed": "अनुवाद विफल रहा। कृपया पुनः प्रयास करें।",
        "speech_failed": "वाक् आउटपुट में त्रुटि हुई। कृपया पुनः प्रयास करें।",
    },
    "es": {
        "network": "Error de red o respuesta no válida. Compruebe su conexión e inténtelo de nuevo.",
        "backend": "No se pudieron obtener resultados. Inténtelo más tarde.",
        "unexpected_format": "Formato de respuesta inesperado. Inténtelo de nuevo.",
        "no_results": "No se encontraron resultados. Pruebe con otro término de búsqueda.",
        "translation_failed": "La traducción falló. Inténtelo de nuevo.",
        "speech_failed": "Error de texto a voz. Inténtelo de nuevo.",
    },
    "fr": {
        "network": "Erreur réseau ou réponse invalide. Vérifiez votre connexion et réessayez.",
        "backend": "Impossible d'obtenir des résultats. Réessayez plus tard.",
        "unexpected_format": "Format de réponse inattendu. Veuillez réessayer.",
        "no_results": "Aucun résultat trouvé. Essayez un autre terme de recherche.",
        "translation_failed": "La traduction a échoué. Veuillez réessayer.",
        "speech_failed": "Erreur de synthèse vocale. Veuillez réessayer.",
    },
    "de": {
        "network": "Netzwerkfehler oder ungültige Antwort. Bitte Verbindung prüfen und erneut versuchen.",
        "backend": "Ergebnisse konnten nicht geladen werden. Bitte später erneut versuchen.",
        "unexpected_format": "Unerwartetes Antwortformat. Bitte erneut versuchen.",
        "no_results": "Keine Ergebnisse gefunden. Bitte einen anderen Suchbegriff versuchen.",
        "translation_failed": "Übersetzung fehlgeschlagen. Bitte erneut versuchen.",
        "speech_failed": "Fehler bei der Sprachausgabe. Bitte erneut versuchen.",
    },
}


def get_language(code: str) -> Language:
    """Look up a language, falling back to English for unknown codes."""
    return _BY_CODE.get(code, _BY_CODE[DEFAULT_LANGUAGE])


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def language_label(code: str) -> str:
    """English display label; unknown codes are returned as-is."""
    lang = _BY_CODE.get(code)
    return lang.label if lang else code


def tts_tag(code: str) -> str:
    return get_language(code).tts_tag


def default_title(language_code: str, index: int) -> str:
    titles = _DEFAULT_TITLES.get(language_code, _DEFAULT_TITLES[DEFAULT_LANGUAGE])
    return titles[0] if index == 0 else titles[1]


def message(language_code: str, key: str) -> str:
    """Localized user-facing message; English when the language has none."""
    table = _MESSAGES.get(language_code, _MESSAGES[DEFAULT_LANGUAGE])
    return table.get(key, _MESSAGES[DEFAULT_LANGUAGE][key])
