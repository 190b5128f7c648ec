"""
ScanLingo — PromptBuilder and language registry tests
"""

import pytest

from scanlingo.languages import (
    LANGUAGES,
    default_title,
    get_language,
    language_label,
    message,
    tts_tag,
)
from scanlingo.text_pipeline import build_find_prompt, build_prompt, build_translation_prompt
from scanlingo.text_pipeline.prompt_builder import PROMPT_LANGUAGES


def test_english_prompt_embeds_query_and_four_numbered_parts():
    prompt = build_prompt("black holes", "en")

    assert "Provide comprehensive information about: black holes" in prompt
    for marker in ("1. Brief Overview", "2. Key Details", "3. Additional Information", "4. Related Topics"):
        assert marker in prompt


def test_hindi_prompt_uses_devanagari_numerals():
    prompt = build_prompt("मानसून", "hi")

    assert "मानसून" in prompt
    for numeral in ("१.", "२.", "३.", "४."):
        assert numeral in prompt
    assert "1." not in prompt


@pytest.mark.parametrize("code,heading", [
    ("es", "4. Temas Relacionados"),
    ("fr", "4. Sujets Connexes"),
    ("de", "4. Verwandte Themen"),
])
def test_localized_templates_end_with_related_topics(code, heading):
    assert heading in build_prompt("x", code)


def test_unsupported_language_falls_back_to_english_template():
    assert build_prompt("sushi", "ja") == build_prompt("sushi", "en")
    assert "ja" not in PROMPT_LANGUAGES


def test_query_is_used_verbatim():
    query = '  "quoted" {braces} 1. tricky  '
    assert query in build_prompt(query, "en")


def test_translation_prompt_names_target_language():
    prompt = build_translation_prompt("Hello", "hi")
    assert prompt == (
        "Translate the following text to Hindi. Only provide the translation "
        'without any additional text or explanations: "Hello"'
    )


def test_find_prompt():
    prompt = build_find_prompt("price", "Milk 2.50\nBread 1.20")
    assert prompt.startswith('Search for "price" in the following text')
    assert "Milk 2.50\nBread 1.20" in prompt


def test_registry_lookups():
    assert len({lang.code for lang in LANGUAGES}) == len(LANGUAGES) == 11
    assert tts_tag("hi") == "hi-IN"
    assert get_language("xx").code == "en"
    assert language_label("es") == "Spanish"
    assert language_label("xx") == "xx"


def test_default_titles_and_messages_fall_back_to_english():
    assert default_title("en", 0) == "Overview"
    assert default_title("en", 5) == "Additional Information"
    assert default_title("ja", 0) == "Overview"
    assert message("ja", "no_results") == message("en", "no_results")
    assert message("hi", "no_results") != message("en", "no_results")
