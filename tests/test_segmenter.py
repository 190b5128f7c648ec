"""
ScanLingo — ResponseSegmenter tests
"""

import pytest

from scanlingo.errors import NoSectionsError
from scanlingo.text_pipeline import segment

from conftest import CATS_ANSWER


def _pairs(sections):
    return [(s.title, s.body) for s in sections]


def test_cats_answer_splits_into_three_titled_sections():
    sections = segment(CATS_ANSWER, "en")

    assert _pairs(sections) == [
        ("Overview", "Cats are mammals."),
        ("Key Details", "They purr."),
        ("Related Topics", "Dogs"),
    ]
    assert [s.index for s in sections] == [0, 1, 2]
    assert all(s.image_url is None for s in sections)


def test_text_without_markers_is_no_results():
    with pytest.raises(NoSectionsError):
        segment("Cats are small furry animals that like to sleep.", "en")


def test_empty_text_is_no_results():
    with pytest.raises(NoSectionsError):
        segment("", "en")


def test_unmarked_lead_in_and_empty_title_get_positional_defaults():
    sections = segment("Here is what I found.\n1. \nDetails body", "en")

    assert _pairs(sections) == [
        ("Overview", "Here is what I found."),
        ("Additional Information", "Details body"),
    ]


def test_default_titles_are_localized():
    sections = segment("Voici.\n1.\nCorps", "fr")
    assert [s.title for s in sections] == ["Aperçu", "Informations Supplémentaires"]


def test_hindi_uses_devanagari_markers():
    raw = (
        "१. संक्षिप्त अवलोकन\nबिल्लियाँ स्तनधारी हैं।\n"
        "२. मुख्य विवरण\nवे घुरघुराती हैं।\n"
        "संबंधित विषय:\nकुत्ते"
    )
    sections = segment(raw, "hi")

    assert [s.title for s in sections] == ["संक्षिप्त अवलोकन", "मुख्य विवरण", "संबंधित विषय"]
    assert sections[0].body == "बिल्लियाँ स्तनधारी हैं।"
    assert sections[2].body == "कुत्ते"


def test_hindi_ignores_ascii_numerals():
    with pytest.raises(NoSectionsError):
        segment("1. Overview\nCats are mammals.", "hi")


def test_language_specific_related_topics_phrase():
    sections = segment("1. Descripción General\nGatos.\nTemas Relacionados:\nPerros", "es")
    assert [s.title for s in sections] == ["Descripción General", "Temas Relacionados"]


def test_decimal_numbers_are_not_markers():
    sections = segment("1. Facts\nPi is about\n3.14 in value", "en")

    assert len(sections) == 1
    assert sections[0].body == "Pi is about 3.14 in value"


def test_markers_only_count_at_line_start():
    sections = segment("1. Facts\nThere are 2. kinds of cats", "en")
    assert _pairs(sections) == [("Facts", "There are 2. kinds of cats")]


def test_markdown_decoration_and_prompt_hints_are_stripped_from_titles():
    sections = segment("**1. Brief Overview (2-3 sentences)**\nCats.\n## 2. Key Details\nPurr.", "en")
    assert [s.title for s in sections] == ["Brief Overview", "Key Details"]


def test_body_is_filtered_and_collapsed():
    sections = segment("2. Key Details\nThey   purr 😺 & *knead*.\n\n  Often.", "en")
    assert sections[0].body == "They purr knead. Often."


def test_duplicate_titles_are_kept_in_order():
    sections = segment("1. Facts\nfirst\n2. Facts\nsecond", "en")
    assert _pairs(sections) == [("Facts", "first"), ("Facts", "second")]


def test_segmentation_is_deterministic():
    assert segment(CATS_ANSWER, "en") == segment(CATS_ANSWER, "en")
