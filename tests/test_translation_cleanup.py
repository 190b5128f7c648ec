"""
ScanLingo — translation cleanup tests
"""

import pytest

from scanlingo.text_pipeline import clean_translation


@pytest.mark.parametrize("raw,expected", [
    ('"Hola"', "Hola"),
    ("'Hola'", "Hola"),
    ("“नमस्ते”", "नमस्ते"),
    ('Translation: "Hola"', "Hola"),
    ("translated text: Bonjour", "Bonjour"),
    ('"Translation: Hallo"', "Hallo"),
    ("  Hola mundo  ", "Hola mundo"),
])
def test_quotes_and_labels_are_removed(raw, expected):
    assert clean_translation(raw, "es") == expected


def test_in_language_prefix_uses_target_label():
    assert clean_translation("In Spanish: Hola", "es") == "Hola"
    assert clean_translation("In Spanish: Hola", "fr") == "In Spanish: Hola"


@pytest.mark.parametrize("raw", [
    "the students'",
    "'t is goed zo",
    "«Bonjour",
])
def test_unpaired_quote_characters_are_kept(raw):
    assert clean_translation(raw, "nl") == raw


def test_german_low_high_quotes_are_a_pair():
    assert clean_translation("„Hallo“", "de") == "Hallo"


def test_inner_quotes_are_preserved():
    assert clean_translation('Il a dit "oui" hier', "fr") == 'Il a dit "oui" hier'
