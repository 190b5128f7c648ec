"""
ScanLingo — source language detection tests
"""

from scanlingo.text_pipeline.language_detector import detect_language


def test_detects_english():
    code, confidence = detect_language(
        "The quick brown fox jumps over the lazy dog while the cat sleeps in the sun."
    )
    assert code == "en"
    assert 0.0 < confidence <= 1.0


def test_chinese_is_reported_as_registry_code():
    code, _ = detect_language("这是一个关于猫的简单句子，猫喜欢在阳光下睡觉。")
    assert code == "zh"


def test_blank_or_featureless_text_falls_back_to_english():
    assert detect_language("   ") == ("en", 0.0)
    assert detect_language("12345 !!!") == ("en", 0.0)
