"""
ScanLingo — Response Segmenter
Module : scanlingo/text_pipeline/segmenter.py

Splits a generated answer into ordered, titled sections.

Marker families
---------------
• Devanagari ("hi") : १. २. ३. ४.  and  "संबंधित विषय:"
• Latin (all others): 1. 2. 3. …   and  "Related Topics:", "Temas Relacionados:",
                                         "Sujets Connexes:", "Verwandte Themen:"

Rules
-----
1. A marker only counts at the start of a line (optionally behind markdown
   emphasis such as "**" or "##"). Splitting is a lookahead split, so each
   marker stays with the fragment that follows it.
2. Title = rest of the marker line. Unmarked fragments get the localized
   "Overview" (position 0) / "Additional Information" (later) default.
3. Body = remaining lines, filtered to the language's permitted characters
   and collapsed to single spaces.

The transform is a pure function of (raw_text, language_code): only regexes
and fixed Unicode ranges, no locale-dependent behaviour.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Pattern, Tuple

from loguru import logger

from scanlingo.errors import NoSectionsError
from scanlingo.languages import default_title
from scanlingo.text_pipeline.schemas import Section

# ── Marker vocabularies ──────────────────────────────────────────────────────

_LATIN_NUMERAL = r"[0-9]+\.(?![0-9])"     # "2." but not "2.5"
_LATIN_PHRASES = (
    "Related Topics:",
    "Temas Relacionados:",
    "Sujets Connexes:",
    "Verwandte Themen:",
)
_DEVANAGARI_NUMERAL = r"[१२३४]\."
_DEVANAGARI_PHRASES = ("संबंधित विषय:",)

# Markdown emphasis / heading noise allowed in front of a marker
_DECORATION = r"[ \t]*(?:[#*]+[ \t]*)?"

# ── Permitted character sets ─────────────────────────────────────────────────

_BASIC_PUNCTUATION = r".,!?;:'\"()\-"
_HEBREW_ARABIC = r"\u0591-\u05F4\u0600-\u06FF\u0750-\u077F"
_DEVANAGARI = r"\u0900-\u097F"            # includes danda । and double danda ॥
_CJK_PUNCTUATION = r"\u3000-\u303F\uFF00-\uFFEF"

_EXTRA_RANGES = {
    "hi": _DEVANAGARI,
    "ja": _CJK_PUNCTUATION,
    "ko": _CJK_PUNCTUATION,
    "zh": _CJK_PUNCTUATION,
}


@dataclass(frozen=True)
class _Rules:
    splitter:    Pattern[str]
    head:        Pattern[str]
    phrases:     Tuple[str, ...]
    body_noise:  Pattern[str]
    title_noise: Pattern[str]


@lru_cache(maxsize=None)
def _rules_for(language_code: str) -> _Rules:
    if language_code == "hi":
        numeral, phrases = _DEVANAGARI_NUMERAL, _DEVANAGARI_PHRASES
        title_ranges = _DEVANAGARI
    else:
        numeral, phrases = _LATIN_NUMERAL, _LATIN_PHRASES
        title_ranges = _HEBREW_ARABIC

    marker = "|".join([numeral] + [re.escape(p) for p in phrases])
    extra = _EXTRA_RANGES.get(language_code, "")

    return _Rules(
        splitter=re.compile(rf"^(?={_DECORATION}(?:{marker}))", re.MULTILINE),
        head=re.compile(rf"\A{_DECORATION}(?P<marker>{marker})(?P<title>[^\n]*)"),
        phrases=phrases,
        body_noise=re.compile(rf"[^\w\s{_BASIC_PUNCTUATION}{_HEBREW_ARABIC}{extra}]"),
        title_noise=re.compile(rf"[^\w\s{title_ranges}{extra}]"),
    )


# ── Cleaning helpers ─────────────────────────────────────────────────────────

def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def _clean_body(text: str, rules: _Rules) -> str:
    return _collapse(rules.body_noise.sub("", text.strip()))


def _clean_title(text: str, rules: _Rules) -> str:
    # prompt hints echoed back, e.g. "Brief Overview (2-3 sentences)"
    text = re.sub(r"\([^)]*\)", "", text)
    return _collapse(rules.title_noise.sub("", text))


def _split(raw_text: str, rules: _Rules) -> List[str]:
    return [frag for frag in rules.splitter.split(raw_text) if frag.strip()]


def _section_from_fragment(
    fragment: str,
    index: int,
    language_code: str,
    rules: _Rules,
) -> Tuple[Section, bool]:
    """Build one Section; the flag reports whether a marker was found."""
    match = rules.head.match(fragment)
    if match is None:
        title = default_title(language_code, index)
        return Section(index=index, title=title, body=_clean_body(fragment, rules)), False

    title = _clean_title(match.group("title"), rules)
    if not title:
        title = _marker_title(match.group("marker"), rules) or default_title(language_code, index)

    body = _clean_body(fragment[match.end():], rules)
    return Section(index=index, title=title, body=body), True


def _marker_title(marker: str, rules: _Rules) -> Optional[str]:
    """Phrase markers double as titles ("Related Topics:" → "Related Topics")."""
    if marker in rules.phrases:
        return marker.rstrip(":").strip()
    return None


# ── Public API ───────────────────────────────────────────────────────────────

def segment(raw_text: str, language_code: str) -> List[Section]:
    """
    Split *raw_text* into ordered Sections using *language_code*'s markers.

    Raises
    ------
    NoSectionsError : the text is empty or contains no line-anchored marker.
    """
    rules = _rules_for(language_code)
    fragments = _split(raw_text or "", rules)

    sections: List[Section] = []
    marked = 0
    for index, fragment in enumerate(fragments):
        section, has_marker = _section_from_fragment(fragment, index, language_code, rules)
        sections.append(section)
        marked += has_marker

    if not marked:
        logger.warning(
            f"[Segmenter] No section markers found (lang={language_code!r}, "
            f"chars={len(raw_text or '')})"
        )
        raise NoSectionsError(f"No sections found for language {language_code!r}")

    logger.debug(f"[Segmenter] {len(sections)} sections | lang={language_code!r}")
    return sections
