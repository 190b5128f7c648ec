"""
ScanLingo — Result Assembler
Module : scanlingo/text_pipeline/assembler.py

Pairs segmented sections with image links by position and renders the
share text for one section or a whole result set.
"""

from __future__ import annotations

from typing import Optional, Sequence

from scanlingo.text_pipeline.schemas import ResultSet, Section


def assemble(sections: Sequence[Section], image_urls: Sequence[str]) -> ResultSet:
    """
    Attach image_urls[i] to sections[i].

    Pairing is purely positional. Sections beyond the end of *image_urls*
    (or paired with an empty link) get image_url=None.
    """
    return tuple(
        section.with_image(_image_at(image_urls, position))
        for position, section in enumerate(sections)
    )


def _image_at(image_urls: Sequence[str], position: int) -> Optional[str]:
    if position < len(image_urls):
        return image_urls[position] or None
    return None


# ── Sharing ───────────────────────────────────────────────────────────────

def format_share_text(section: Section) -> str:
    return f"{section.title}\n\n{section.body}"


def format_share_all(results: ResultSet) -> str:
    return "\n".join(f"{s.title}\n{s.body}\n" for s in results)


def share_all_title(query: str) -> str:
    return f"Search Results: {query}"
