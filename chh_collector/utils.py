# File: chh_collector/utils.py
"""chh_collector.utils: text clean-up helpers for scraped titles."""

from __future__ import annotations

from typing import Final, Sequence

__all__: Sequence[str] = ("replace_dashes", "replace_ampersand")

# en dash, and the same character decoded as cp1252 instead of UTF-8
_DASH_VARIANTS: Final = ("–", "â€“")


def replace_dashes(text: str) -> str:
    """Replace every en-dash variant with a plain hyphen-minus."""
    for dash in _DASH_VARIANTS:
        text = text.replace(dash, "-")
    return text


def replace_ampersand(text: str) -> str:
    """Turn a literal ``&amp;`` left in the text into ``&``."""
    return text.replace("&amp;", "&")
