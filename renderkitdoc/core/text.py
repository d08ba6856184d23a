"""
Description Text Helpers
========================

Pick the locale-matched description of a renderer, find the first div/span
wrapper an author embedded in it, and cut first sentences for summaries.
"""

from typing import Optional

from renderkitdoc.core.exceptions import InputConsistencyError
from renderkitdoc.models.schemas import DescribedModel, Description, WrapperKind, WrapperTag


def select_localized(node: DescribedModel, active_locale_country_code: str) -> Optional[Description]:
    """
    Return the first description whose language tag occurs in the country code.

    Matching is case-insensitive. An empty tag occurs in every country code, so
    an untagged default description matches any locale; a None tag never does.
    """
    country = (active_locale_country_code or "").lower()
    for description in node.descriptions:
        if description.lang is not None and description.lang.lower() in country:
            return description
    return None


def _find_opening_tag(text: str, kind: WrapperKind) -> Optional[WrapperTag]:
    start = text.find(f"<{kind.value}")
    if start == -1:
        return None
    end = text.find(">", start)
    if end == -1:
        return None
    return WrapperTag(kind=kind, text=text[start:end + 1], start=start)


def first_wrapper_tag(text: Optional[str]) -> Optional[WrapperTag]:
    """
    Find the earliest opening div or span tag in raw description text.

    The tag text runs from '<div' or '<span' through the next '>'. A candidate
    without a closing '>' does not count. When both tags start at the same
    offset the span wins.

    Args:
        text: Raw description text

    Returns:
        The winning wrapper tag, or None when neither tag is present
    """
    if not text:
        return None

    div = _find_opening_tag(text, WrapperKind.DIV)
    span = _find_opening_tag(text, WrapperKind.SPAN)

    if span is not None and (div is None or span.start <= div.start):
        return span
    return div


def first_sentence(text: str, owner: str = "description") -> str:
    """
    Return the text up to and including the first '.'.

    Raises:
        InputConsistencyError: If the text has no '.' to end a sentence
    """
    end = text.find(".")
    if end == -1:
        raise InputConsistencyError(f"{owner} has no sentence terminator: {text!r}")
    return text[:end + 1]
