"""Normalise common typographic quirks in ebook text."""

from __future__ import annotations

import re
from dataclasses import dataclass

_EM_INDICATOR = "--"
_DOUBLE_SPACE = "  "
_EM_DASH = "\u2014"


@dataclass(frozen=True)
class ReplaceWords:
    """A literal replacement together with the reason for making it."""

    search: str
    replace: str
    rationale: str


_SMART_DOUBLE = "Replace smart double quotes with straight double quotes"
_SMART_SINGLE = "Replace smart single quotes with straight single quotes"
_SNUCK = (
    "Use snuck instead of sneaked as it is the more commonly used version "
    "of the word nowadays"
)

COMMON_REPLACE_WORDS: tuple[ReplaceWords, ...] = (
    ReplaceWords("Sneaked", "Snuck", _SNUCK),
    ReplaceWords("sneaked", "snuck", _SNUCK),
    ReplaceWords("\u201c", '"', _SMART_DOUBLE),
    ReplaceWords("\u201d", '"', _SMART_DOUBLE),
    ReplaceWords("\u2018", "'", _SMART_SINGLE),
    ReplaceWords("\u2019", "'", _SMART_SINGLE),
    ReplaceWords(
        "...",
        "\u2026",
        "Proper ellipses should be used where possible as it keeps things clean and consistent",
    ),
)


def _build_replacements() -> dict[str, str]:
    replacements: dict[str, str] = {}
    for word in COMMON_REPLACE_WORDS:
        replacements.setdefault(word.search, word.replace)
    return replacements


_REPLACEMENTS = _build_replacements()
# Alternation order follows the table order, so earlier entries win on ties.
_REPLACE_PATTERN = re.compile("|".join(re.escape(search) for search in _REPLACEMENTS))


def common_string_replace(text: str) -> str:
    """Collapse extra spaces, straighten quotes, fix ellipses and em dashes."""
    new_text = _collapse_spaces_between_words(text)
    new_text = _REPLACE_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], new_text)
    return _double_dashes_to_em_dashes(new_text)


def _double_dashes_to_em_dashes(text: str) -> str:
    index = text.find(_EM_INDICATOR)
    if index == -1:
        return text

    parts: list[str] = []
    while index != -1:
        preceded_by_bang = index > 0 and text[index - 1] == "!"
        followed_by_close = index + 2 < len(text) and text[index + 2] == ">"
        if preceded_by_bang or followed_by_close:
            parts.append(text[: index + 2])
        else:
            parts.append(text[:index] + _EM_DASH)
        text = text[index + 2 :]
        index = text.find(_EM_INDICATOR)

    parts.append(text)
    return "".join(parts)


def _collapse_spaces_between_words(text: str) -> str:
    index = text.find(_DOUBLE_SPACE)
    if index == -1:
        return text

    parts: list[str] = []
    while index != -1:
        start = index
        end = index + 1
        while start > 0 and text[start - 1] == " ":
            start -= 1
        while end + 1 < len(text) and text[end + 1] == " ":
            end += 1

        after_line_start = start > 0 and text[start - 1] in "\n\t"
        before_tag_or_newline = end + 1 < len(text) and text[end + 1] in "<\n"
        if after_line_start or before_tag_or_newline:
            parts.append(text[: index + 2])
        else:
            parts.append(text[:start] + " ")

        text = text[end + 1 :]
        index = text.find(_DOUBLE_SPACE)

    parts.append(text)
    return "".join(parts)