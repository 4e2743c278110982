"""Parse a markdown table of text replacements."""

from __future__ import annotations


class ReplacementParseError(ValueError):
    """A table row did not have the expected shape."""


def parse_text_replacements(text: str) -> dict[str, str]:
    """Return the ``text to replace -> replacement`` pairs from a two-column markdown table.

    The first two lines (header and divider) are skipped; lines without a pipe are ignored.
    """
    replacements: dict[str, str] = {}
    lines = text.split("\n")
    if len(lines) <= 2:
        return replacements

    for line in lines[2:]:
        parts = line.split("|")
        if len(parts) == 1:
            continue
        if len(parts) != 4:
            raise ReplacementParseError(
                f'could not parse {line!r} because it does not have the proper amount of "|"s in it'
            )
        replacements[parts[1].strip(" ")] = parts[2].strip(" ")

    return replacements