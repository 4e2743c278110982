"""Find paragraphs that look like one paragraph split across several lines."""

from __future__ import annotations

import logging
import re

_log = logging.getLogger(__name__)

# Guards against runaway scans when quotes never balance out.
MAX_QUOTE_LOOPS = 10

_OPENING_TAG = r"((^|\n)[ \t]*<p[^>]*>)"
_ABBREVIATIONS = (
    r"Dr\.|Esq\.|Hon\.|Jr\.|Mr\.|Mrs\.|Ms\.|Messrs\.|Mmes\.|Msgr\.|Prof\.|Rev\.|"
    r"Sr\.|St\.|Capt\.|Lt\.|Mt\.|Mtn\.|Gen\.|Sen\."
)

_UNENDED_PARAGRAPH = re.compile(
    _OPENING_TAG
    + r"([^\n]*("
    + _ABBREVIATIONS
    + r"|[a-zA-z,0-9%\u2013-\u2014])[\"']?)( ?)(</p>\n)"
)
_PARAGRAPH_WITH_DOUBLE_QUOTE = re.compile(_OPENING_TAG + r'([^\n]*)(")([^\n]*)(</p>)')
_PARAGRAPH_STARTING_LOWERCASE = re.compile(_OPENING_TAG + r"([\t\n\f\r ]*[a-z][^\n]*</p>)")


def get_potentially_broken_lines(file_content: str) -> dict[str, str]:
    """Map each suspected broken run of paragraphs to a suggested merged paragraph."""
    finder = _BrokenLineFinder(file_content)
    finder.find_unended_paragraphs()
    finder.find_unended_double_quotes()
    finder.find_paragraphs_starting_lowercase()
    return finder.suggestions


def _after_opening_tag(line: str) -> str:
    end = line.find(">")
    return line if end == -1 else line[end + 1 :]


class _BrokenLineFinder:
    def __init__(self, content: str) -> None:
        self.content = content
        self.parsed: set[str] = set()
        self.suggestions: dict[str, str] = {}

    def _seen(self, line: str) -> bool:
        return line.strip() in self.parsed

    def _mark(self, line: str) -> None:
        self.parsed.add(line.strip())

    def _next_line(self, line: str) -> str:
        start = self.content.find(line)
        if start == -1:
            return ""
        rest = self.content[start + len(line) :]
        end = rest.find("\n")
        return rest if end == -1 else rest[: end + 1]

    def _previous_line(self, line: str) -> str:
        start = self.content.find(line)
        if start == -1:
            return ""
        previous_start = max(self.content.rfind("\n", 1, start), 0)
        return self.content[previous_start:start]

    def _record(self, original: str, suggested: str) -> None:
        self.suggestions[original.rstrip("\n")] = suggested

    def find_unended_paragraphs(self) -> None:
        for match in _UNENDED_PARAGRAPH.finditer(self.content):
            current = match.group(0)
            if self._seen(current):
                continue
            self._mark(current)

            original = current
            suggested = match.group(1) + match.group(3) + " "
            next_line = current
            while True:
                next_line = self._next_line(next_line)
                self._mark(next_line)
                original += next_line

                next_match = _UNENDED_PARAGRAPH.search(next_line)
                if next_match is None:
                    suggested += _after_opening_tag(next_line)
                    break
                suggested += next_match.group(3) + " "

            self._record(original, suggested.rstrip("\n"))

    def find_unended_double_quotes(self) -> None:
        for match in _PARAGRAPH_WITH_DOUBLE_QUOTE.finditer(self.content):
            current = match.group(0) + "\n"
            quote_count = current.count('"')
            if quote_count % 2 == 0 or self._seen(current):
                continue
            self._mark(current)

            original = current
            suggested = match.group(1) + match.group(3) + match.group(4) + match.group(5)
            if not suggested.endswith(" "):
                suggested += " "

            lines_read = 1
            next_line = current
            while True:
                lines_read += 1
                next_line = self._next_line(next_line)
                self._mark(next_line)
                original += next_line
                quote_count += next_line.count('"')

                still_broken = (
                    quote_count % 2 != 0 and next_line != "" and lines_read < MAX_QUOTE_LOOPS
                )
                line_content = _after_opening_tag(next_line)
                if still_broken:
                    closing_start = line_content.rfind("<")
                    if closing_start != -1:
                        line_content = line_content[:closing_start]
                suggested += line_content

                if not still_broken:
                    break

            self._record(original, suggested.rstrip("\n").replace("  ", " "))

    def find_paragraphs_starting_lowercase(self) -> None:
        for match in _PARAGRAPH_STARTING_LOWERCASE.finditer(self.content):
            current = match.group(0) + "\n"
            if self._seen(current):
                continue
            self._mark(current)

            suggested = match.group(3)
            if not suggested.startswith(" "):
                suggested = " " + suggested

            previous = self._previous_line(match.group(0))
            self._mark(previous)

            closing_start = previous.find("</p>")
            if closing_start == -1:
                _log.warning("failed to find ending paragraph tag for line %r", previous)
                continue

            original = previous + current
            suggested = previous[:closing_start] + suggested
            self._record(original, suggested.rstrip("\n").replace("  ", " "))