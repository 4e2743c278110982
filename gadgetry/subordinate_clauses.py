"""Find subordinate clauses followed by a redundant conjunction."""

from __future__ import annotations

import re

_SUBORDINATE_CLAUSE = re.compile(
    r"(?m)^[\r\t\f\v ]*?<p[^>]*?>[^\n]*?(?i:although|because|while)[^.!?\n]*?, "
    r"(?:but|thus|therefore|furthermore|however)[^\n]*?</p>"
)
_REDUNDANT_CONJUNCTION = re.compile(
    r"(.*?,)[\t\n\f\r ]*?(?:but|thus|therefore|furthermore|however)(.*)"
)


def get_potentially_lacking_subordinate_clause_instances(file_content: str) -> dict[str, str]:
    """Map each offending paragraph line to the line without the extra conjunction."""
    return {
        match: _REDUNDANT_CONJUNCTION.sub(r"\1\2", match)
        for match in _SUBORDINATE_CLAUSE.findall(file_content)
    }