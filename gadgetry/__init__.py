"""Ebook markup linting, epub zip rewriting and argument checks for git submodule and image tools."""

__version__ = "0.1.0"

__all__ = [
    "broken_lines",
    "common_strings",
    "image_args",
    "language",
    "submodule_args",
    "subordinate_clauses",
    "text_replacements",
    "zip_update",
]