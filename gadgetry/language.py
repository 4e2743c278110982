"""Make sure the html element of a document declares its language."""

from __future__ import annotations

_LANG_ATTRIBUTE = "lang="
_XML_LANG_ATTRIBUTE = "xml:lang="
_OPENING_HTML_TAG = "<html"


def ensure_language_is_set(text: str, lang: str) -> str:
    """Add or fill in ``lang`` and ``xml:lang`` on the html element when missing or blank."""
    html_open_start = text.find(_OPENING_HTML_TAG)
    if html_open_start == -1:
        return text

    html_open_end = text.find(">", html_open_start)
    if html_open_end == -1:
        return text

    attribute_end = html_open_end
    html_el = text[html_open_start:attribute_end]
    lang_index = html_el.find(_LANG_ATTRIBUTE)
    if lang_index == -1:
        return (
            text[:attribute_end]
            + f' {_LANG_ATTRIBUTE}"{lang}" {_XML_LANG_ATTRIBUTE}"{lang}"'
            + text[attribute_end:]
        )

    parts: list[str] = []
    handled = {"lang": False, "xml": False}

    def handle_attribute(index: int) -> int:
        value_start = index + len(_LANG_ATTRIBUTE)
        end = value_start + 1
        quote = html_el[value_start:end]
        value_chars: list[str] = []
        while end < len(html_el):
            char = html_el[end]
            if char == quote:
                break
            value_chars.append(char)
            end += 1

        if not "".join(value_chars).strip():
            parts.append(html_el[index : value_start + 1] + lang + quote)
        else:
            parts.append(html_el[index : end + 1])
        handled["xml" if html_el[index - 1] == ":" else "lang"] = True
        return end

    parts.append(html_el[:lang_index])
    end_of_attr = handle_attribute(lang_index)

    second = html_el.find(_LANG_ATTRIBUTE, end_of_attr)
    if second != -1:
        parts.append(html_el[end_of_attr + 1 : second])
        end_of_attr = handle_attribute(second)

    if not handled["lang"]:
        parts.append(f' {_LANG_ATTRIBUTE}"{lang}"')
    if not handled["xml"]:
        parts.append(f' {_XML_LANG_ATTRIBUTE}"{lang}"')

    if end_of_attr < len(html_el) - 1:
        parts.append(html_el[end_of_attr + 1 :])

    return text[:html_open_start] + "".join(parts) + text[attribute_end:]