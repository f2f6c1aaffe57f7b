"""
Selector resolution and element inspection.

Selection is delegated to soupsieve through ``Tag.select_one`` and
``Tag.select``. Nothing here is cached: every call queries the live tree,
so mutations made between two assertions are visible to the second one.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Script,
    Stylesheet,
    Tag,
)
from bs4.formatter import HTMLFormatter

logger = logging.getLogger(__name__)

# Ordered matches of a selector, in document order
Selection = list[Tag]

# Element boundaries that separate words in extracted text
BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "body", "br", "caption",
    "dd", "details", "dialog", "div", "dl", "dt", "fieldset", "figcaption",
    "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6", "head",
    "header", "hgroup", "hr", "html", "legend", "li", "main", "nav", "ol",
    "option", "p", "pre", "section", "summary", "table", "tbody", "td",
    "tfoot", "th", "thead", "title", "tr", "ul",
})

_NON_TEXT_STRINGS = (
    Comment,
    Declaration,
    Doctype,
    ProcessingInstruction,
    Script,
    Stylesheet,
)

_WHITESPACE = re.compile(r"[ \t\n\r\f]+")


def resolve_one(document: BeautifulSoup, selector: str) -> Tag | None:
    """Return the first element matching the selector, or None."""
    element = document.select_one(selector)
    logger.debug(f"resolve_one({selector!r}) -> {'match' if element is not None else 'no match'}")
    return element


def resolve_all(document: BeautifulSoup, selector: str) -> Selection:
    """Return every element matching the selector, in document order."""
    selection = list(document.select(selector))
    logger.debug(f"resolve_all({selector!r}) -> {len(selection)} match(es)")
    return selection


def element_text(element: Tag) -> str:
    """
    Extract the visible text of an element.

    Text nodes of all descendants are concatenated; block-level elements
    and line breaks count as whitespace. Runs of whitespace collapse to a
    single space and the result is trimmed. Comments, script and style
    contents are not text.
    """
    parts: list[str] = []
    for node in element.descendants:
        if isinstance(node, Tag):
            if node.name in BLOCK_TAGS:
                parts.append(" ")
        elif isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS):
            if _is_block(node.previous_sibling):
                parts.append(" ")
            parts.append(str(node))
    return _WHITESPACE.sub(" ", "".join(parts)).strip(" ")


def _is_block(node) -> bool:
    return isinstance(node, Tag) and node.name in BLOCK_TAGS


def has_attribute(target: Union[Tag, Selection], name: str) -> bool:
    """Check an element, or any element of a selection, for an attribute."""
    if isinstance(target, Tag):
        return target.has_attr(name)
    return any(element.has_attr(name) for element in target)


def attribute_value(target: Union[Tag, Selection], name: str) -> str:
    """
    Get an attribute value as a string.

    For a selection, the value comes from the first element carrying the
    attribute. Missing attributes read as an empty string.
    """
    elements = [target] if isinstance(target, Tag) else target
    for element in elements:
        if element.has_attr(name):
            value = element.get(name)
            if isinstance(value, (list, tuple)):
                return " ".join(value)
            return value
    return ""


def class_names(element: Tag) -> list[str]:
    """Get the whitespace-separated class tokens of an element."""
    return attribute_value(element, "class").split()


def has_class(element: Tag, class_name: str) -> bool:
    """Check class token membership, ignoring case."""
    wanted = class_name.lower()
    return any(token.lower() == wanted for token in class_names(element))


class SourceOrderFormatter(HTMLFormatter):
    """The "minimal" formatter, with attributes kept in source order."""

    def __init__(self):
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)

    def attributes(self, tag: Tag):
        return list(tag.attrs.items()) if tag.attrs else []


_SOURCE_ORDER = SourceOrderFormatter()


def render(target: Union[Tag, Selection]) -> str:
    """Render an element, or each element of a selection, as outer HTML."""
    if isinstance(target, Tag):
        return target.decode(formatter=_SOURCE_ORDER)
    return "\n".join(element.decode(formatter=_SOURCE_ORDER) for element in target)


def indent(text: str, prefix: str = "  ") -> str:
    """Prefix every line of text, including blank ones."""
    return "\n".join(prefix + line for line in text.split("\n"))
