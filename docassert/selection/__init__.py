"""
Document parsing and selector resolution.

Usage:
    from docassert.selection import parse, resolve_one, resolve_all, element_text

    document = parse("<ul><li>a</li><li>b</li></ul>")
    first = resolve_one(document, "li")
    every = resolve_all(document, "li")
    print(element_text(first))  # "a"
"""

from .parser import DEFAULT_FEATURES, parse
from .query import (
    BLOCK_TAGS,
    Selection,
    attribute_value,
    class_names,
    element_text,
    has_attribute,
    has_class,
    indent,
    render,
    resolve_all,
    resolve_one,
)

__all__ = [
    # Parsing
    "DEFAULT_FEATURES",
    "parse",
    # Resolution
    "Selection",
    "resolve_one",
    "resolve_all",
    # Inspection
    "BLOCK_TAGS",
    "element_text",
    "has_attribute",
    "attribute_value",
    "class_names",
    "has_class",
    # Rendering
    "render",
    "indent",
]
