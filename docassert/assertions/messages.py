"""
Failure message templates and diagnostic builders.

Every failure kind has one fixed template. Templates start with a blank
line and put each parameter on its own line, so that the message reads
well after a test runner's "AssertionError:" prefix. The wording is
matched verbatim by golden-output tests; change it deliberately.
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from bs4.element import Tag

from ..selection import Selection, indent, render
from .models import Diagnostic, FailureKind


# ─────────────────────────────────────────────────────────────────────────────
# Templates
# ─────────────────────────────────────────────────────────────────────────────

NULL_DOCUMENT = "\nExpecting actual not to be null"

DOCUMENT_MISSING = (
    "\nExpecting document but found\n"
    "  null"
)

ELEMENT_NOT_FOUND = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "but found nothing"
)

COUNT_MISMATCH = (
    "\nExpecting elements for\n"
    "  <%s>\n"
    "to have size of\n"
    "  <%s>\n"
    "but had\n"
    "  <%s>\n"
    "with elements:\n"
    "%s"
)

UNEXPECTED_ELEMENT = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "to be absent, but was\n"
    "%s"
)

ATTRIBUTE_NOT_FOUND_ON_ELEMENTS = (
    "\nExpecting attribute\n"
    "  <%s>\n"
    "on elements for\n"
    "  <%s>\n"
    "but found\n"
    "  <%s>"
)

ATTRIBUTE_NOT_FOUND_ON_ELEMENT = (
    "\nExpecting attribute\n"
    "  <%s>\n"
    "on element for\n"
    "  <%s>\n"
    "but found\n"
    "  <%s>"
)

UNEXPECTED_ATTRIBUTE = (
    "\nExpecting attribute\n"
    "  <%s>\n"
    "on element for\n"
    "  <%s>\n"
    "to be absent, but was\n"
    "  <%s>"
)

TEXT_MISMATCH = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "to have text\n"
    "  <%s>\n"
    "but was\n"
    "<%s>"
)

POSITIONAL_TEXT_MISMATCH = (
    "\nExpecting element at position"
    " %s "
    "in list for\n"
    "<%s>\n"
    "to not have text\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>"
)

TEXT_REMAINDER = (
    "\nExpecting"
    " <%s> remaining elements:\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>"
    "for <%s>"
)

SUBSTRING_MISSING = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "not to contain text\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>"
)

PATTERN_MISMATCH = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "not to match regex\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>"
)

ATTRIBUTE_VALUE_MISMATCH = (
    "\nExpecting attribute\n"
    "  <%s>\n"
    "on element for\n"
    "  <%s>\n"
    "to be \n"
    "  <%s>\n"
    "but was <%s>"
)

POSITIONAL_ATTRIBUTE_MISSING = (
    "\nExpecting element at position"
    " %s "
    "in list for\n"
    "<%s>\n"
    "to have attribute\n"
    "  <%s>\n"
    "but did not:\n"
    "  <%s>\n"
    "in list\n"
    "  <%s>"
)

POSITIONAL_ATTRIBUTE_MISMATCH = (
    "\nExpecting element at position"
    " %s "
    "in list for\n"
    "<%s>\n"
    "to have attribute value\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>\n"
    "in list\n"
    "  <%s>"
)

ATTRIBUTE_REMAINDER = (
    "\nExpecting"
    " <%s> remaining elements:\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>\n"
    "for\n"
    "  <%s>"
)

CLASS_MISSING = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "to include class\n"
    "  <%s>\n"
    "but found\n"
    "  <%s>"
)

CLASS_PRESENT = (
    "\nExpecting element for\n"
    "  <%s>\n"
    "to not include class\n"
    "  <%s>\n"
    "but was\n"
    "  <%s>"
)


# ─────────────────────────────────────────────────────────────────────────────
# Formatting
# ─────────────────────────────────────────────────────────────────────────────

def format_value(value: Any) -> str:
    """
    Render one template parameter.

    Elements render as outer HTML, selections as one element per line,
    other sequences as ``[a, b]``, patterns by their source and None as
    ``null``.
    """
    if value is None:
        return "null"
    if isinstance(value, Tag):
        return render(value)
    if isinstance(value, re.Pattern):
        return value.pattern
    if isinstance(value, (list, tuple)):
        if all(isinstance(item, Tag) for item in value):
            return render(list(value))
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_message(template: str, *args: Any) -> str:
    """Fill a template with rendered parameters."""
    return template % tuple(format_value(arg) for arg in args)


def mask(target: Tag | Selection) -> str:
    """Render an element or selection indented by two spaces on every line."""
    return indent(render(target))


def aggregate_message(errors: Sequence[Diagnostic]) -> str:
    """Combine collected diagnostics into one numbered message, in order."""
    noun = "assertion" if len(errors) == 1 else "assertions"
    lines = [f"\nThe following {len(errors)} {noun} failed:"]
    for number, error in enumerate(errors, start=1):
        lines.append(f"{number}) {error.message.lstrip(chr(10))}")
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Diagnostic builders
# ─────────────────────────────────────────────────────────────────────────────

def null_document() -> Diagnostic:
    return Diagnostic(FailureKind.NULL_DOCUMENT, NULL_DOCUMENT)


def document_missing() -> Diagnostic:
    return Diagnostic(FailureKind.NULL_DOCUMENT, DOCUMENT_MISSING)


def element_not_found(selector: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.ELEMENT_NOT_FOUND,
        format_message(ELEMENT_NOT_FOUND, selector),
        selector=selector,
    )


def count_mismatch(selector: str, count: int, selection: Selection) -> Diagnostic:
    return Diagnostic(
        FailureKind.COUNT_MISMATCH,
        format_message(COUNT_MISMATCH, selector, count, len(selection), mask(selection)),
        actual=len(selection),
        expected=count,
        selector=selector,
    )


def unexpected_element(selector: str, element: Tag) -> Diagnostic:
    return Diagnostic(
        FailureKind.UNEXPECTED_ELEMENT,
        format_message(UNEXPECTED_ELEMENT, selector, mask(element)),
        actual=render(element),
        selector=selector,
    )


def attribute_not_found(attribute: str, selector: str, found: Tag | Selection) -> Diagnostic:
    """Attribute missing on a single element or on every element of a selection."""
    template = (
        ATTRIBUTE_NOT_FOUND_ON_ELEMENT if isinstance(found, Tag)
        else ATTRIBUTE_NOT_FOUND_ON_ELEMENTS
    )
    return Diagnostic(
        FailureKind.ATTRIBUTE_NOT_FOUND,
        format_message(template, attribute, selector, found),
        expected=attribute,
        selector=selector,
    )


def unexpected_attribute(attribute: str, selector: str, selection: Selection) -> Diagnostic:
    return Diagnostic(
        FailureKind.UNEXPECTED_ATTRIBUTE,
        format_message(UNEXPECTED_ATTRIBUTE, attribute, selector, selection),
        actual=render(selection),
        selector=selector,
    )


def text_mismatch(selector: str, expected: str, actual: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(TEXT_MISMATCH, selector, expected, actual),
        actual=actual,
        expected=expected,
        selector=selector,
    )


def positional_text_mismatch(index: int, selector: str, expected: str, actual: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(POSITIONAL_TEXT_MISMATCH, index, selector, expected, actual),
        actual=actual,
        expected=expected,
        selector=selector,
    )


def text_remainder(selector: str, rest: Sequence[str], selection: Selection) -> Diagnostic:
    return Diagnostic(
        FailureKind.REMAINDER,
        format_message(TEXT_REMAINDER, len(rest), list(rest), selection, selector),
        expected=list(rest),
        selector=selector,
    )


def substring_missing(selector: str, substring: str, actual: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(SUBSTRING_MISSING, selector, substring, actual),
        actual=actual,
        expected=substring,
        selector=selector,
    )


def pattern_mismatch(selector: str, pattern: re.Pattern, actual: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(PATTERN_MISMATCH, selector, pattern, actual),
        actual=actual,
        expected=pattern.pattern,
        selector=selector,
    )


def attribute_value_mismatch(attribute: str, selector: str, expected: str, actual: str) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(ATTRIBUTE_VALUE_MISMATCH, attribute, selector, expected, actual),
        actual=actual,
        expected=expected,
        selector=selector,
    )


def positional_attribute_missing(
    index: int,
    selector: str,
    attribute: str,
    element: Tag,
    selection: Selection,
) -> Diagnostic:
    return Diagnostic(
        FailureKind.ATTRIBUTE_NOT_FOUND,
        format_message(POSITIONAL_ATTRIBUTE_MISSING, index, selector, attribute, element, selection),
        expected=attribute,
        selector=selector,
    )


def positional_attribute_mismatch(
    index: int,
    selector: str,
    expected: str,
    actual: str,
    selection: Selection,
) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(POSITIONAL_ATTRIBUTE_MISMATCH, index, selector, expected, actual, selection),
        actual=actual,
        expected=expected,
        selector=selector,
    )


def attribute_remainder(selector: str, rest: Sequence[str], selection: Selection) -> Diagnostic:
    return Diagnostic(
        FailureKind.REMAINDER,
        format_message(ATTRIBUTE_REMAINDER, len(rest), list(rest), selection, selector),
        expected=list(rest),
        selector=selector,
    )


def class_missing(selector: str, class_name: str, element: Tag) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(CLASS_MISSING, selector, class_name, element),
        actual=render(element),
        expected=class_name,
        selector=selector,
    )


def class_present(selector: str, class_name: str, element: Tag) -> Diagnostic:
    return Diagnostic(
        FailureKind.VALUE_MISMATCH,
        format_message(CLASS_PRESENT, selector, class_name, element),
        actual=render(element),
        expected=class_name,
        selector=selector,
    )
