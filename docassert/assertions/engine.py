"""
Assertion engine for HTML documents.

This module provides the fluent assertion chain that checks element
existence, counts, text, attributes and classes of a parsed document.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence, Union

from bs4 import BeautifulSoup

from ..selection import (
    DEFAULT_FEATURES,
    attribute_value,
    element_text,
    has_attribute,
    has_class,
    parse,
    resolve_all,
    resolve_one,
)
from . import messages
from .errors import DocumentAssertionError, SoftAssertionsError
from .models import Diagnostic

logger = logging.getLogger(__name__)

TextExpectation = Union[str, Sequence[str]]


class DocumentAssertions:
    """
    Fluent assertions on one parsed document.

    Every assertion first checks that a document is held, then resolves its
    selector against the live tree, then evaluates its predicate. Passing
    assertions return the chain so calls can be strung together.

    In strict mode (the default) the first failure raises
    DocumentAssertionError and the rest of the expression never runs. In
    soft mode failures are collected in order and raised together by
    assert_all().

    Example:
        document = parse('<ul><li class="a">one</li><li>two</li></ul>')

        (DocumentAssertions(document)
            .element_exists("li", 2)
            .element_has_text("li", ["one", "two"])
            .element_has_class("li", "a"))
    """

    def __init__(self, document: BeautifulSoup | None, soft: bool = False):
        self.document = document
        self.soft = soft
        self.diagnostics: list[Diagnostic] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Existence
    # ─────────────────────────────────────────────────────────────────────────

    def element_exists(self, selector: str, count: int | None = None) -> DocumentAssertions:
        """
        Assert that the selector matches an element.

        Args:
            selector: CSS selector
            count: When given, the exact number of elements that must match

        Returns:
            The chain
        """
        if self._document_missing():
            return self

        if count is not None:
            selection = resolve_all(self.document, selector)
            if len(selection) != count:
                self._report(messages.count_mismatch(selector, count, selection))
            return self

        if resolve_one(self.document, selector) is None:
            self._report(messages.element_not_found(selector))
        return self

    def element_not_exists(self, selector: str) -> DocumentAssertions:
        """Assert that the selector matches nothing."""
        if self._document_missing():
            return self

        element = resolve_one(self.document, selector)
        if element is not None:
            self._report(messages.unexpected_element(selector, element))
        return self

    def element_attribute_exists(self, selector: str, attribute: str) -> DocumentAssertions:
        """Assert that at least one matched element carries the attribute."""
        if self._document_missing():
            return self

        selection = resolve_all(self.document, selector)
        if not selection:
            self._report(messages.element_not_found(selector))
            return self

        if not has_attribute(selection, attribute):
            self._report(messages.attribute_not_found(attribute, selector, selection))
        return self

    def element_attribute_not_exists(self, selector: str, attribute: str) -> DocumentAssertions:
        """Assert that the selector matches and no matched element carries the attribute."""
        if self._document_missing():
            return self

        selection = resolve_all(self.document, selector)
        if not selection:
            self._report(messages.element_not_found(selector))
            return self

        if has_attribute(selection, attribute):
            self._report(messages.unexpected_attribute(attribute, selector, selection))
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Text
    # ─────────────────────────────────────────────────────────────────────────

    def element_has_text(self, selector: str, text: TextExpectation) -> DocumentAssertions:
        """
        Assert on element text.

        With a single string, the text of the first matched element must
        contain it. With a list or tuple, the text of each matched element
        must equal the expected string at the same position exactly, and
        there must be at least as many matches as expected strings.

        Args:
            selector: CSS selector
            text: Substring, or exact texts by position

        Returns:
            The chain
        """
        if isinstance(text, str):
            return self._element_contains(selector, text, messages.text_mismatch)
        return self._elements_have_texts(selector, _as_strings(text, "text"))

    def element_contains_text(self, selector: str, substring: str) -> DocumentAssertions:
        """Assert that the text of the first matched element contains the substring."""
        return self._element_contains(selector, substring, messages.substring_missing)

    def element_matches_text(self, selector: str, pattern: str | re.Pattern) -> DocumentAssertions:
        """
        Assert that the text of the first matched element contains a match
        for the regular expression.
        """
        if self._document_missing():
            return self

        element = resolve_one(self.document, selector)
        if element is None:
            self._report(messages.element_not_found(selector))
            return self

        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        text = element_text(element)
        if regex.search(text) is None:
            self._report(messages.pattern_mismatch(selector, regex, text))
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Attributes
    # ─────────────────────────────────────────────────────────────────────────

    def element_attribute_has_text(
        self,
        selector: str,
        attribute: str,
        value: TextExpectation,
    ) -> DocumentAssertions:
        """
        Assert on attribute values.

        With a single string, the attribute value of the matched elements
        (taken from the first one carrying it) must equal it. With a list or
        tuple, each matched element must carry the attribute with the value
        at the same position.

        Args:
            selector: CSS selector
            attribute: Attribute name
            value: Exact value, or exact values by position

        Returns:
            The chain
        """
        if not isinstance(value, str):
            return self._elements_have_attribute_values(selector, attribute, _as_strings(value, "value"))

        if self._document_missing():
            return self

        selection = resolve_all(self.document, selector)
        if not selection:
            self._report(messages.element_not_found(selector))
            return self

        if not has_attribute(selection, attribute):
            self._report(messages.attribute_not_found(attribute, selector, selection))
            return self

        actual = attribute_value(selection, attribute)
        if actual != value:
            self._report(messages.attribute_value_mismatch(attribute, selector, value, actual))
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Classes
    # ─────────────────────────────────────────────────────────────────────────

    def element_has_class(self, selector: str, class_name: str) -> DocumentAssertions:
        """Assert that the first matched element has the class."""
        element = self._element_with_classes(selector)
        if element is not None and not has_class(element, class_name):
            self._report(messages.class_missing(selector, class_name, element))
        return self

    def element_not_has_class(self, selector: str, class_name: str) -> DocumentAssertions:
        """Assert that the first matched element has classes, but not this one."""
        element = self._element_with_classes(selector)
        if element is not None and has_class(element, class_name):
            self._report(messages.class_present(selector, class_name, element))
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Soft mode
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def failed(self) -> bool:
        return bool(self.diagnostics)

    def assert_all(self) -> None:
        """Raise one SoftAssertionsError if any failures were collected."""
        if self.diagnostics:
            logger.debug(f"Flushing {len(self.diagnostics)} collected failure(s)")
            raise SoftAssertionsError(self.diagnostics)

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _report(self, diagnostic: Diagnostic) -> None:
        """Raise the diagnostic, or queue it in soft mode."""
        logger.debug(f"Assertion failed ({diagnostic.kind.value}) for {diagnostic.selector!r}")
        if self.soft:
            self.diagnostics.append(diagnostic)
            return
        raise DocumentAssertionError(diagnostic)

    def _document_missing(self) -> bool:
        if self.document is None:
            self._report(messages.null_document())
            return True
        return False

    def _element_contains(self, selector: str, substring: str, on_failure) -> DocumentAssertions:
        if self._document_missing():
            return self

        element = resolve_one(self.document, selector)
        if element is None:
            self._report(messages.element_not_found(selector))
            return self

        text = element_text(element)
        if substring not in text:
            self._report(on_failure(selector, substring, text))
        return self

    def _elements_have_texts(self, selector: str, texts: list[str]) -> DocumentAssertions:
        if self._document_missing():
            return self

        selection = resolve_all(self.document, selector)
        for index in range(min(len(texts), len(selection))):
            actual = element_text(selection[index])
            if actual != texts[index]:
                self._report(messages.positional_text_mismatch(index, selector, texts[index], actual))

        if len(texts) > len(selection):
            self._report(messages.text_remainder(selector, texts[len(selection):], selection))
        return self

    def _elements_have_attribute_values(
        self,
        selector: str,
        attribute: str,
        values: list[str],
    ) -> DocumentAssertions:
        if self._document_missing():
            return self

        selection = resolve_all(self.document, selector)
        for index in range(min(len(values), len(selection))):
            element = selection[index]
            if not has_attribute(element, attribute):
                self._report(messages.positional_attribute_missing(
                    index, selector, attribute, element, selection
                ))
                continue

            actual = attribute_value(element, attribute)
            if actual != values[index]:
                self._report(messages.positional_attribute_mismatch(
                    index, selector, values[index], actual, selection
                ))

        if len(values) > len(selection):
            self._report(messages.attribute_remainder(selector, values[len(selection):], selection))
        return self

    def _element_with_classes(self, selector: str):
        """Resolve the first match and require a non-empty class attribute."""
        if self._document_missing():
            return None

        element = resolve_one(self.document, selector)
        if element is None:
            self._report(messages.element_not_found(selector))
            return None

        if not attribute_value(element, "class"):
            self._report(messages.attribute_not_found("class", selector, element))
            return None
        return element


def _as_strings(values: Sequence[str], name: str) -> list[str]:
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"Expected {name} as a string or a list of strings, got {type(values).__name__}")
    return list(values)


# Convenience functions for building chains
def assert_that(document: BeautifulSoup | None) -> DocumentAssertions:
    """Start a strict assertion chain on a parsed document."""
    return DocumentAssertions(document)


def assert_that_document(
    markup: str | bytes | None,
    features: str = DEFAULT_FEATURES,
) -> DocumentAssertions:
    """Parse markup and start a strict assertion chain on the result."""
    chain = DocumentAssertions(parse(markup, features))
    if markup is None:
        chain._report(messages.document_missing())
    return chain


def qa(value: str) -> str:
    """Build a selector for elements tagged with ``data-qa="value"``."""
    return f"*[data-qa={value}]"
