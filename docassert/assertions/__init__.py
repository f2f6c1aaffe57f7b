"""
Assertion Engine for HTML Documents

This package provides fluent assertions on parsed HTML documents with
detailed failure messages.

Supported assertions:
    - element_exists: Selector matches an element (optionally exactly N)
    - element_not_exists: Selector matches nothing
    - element_attribute_exists / element_attribute_not_exists
    - element_has_text: Substring of the first match, or exact texts by position
    - element_contains_text: Substring of the first match
    - element_matches_text: Regular expression search in the first match
    - element_attribute_has_text: Exact attribute value, or values by position
    - element_has_class / element_not_has_class

Usage:
    from docassert.assertions import assert_that_document, qa, soft_assertions

    (assert_that_document(html)
        .element_exists(qa("login-form"))
        .element_has_text("h1", "Sign in")
        .element_attribute_has_text("input", "name", ["user", "password"]))

    # Soft mode: collect every failure, raise once
    with soft_assertions(html) as doc:
        doc.element_exists("nav")
        doc.element_has_class("body", "dark")
"""

# Models
from .models import Diagnostic, FailureKind

# Errors
from .errors import DocumentAssertionError, SoftAssertionsError

# Engine
from .engine import (
    DocumentAssertions,
    # Convenience functions
    assert_that,
    assert_that_document,
    qa,
)

# Soft mode
from .soft import assert_that_document_spec, assert_that_spec, soft_assertions

__all__ = [
    # Models
    "Diagnostic",
    "FailureKind",
    # Errors
    "DocumentAssertionError",
    "SoftAssertionsError",
    # Engine
    "DocumentAssertions",
    # Convenience functions
    "assert_that",
    "assert_that_document",
    "qa",
    # Soft mode
    "assert_that_spec",
    "assert_that_document_spec",
    "soft_assertions",
]
