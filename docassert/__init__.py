"""
docassert - Fluent Assertions for HTML Documents

This package provides assertions for verifying the structure, text,
attributes and classes of parsed HTML documents in tests.

Subpackages:
    - selection: Parse markup and resolve CSS selectors
    - assertions: Fluent assertion chain, failure messages and soft mode
    - schema_parsing: Parse and validate YAML check suites
    - reporting: Run reports and result tracking

Usage:
    from docassert import assert_that_document, assert_that_document_spec, qa

    (assert_that_document(html)
        .element_exists(qa("cart"))
        .element_has_text(".item", ["Socks", "Shoes"])
        .element_attribute_has_text("a.checkout", "href", "/checkout"))

    # Collect every failure and raise once
    assert_that_document_spec(html, lambda doc: (
        doc.element_has_class("body", "logged-in")
           .element_not_exists(".error")
    ))
"""

__version__ = "0.1.0"

from soupsieve import SelectorSyntaxError

# Re-export selection for convenience
from .selection import (
    parse,
    resolve_one,
    resolve_all,
    element_text,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    Diagnostic,
    FailureKind,
    # Errors
    DocumentAssertionError,
    SoftAssertionsError,
    # Engine
    DocumentAssertions,
    # Entry points
    assert_that,
    assert_that_document,
    assert_that_spec,
    assert_that_document_spec,
    soft_assertions,
    qa,
)

# Re-export schema_parsing for convenience
from .schema_parsing import (
    load_suite,
    validate_suite_yaml,
    Suite,
    Check,
    CheckOp,
    RunMode,
    ValidationResult,
    ValidationError,
)

# Re-export reporting for convenience
from .reporting import (
    RunReport,
    RunStatus,
    CheckRecord,
    CheckStatus,
    Reporter,
)

__all__ = [
    # Package info
    "__version__",
    # Selection
    "SelectorSyntaxError",
    "parse",
    "resolve_one",
    "resolve_all",
    "element_text",
    # Assertions - Models
    "Diagnostic",
    "FailureKind",
    # Assertions - Errors
    "DocumentAssertionError",
    "SoftAssertionsError",
    # Assertions - Engine
    "DocumentAssertions",
    # Assertions - Entry points
    "assert_that",
    "assert_that_document",
    "assert_that_spec",
    "assert_that_document_spec",
    "soft_assertions",
    "qa",
    # Schema parsing
    "load_suite",
    "validate_suite_yaml",
    "Suite",
    "Check",
    "CheckOp",
    "RunMode",
    "ValidationResult",
    "ValidationError",
    # Reporting
    "RunReport",
    "RunStatus",
    "CheckRecord",
    "CheckStatus",
    "Reporter",
]
