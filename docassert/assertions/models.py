"""
Diagnostic models.

This module defines the failure kinds an assertion can report and the
immutable record that carries one formatted failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    """Kind of failure a diagnostic describes."""
    NULL_DOCUMENT = "null_document"
    ELEMENT_NOT_FOUND = "element_not_found"
    ATTRIBUTE_NOT_FOUND = "attribute_not_found"
    COUNT_MISMATCH = "count_mismatch"
    UNEXPECTED_ELEMENT = "unexpected_element"
    UNEXPECTED_ATTRIBUTE = "unexpected_attribute"
    VALUE_MISMATCH = "value_mismatch"
    REMAINDER = "remainder"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single formatted assertion failure.

    Attributes:
        kind: What kind of discrepancy was found
        message: Multi-line human-readable failure message
        actual: What was actually found, for tooling
        expected: What was expected, for tooling
        selector: The selector the assertion ran against, if any
    """
    kind: FailureKind
    message: str
    actual: Any = None
    expected: Any = None
    selector: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "selector": self.selector,
            "actual": _safe_str(self.actual),
            "expected": _safe_str(self.expected),
        }


def _safe_str(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)
