"""
Typed data structures for document check suites.

This module contains all enums and dataclasses that represent
the internal typed structure of a parsed suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class CheckOp(str, Enum):
    """Supported check operators, one per assertion on the chain."""
    ELEMENT_EXISTS = "element_exists"
    ELEMENT_NOT_EXISTS = "element_not_exists"
    ELEMENT_ATTRIBUTE_EXISTS = "element_attribute_exists"
    ELEMENT_ATTRIBUTE_NOT_EXISTS = "element_attribute_not_exists"
    ELEMENT_HAS_TEXT = "element_has_text"
    ELEMENT_CONTAINS_TEXT = "element_contains_text"
    ELEMENT_MATCHES_TEXT = "element_matches_text"
    ELEMENT_ATTRIBUTE_HAS_TEXT = "element_attribute_has_text"
    ELEMENT_HAS_CLASS = "element_has_class"
    ELEMENT_NOT_HAS_CLASS = "element_not_has_class"


class RunMode(str, Enum):
    """How a suite reacts to a failing check."""
    SOFT = "soft"  # Run every check, report all failures
    STRICT = "strict"  # Stop at the first failing check


# ─────────────────────────────────────────────────────────────────────────────
# Document
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class DocumentSource:
    """Where the document under test comes from."""
    path: Path | None = None  # Resolved against the suite file's directory
    markup: str | None = None  # Inline markup
    parser: str = "html.parser"  # BeautifulSoup tree builder

    @property
    def label(self) -> str:
        return str(self.path) if self.path is not None else "<inline markup>"


# ─────────────────────────────────────────────────────────────────────────────
# Checks
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Check:
    """A single assertion against the suite's document."""
    id: str
    op: CheckOp
    selector: str
    attribute: str | None = None  # For attribute ops
    value: Any = None  # Text, substring, pattern, attribute value or class name
    values: list[str] | None = None  # Positional texts or attribute values
    count: int | None = None  # For element_exists

    @property
    def expected(self) -> Any:
        """The expectation to show in reports."""
        if self.values is not None:
            return self.values
        if self.count is not None:
            return self.count
        return self.value


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    document: DocumentSource
    mode: RunMode = RunMode.SOFT
    checks: list[Check] = field(default_factory=list)
