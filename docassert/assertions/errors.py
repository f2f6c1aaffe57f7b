"""
Exceptions raised by failing document assertions.

Both are AssertionError subclasses so test runners report them as test
failures rather than errors.
"""

from __future__ import annotations

from typing import Any

from .messages import aggregate_message
from .models import Diagnostic


class DocumentAssertionError(AssertionError):
    """Raised by a strict chain for its first failing assertion."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def actual(self) -> Any:
        return self.diagnostic.actual

    @property
    def expected(self) -> Any:
        return self.diagnostic.expected


class SoftAssertionsError(AssertionError):
    """Raised once at the end of a soft chain that collected failures."""

    def __init__(self, errors: list[Diagnostic]):
        super().__init__(aggregate_message(errors))
        self.errors = list(errors)

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]
