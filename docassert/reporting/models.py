"""
Report data models for suite runs.

This module defines the data structures for capturing complete
run records including metadata, check results, and timing.
"""

from __future__ import annotations

import hashlib
import json
import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class CheckStatus(str, Enum):
    """Status of an individual check."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    SKIPPED = "skipped"


class RunStatus(str, Enum):
    """Overall status of a suite run."""
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


STATUS_ICONS = {
    "pending": "⏳",
    "running": "🔄",
    "passed": "✅",
    "failed": "❌",
    "error": "⚠️",
    "skipped": "⏭️",
}

# Prefix of the first failure line in summaries; later lines align under it
_FAILURE_PREFIX = "      └─ "


@dataclass
class CheckRecord:
    """
    Record of a single check.

    Captures what was asserted, what was found, how long it took,
    and every failure message the assertion produced.
    """
    check_id: str
    op: str  # e.g. "element_has_text"
    selector: str
    status: CheckStatus = CheckStatus.PENDING

    started_at: datetime | None = None
    duration_ms: float | None = None

    attribute: str | None = None
    expected_value: Any = None
    actual_value: Any = None

    failure_message: str | None = None
    failure_kinds: list[str] = field(default_factory=list)
    error_message: str | None = None

    def start(self) -> None:
        self.status = CheckStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self, status: CheckStatus) -> None:
        """Mark the check as completed with given status."""
        self.status = status
        if self.started_at:
            delta = datetime.now(timezone.utc) - self.started_at
            self.duration_ms = delta.total_seconds() * 1000

    def summary_lines(self) -> list[str]:
        """Status line plus the indented failure or error text."""
        lines = [f"  {STATUS_ICONS[self.status.value]} [{self.check_id}] {self.op} {self.selector}"]
        if self.failure_message:
            first, *rest = self.failure_message.splitlines()
            lines.append(_FAILURE_PREFIX + first)
            lines.extend(" " * len(_FAILURE_PREFIX) + line for line in rest)
        elif self.error_message:
            lines.append(f"{_FAILURE_PREFIX}Error: {self.error_message}")
        return lines

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "check_id": self.check_id,
            "op": self.op,
            "selector": self.selector,
            "status": self.status.value,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "duration_ms": self.duration_ms,
            "attribute": self.attribute,
            "expected_value": self.expected_value,
            "actual_value": self.actual_value,
            "failure_message": self.failure_message,
            "failure_kinds": self.failure_kinds,
            "error_message": self.error_message,
        }


@dataclass
class RunReport:
    """
    Complete record of a suite run.

    Contains metadata about the run, the suite and document being
    checked, and one record per check in suite order.
    """
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    duration_ms: float | None = None

    suite_name: str = ""
    suite_version: int = 1
    suite_hash: str = ""
    document: str = ""
    mode: str = "soft"

    status: RunStatus = RunStatus.RUNNING
    checks: list[CheckRecord] = field(default_factory=list)
    # Check status value -> number of checks, filled in by complete()
    counts: dict[str, int] = field(default_factory=dict)

    _index: dict[str, CheckRecord] = field(default_factory=dict, repr=False)

    def start(self) -> None:
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Count check outcomes and derive the overall status."""
        delta = datetime.now(timezone.utc) - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        tally = Counter(check.status.value for check in self.checks)
        self.counts = {
            status: tally[status]
            for status in ("passed", "failed", "error", "skipped")
        }

        if self.counts["error"]:
            self.status = RunStatus.ERROR
        elif self.counts["failed"]:
            self.status = RunStatus.FAILED
        else:
            self.status = RunStatus.PASSED

    def add_check(self, check: CheckRecord) -> None:
        self.checks.append(check)
        self._index[check.check_id] = check

    def get_check(self, check_id: str) -> CheckRecord | None:
        return self._index.get(check_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat(),
            "duration_ms": self.duration_ms,
            "suite_name": self.suite_name,
            "suite_version": self.suite_version,
            "suite_hash": self.suite_hash,
            "document": self.document,
            "mode": self.mode,
            "status": self.status.value,
            "summary": {"total": len(self.checks), **self.counts},
            "checks": [check.to_dict() for check in self.checks],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        rule = "═" * 59
        divider = "─" * 59
        duration = f"{self.duration_ms:.0f}ms" if self.duration_ms is not None else "N/A"
        lines = [
            rule,
            f"  Run Report: {self.suite_name}",
            rule,
            f"  Run ID:     {self.run_id}",
            f"  Document:   {self.document}",
            f"  Mode:       {self.mode}",
            f"  Status:     {STATUS_ICONS[self.status.value]} {self.status.value.upper()}",
            f"  Duration:   {duration}",
            f"  Started:    {self.started_at.strftime('%Y-%m-%d %H:%M:%S UTC')}",
            divider,
            "  Checks: " + ", ".join(
                f"{self.counts.get(status, 0)} {status}"
                for status in ("passed", "failed", "error", "skipped")
            ),
            divider,
        ]
        for check in self.checks:
            lines.extend(check.summary_lines())
        lines.append(rule)
        return "\n".join(lines)


def compute_suite_hash(suite_dict: dict[str, Any]) -> str:
    """First 12 hex characters of the SHA-256 of the normalized suite."""
    serialized = json.dumps(suite_dict, sort_keys=True, default=str)
    return hashlib.sha256(serialized.encode()).hexdigest()[:12]
