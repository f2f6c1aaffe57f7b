"""
Reporter for building and managing run reports.

This module provides the Reporter class which helps construct
run reports from suite executions.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    compute_suite_hash,
)

if TYPE_CHECKING:
    from ..assertions import Diagnostic
    from ..schema_parsing import Suite

logger = logging.getLogger(__name__)


class Reporter:
    """
    Builds and manages run reports.

    The Reporter provides a convenient interface for creating reports
    from Suite objects and recording check results.

    Example:
        from docassert.schema_parsing import load_suite
        from docassert.reporting import Reporter

        suite, _ = load_suite("landing.yaml")
        reporter = Reporter.from_suite(suite)

        # Start the run
        reporter.start_run()

        # Record checks
        reporter.start_check("heading")
        reporter.complete_check_success("heading")

        reporter.start_check("nav_links")
        reporter.complete_check_failure("nav_links", diagnostics)

        # Finish and get report
        report = reporter.finish_run()
        print(report.summary())
    """

    def __init__(self, report: RunReport):
        """
        Initialize with a RunReport.

        Use Reporter.from_suite() for the typical case.
        """
        self.report = report

    @classmethod
    def from_suite(
        cls,
        suite: Suite,
        run_id: str | None = None,
    ) -> Reporter:
        """
        Create a Reporter from a parsed Suite.

        Args:
            suite: The parsed suite to create a report for
            run_id: Optional custom run ID (auto-generated if not provided)

        Returns:
            Reporter instance ready to record check results
        """
        report = RunReport(
            suite_name=suite.name,
            suite_version=suite.version,
            suite_hash=compute_suite_hash(_suite_to_dict(suite)),
            document=suite.document.label,
            mode=suite.mode.value,
        )

        if run_id:
            report.run_id = run_id

        # Pre-populate check records from suite checks
        for check in suite.checks:
            report.add_check(CheckRecord(
                check_id=check.id,
                op=check.op.value,
                selector=check.selector,
                attribute=check.attribute,
                expected_value=check.expected,
            ))

        return cls(report)

    def start_run(self) -> None:
        """Mark the run as started."""
        logger.info(f"Starting run {self.report.run_id} for suite '{self.report.suite_name}'")
        self.report.start()

    def finish_run(self) -> RunReport:
        """
        Mark the run as completed and return the final report.

        Returns:
            The completed RunReport with summary stats
        """
        self.report.complete()
        logger.info(
            f"Finished run {self.report.run_id}: {self.report.status.value} "
            f"({self.report.counts['passed']}/{len(self.report.checks)} passed)"
        )
        return self.report

    def start_check(self, check_id: str) -> CheckRecord | None:
        """Mark a check as started. Returns None if the check is unknown."""
        check = self.report.get_check(check_id)
        if check:
            check.start()
        return check

    def complete_check_success(self, check_id: str) -> CheckRecord | None:
        """Mark a check as passed."""
        check = self.report.get_check(check_id)
        if check:
            check.complete(CheckStatus.PASSED)
        return check

    def complete_check_failure(
        self,
        check_id: str,
        diagnostics: list[Diagnostic],
    ) -> CheckRecord | None:
        """
        Mark a check as failed.

        Args:
            check_id: The ID of the check
            diagnostics: Failures the assertion produced, in order

        Returns:
            The CheckRecord, or None if check not found
        """
        check = self.report.get_check(check_id)
        if check:
            check.failure_message = "\n".join(d.message.lstrip("\n") for d in diagnostics)
            check.failure_kinds = [d.kind.value for d in diagnostics]
            if diagnostics:
                check.actual_value = diagnostics[0].actual
            check.complete(CheckStatus.FAILED)
        return check

    def complete_check_error(self, check_id: str, error_message: str) -> CheckRecord | None:
        """
        Mark a check as errored (not a failed expectation, but a check
        that could not be evaluated).
        """
        check = self.report.get_check(check_id)
        if check:
            check.error_message = error_message
            check.complete(CheckStatus.ERROR)
        return check

    def skip_check(self, check_id: str, reason: str | None = None) -> CheckRecord | None:
        """Mark a check as skipped."""
        check = self.report.get_check(check_id)
        if check:
            if reason:
                check.failure_message = f"Skipped: {reason}"
            check.complete(CheckStatus.SKIPPED)
        return check

    def save_json(self, path: str | Path) -> None:
        """
        Save the report to a JSON file.

        Args:
            path: Path to save the JSON file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json())

    def get_summary(self) -> str:
        """Get a human-readable summary of the run."""
        return self.report.summary()


def _suite_to_dict(suite: Suite) -> dict[str, Any]:
    """Convert a Suite to a dict for hashing."""
    return {
        "version": suite.version,
        "name": suite.name,
        "mode": suite.mode.value,
        "document": {
            "path": str(suite.document.path) if suite.document.path else None,
            "markup": suite.document.markup,
            "parser": suite.document.parser,
        },
        "checks": [
            {
                "id": check.id,
                "op": check.op.value,
                "selector": check.selector,
                "attribute": check.attribute,
                "value": check.value,
                "values": check.values,
                "count": check.count,
            }
            for check in suite.checks
        ],
    }
