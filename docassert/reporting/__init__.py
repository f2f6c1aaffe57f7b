"""
Reporting for Suite Runs

This package provides reporting capabilities for capturing complete
records of document check suite runs.

Features:
    - Run metadata (ID, timestamp, suite and document info)
    - Check-by-check records with timing
    - Expected values and failure messages
    - JSON serialization
    - Human-readable summaries

Usage:
    from docassert.schema_parsing import load_suite
    from docassert.reporting import Reporter

    suite, _ = load_suite("landing.yaml")
    reporter = Reporter.from_suite(suite)

    reporter.start_run()
    reporter.start_check("heading")
    reporter.complete_check_success("heading")

    report = reporter.finish_run()
    print(report.summary())

    reporter.save_json("reports/run.json")
"""

# Models
from .models import (
    CheckRecord,
    CheckStatus,
    RunReport,
    RunStatus,
    compute_suite_hash,
)

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "RunReport",
    "RunStatus",
    "CheckRecord",
    "CheckStatus",
    "compute_suite_hash",
    # Reporter
    "Reporter",
]
