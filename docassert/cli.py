#!/usr/bin/env python3
"""
docassert CLI - HTML Document Check Runner

Usage:
    docassert run <suite.yaml> [OPTIONS]
    docassert validate <suite.yaml>
    docassert --version
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import DocumentAssertions
from .reporting import Reporter
from .schema_parsing import (
    Check,
    CheckOp,
    RunMode,
    Suite,
    load_document,
    load_suite,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="docassert",
    help="🔎 docassert - Declarative checks for HTML documents",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"🔎 docassert v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    🔎 docassert - Declarative checks for HTML documents

    Check HTML documents against YAML suites of element, text,
    attribute and class expectations.
    """
    pass


def apply_check(chain: DocumentAssertions, check: Check) -> DocumentAssertions:
    """Run one suite check as the matching assertion on the chain."""
    op = check.op
    if op == CheckOp.ELEMENT_EXISTS:
        return chain.element_exists(check.selector, check.count)
    elif op == CheckOp.ELEMENT_NOT_EXISTS:
        return chain.element_not_exists(check.selector)
    elif op == CheckOp.ELEMENT_ATTRIBUTE_EXISTS:
        return chain.element_attribute_exists(check.selector, check.attribute)
    elif op == CheckOp.ELEMENT_ATTRIBUTE_NOT_EXISTS:
        return chain.element_attribute_not_exists(check.selector, check.attribute)
    elif op == CheckOp.ELEMENT_HAS_TEXT:
        return chain.element_has_text(check.selector, check.expected)
    elif op == CheckOp.ELEMENT_CONTAINS_TEXT:
        return chain.element_contains_text(check.selector, check.value)
    elif op == CheckOp.ELEMENT_MATCHES_TEXT:
        return chain.element_matches_text(check.selector, check.value)
    elif op == CheckOp.ELEMENT_ATTRIBUTE_HAS_TEXT:
        return chain.element_attribute_has_text(check.selector, check.attribute, check.expected)
    elif op == CheckOp.ELEMENT_HAS_CLASS:
        return chain.element_has_class(check.selector, check.value)
    elif op == CheckOp.ELEMENT_NOT_HAS_CLASS:
        return chain.element_not_has_class(check.selector, check.value)
    raise ValueError(f"Unknown check op: {op}")


def run_suite(
    suite: Suite,
    verbose: bool = True,
    quiet: bool = False,
) -> Reporter:
    """Execute a suite and return the reporter with results."""
    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    if verbose and not quiet:
        console.print(f"\n{'='*60}")
        console.print(f"  [bold]Running:[/bold] {escape(suite.name)}")
        console.print(f"  [bold]Document:[/bold] {escape(suite.document.label)}")
        console.print(f"  [bold]Mode:[/bold] {suite.mode.value}")
        console.print(f"  [bold]Checks:[/bold] {len(suite.checks)}")
        console.print(f"{'='*60}\n")

    try:
        document = load_document(suite.document)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read document {suite.document.label}: {e}")
        if not quiet:
            console.print(f"[red]❌ Cannot read document:[/red] {escape(str(e))}")
        for check in suite.checks:
            reporter.complete_check_error(check.id, f"Cannot read document: {e}")
        reporter.finish_run()
        return reporter

    stopped = False
    for check in suite.checks:
        if stopped:
            reporter.skip_check(check.id, "an earlier check failed in strict mode")
            continue

        if verbose and not quiet:
            console.print(f"▶ [bold]Check:[/bold] {escape(check.id)} ({check.op.value} {escape(check.selector)})")

        reporter.start_check(check.id)
        # A soft chain per check keeps every diagnostic of that check
        chain = DocumentAssertions(document, soft=True)

        try:
            apply_check(chain, check)
        except Exception as e:
            reporter.complete_check_error(check.id, f"{type(e).__name__}: {e}")
            if not quiet:
                console.print(f"  [red]❌ Error:[/red] {type(e).__name__}: {escape(str(e))}")
            stopped = suite.mode == RunMode.STRICT
            continue

        if chain.failed:
            reporter.complete_check_failure(check.id, chain.diagnostics)
            if not quiet:
                console.print(f"  [red]❌ Failed[/red] ({len(chain.diagnostics)} failure(s))")
                for diagnostic in chain.diagnostics:
                    console.print(diagnostic.message, markup=False, highlight=False)
            stopped = suite.mode == RunMode.STRICT
        else:
            reporter.complete_check_success(check.id)
            if verbose and not quiet:
                console.print(f"  [green]✅ Passed[/green]")

    reporter.finish_run()
    return reporter


@app.command()
def run(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
    verbose: bool = typer.Option(
        True, "--verbose/--no-verbose", "-V",
        help="Show detailed check output"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show errors and final status"
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    report_dir: Path = typer.Option(
        Path("reports"), "--report-dir", "-r",
        help="Directory to save JSON reports"
    ),
    no_report: bool = typer.Option(
        False, "--no-report",
        help="Don't save a JSON report file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level",
        help="Enable library logging at this level (e.g. DEBUG)"
    ),
):
    """
    Run a document check suite.

    Load the suite's document, evaluate every check,
    and generate a run report.
    """
    if log_level:
        logging.basicConfig(level=log_level.upper())

    # Keep stdout parseable as JSON
    if output == "json":
        quiet = True

    if not quiet:
        console.print(f"\n📄 Loading suite: {suite_file}")

    # Load and validate
    suite, validation = load_suite(suite_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)

    if not quiet:
        console.print(f"   [green]✅ Valid suite:[/green] {escape(suite.name)}")

    # Run the suite
    reporter = run_suite(suite, verbose, quiet)
    report = reporter.report

    # Output results
    if output == "json":
        console.print_json(report.to_json())
    else:
        if not quiet:
            console.print("\n" + report.summary(), markup=False, highlight=False)

    # Save report
    if not no_report:
        report_dir.mkdir(parents=True, exist_ok=True)
        report_path = report_dir / f"{report.run_id}.json"
        reporter.save_json(report_path)
        if not quiet:
            console.print(f"\n📁 Report saved: {report_path}")

    # Exit with appropriate code
    if report.status.value == "passed":
        raise typer.Exit(code=0)
    else:
        raise typer.Exit(code=1)


@app.command()
def validate(
    suite_file: Path = typer.Argument(
        ...,
        help="Path to the suite YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a suite YAML file.

    Check the schema and report any errors without running the suite.
    """
    console.print(f"\n📄 Validating: {suite_file}")

    suite, validation = load_suite(suite_file)

    if validation.is_valid:
        console.print(f"\n[green]✅ Valid suite:[/green] {suite.name}")
        console.print(f"   Document: {suite.document.label}")
        console.print(f"   Mode: {suite.mode.value}")
        console.print(f"   Checks: {len(suite.checks)}")

        # Show checks summary
        table = Table(title="Checks")
        table.add_column("ID", style="cyan")
        table.add_column("Op", style="magenta")
        table.add_column("Selector")
        table.add_column("Expected")

        for check in suite.checks:
            expected = check.expected
            details = "" if expected is None else str(expected)
            if check.attribute:
                details = f"@{check.attribute} {details}".strip()
            table.add_row(escape(check.id), check.op.value, escape(check.selector), escape(details))

        console.print()
        console.print(table)
        raise typer.Exit(code=0)
    else:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation), markup=False)
        raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about docassert.
    """
    console.print(f"""
🔎 [bold]docassert[/bold] v{__version__}

Fluent assertions and declarative checks for HTML documents

[bold]Features:[/bold]
  • CSS selector based element, text, attribute and class assertions
  • Strict (fail fast) and soft (collect all) modes
  • Declarative YAML check suites
  • Detailed JSON run reports

[bold]Quick Start:[/bold]
  docassert run checks/landing.yaml
  docassert validate checks/landing.yaml
""")


if __name__ == "__main__":
    app()
