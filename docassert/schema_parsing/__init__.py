"""
Schema Parsing for Document Check Suites

This package provides tools for parsing, validating, and working with
YAML suites that pair one HTML document with a list of checks.

Usage:
    from docassert.schema_parsing import load_suite, validate_suite_yaml

    # Load from file
    suite, result = load_suite("checks/landing.yaml")
    if not result.is_valid:
        print(result)

    # Or validate from string
    suite, result = validate_suite_yaml(yaml_string)
"""

# Public API
from .loader import load_document, load_suite, validate_suite_yaml

# Models (for type hints and isinstance checks)
from .models import Check, CheckOp, DocumentSource, RunMode, Suite

# Validation (for custom validation if needed)
from .validation import SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "load_document",
    "validate_suite_yaml",
    # Models
    "Suite",
    "DocumentSource",
    "Check",
    "CheckOp",
    "RunMode",
    # Validation
    "ValidationResult",
    "ValidationError",
    "SchemaValidator",
]
