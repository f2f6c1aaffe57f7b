"""
Suite loader for document check suites.

This module provides the public API for loading and validating
suite files from disk or YAML strings, and for reading the document
a suite points at.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from bs4 import BeautifulSoup

from ..selection import parse
from .models import DocumentSource, Suite
from .parser import SchemaParser
from .validation import SchemaValidator, ValidationResult


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite from a YAML file.

    Relative document paths in the suite are resolved against the
    directory containing the suite file.

    Args:
        path: Path to the YAML suite file

    Returns:
        Tuple of (Suite or None, ValidationResult)
        If validation fails, Suite will be None.

    Example:
        suite, result = load_suite("checks/landing.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
        # Use suite...
    """
    path = Path(path)

    # Check file exists
    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    # Parse YAML
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    return _validate_and_parse(data, str(path), base_dir=path.parent)


def validate_suite_yaml(
    yaml_string: str,
    base_dir: str | Path | None = None,
) -> tuple[Suite | None, ValidationResult]:
    """
    Validate a suite from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string
        base_dir: Directory to resolve relative document paths against

    Returns:
        Tuple of (Suite or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _validate_and_parse(
        data,
        "yaml",
        base_dir=Path(base_dir) if base_dir is not None else None,
    )


def load_document(source: DocumentSource) -> BeautifulSoup | None:
    """
    Read and parse the document a suite points at.

    Raises:
        OSError: The document file cannot be read
    """
    if source.path is not None:
        markup = source.path.read_text(encoding="utf-8")
    else:
        markup = source.markup
    return parse(markup, source.parser)


def _validate_and_parse(
    data: Any,
    location: str,
    base_dir: Path | None,
) -> tuple[Suite | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            location,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    # Validate schema
    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    # Parse to typed structure
    parser = SchemaParser(data, base_dir=base_dir)
    return parser.parse(), result
