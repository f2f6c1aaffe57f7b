"""
Schema validation for document check suites.

This module contains the validation logic that checks raw parsed YAML
against the suite schema and reports errors with helpful messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from .models import CheckOp, RunMode


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "checks[0].selector"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "✅ Schema validation passed"
        lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Schema Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "document", "checks"}
    OPTIONAL_TOP_LEVEL = {"mode"}
    VALID_OPS = {op.value for op in CheckOp}
    VALID_MODES = {m.value for m in RunMode}

    ATTRIBUTE_OPS = {
        "element_attribute_exists",
        "element_attribute_not_exists",
        "element_attribute_has_text",
    }
    # Ops taking either a single `value` or positional `values`
    POSITIONAL_OPS = {"element_has_text", "element_attribute_has_text"}
    # Ops requiring a single string `value`
    VALUE_OPS = {
        "element_contains_text",
        "element_matches_text",
        "element_has_class",
        "element_not_has_class",
    }

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.check_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_mode()
        self._validate_document()
        self._validate_checks()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_mode(self) -> None:
        mode = self.data.get("mode")
        if mode is not None and mode not in self.VALID_MODES:
            self.result.add_error(
                "mode",
                "Invalid run mode",
                value=mode,
                suggestion=f"Valid modes: {', '.join(sorted(self.VALID_MODES))}"
            )

    def _validate_document(self) -> None:
        document = self.data.get("document")
        if not isinstance(document, dict):
            self.result.add_error(
                "document",
                "Must be an object",
                value=document,
                suggestion="Use 'document: {path: page.html}' or 'document: {markup: \"<html>...\"}'"
            )
            return

        has_path = "path" in document
        has_markup = "markup" in document
        if has_path == has_markup:
            self.result.add_error(
                "document",
                "Exactly one of 'path' or 'markup' is required",
                suggestion="Point 'path' at an HTML file or inline the HTML as 'markup'"
            )
        elif has_path and not (isinstance(document["path"], str) and document["path"].strip()):
            self.result.add_error(
                "document.path",
                "Must be a non-empty string",
                value=document["path"]
            )
        elif has_markup and not isinstance(document["markup"], str):
            self.result.add_error(
                "document.markup",
                "Must be a string",
                value=document["markup"]
            )

        parser = document.get("parser")
        if parser is not None and not isinstance(parser, str):
            self.result.add_error(
                "document.parser",
                "Must be a string (BeautifulSoup tree builder name)",
                value=parser,
                suggestion="Use 'html.parser', 'lxml' or 'html5lib'"
            )

    def _validate_checks(self) -> None:
        checks = self.data.get("checks")
        if not isinstance(checks, list):
            self.result.add_error(
                "checks",
                "Must be a list",
                value=checks
            )
            return

        if len(checks) == 0:
            self.result.add_error(
                "checks",
                "Must contain at least one check",
                suggestion="Add at least one check such as 'op: element_exists'"
            )
            return

        for i, check in enumerate(checks):
            self._validate_check(i, check)

    def _validate_check(self, index: int, check: Any) -> None:
        path = f"checks[{index}]"

        if not isinstance(check, dict):
            self.result.add_error(
                path,
                "Check must be an object",
                value=check
            )
            return

        check_id = check.get("id")
        if not check_id:
            self.result.add_error(
                f"{path}.id",
                "Check must have an 'id' field",
                suggestion="Add a unique identifier like 'id: page_title'"
            )
        elif not isinstance(check_id, str):
            self.result.add_error(
                f"{path}.id",
                "Check id must be a string",
                value=check_id
            )
        elif check_id in self.check_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate check id",
                value=check_id,
                suggestion="Each check must have a unique id"
            )
        else:
            self.check_ids.add(check_id)

        self._validate_selector(path, check)

        op = check.get("op")
        if op not in self.VALID_OPS:
            self.result.add_error(
                f"{path}.op",
                "Invalid check operator",
                value=op,
                suggestion=f"Valid operators: {', '.join(sorted(self.VALID_OPS))}"
            )
            return

        if op in self.ATTRIBUTE_OPS:
            attribute = check.get("attribute")
            if not (isinstance(attribute, str) and attribute):
                self.result.add_error(
                    f"{path}.attribute",
                    f"Operator '{op}' requires an 'attribute' field",
                    value=attribute
                )

        if op == "element_exists":
            count = check.get("count")
            if count is not None and (not isinstance(count, int) or isinstance(count, bool) or count < 0):
                self.result.add_error(
                    f"{path}.count",
                    "Must be a non-negative integer",
                    value=count
                )
        elif op in self.POSITIONAL_OPS:
            self._validate_value_or_values(path, op, check)
        elif op in self.VALUE_OPS:
            self._validate_string_value(path, op, check)
            if op == "element_matches_text" and isinstance(check.get("value"), str):
                try:
                    re.compile(check["value"])
                except re.error as e:
                    self.result.add_error(
                        f"{path}.value",
                        f"Invalid regular expression: {e}",
                        value=check["value"]
                    )

    def _validate_selector(self, path: str, check: dict) -> None:
        has_selector = "selector" in check
        has_qa = "qa" in check
        if has_selector == has_qa:
            self.result.add_error(
                path,
                "Exactly one of 'selector' or 'qa' is required",
                suggestion="Use 'selector: \"h1\"' or 'qa: \"title\"' for data-qa attributes"
            )
            return

        key = "selector" if has_selector else "qa"
        value = check[key]
        if not (isinstance(value, str) and value.strip()):
            self.result.add_error(
                f"{path}.{key}",
                "Must be a non-empty string",
                value=value
            )

    def _validate_value_or_values(self, path: str, op: str, check: dict) -> None:
        has_value = "value" in check
        has_values = "values" in check
        if has_value == has_values:
            self.result.add_error(
                path,
                f"Operator '{op}' requires exactly one of 'value' or 'values'",
                suggestion="Use 'value' for a single expectation, 'values' for one per matched element"
            )
            return

        if has_value:
            self._validate_string_value(path, op, check)
            return

        values = check["values"]
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            self.result.add_error(
                f"{path}.values",
                "Must be a list of strings",
                value=values,
                suggestion="Quote values that YAML would read as numbers or booleans"
            )

    def _validate_string_value(self, path: str, op: str, check: dict) -> None:
        if "value" not in check:
            self.result.add_error(
                f"{path}.value",
                f"Operator '{op}' requires a 'value' field"
            )
        elif not isinstance(check["value"], str):
            self.result.add_error(
                f"{path}.value",
                "Must be a string",
                value=check["value"],
                suggestion="Quote values that YAML would read as numbers or booleans"
            )
