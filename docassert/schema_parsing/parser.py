"""
Schema parser for document check suites.

This module converts validated YAML data into typed Suite structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..assertions import qa
from ..selection import DEFAULT_FEATURES
from .models import Check, CheckOp, DocumentSource, RunMode, Suite


class SchemaParser:
    """Parses and converts validated YAML to typed Suite structure."""

    def __init__(self, data: dict[str, Any], base_dir: Path | None = None):
        self.data = data
        self.base_dir = base_dir

    def parse(self) -> Suite:
        """Convert validated data to typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            document=self._parse_document(),
            mode=RunMode(self.data.get("mode", RunMode.SOFT.value)),
            checks=self._parse_checks(),
        )

    def _parse_document(self) -> DocumentSource:
        document = self.data["document"]
        path = None
        if "path" in document:
            path = Path(document["path"])
            if not path.is_absolute() and self.base_dir is not None:
                path = self.base_dir / path

        return DocumentSource(
            path=path,
            markup=document.get("markup"),
            parser=document.get("parser", DEFAULT_FEATURES),
        )

    def _parse_checks(self) -> list[Check]:
        return [self._parse_check(check) for check in self.data.get("checks", [])]

    def _parse_check(self, check: dict) -> Check:
        selector = check["selector"] if "selector" in check else qa(check["qa"])
        values = check.get("values")
        return Check(
            id=check["id"],
            op=CheckOp(check["op"]),
            selector=selector,
            attribute=check.get("attribute"),
            value=check.get("value"),
            values=list(values) if values is not None else None,
            count=check.get("count"),
        )
