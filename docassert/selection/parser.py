"""
HTML parsing for documents under test.

Markup is handed to BeautifulSoup as-is. The tree builders recover from
malformed input, so parsing never fails for garbage markup.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

DEFAULT_FEATURES = "html.parser"


def parse(
    markup: str | bytes | None,
    features: str = DEFAULT_FEATURES,
) -> BeautifulSoup | None:
    """
    Parse raw markup into a queryable document.

    Args:
        markup: HTML text (or bytes). None yields None so that callers can
            report the missing document themselves.
        features: BeautifulSoup tree builder name

    Returns:
        The parsed document, or None when no markup was given
    """
    if markup is None:
        logger.debug("No markup given, returning no document")
        return None

    # Keep `class` as a plain string so attribute values render verbatim
    document = BeautifulSoup(markup, features, multi_valued_attributes=None)
    logger.debug(f"Parsed {len(markup)} characters of markup with {features}")
    return document
