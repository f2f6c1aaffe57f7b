"""
Soft assertion entry points.

A soft chain keeps evaluating after a failure and raises one
SoftAssertionsError at the end, listing every failure in the order the
assertions were written.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Union

from bs4 import BeautifulSoup

from ..selection import DEFAULT_FEATURES, parse
from . import messages
from .engine import DocumentAssertions

AssertionBlock = Callable[[DocumentAssertions], object]


def assert_that_spec(
    document: BeautifulSoup | None,
    block: AssertionBlock,
) -> DocumentAssertions:
    """
    Run a block of assertions on a parsed document in soft mode.

    Args:
        document: The document under test
        block: Callable receiving the soft chain

    Returns:
        The chain, when every assertion passed

    Raises:
        SoftAssertionsError: One or more assertions failed
    """
    chain = DocumentAssertions(document, soft=True)
    block(chain)
    chain.assert_all()
    return chain


def assert_that_document_spec(
    markup: str | bytes | None,
    block: AssertionBlock,
    features: str = DEFAULT_FEATURES,
) -> DocumentAssertions:
    """
    Parse markup and run a block of assertions on it in soft mode.

    Example:
        assert_that_document_spec(html, lambda doc: (
            doc.element_exists("h1")
               .element_has_text("h1", "Welcome")
               .element_not_exists(".error")
        ))
    """
    chain = DocumentAssertions(parse(markup, features), soft=True)
    if markup is None:
        chain._report(messages.document_missing())
    block(chain)
    chain.assert_all()
    return chain


@contextmanager
def soft_assertions(
    target: Union[BeautifulSoup, str, bytes, None],
    features: str = DEFAULT_FEATURES,
) -> Iterator[DocumentAssertions]:
    """
    Collect assertion failures for the duration of a ``with`` block.

    Accepts a parsed document or raw markup. Failures are raised together
    when the block exits cleanly; an exception raised inside the block
    propagates unchanged.

    Example:
        with soft_assertions(html) as doc:
            doc.element_exists("nav")
            doc.element_has_text("h1", "Welcome")
    """
    document = parse(target, features) if isinstance(target, (str, bytes)) else target
    chain = DocumentAssertions(document, soft=True)
    yield chain
    chain.assert_all()
