"""Tests for soft (collect-all) assertion mode"""
import pytest

from docassert import (
    DocumentAssertions,
    FailureKind,
    SoftAssertionsError,
    assert_that_document_spec,
    assert_that_spec,
    soft_assertions,
)
from docassert.selection import parse


def test_soft_chain_collects_without_raising(document):
    chain = DocumentAssertions(document, soft=True)
    chain.element_exists(".missing").element_has_text("h1", "Goodbye")

    assert chain.failed
    assert [d.kind for d in chain.diagnostics] == [
        FailureKind.ELEMENT_NOT_FOUND,
        FailureKind.VALUE_MISMATCH,
    ]


def test_assert_all_passes_when_nothing_failed(document):
    chain = DocumentAssertions(document, soft=True).element_exists("h1")
    chain.assert_all()
    assert not chain.failed


def test_spec_raises_once_with_all_failures_in_order(html):
    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_document_spec(html, lambda doc: (
            doc.element_exists(".first")
               .element_has_text("h1", "Goodbye")
               .element_not_exists("nav")
        ))

    error = exc_info.value
    assert len(error.errors) == 3
    message = str(error)
    assert message.startswith("\nThe following 3 assertions failed:\n")
    first = message.index("<.first>")
    second = message.index("<Goodbye>")
    third = message.index("<nav>")
    assert first < second < third


def test_spec_error_keeps_full_messages():
    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_spec(parse('<div class="class"/>'), lambda doc: doc.element_not_exists(".class"))

    assert exc_info.value.messages == [
        "\nExpecting element for\n"
        "  <.class>\n"
        "to be absent, but was\n"
        '  <div class="class"></div>'
    ]


def test_spec_returns_chain_when_everything_passes(html):
    chain = assert_that_document_spec(html, lambda doc: doc.element_exists("h1"))
    assert isinstance(chain, DocumentAssertions)
    assert chain.diagnostics == []


def test_spec_block_may_call_statements_separately(html):
    def checks(doc):
        doc.element_exists(".a")
        doc.element_exists(".b")

    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_document_spec(html, checks)
    assert len(exc_info.value.errors) == 2


def test_soft_mode_continues_positional_checks_before_remainder():
    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_document_spec(
            "<ul><li>a</li><li>b</li></ul>",
            lambda doc: doc.element_has_text("li", ["x", "b", "y", "z"]),
        )

    kinds = [d.kind for d in exc_info.value.errors]
    assert kinds == [FailureKind.VALUE_MISMATCH, FailureKind.REMAINDER]
    assert "at position 0" in exc_info.value.errors[0].message
    assert "<2> remaining elements" in exc_info.value.errors[1].message


def test_soft_mode_positional_attributes_report_each_position():
    html = '<a href="/1">1</a><a>2</a><a href="/x">3</a>'
    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_document_spec(
            html,
            lambda doc: doc.element_attribute_has_text("a", "href", ["/1", "/2", "/3", "/4"]),
        )

    kinds = [d.kind for d in exc_info.value.errors]
    assert kinds == [
        FailureKind.ATTRIBUTE_NOT_FOUND,
        FailureKind.VALUE_MISMATCH,
        FailureKind.REMAINDER,
    ]


def test_soft_mode_stops_an_operation_after_not_found():
    chain = DocumentAssertions(parse("<p>x</p>"), soft=True)
    chain.element_attribute_has_text("a", "href", "/")

    assert [d.kind for d in chain.diagnostics] == [FailureKind.ELEMENT_NOT_FOUND]


def test_null_document_is_queued_in_soft_mode():
    chain = DocumentAssertions(None, soft=True)
    chain.element_exists("a").element_has_text("p", "x")

    assert [d.message for d in chain.diagnostics] == [
        "\nExpecting actual not to be null",
        "\nExpecting actual not to be null",
    ]
    with pytest.raises(SoftAssertionsError):
        chain.assert_all()


def test_spec_with_null_markup_reports_missing_document_first():
    with pytest.raises(SoftAssertionsError) as exc_info:
        assert_that_document_spec(None, lambda doc: doc.element_exists("h1"))

    assert exc_info.value.messages == [
        "\nExpecting document but found\n  null",
        "\nExpecting actual not to be null",
    ]


def test_soft_assertions_context_manager_with_markup(html):
    with pytest.raises(SoftAssertionsError) as exc_info:
        with soft_assertions(html) as doc:
            doc.element_exists("nav")
            doc.element_has_class("body", "light")
            doc.element_exists("footer")

    assert len(exc_info.value.errors) == 2


def test_soft_assertions_context_manager_with_document(document):
    with soft_assertions(document) as doc:
        doc.element_exists("nav").element_has_class("body", "home")


def test_soft_assertions_lets_block_exceptions_through(document):
    with pytest.raises(ValueError):
        with soft_assertions(document) as doc:
            doc.element_exists(".missing")
            raise ValueError("boom")
