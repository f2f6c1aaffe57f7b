"""Tests for failure message templates and formatting"""
import re

from docassert.assertions import Diagnostic, FailureKind
from docassert.assertions import messages
from docassert.selection import parse, resolve_all, resolve_one


def test_format_value_renders_none_as_null():
    assert messages.format_value(None) == "null"


def test_format_value_renders_string_lists_in_brackets():
    assert messages.format_value(["b", "c"]) == "[b, c]"


def test_format_value_renders_elements_as_html():
    document = parse("<ul><li>a</li><li>b</li></ul>")
    assert messages.format_value(resolve_one(document, "li")) == "<li>a</li>"
    assert messages.format_value(resolve_all(document, "li")) == "<li>a</li>\n<li>b</li>"


def test_format_value_renders_pattern_source():
    assert messages.format_value(re.compile(r"\d+ items")) == r"\d+ items"


def test_format_message_leaves_percent_in_arguments_alone():
    message = messages.format_message(messages.ELEMENT_NOT_FOUND, "a[href='100%']")
    assert message == "\nExpecting element for\n  <a[href='100%']>\nbut found nothing"


def test_element_not_found_diagnostic():
    diagnostic = messages.element_not_found(".missing")

    assert diagnostic.kind == FailureKind.ELEMENT_NOT_FOUND
    assert diagnostic.selector == ".missing"
    assert str(diagnostic) == "\nExpecting element for\n  <.missing>\nbut found nothing"


def test_count_mismatch_masks_selection():
    document = parse("<ul><li>a</li><li>b</li></ul>")
    diagnostic = messages.count_mismatch("li", 3, resolve_all(document, "li"))

    assert diagnostic.message == (
        "\nExpecting elements for\n"
        "  <li>\n"
        "to have size of\n"
        "  <3>\n"
        "but had\n"
        "  <2>\n"
        "with elements:\n"
        "  <li>a</li>\n"
        "  <li>b</li>"
    )
    assert diagnostic.actual == 2
    assert diagnostic.expected == 3


def test_attribute_not_found_wording_depends_on_target():
    document = parse("<p>x</p>")
    element = resolve_one(document, "p")

    assert "on element for" in messages.attribute_not_found("class", "p", element).message
    assert "on elements for" in messages.attribute_not_found("class", "p", [element]).message


def test_aggregate_message_numbers_failures_in_order():
    errors = [
        messages.element_not_found("h2"),
        messages.text_mismatch("h1", "Hi", "Hello"),
    ]

    assert messages.aggregate_message(errors) == (
        "\nThe following 2 assertions failed:\n"
        "1) Expecting element for\n"
        "  <h2>\n"
        "but found nothing\n"
        "2) Expecting element for\n"
        "  <h1>\n"
        "to have text\n"
        "  <Hi>\n"
        "but was\n"
        "<Hello>"
    )


def test_aggregate_message_singular():
    assert messages.aggregate_message([messages.null_document()]).startswith(
        "\nThe following 1 assertion failed:\n1) Expecting actual not to be null"
    )


def test_diagnostic_to_dict_stringifies_elements():
    document = parse('<div class="x"></div>')
    diagnostic = Diagnostic(
        FailureKind.UNEXPECTED_ELEMENT,
        "message",
        actual=resolve_one(document, "div"),
        selector=".x",
    )

    assert diagnostic.to_dict() == {
        "kind": "unexpected_element",
        "message": "message",
        "selector": ".x",
        "actual": '<div class="x"></div>',
        "expected": None,
    }
