"""Tests for attribute and class assertions"""
import pytest

from docassert import DocumentAssertionError, FailureKind, assert_that, assert_that_document


LINKS_HTML = '<nav><a href="/1">1</a><a>2</a><a href="/3">3</a></nav>'


def test_attribute_exists_passes_when_any_element_has_it(document):
    assert_that(document).element_attribute_exists("nav a", "href")


def test_attribute_exists_without_match_is_not_found(document):
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that(document).element_attribute_exists("form", "action")
    assert exc_info.value.diagnostic.kind == FailureKind.ELEMENT_NOT_FOUND


def test_attribute_exists_fails():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p><p>y</p>").element_attribute_exists("p", "title")

    assert str(exc_info.value) == (
        "\nExpecting attribute\n"
        "  <title>\n"
        "on elements for\n"
        "  <p>\n"
        "but found\n"
        "  <<p>x</p>\n"
        "<p>y</p>>"
    )
    assert exc_info.value.diagnostic.kind == FailureKind.ATTRIBUTE_NOT_FOUND


def test_attribute_names_are_matched_as_parsed():
    assert_that_document('<p DATA-ID="1">x</p>').element_attribute_exists("p", "data-id")


def test_attribute_not_exists_passes(document):
    assert_that(document).element_attribute_not_exists("nav a", "target")


def test_attribute_not_exists_fails():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<a href="/">x</a>').element_attribute_not_exists("a", "href")

    assert str(exc_info.value) == (
        "\nExpecting attribute\n"
        "  <href>\n"
        "on element for\n"
        "  <a>\n"
        "to be absent, but was\n"
        '  <<a href="/">x</a>>'
    )
    assert exc_info.value.diagnostic.kind == FailureKind.UNEXPECTED_ATTRIBUTE


def test_attribute_not_exists_without_match_is_not_found():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p>").element_attribute_not_exists("a", "href")
    assert exc_info.value.diagnostic.kind == FailureKind.ELEMENT_NOT_FOUND


def test_attribute_value_passes(document):
    assert_that(document).element_attribute_has_text("h1", "data-qa", "title")


def test_attribute_value_is_exact():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<a href="/x">x</a>').element_attribute_has_text("a", "href", "/")

    assert str(exc_info.value) == (
        "\nExpecting attribute\n"
        "  <href>\n"
        "on element for\n"
        "  <a>\n"
        "to be \n"
        "  </>\n"
        "but was </x>"
    )
    assert exc_info.value.actual == "/x"
    assert exc_info.value.expected == "/"


def test_attribute_value_comes_from_first_element_carrying_it():
    assert_that_document(LINKS_HTML).element_attribute_has_text("a", "href", "/1")


def test_attribute_value_missing_attribute_is_distinct_from_mismatch():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<a>x</a>").element_attribute_has_text("a", "href", "/")

    assert exc_info.value.diagnostic.kind == FailureKind.ATTRIBUTE_NOT_FOUND
    assert str(exc_info.value).startswith("\nExpecting attribute\n  <href>\non elements for\n  <a>\n")


def test_attribute_value_without_match_is_not_found():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p>").element_attribute_has_text("a", "href", "/")
    assert exc_info.value.diagnostic.kind == FailureKind.ELEMENT_NOT_FOUND


def test_positional_attribute_values_pass(document):
    assert_that(document).element_attribute_has_text("li", "id", ["p1", "p2", "p3"])


def test_positional_attribute_values_check_only_overlap(document):
    assert_that(document).element_attribute_has_text("li", "id", ["p1"])


def test_positional_attribute_missing():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document(LINKS_HTML).element_attribute_has_text("a", "href", ["/1", "/2"])

    assert str(exc_info.value) == (
        "\nExpecting element at position 1 in list for\n"
        "<a>\n"
        "to have attribute\n"
        "  <href>\n"
        "but did not:\n"
        "  <<a>2</a>>\n"
        "in list\n"
        '  <<a href="/1">1</a>\n'
        "<a>2</a>\n"
        '<a href="/3">3</a>>'
    )
    assert exc_info.value.diagnostic.kind == FailureKind.ATTRIBUTE_NOT_FOUND


def test_positional_attribute_mismatch():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<a href="/1">1</a>').element_attribute_has_text("a", "href", ["/one"])

    assert str(exc_info.value) == (
        "\nExpecting element at position 0 in list for\n"
        "<a>\n"
        "to have attribute value\n"
        "  </one>\n"
        "but was\n"
        "  </1>\n"
        "in list\n"
        '  <<a href="/1">1</a>>'
    )


def test_positional_attribute_remainder():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<a href="/1">1</a>').element_attribute_has_text("a", "href", ["/1", "/2"])

    assert str(exc_info.value) == (
        "\nExpecting <1> remaining elements:\n"
        "  <[/2]>\n"
        "but was\n"
        '  <<a href="/1">1</a>>\n'
        "for\n"
        "  <a>"
    )


def test_has_class_passes(document):
    assert_that(document).element_has_class("body", "dark").element_has_class("#p2", "sale")


def test_has_class_is_case_insensitive(document):
    assert_that(document).element_has_class("body", "DARK")


def test_has_class_fails():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<p class="a b">x</p>').element_has_class("p", "c")

    assert str(exc_info.value) == (
        "\nExpecting element for\n"
        "  <p>\n"
        "to include class\n"
        "  <c>\n"
        "but found\n"
        '  <<p class="a b">x</p>>'
    )


def test_has_class_needs_class_attribute():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p>").element_has_class("p", "a")

    assert str(exc_info.value) == (
        "\nExpecting attribute\n"
        "  <class>\n"
        "on element for\n"
        "  <p>\n"
        "but found\n"
        "  <<p>x</p>>"
    )


def test_has_class_treats_empty_class_as_missing():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<p class="">x</p>').element_has_class("p", "a")
    assert exc_info.value.diagnostic.kind == FailureKind.ATTRIBUTE_NOT_FOUND


def test_has_class_without_match_is_not_found():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p>").element_has_class("div", "a")
    assert exc_info.value.diagnostic.kind == FailureKind.ELEMENT_NOT_FOUND


def test_not_has_class_passes(document):
    assert_that(document).element_not_has_class("#p1", "sale")


def test_not_has_class_fails():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document('<p class="a b">x</p>').element_not_has_class("p", "b")

    assert str(exc_info.value) == (
        "\nExpecting element for\n"
        "  <p>\n"
        "to not include class\n"
        "  <b>\n"
        "but was\n"
        '  <<p class="a b">x</p>>'
    )


def test_not_has_class_needs_class_attribute():
    with pytest.raises(DocumentAssertionError) as exc_info:
        assert_that_document("<p>x</p>").element_not_has_class("p", "a")
    assert exc_info.value.diagnostic.kind == FailureKind.ATTRIBUTE_NOT_FOUND
