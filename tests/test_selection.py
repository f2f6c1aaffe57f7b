"""Tests for parsing, selector resolution and element inspection"""
import pytest
from soupsieve import SelectorSyntaxError

from docassert.selection import (
    attribute_value,
    class_names,
    element_text,
    has_attribute,
    has_class,
    indent,
    parse,
    render,
    resolve_all,
    resolve_one,
)


def test_parse_none_returns_none():
    assert parse(None) is None


def test_parse_tolerates_malformed_markup():
    document = parse("<div><p>unclosed <b>bold</div></span>")
    assert resolve_one(document, "b") is not None


def test_self_closing_div_renders_with_end_tag():
    document = parse('<div class="class"/>')
    assert render(resolve_one(document, ".class")) == '<div class="class"></div>'


def test_resolve_one_returns_first_in_document_order(document):
    assert resolve_one(document, "li")["id"] == "p1"


def test_resolve_one_without_match(document):
    assert resolve_one(document, "table") is None


def test_resolve_all_in_document_order(document):
    assert [li["id"] for li in resolve_all(document, "li.product")] == ["p1", "p2", "p3"]


def test_resolve_all_without_match_is_empty(document):
    assert resolve_all(document, ".missing") == []


def test_resolution_sees_mutations(document):
    resolve_one(document, "#p2").decompose()
    assert [li["id"] for li in resolve_all(document, "li")] == ["p1", "p3"]


def test_invalid_selector_raises(document):
    with pytest.raises(SelectorSyntaxError):
        resolve_one(document, "div[")


def test_element_text_normalizes_whitespace(document):
    assert element_text(resolve_one(document, "#p3")) == "Green socks"


def test_element_text_joins_inline_children(document):
    assert element_text(resolve_one(document, ".price")) == "Total: $19.99"


def test_element_text_separates_block_children():
    document = parse("<div><p>one</p><p>two</p>three<br>four</div>")
    assert element_text(resolve_one(document, "div")) == "one two three four"


def test_element_text_separates_text_after_block_element():
    document = parse("<div><p>Hello</p>World</div>")
    assert element_text(resolve_one(document, "div")) == "Hello World"


def test_element_text_keeps_inline_neighbours_together():
    document = parse("<div><b>Hello</b>World</div>")
    assert element_text(resolve_one(document, "div")) == "HelloWorld"


def test_render_keeps_source_attribute_order():
    document = parse('<a id="x" href="/" class="btn">Go &amp; see</a>')
    assert render(resolve_one(document, "a")) == '<a id="x" href="/" class="btn">Go &amp; see</a>'


def test_render_selection_keeps_source_attribute_order(document):
    assert render(resolve_all(document, "#p1, #p2")) == (
        '<li class="product" id="p1">Red socks</li>\n'
        '<li class="product sale" id="p2">Blue socks</li>'
    )


def test_element_text_ignores_comments_and_scripts():
    document = parse("<div>a<!-- hidden --><script>var x;</script><style>p{}</style>b</div>")
    assert element_text(resolve_one(document, "div")) == "ab"


def test_element_text_of_empty_element(document):
    assert element_text(resolve_one(document, "div")) == ""


def test_has_attribute_on_element_and_selection(document):
    links = resolve_all(document, "nav a")
    assert has_attribute(links[0], "href")
    assert not has_attribute(links[2], "href")
    assert has_attribute(links, "href")
    assert not has_attribute(links, "target")


def test_attribute_value_takes_first_element_carrying_it(document):
    links = resolve_all(document, "nav a")
    assert attribute_value(links, "href") == "/"
    assert attribute_value(links[2:], "href") == ""


def test_attribute_value_keeps_class_verbatim(document):
    assert attribute_value(resolve_one(document, "#p2"), "class") == "product sale"


def test_attribute_value_joins_multi_valued_attributes():
    from bs4 import BeautifulSoup

    # Default BeautifulSoup parsing splits class into a list
    document = BeautifulSoup('<p class="a  b">x</p>', "html.parser")
    assert attribute_value(resolve_one(document, "p"), "class") == "a b"


def test_class_names_and_has_class(document):
    element = resolve_one(document, "#p2")
    assert class_names(element) == ["product", "sale"]
    assert has_class(element, "sale")
    assert has_class(element, "SALE")
    assert not has_class(element, "sal")


def test_render_selection_one_element_per_line():
    document = parse("<ul><li>a</li><li>b</li></ul>")
    assert render(resolve_all(document, "li")) == "<li>a</li>\n<li>b</li>"


def test_render_empty_selection():
    assert render([]) == ""


def test_indent_prefixes_every_line():
    assert indent("a\nb") == "  a\n  b"
    assert indent("") == "  "
