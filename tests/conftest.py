"""Shared fixtures for docassert tests."""
import pytest

from docassert.selection import parse


# Sample HTML for testing
SAMPLE_HTML = """
<html>
<head><title>Socks Shop</title></head>
<body class="home dark">
    <h1 data-qa="title">Welcome to the shop</h1>
    <nav>
        <a href="/" class="active">Home</a>
        <a href="/catalogue">Catalogue</a>
        <a>Basket</a>
    </nav>
    <ul class="products">
        <li class="product" id="p1">Red socks</li>
        <li class="product sale" id="p2">Blue socks</li>
        <li class="product" id="p3">Green   socks</li>
    </ul>
    <p class="price">Total: <b>$19.99</b></p>
    <div data-qa="empty"></div>
</body>
</html>
"""


@pytest.fixture
def html():
    return SAMPLE_HTML


@pytest.fixture
def document():
    return parse(SAMPLE_HTML)
