import pytest
from bs4 import BeautifulSoup

from yamwebs.selectors import (
    extract_attribute,
    extract_multiple_texts,
    extract_text,
    suggest_selectors,
    validate_selector,
)

HTML = """
<div id="root">
  <span class="name">  Widget  </span>
  <span class="name">Second</span>
  <span class="blank">   </span>
  <a class="link" href="/p/1">Go</a>
  <ul><li>one</li><li> </li><li>two</li></ul>
</div>
"""


@pytest.fixture
def root():
    return BeautifulSoup(HTML, "html.parser").select_one("#root")


def test_extract_text_first_match_trimmed(root):
    assert extract_text(root, ".name") == "Widget"


def test_extract_text_blank_is_none(root):
    assert extract_text(root, ".blank") is None


def test_extract_text_no_match_is_none(root):
    assert extract_text(root, ".missing") is None


def test_extract_text_empty_selector_is_none(root):
    assert extract_text(root, "") is None


def test_extract_text_invalid_selector_is_none(root):
    assert extract_text(root, "[[") is None


def test_extract_attribute(root):
    assert extract_attribute(root, "a.link", "href") == "/p/1"


def test_extract_attribute_missing_attribute(root):
    assert extract_attribute(root, "a.link", "title") is None


def test_extract_attribute_empty_or_invalid_selector(root):
    assert extract_attribute(root, "", "href") is None
    assert extract_attribute(root, "[[", "href") is None


def test_extract_multiple_texts_skips_blank(root):
    assert extract_multiple_texts(root, "li") == ["one", "two"]


def test_extract_multiple_texts_bad_selector_is_empty(root):
    assert extract_multiple_texts(root, "") == []
    assert extract_multiple_texts(root, "[[") == []


def test_validate_selector():
    assert validate_selector("div > p.price") is True
    assert validate_selector("") is False
    assert validate_selector("[[") is False


def test_suggest_selectors_price_case_insensitive():
    assert suggest_selectors("PRICE") == [
        ".price",
        ".product-price",
        ".current-price",
        ".sale-price",
        "[data-testid='price']",
        ".price-current",
    ]


def test_suggest_selectors_name_and_title_match():
    assert suggest_selectors("name") == suggest_selectors("title")
    assert ".product-title" in suggest_selectors("title")


def test_suggest_selectors_container():
    assert suggest_selectors("container")[0] == ".product-item"
    assert len(suggest_selectors("container")) == 5


def test_suggest_selectors_unknown_is_empty():
    assert suggest_selectors("colour") == []


def test_suggestions_are_all_valid():
    for kind in ("title", "price", "image", "link", "description", "container"):
        assert all(validate_selector(s) for s in suggest_selectors(kind))