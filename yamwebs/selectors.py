"""Helpers for pulling text and attributes out of HTML with CSS selectors."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

_SUGGESTIONS: dict[str, list[str]] = {
    "title": [
        ".product-title",
        ".product-name",
        "h1",
        "h2",
        ".title",
        "[data-testid='product-title']",
    ],
    "price": [
        ".price",
        ".product-price",
        ".current-price",
        ".sale-price",
        "[data-testid='price']",
        ".price-current",
    ],
    "image": [
        ".product-image img",
        ".main-image img",
        "img.product-photo",
        "[data-testid='product-image'] img",
    ],
    "link": [
        "a",
        ".product-link",
        "a.product-title",
        "[data-testid='product-link']",
    ],
    "description": [
        ".product-description",
        ".description",
        ".product-summary",
        "[data-testid='description']",
    ],
    "container": [
        ".product-item",
        ".product-card",
        ".product",
        "[data-testid='product']",
        ".search-result",
    ],
}
_SUGGESTIONS["name"] = _SUGGESTIONS["title"]


def _select(element: Tag, selector: str, limit: int | None = None) -> list[Tag] | None:
    """Descendants of ``element`` matching ``selector``, or None if it is unusable."""
    if not selector:
        return None
    try:
        return element.select(selector, limit=limit)
    except Exception:  # the selector engine raises its own syntax error type
        return None


def _text(element: Tag) -> str:
    return element.get_text().strip()


def extract_text(element: Tag, selector: str) -> str | None:
    """Trimmed text of the first match, or None if nothing non-empty matches."""
    matches = _select(element, selector, limit=1)
    if not matches:
        return None
    return _text(matches[0]) or None


def extract_attribute(element: Tag, selector: str, attribute: str) -> str | None:
    """Value of ``attribute`` on the first match, or None."""
    matches = _select(element, selector, limit=1)
    if not matches:
        return None
    value = matches[0].get(attribute)
    if isinstance(value, list):
        return " ".join(value)
    return value


def extract_multiple_texts(element: Tag, selector: str) -> list[str]:
    """Trimmed, non-empty texts of every match."""
    matches = _select(element, selector) or []
    return [text for text in map(_text, matches) if text]


def validate_selector(selector: str) -> bool:
    """Whether ``selector`` is a non-empty, well-formed CSS selector."""
    return _select(BeautifulSoup("", "html.parser"), selector, limit=1) is not None


def suggest_selectors(element_type: str) -> list[str]:
    """Common selectors for a kind of element such as "price" or "container"."""
    return list(_SUGGESTIONS.get(element_type.lower(), []))