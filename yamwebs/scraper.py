"""Fetching store pages and turning them into products."""

from __future__ import annotations

from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup, Tag

from .product import Product
from .selectors import extract_attribute, extract_text, validate_selector
from .store import StoreConfig

_TIMEOUT = 30


class ScrapeError(Exception):
    """A page could not be fetched or scraped."""


def resolve_url(base_url: str, relative_url: str) -> str:
    """Turn a link found on ``base_url`` into an absolute URL."""
    if relative_url.startswith("http"):
        return relative_url
    if relative_url.startswith("//"):
        return f"https:{relative_url}"
    if relative_url.startswith("/"):
        try:
            parts = urlsplit(base_url)
            host = parts.hostname or ""
        except ValueError:
            return relative_url
        if not parts.scheme:
            return relative_url
        if ":" in host:
            host = f"[{host}]"
        return f"{parts.scheme.lower()}://{host}{relative_url}"
    return f"{base_url.rstrip('/')}/{relative_url}"


def extract_product(element: Tag, store: StoreConfig, base_url: str) -> Product | None:
    """Read one product out of ``element``; None if it lacks a name or price."""
    name = extract_text(element, store.name_selector)
    if name is None:
        return None
    price = extract_text(element, store.price_selector)
    if price is None:
        return None

    link = extract_attribute(element, store.link_selector, "href")
    product_url = resolve_url(base_url, link) if link is not None else base_url

    image = extract_attribute(element, store.image_selector, "src")
    image_url = resolve_url(base_url, image) if image is not None else ""

    description = (
        extract_text(element, store.description_selector)
        if store.description_selector is not None
        else None
    )
    return Product(
        name=name,
        price=price,
        url=product_url,
        image_url=image_url,
        store_name=store.name,
        description=description,
    )


def parse_products(html: str, store: StoreConfig, url: str) -> list[Product]:
    """Every complete product inside the store's containers on the page."""
    selector = store.product_container_selector
    if not validate_selector(selector):
        raise ScrapeError(f"Error en selector de contenedor: {selector!r}")
    document = BeautifulSoup(html, "html.parser")
    found = (extract_product(el, store, url) for el in document.select(selector))
    return [product for product in found if product is not None]


class WebScraper:
    """Downloads store pages over HTTP and scrapes products from them."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()

    def fetch_html(self, url: str) -> str:
        """Return the body of ``url``; raise ScrapeError on failure."""
        try:
            response = self.session.get(url, timeout=_TIMEOUT)
        except requests.RequestException as exc:
            raise ScrapeError(f"Error de conexión: {exc}") from exc
        if not 200 <= response.status_code < 300:
            status = f"{response.status_code} {response.reason or ''}".rstrip()
            raise ScrapeError(f"Error HTTP: {status}")
        try:
            return response.text
        except (requests.RequestException, UnicodeDecodeError) as exc:
            raise ScrapeError(f"Error al leer el contenido: {exc}") from exc

    def scrape_products(self, url: str, store: StoreConfig) -> list[Product]:
        """Scrape every product listed on the page at ``url``."""
        return parse_products(self.fetch_html(url), store, url)

    def scrape_single_product(self, url: str, store: StoreConfig) -> Product | None:
        """Scrape the page at ``url`` as the page of a single product."""
        document = BeautifulSoup(self.fetch_html(url), "html.parser")
        return extract_product(document, store, url)

    def search_products(self, query: str, store: StoreConfig) -> list[Product]:
        """Run the store's search for ``query`` and scrape the results."""
        return self.scrape_products(store.build_search_url(query), store)