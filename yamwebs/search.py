"""Searching every enabled store for a term."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Protocol

from .product import Product
from .scraper import ScrapeError, WebScraper
from .store import StoreConfig, StoreManager


class _Scraper(Protocol):
    def search_products(self, query: str, store: StoreConfig) -> list[Product]: ...


@dataclass
class SearchOutcome:
    """What a search across stores produced."""

    products: list[Product] = field(default_factory=list)
    successful: int = 0
    failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def status(self) -> str:
        return (
            f"Búsqueda completada: {self.successful} tiendas exitosas, "
            f"{self.failed} fallidas. {len(self.products)} productos encontrados."
        )


class SearchSession:
    """Runs searches over the enabled stores and tracks their progress."""

    def __init__(self, scraper: _Scraper | None = None) -> None:
        self.scraper = scraper if scraper is not None else WebScraper()
        self.status = ""
        self.is_searching = False

    def search(self, query: str, store_manager: StoreManager) -> SearchOutcome:
        """Search each enabled store in turn; a failing store is counted and skipped."""
        if not query:
            raise ValueError("search term must not be empty")
        if self.is_searching:
            raise RuntimeError("a search is already running")
        self.is_searching = True
        self.status = "Iniciando búsqueda..."
        outcome = SearchOutcome()
        try:
            for store in store_manager.enabled_stores():
                self.status = f"Buscando en {store.name}..."
                try:
                    found = self.scraper.search_products(query, store)
                except ScrapeError as exc:
                    outcome.failed += 1
                    outcome.errors.append((store.name, str(exc)))
                    print(f"Error buscando en {store.name}: {exc}", file=sys.stderr)
                else:
                    outcome.successful += 1
                    outcome.products.extend(found)
        finally:
            self.is_searching = False
        self.status = outcome.status
        return outcome