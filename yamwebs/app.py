"""The product scraping application and its command line."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from pathlib import Path
from typing import Sequence

from .file_manager import FileManager, StorageError
from .product import Product
from .results import ResultsView
from .search import SearchOutcome, SearchSession
from .store_editor import StoreEditor

APP_TITLE = "Sistema de Scraping de Productos"


class Tab(Enum):
    SEARCH = "search"
    STORES = "stores"
    RESULTS = "results"


class ScrapingApp:
    """Stores, settings, search and results tied together."""

    def __init__(self, file_manager: FileManager | None = None, scraper=None) -> None:
        self.file_manager = file_manager if file_manager is not None else FileManager()
        self.store_manager = self.file_manager.load_stores()
        self.config = self.file_manager.load_app_config()
        self.search_session = SearchSession(scraper)
        self.store_editor = StoreEditor()
        self.results_view = ResultsView(self.file_manager)
        self.current_tab = Tab.SEARCH
        self.search_results: list[Product] | None = None

    def search(self, query: str) -> SearchOutcome:
        """Search the enabled stores; any products found become the results."""
        outcome = self.search_session.search(query, self.store_manager)
        if outcome.products:
            self.search_results = outcome.products
            self.current_tab = Tab.RESULTS
        return outcome

    def save_stores(self) -> None:
        self.file_manager.save_stores(self.store_manager)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yamwebs", description=APP_TITLE)
    parser.add_argument("query", nargs="?", help="term to search for; without it the stores are listed")
    parser.add_argument("--directory", default=".", help="directory holding the JSON files")
    parser.add_argument("--save", action="store_true", help="save the results found")
    parser.add_argument("--csv", metavar="FILE", help="export the results found as CSV")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    app = ScrapingApp(FileManager(Path(args.directory)))

    if not args.query:
        for store in app.store_manager.stores:
            mark = "x" if store.enabled else " "
            print(f"[{mark}] {store.name} - {store.base_url}")
        return 0

    outcome = app.search(args.query)
    for product in outcome.products:
        print(f"{product.name} | {product.price} | {product.store_name} | {product.url}")
    print(outcome.status)

    try:
        if args.save and outcome.products:
            print(app.results_view.save(outcome.products))
        if args.csv and outcome.products:
            app.file_manager.export_to_csv(outcome.products, args.csv)
    except StorageError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())