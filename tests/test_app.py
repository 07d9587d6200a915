import json

import pytest

from yamwebs.app import ScrapingApp, Tab, main
from yamwebs.file_manager import FileManager
from yamwebs.product import Product
from yamwebs.scraper import ScrapeError
from yamwebs.store import StoreConfig, StoreManager


class FakeScraper:
    def __init__(self, products=None, failing=()):
        self.products = products or []
        self.failing = set(failing)
        self.calls = []

    def search_products(self, query, store):
        self.calls.append((query, store.name))
        if store.name in self.failing:
            raise ScrapeError("Error HTTP: 404 Not Found")
        return [p for p in self.products if p.store_name == store.name]


def _product(name, store="Ejemplo Store"):
    return Product(name, "10", "https://ejemplo.com/p", "", store)


def test_init_creates_default_files(tmp_path):
    app = ScrapingApp(FileManager(tmp_path), FakeScraper())
    assert [s.name for s in app.store_manager.stores] == ["Ejemplo Store"]
    assert (tmp_path / "stores.json").exists()
    assert (tmp_path / "config.json").exists()
    assert app.current_tab is Tab.SEARCH
    assert app.search_results is None


def test_search_with_results_switches_tab(tmp_path):
    products = [_product("Uno"), _product("Dos")]
    scraper = FakeScraper(products)
    app = ScrapingApp(FileManager(tmp_path), scraper)
    outcome = app.search("uno")
    assert outcome.products == products
    assert app.search_results == products
    assert app.current_tab is Tab.RESULTS
    assert scraper.calls == [("uno", "Ejemplo Store")]


def test_search_without_results_keeps_tab(tmp_path):
    app = ScrapingApp(FileManager(tmp_path), FakeScraper(failing={"Ejemplo Store"}))
    outcome = app.search("nada")
    assert outcome.failed == 1
    assert app.search_results is None
    assert app.current_tab is Tab.SEARCH


def test_search_empty_query_raises(tmp_path):
    app = ScrapingApp(FileManager(tmp_path), FakeScraper())
    with pytest.raises(ValueError):
        app.search("")


def test_save_stores_persists(tmp_path):
    manager = FileManager(tmp_path)
    app = ScrapingApp(manager, FakeScraper())
    app.store_manager.add_store(StoreConfig(name="Otra", base_url="https://otra.example.com"))
    app.save_stores()
    assert [s.name for s in manager.load_stores().stores] == ["Ejemplo Store", "Otra"]


def test_main_lists_stores(tmp_path, capsys):
    assert main(["--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Ejemplo Store" in out
    assert "https://ejemplo.com" in out


def test_main_search_with_no_enabled_stores(tmp_path, capsys):
    store = StoreManager.with_defaults().stores[0]
    store.enabled = False
    FileManager(tmp_path).save_stores(StoreManager([store]))
    assert main(["--directory", str(tmp_path), "zapatos"]) == 0
    out = capsys.readouterr().out
    assert "Búsqueda completada: 0 tiendas exitosas, 0 fallidas. 0 productos encontrados." in out
    data = json.loads((tmp_path / "stores.json").read_text(encoding="utf-8"))
    assert data["stores"][0]["enabled"] is False