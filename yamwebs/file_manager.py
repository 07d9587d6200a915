"""Reading and writing store configurations, results and settings as JSON."""

from __future__ import annotations

import json
import shutil
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping

from .product import Product
from .store import StoreManager

STORES_FILE = "stores.json"
RESULTS_FILE = "search_results.json"
CONFIG_FILE = "config.json"
CSV_HEADER = "Nombre,Precio,URL,Tienda,Descripción\n"

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class StorageError(Exception):
    """A file could not be written or copied."""


def _require_int(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"field `{key}` must be a non-negative integer")
    return value


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    if not isinstance(data[key], kind):
        raise ValueError(f"field `{key}` must be of type {kind.__name__}")
    return data[key]


@dataclass
class AppConfig:
    """General application settings."""

    max_products_per_store: int = 50
    request_delay_ms: int = 1000
    user_agent: str = DEFAULT_USER_AGENT
    auto_save_results: bool = True
    theme: str = "dark"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppConfig:
        if not isinstance(data, Mapping):
            raise ValueError("configuration must be an object")
        return cls(
            max_products_per_store=_require_int(data, "max_products_per_store"),
            request_delay_ms=_require_int(data, "request_delay_ms"),
            user_agent=_require(data, "user_agent", str),
            auto_save_results=_require(data, "auto_save_results", bool),
            theme=_require(data, "theme", str),
        )


def _parse_results(data: Any) -> list[Product]:
    if not isinstance(data, Mapping):
        raise ValueError("results must be an object")
    _require(data, "timestamp", str)
    products = _require(data, "products", list)
    return [Product.from_dict(item) for item in products]


def _csv_field(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


class FileManager:
    """Keeps the application's JSON files inside one directory."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else Path(".")

    @property
    def stores_path(self) -> Path:
        return self.directory / STORES_FILE

    @property
    def results_path(self) -> Path:
        return self.directory / RESULTS_FILE

    @property
    def config_path(self) -> Path:
        return self.directory / CONFIG_FILE

    @staticmethod
    def _write_json(path: Path, data: Any, what: str) -> None:
        text = json.dumps(data, indent=2, ensure_ascii=False)
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Error al escribir {what}: {exc}") from exc

    def load_stores(self) -> StoreManager:
        """Load the stores, creating the file with the defaults if it is missing.

        An unreadable or malformed file yields the default stores.
        """
        path = self.stores_path
        if not path.exists():
            defaults = StoreManager.with_defaults()
            try:
                self.save_stores(defaults)
            except StorageError:
                pass
            return defaults
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error al leer {STORES_FILE}: {exc}", file=sys.stderr)
            return StoreManager.with_defaults()
        try:
            data = json.loads(content)
            if not isinstance(data, Mapping):
                raise ValueError("stores file must hold an object")
            return StoreManager.from_dict(data)
        except (ValueError, TypeError) as exc:
            print(f"Error al parsear {STORES_FILE}: {exc}", file=sys.stderr)
            return StoreManager.with_defaults()

    def save_stores(self, manager: StoreManager) -> None:
        self._write_json(self.stores_path, manager.to_dict(), STORES_FILE)

    def save_search_results(self, products: Iterable[Product]) -> None:
        """Write the products together with the current UTC time."""
        data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "products": [product.to_dict() for product in products],
        }
        try:
            self._write_json(self.results_path, data, "resultados")
        except StorageError as exc:
            raise StorageError(str(exc).replace(f"{RESULTS_FILE}", "resultados")) from exc

    def load_search_results(self) -> list[Product]:
        """The last saved products, or an empty list if none can be read."""
        try:
            content = self.results_path.read_text(encoding="utf-8")
            return _parse_results(json.loads(content))
        except (OSError, UnicodeDecodeError, ValueError, TypeError):
            return []

    def load_app_config(self) -> AppConfig:
        """Load the settings, creating the file with the defaults if it is missing."""
        path = self.config_path
        if not path.exists():
            config = AppConfig()
            try:
                self.save_app_config(config)
            except StorageError:
                pass
            return config
        try:
            content = path.read_text(encoding="utf-8")
            return AppConfig.from_dict(json.loads(content))
        except (OSError, UnicodeDecodeError, ValueError, TypeError):
            return AppConfig()

    def save_app_config(self, config: AppConfig) -> None:
        self._write_json(self.config_path, config.to_dict(), CONFIG_FILE)

    def export_to_csv(self, products: Iterable[Product], filename: str | Path) -> None:
        """Write the products as CSV with every field quoted."""
        lines = [CSV_HEADER]
        for product in products:
            fields = (
                product.name,
                product.price,
                product.url,
                product.store_name,
                product.description or "",
            )
            lines.append(",".join(map(_csv_field, fields)) + "\n")
        try:
            (self.directory / filename).write_text("".join(lines), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Error al exportar CSV: {exc}") from exc

    def create_backup(self) -> Path:
        """Copy the stores file to a timestamped backup and return its path."""
        source = self.stores_path
        if not source.exists():
            raise StorageError("No existe archivo de stores para hacer backup")
        stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        target = self.directory / f"stores_backup_{stamp}.json"
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise StorageError(f"Error al crear backup: {exc}") from exc
        return target