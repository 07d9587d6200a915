"""Store configurations and the collection that holds them."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

DEFAULT_SEARCH_URL_PATTERN = "{base_url}/search?q={query}"

_STRING_FIELDS = (
    "name",
    "base_url",
    "search_url_pattern",
    "product_container_selector",
    "name_selector",
    "price_selector",
    "image_selector",
    "link_selector",
)


@dataclass
class StoreConfig:
    """How to search one store and which CSS selectors pick out product data."""

    name: str = ""
    base_url: str = ""
    search_url_pattern: str = DEFAULT_SEARCH_URL_PATTERN
    product_container_selector: str = ""
    name_selector: str = ""
    price_selector: str = ""
    image_selector: str = ""
    link_selector: str = ""
    description_selector: str | None = None
    enabled: bool = True

    def build_search_url(self, query: str) -> str:
        """Fill the search URL pattern with the base URL and the query."""
        return self.search_url_pattern.replace("{base_url}", self.base_url).replace(
            "{query}", query
        )

    def is_valid(self) -> bool:
        """Whether the fields needed for scraping are all filled in."""
        return all(
            (
                self.name,
                self.base_url,
                self.product_container_selector,
                self.name_selector,
                self.price_selector,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a JSON-compatible mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoreConfig:
        """Build a configuration from a mapping such as one read from JSON."""
        values: dict[str, Any] = {}
        for key in _STRING_FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = data[key]
        if "enabled" not in data:
            raise ValueError("missing field `enabled`")
        if not isinstance(data["enabled"], bool):
            raise ValueError("field `enabled` must be a boolean")
        description = data.get("description_selector")
        if description is not None and not isinstance(description, str):
            raise ValueError("field `description_selector` must be a string or null")
        return cls(
            description_selector=description, enabled=data["enabled"], **values
        )


def _example_store() -> StoreConfig:
    return StoreConfig(
        name="Ejemplo Store",
        base_url="https://ejemplo.com",
        search_url_pattern=DEFAULT_SEARCH_URL_PATTERN,
        product_container_selector=".product-item",
        name_selector=".product-name",
        price_selector=".price",
        image_selector=".product-image img",
        link_selector="a",
        description_selector=".description",
        enabled=True,
    )


@dataclass
class StoreManager:
    """An ordered collection of store configurations."""

    stores: list[StoreConfig] = field(default_factory=list)

    @classmethod
    def with_defaults(cls) -> StoreManager:
        """A manager holding the example store configuration."""
        return cls([_example_store()])

    def add_store(self, store: StoreConfig) -> None:
        self.stores.append(store)

    def remove_store(self, index: int) -> StoreConfig | None:
        """Remove and return the store at ``index``, or None if out of range."""
        if 0 <= index < len(self.stores):
            return self.stores.pop(index)
        return None

    def enabled_stores(self) -> list[StoreConfig]:
        return [store for store in self.stores if store.enabled]

    def update_store(self, index: int, store: StoreConfig) -> bool:
        """Replace the store at ``index``; return False if out of range."""
        if 0 <= index < len(self.stores):
            self.stores[index] = store
            return True
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"stores": [store.to_dict() for store in self.stores]}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoreManager:
        if "stores" not in data:
            raise ValueError("missing field `stores`")
        stores = data["stores"]
        if not isinstance(stores, list):
            raise ValueError("field `stores` must be a list")
        return cls([StoreConfig.from_dict(item) for item in stores])