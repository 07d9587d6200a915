"""Product records found while scraping a store."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping

_REQUIRED_FIELDS = ("name", "price", "url", "image_url", "store_name")


@dataclass
class Product:
    """A single product as scraped from a store page."""

    name: str
    price: str
    url: str
    image_url: str
    store_name: str
    description: str | None = None

    def with_description(self, description: str) -> Product:
        """Return a copy of this product carrying the given description."""
        return replace(self, description=description)

    def numeric_price(self) -> float:
        """Extract the numeric value of the price text, or 0.0 if it has none.

        Digits, dots and commas are kept; commas are read as decimal points.
        """
        kept = "".join(c for c in self.price if c.isnumeric() or c in ".,")
        kept = kept.replace(",", ".")
        if not kept.isascii():
            return 0.0
        try:
            return float(kept)
        except ValueError:
            return 0.0

    def to_dict(self) -> dict[str, Any]:
        """Return the product as a JSON-compatible mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Product:
        """Build a product from a mapping such as one read from JSON."""
        values: dict[str, Any] = {}
        for key in _REQUIRED_FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"field `{key}` must be a string")
            values[key] = data[key]
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError("field `description` must be a string or null")
        return cls(description=description, **values)