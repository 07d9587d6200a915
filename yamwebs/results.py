"""Presenting and saving the products a search found."""

from __future__ import annotations

from typing import Sequence

from .file_manager import FileManager, StorageError
from .product import Product

SAVE_OK_MESSAGE = "✅ Resultados guardados correctamente"
SAVE_OK_SECONDS = 3.0
SAVE_ERROR_SECONDS = 5.0


class ResultsView:
    """Holds the selected product and the outcome of the last save."""

    def __init__(self, file_manager: FileManager | None = None) -> None:
        self.file_manager = file_manager if file_manager is not None else FileManager()
        self.selected_index: int | None = None
        self.message: str | None = None
        self.message_seconds = 0.0

    def select(self, index: int) -> None:
        self.selected_index = index

    def selected(self, products: Sequence[Product]) -> Product | None:
        """The selected product, or None if nothing valid is selected."""
        index = self.selected_index
        if index is None or not 0 <= index < len(products):
            return None
        return products[index]

    def save(self, products: Sequence[Product]) -> str:
        """Save the products and return the message to show the user."""
        try:
            self.file_manager.save_search_results(products)
        except StorageError as exc:
            self.message = f"❌ Error al guardar: {exc}"
            self.message_seconds = SAVE_ERROR_SECONDS
        else:
            self.message = SAVE_OK_MESSAGE
            self.message_seconds = SAVE_OK_SECONDS
        return self.message

    def describe(self, product: Product) -> list[str]:
        """Lines describing a product in detail."""
        lines = [
            product.name,
            f"Precio: {product.price}",
            f"Tienda: {product.store_name}",
        ]
        if product.description is not None:
            lines.append(f"Descripción: {product.description}")
        lines.append(f"Enlace: {product.url}")
        if product.image_url:
            lines.append(f"Imagen: {product.image_url}")
        return lines