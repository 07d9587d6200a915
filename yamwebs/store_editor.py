"""Editing store configurations before they are added to the collection."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from .selectors import suggest_selectors
from .store import StoreConfig, StoreManager


class SelectorField(Enum):
    """The selector fields of a store that selector suggestions can fill."""

    CONTAINER = "container"
    TITLE = "title"
    PRICE = "price"
    IMAGE = "image"
    LINK = "link"
    DESCRIPTION = "description"

    @property
    def attribute(self) -> str:
        """Name of the StoreConfig attribute this field edits."""
        return _ATTRIBUTES[self]


_ATTRIBUTES = {
    SelectorField.CONTAINER: "product_container_selector",
    SelectorField.TITLE: "name_selector",
    SelectorField.PRICE: "price_selector",
    SelectorField.IMAGE: "image_selector",
    SelectorField.LINK: "link_selector",
    SelectorField.DESCRIPTION: "description_selector",
}


class StoreEditor:
    """A draft store configuration, either new or a copy of an existing one."""

    def __init__(self) -> None:
        self.draft = StoreConfig()
        self.selected_index: int | None = None
        self.editing = False
        self.test_url = ""

    @property
    def title(self) -> str:
        """Heading for the form holding the draft."""
        if self.editing:
            return f"Editar Tienda: {self.draft.name}"
        return "Nueva Tienda"

    def new_store(self) -> None:
        """Start a fresh draft that will be added as a new store."""
        self.draft = StoreConfig()
        self.editing = False
        self.selected_index = None

    def cancel(self) -> None:
        """Drop the draft without touching any store."""
        self.new_store()

    def select_store(self, manager: StoreManager, index: int) -> None:
        """Start editing a copy of the store at ``index``."""
        if not 0 <= index < len(manager.stores):
            raise IndexError(f"no store at index {index}")
        self.selected_index = index
        self.draft = replace(manager.stores[index])
        self.editing = True

    def suggestions(self, field: SelectorField) -> list[str]:
        """Common selectors for the given field."""
        return suggest_selectors(field.value)

    def apply_suggestion(self, field: SelectorField, suggestion: str) -> None:
        """Put ``suggestion`` into the draft's selector for ``field``."""
        setattr(self.draft, field.attribute, suggestion)

    def save(self, manager: StoreManager) -> StoreConfig:
        """Store the draft in ``manager`` and start a fresh one.

        An edited store replaces the one it was copied from; a new one is
        appended. Raises ValueError if the draft is incomplete.
        """
        if not self.draft.is_valid():
            raise ValueError("store needs a name, base URL and container, name and price selectors")
        store = replace(self.draft)
        if self.editing and self.selected_index is not None:
            if not manager.update_store(self.selected_index, store):
                raise IndexError(f"no store at index {self.selected_index}")
        else:
            manager.add_store(store)
        self.new_store()
        return store

    def delete(self, manager: StoreManager) -> StoreConfig:
        """Remove the store being edited from ``manager`` and return it."""
        if not self.editing or self.selected_index is None:
            raise ValueError("no store is being edited")
        removed = manager.remove_store(self.selected_index)
        if removed is None:
            raise IndexError(f"no store at index {self.selected_index}")
        self.new_store()
        return removed