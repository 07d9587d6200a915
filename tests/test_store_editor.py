import pytest

from yamwebs.selectors import suggest_selectors
from yamwebs.store import StoreConfig, StoreManager
from yamwebs.store_editor import SelectorField, StoreEditor


def _fill_valid(editor, name="Tienda"):
    editor.draft.name = name
    editor.draft.base_url = "https://shop.example.com"
    editor.draft.product_container_selector = ".product-item"
    editor.draft.name_selector = ".product-name"
    editor.draft.price_selector = ".price"


def test_new_editor_has_default_draft():
    editor = StoreEditor()
    assert editor.draft == StoreConfig()
    assert editor.editing is False
    assert editor.selected_index is None
    assert editor.title == "Nueva Tienda"


def test_select_store_copies_the_store():
    manager = StoreManager.with_defaults()
    editor = StoreEditor()
    editor.select_store(manager, 0)
    assert editor.editing is True
    assert editor.selected_index == 0
    assert editor.draft == manager.stores[0]
    assert editor.title == "Editar Tienda: Ejemplo Store"
    editor.draft.name = "Changed"
    assert manager.stores[0].name == "Ejemplo Store"


def test_select_store_out_of_range():
    editor = StoreEditor()
    with pytest.raises(IndexError):
        editor.select_store(StoreManager(), 0)


@pytest.mark.parametrize("field", list(SelectorField))
def test_suggestions_match_selector_helper(field):
    assert StoreEditor().suggestions(field) == suggest_selectors(field.value)


@pytest.mark.parametrize("field", list(SelectorField))
def test_apply_suggestion_sets_field(field):
    editor = StoreEditor()
    editor.apply_suggestion(field, "div.x")
    assert getattr(editor.draft, field.attribute) == "div.x"


def test_title_suggestion_goes_to_name_selector():
    editor = StoreEditor()
    editor.apply_suggestion(SelectorField.TITLE, ".product-title")
    assert editor.draft.name_selector == ".product-title"


def test_save_new_store_appends_and_resets():
    manager = StoreManager()
    editor = StoreEditor()
    _fill_valid(editor)
    saved = editor.save(manager)
    assert manager.stores == [saved]
    assert saved.name == "Tienda"
    assert editor.draft == StoreConfig()
    assert editor.editing is False


def test_save_invalid_raises_and_leaves_manager():
    manager = StoreManager()
    editor = StoreEditor()
    editor.draft.name = "Only a name"
    with pytest.raises(ValueError):
        editor.save(manager)
    assert manager.stores == []
    assert editor.draft.name == "Only a name"


def test_save_while_editing_replaces_store():
    manager = StoreManager.with_defaults()
    editor = StoreEditor()
    _fill_valid(editor, "First")
    editor.save(manager)
    editor.select_store(manager, 1)
    editor.draft.name = "Renamed"
    editor.save(manager)
    assert [store.name for store in manager.stores] == ["Ejemplo Store", "Renamed"]
    assert editor.editing is False


def test_delete_removes_edited_store():
    manager = StoreManager.with_defaults()
    editor = StoreEditor()
    editor.select_store(manager, 0)
    removed = editor.delete(manager)
    assert removed.name == "Ejemplo Store"
    assert manager.stores == []
    assert editor.selected_index is None


def test_delete_without_selection_raises():
    manager = StoreManager.with_defaults()
    with pytest.raises(ValueError):
        StoreEditor().delete(manager)
    assert len(manager.stores) == 1


def test_cancel_discards_draft():
    manager = StoreManager.with_defaults()
    editor = StoreEditor()
    editor.select_store(manager, 0)
    editor.draft.name = "Changed"
    editor.cancel()
    assert editor.draft == StoreConfig()
    assert editor.editing is False
    assert manager.stores[0].name == "Ejemplo Store"