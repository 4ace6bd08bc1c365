# tests/bot/test_keyboards.py

import pytest
from unittest.mock import MagicMock
from telegram import InlineKeyboardButton

from app.bot.keyboards import (
    Callback, clamp_page, create_paginated_keyboard, create_products_keyboard, create_form_keyboard, create_confirm_keyboard
)
from app.models.product import Product

# Создаем простые мок-объекты для элементов списка
@pytest.fixture
def mock_items():
    items = []
    for i in range(12): # 12 элементов для 3 страниц при page_size=5
        item = MagicMock()
        item.id = i
        item.__str__ = lambda self, num=i: f"Item {num}"
        items.append(item)
    return items

def item_row(index, item):
    return [InlineKeyboardButton(str(item), callback_data=f"item_{item.id}")]

def test_pagination_empty_list():
    """Тест: если список пуст, возвращается пустая клавиатура (или только extra_buttons)."""
    keyboard = create_paginated_keyboard(items=[], row_builder=item_row)
    assert len(keyboard.inline_keyboard) == 0

    extra_button = [[InlineKeyboardButton("Add", callback_data="add")]]
    keyboard_with_extra = create_paginated_keyboard(items=[], row_builder=item_row, extra_buttons=extra_button)
    assert len(keyboard_with_extra.inline_keyboard) == 1
    assert keyboard_with_extra.inline_keyboard[0][0].text == "Add"

def test_pagination_single_page(mock_items):
    """Тест: если все элементы помещаются на одну страницу, кнопок навигации нет."""
    keyboard = create_paginated_keyboard(items=mock_items[:3], row_builder=item_row, page_size=5)
    assert len(keyboard.inline_keyboard) == 3
    callbacks = [btn.callback_data for row in keyboard.inline_keyboard for btn in row]
    assert not any("page_" in cb for cb in callbacks)

def test_pagination_middle_page(mock_items):
    """Тест: на средней странице есть обе кнопки навигации."""
    keyboard = create_paginated_keyboard(items=mock_items, row_builder=item_row, page=1, page_size=5)

    nav_row = keyboard.inline_keyboard[-1]
    callbacks = [btn.callback_data for btn in nav_row]

    assert "page_0" in callbacks
    assert "page_2" in callbacks
    assert any("2/3" in btn.text for btn in nav_row)

def test_pagination_out_of_range_page_is_clamped(mock_items):
    keyboard = create_paginated_keyboard(items=mock_items, row_builder=item_row, page=10, page_size=5)
    nav_row = keyboard.inline_keyboard[-1]
    assert any("3/3" in btn.text for btn in nav_row)
    # На последней странице 2 элемента
    assert len(keyboard.inline_keyboard) == 3

def test_row_builder_receives_global_index(mock_items):
    seen = []

    def row_builder(index, item):
        seen.append(index)
        return [InlineKeyboardButton(f"#{index}", callback_data=f"x_{item.id}")]

    create_paginated_keyboard(items=mock_items, page=1, page_size=5, row_builder=row_builder)
    assert seen == [5, 6, 7, 8, 9]

def test_products_keyboard_has_edit_delete_per_product_and_add_button():
    products = [Product(id=10, name='Widget'), Product(id=11, name='Gadget')]
    keyboard = create_products_keyboard(products)

    rows = keyboard.inline_keyboard
    assert [btn.callback_data for btn in rows[0]] == ["edit_10", "delete_10"]
    assert [btn.callback_data for btn in rows[1]] == ["edit_11", "delete_11"]
    assert rows[1][0].text == "✏️ Edit #2"
    assert rows[-1][0].callback_data == Callback.ADD

def test_products_keyboard_empty_list_only_add_button():
    keyboard = create_products_keyboard([])
    assert len(keyboard.inline_keyboard) == 1
    assert keyboard.inline_keyboard[0][0].callback_data == Callback.ADD

@pytest.mark.parametrize("edit_mode, save_text, close_text", [
    (False, "💾 Save Product", "Close"),
    (True, "💾 Update Product", "Cancel"),
])
def test_form_keyboard(edit_mode, save_text, close_text):
    keyboard = create_form_keyboard(edit_mode)
    field_callbacks = [btn.callback_data for btn in keyboard.inline_keyboard[0]]
    assert field_callbacks == ["field_name", "field_price", "field_quantity"]
    actions = {btn.callback_data: btn.text for btn in keyboard.inline_keyboard[1]}
    assert actions[Callback.SAVE] == save_text
    assert actions[Callback.CLOSE] == close_text

def test_confirm_keyboard():
    callbacks = [btn.callback_data for btn in create_confirm_keyboard().inline_keyboard[0]]
    assert callbacks == [Callback.CONFIRM_YES, Callback.CONFIRM_NO]

def test_paginated_keyboard_requires_row_builder(mock_items):
    """Тест: без row_builder клавиатуру построить нельзя, кнопок без обработчика не бывает."""
    with pytest.raises(TypeError):
        create_paginated_keyboard(items=mock_items)

@pytest.mark.parametrize("total, page, expected", [
    (12, 0, 0),
    (12, 2, 2),
    (12, 10, 2),
    (12, -3, 0),
    (0, 4, 0),
])
def test_clamp_page(total, page, expected):
    assert clamp_page(total, page, 5) == expected
