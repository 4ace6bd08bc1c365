from math import ceil
from typing import Callable
from telegram import InlineKeyboardButton, InlineKeyboardMarkup, ReplyKeyboardMarkup, KeyboardButton

from app.models.product import Product

# --- КОНСТАНТЫ ДЛЯ ТЕКСТА КНОПОК ГЛАВНОГО МЕНЮ ---
class ReplyButton:
    MANAGE_PRODUCTS = "🛒 Product Manager"


# --- CALLBACK DATA ЭКРАНА ТОВАРОВ ---
class Callback:
    ADD = "add_product"
    EDIT_PREFIX = "edit_"
    DELETE_PREFIX = "delete_"
    PAGE_PREFIX = "products_page_"
    FIELD_PREFIX = "field_"
    SAVE = "save_form"
    CLOSE = "close_form"
    CONFIRM_YES = "confirm_yes"
    CONFIRM_NO = "confirm_no"
    NOOP = "noop"


def create_main_menu_keyboard() -> ReplyKeyboardMarkup:
    """Создает ReplyKeyboardMarkup с кнопкой входа в менеджер товаров."""
    keyboard = [[KeyboardButton(ReplyButton.MANAGE_PRODUCTS)]]
    return ReplyKeyboardMarkup(keyboard, resize_keyboard=True)


def clamp_page(total_items: int, page: int, page_size: int) -> int:
    """Номер страницы в допустимых границах для списка из total_items элементов."""
    total_pages = max(1, ceil(total_items / page_size))
    return max(0, min(page, total_pages - 1))


def create_paginated_keyboard(
    items: list,
    row_builder: Callable[[int, object], list[InlineKeyboardButton]],
    page: int = 0,
    page_size: int = 5,
    pagination_callback_prefix: str = "page_",
    extra_buttons: list[list[InlineKeyboardButton]] | None = None
) -> InlineKeyboardMarkup:
    """
    Создает универсальную Inline-клавиатуру с пагинацией.

    row_builder получает сквозной (с нуля) индекс элемента в полном списке
    и сам элемент, и возвращает ряд кнопок для него.
    """
    if not items:
        keyboard = extra_buttons or []
        return InlineKeyboardMarkup(keyboard)

    total_pages = ceil(len(items) / page_size)
    page = clamp_page(len(items), page, page_size)

    start_index = page * page_size
    end_index = start_index + page_size

    keyboard = [
        row_builder(index, item)
        for index, item in enumerate(items[start_index:end_index], start=start_index)
    ]

    nav_buttons = []
    if page > 0:
        nav_buttons.append(InlineKeyboardButton("⬅️ Back", callback_data=f"{pagination_callback_prefix}{page - 1}"))

    if total_pages > 1:
        nav_buttons.append(InlineKeyboardButton(f"📄 {page + 1}/{total_pages}", callback_data=Callback.NOOP))

    if page < total_pages - 1:
        nav_buttons.append(InlineKeyboardButton("Next ➡️", callback_data=f"{pagination_callback_prefix}{page + 1}"))

    if nav_buttons:
        keyboard.append(nav_buttons)

    if extra_buttons:
        keyboard.extend(extra_buttons)

    return InlineKeyboardMarkup(keyboard)


def create_products_keyboard(products: list[Product], page: int = 0, page_size: int = 5) -> InlineKeyboardMarkup:
    """Кнопки Edit/Delete для каждого товара и кнопка добавления."""
    def product_row(index: int, product: Product) -> list[InlineKeyboardButton]:
        return [
            InlineKeyboardButton(f"✏️ Edit #{index + 1}", callback_data=f"{Callback.EDIT_PREFIX}{product.id}"),
            InlineKeyboardButton(f"🗑️ Delete #{index + 1}", callback_data=f"{Callback.DELETE_PREFIX}{product.id}"),
        ]

    return create_paginated_keyboard(
        items=products, page=page, page_size=page_size,
        row_builder=product_row,
        pagination_callback_prefix=Callback.PAGE_PREFIX,
        extra_buttons=[[InlineKeyboardButton("➕ Add Product", callback_data=Callback.ADD)]]
    )


def create_form_keyboard(edit_mode: bool) -> InlineKeyboardMarkup:
    """Клавиатура формы: по кнопке на поле, сохранение и закрытие."""
    save_text = "💾 Update Product" if edit_mode else "💾 Save Product"
    close_text = "Cancel" if edit_mode else "Close"
    keyboard = [
        [
            InlineKeyboardButton("Name", callback_data=f"{Callback.FIELD_PREFIX}name"),
            InlineKeyboardButton("Price", callback_data=f"{Callback.FIELD_PREFIX}price"),
            InlineKeyboardButton("Quantity", callback_data=f"{Callback.FIELD_PREFIX}quantity"),
        ],
        [
            InlineKeyboardButton(close_text, callback_data=Callback.CLOSE),
            InlineKeyboardButton(save_text, callback_data=Callback.SAVE),
        ],
    ]
    return InlineKeyboardMarkup(keyboard)


def create_confirm_keyboard() -> InlineKeyboardMarkup:
    keyboard = [[
        InlineKeyboardButton("✅ Yes", callback_data=Callback.CONFIRM_YES),
        InlineKeyboardButton("❌ No", callback_data=Callback.CONFIRM_NO),
    ]]
    return InlineKeyboardMarkup(keyboard)
