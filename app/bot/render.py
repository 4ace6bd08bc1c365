# app/bot/render.py

"""
Отрисовка состояния экрана товаров в HTML-текст сообщений Telegram.
"""

from html import escape

from app.bot.keyboards import clamp_page
from app.config.settings import settings
from app.models.product import Product

TITLE = "🛒 <b>Product Manager</b>"
LOADING_TEXT = "⏳ Loading products..."
EMPTY_STATE_TEXT = "No products found"

TABLE_HEADERS = ("#", "Name", "Price ($)", "Quantity")
NAME_COLUMN_MAX = 24


def render_loading() -> str:
    return f"{TITLE}\n\n{LOADING_TEXT}"


def _cell(value: str, width: int) -> str:
    return value.ljust(width)


def _table_rows(products: list[Product], start: int) -> list[tuple[str, ...]]:
    rows = []
    for index, product in enumerate(products, start=start):
        name = product.name
        if len(name) > NAME_COLUMN_MAX:
            name = name[:NAME_COLUMN_MAX - 1] + "…"
        rows.append((str(index), name, product.get_display_price(), str(product.quantity)))
    return rows


def render_products(products: list[Product], page: int = 0, page_size: int | None = None) -> str:
    """
    Таблица товаров в моноширинном блоке.

    Выводится та же страница, что и на клавиатуре действий: сообщение
    Telegram ограничено 4096 символами. Номер в колонке "#" сквозной по
    всему списку и совпадает с кнопками "Edit #n". При пустом списке
    выводится только сообщение об отсутствии товаров.
    """
    if not products:
        return f"{TITLE}\n\n{EMPTY_STATE_TEXT}"

    page_size = page_size or settings.PAGINATION_PAGE_SIZE
    page = clamp_page(len(products), page, page_size)
    start_index = page * page_size
    page_products = products[start_index:start_index + page_size]

    rows = _table_rows(page_products, start=start_index + 1)
    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(TABLE_HEADERS)
    ]
    lines = [" | ".join(_cell(h, w) for h, w in zip(TABLE_HEADERS, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    lines.extend(" | ".join(_cell(v, w) for v, w in zip(row, widths)) for row in rows)

    table = escape("\n".join(lines))
    summary = f"Showing {start_index + 1}-{start_index + len(page_products)} of {len(products)} products"
    return f"{TITLE}\n\n<pre>{table}</pre>\n{summary}"


def render_form(draft: dict, edit_mode: bool) -> str:
    """Карточка формы добавления/редактирования с текущими значениями черновика."""
    title = "Edit Product" if edit_mode else "Add New Product"

    def show(value) -> str:
        return escape(str(value)) if value not in ("", None) else "—"

    return (
        f"<b>{title}</b>\n\n"
        f"<b>Name:</b> {show(draft.get('name'))}\n"
        f"<b>Price:</b> {show(draft.get('price'))}\n"
        f"<b>Quantity:</b> {show(draft.get('quantity'))}\n\n"
        "Choose a field to change its value."
    )


def render_delete_prompt(product: Product | None) -> str:
    name = escape(product.name) if product else "this product"
    return f"Are you sure you want to delete <b>{name}</b>?"
