# flows/manage_products.py
from enum import Enum, auto
from telegram import Update
from telegram.ext import (
    ContextTypes, ConversationHandler, CommandHandler, CallbackQueryHandler, MessageHandler, filters
)

from app.bot.keyboards import (
    Callback, ReplyButton, create_products_keyboard, create_form_keyboard, create_confirm_keyboard
)
from app.bot.render import render_loading, render_products, render_form, render_delete_prompt
from app.config.settings import settings
from app.views.product_manager import ProductManagerView
from .common import cancel, get_view

class ProductState(Enum):
    LIST = auto()
    ADD_FORM = auto()
    EDIT_FORM = auto()
    FIELD_VALUE = auto()
    CONFIRM_DELETE = auto()

FIELD_PROMPTS = {
    'name': "Enter the product name:",
    'price': "Enter the price (e.g. 9.99):",
    'quantity': "Enter the quantity (e.g. 3):",
}

# --- Вспомогательные функции ---

def _coerce_field_value(field: str, raw: str):
    """
    Приводит введённый текст к числу для цены и количества.
    Значение, которое не разбирается как число, сохраняется как есть: проверки нет.
    """
    value = raw.strip()
    try:
        if field == 'price':
            return float(value.replace(',', '.'))
        if field == 'quantity':
            return int(value)
    except ValueError:
        pass
    return value

def _form_state(view: ProductManagerView) -> ProductState:
    return ProductState.EDIT_FORM if view.is_edit_mode else ProductState.ADD_FORM

async def _show_products(update: Update, context: ContextTypes.DEFAULT_TYPE, view: ProductManagerView) -> ProductState:
    """Отображает таблицу товаров из текущего состояния (без запроса к API)."""
    page = context.user_data.get('products_page', 0)
    text = render_products(view.products, page=page, page_size=settings.PAGINATION_PAGE_SIZE)
    reply_markup = create_products_keyboard(view.products, page=page, page_size=settings.PAGINATION_PAGE_SIZE)

    if update.callback_query:
        await update.callback_query.edit_message_text(text, reply_markup=reply_markup, parse_mode='HTML')
    else:
        await update.message.reply_text(text, reply_markup=reply_markup, parse_mode='HTML')
    return ProductState.LIST

async def _show_form(update: Update, view: ProductManagerView) -> ProductState:
    text = render_form(view.draft, view.is_edit_mode)
    reply_markup = create_form_keyboard(view.is_edit_mode)

    if update.callback_query:
        await update.callback_query.edit_message_text(text, reply_markup=reply_markup, parse_mode='HTML')
    else:
        await update.message.reply_text(text, reply_markup=reply_markup, parse_mode='HTML')
    return _form_state(view)

# --- Список товаров ---

async def products_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    """Открывает менеджер: показывает индикатор загрузки, загружает и выводит список."""
    view = get_view(context)
    context.user_data['products_page'] = 0

    message = await update.message.reply_text(render_loading(), parse_mode='HTML')
    await view.refresh()

    await message.edit_text(
        render_products(view.products, page=0, page_size=settings.PAGINATION_PAGE_SIZE),
        reply_markup=create_products_keyboard(view.products, page_size=settings.PAGINATION_PAGE_SIZE),
        parse_mode='HTML'
    )
    return ProductState.LIST

async def change_page(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    await query.answer()
    context.user_data['products_page'] = int(query.data.removeprefix(Callback.PAGE_PREFIX))
    return await _show_products(update, context, get_view(context))

async def ignore_noop(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Кнопка-счётчик страниц ничего не делает."""
    await update.callback_query.answer()

# --- Формы добавления и редактирования ---

async def add_product_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    await query.answer()
    view = get_view(context)
    view.begin_add()
    return await _show_form(update, view)

async def edit_product_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    view = get_view(context)
    product = view.find_product(query.data.removeprefix(Callback.EDIT_PREFIX))
    if not product:
        await query.answer("Product not found. It may have been deleted.", show_alert=True)
        return await _show_products(update, context, view)

    await query.answer()
    view.begin_edit(product)
    return await _show_form(update, view)

async def ask_for_field_value(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    await query.answer()
    field = query.data.removeprefix(Callback.FIELD_PREFIX)
    context.user_data['edit_field'] = field
    await query.edit_message_text(FIELD_PROMPTS.get(field, "Enter a new value:"))
    return ProductState.FIELD_VALUE

async def field_value_received(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    """Записывает введённое значение в черновик и возвращает к форме."""
    view = get_view(context)
    field = context.user_data.pop('edit_field', None)
    if field:
        view.update_draft_field(field, _coerce_field_value(field, update.message.text))
    return await _show_form(update, view)

async def save_product(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    """
    Отправляет черновик в API.

    При успехе форма закрывается и показывается обновлённый список;
    при ошибке форма остаётся открытой с тем же черновиком.
    """
    query = update.callback_query
    view = get_view(context)

    if view.is_edit_mode:
        success = await view.submit_edit()
        notice = "Product updated successfully!"
    else:
        success = await view.submit_add()
        notice = "Product added successfully!"

    if not success:
        await query.answer()
        return _form_state(view)

    await query.answer(notice)
    return await _show_products(update, context, view)

async def close_form(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    await query.answer()
    view = get_view(context)
    view.close_modal()
    context.user_data.pop('edit_field', None)
    return await _show_products(update, context, view)

# --- Удаление ---

async def delete_product_start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    """Запрашивает подтверждение удаления."""
    query = update.callback_query
    await query.answer()
    product_id = query.data.removeprefix(Callback.DELETE_PREFIX)
    context.user_data['pending_delete_id'] = product_id
    product = get_view(context).find_product(product_id)
    await query.edit_message_text(
        render_delete_prompt(product), reply_markup=create_confirm_keyboard(), parse_mode='HTML'
    )
    return ProductState.CONFIRM_DELETE

async def confirm_delete(update: Update, context: ContextTypes.DEFAULT_TYPE) -> ProductState:
    query = update.callback_query
    view = get_view(context)
    product_id = context.user_data.pop('pending_delete_id', None)
    approved = query.data == Callback.CONFIRM_YES

    async def confirm() -> bool:
        return approved and product_id is not None

    deleted = await view.remove_product(product_id, confirm)
    if deleted:
        await query.answer("Product deleted successfully!")
    else:
        await query.answer()
    return await _show_products(update, context, view)

# --- ConversationHandler ---
form_handlers = [
    CallbackQueryHandler(ask_for_field_value, pattern=f"^{Callback.FIELD_PREFIX}"),
    CallbackQueryHandler(save_product, pattern=f"^{Callback.SAVE}$"),
    CallbackQueryHandler(close_form, pattern=f"^{Callback.CLOSE}$"),
]

products_conv_handler = ConversationHandler(
    entry_points=[
        CommandHandler("products", products_start),
        MessageHandler(filters.Text([ReplyButton.MANAGE_PRODUCTS]), products_start),
    ],
    states={
        ProductState.LIST: [
            CallbackQueryHandler(add_product_start, pattern=f"^{Callback.ADD}$"),
            CallbackQueryHandler(edit_product_start, pattern=f"^{Callback.EDIT_PREFIX}"),
            CallbackQueryHandler(delete_product_start, pattern=f"^{Callback.DELETE_PREFIX}"),
            CallbackQueryHandler(change_page, pattern=f"^{Callback.PAGE_PREFIX}"),
            CallbackQueryHandler(ignore_noop, pattern=f"^{Callback.NOOP}$"),
        ],
        ProductState.ADD_FORM: form_handlers,
        ProductState.EDIT_FORM: form_handlers,
        ProductState.FIELD_VALUE: [MessageHandler(filters.TEXT & ~filters.COMMAND, field_value_received)],
        ProductState.CONFIRM_DELETE: [
            CallbackQueryHandler(confirm_delete, pattern=f"^({Callback.CONFIRM_YES}|{Callback.CONFIRM_NO})$")
        ],
    },
    fallbacks=[CommandHandler("cancel", cancel)],
    allow_reentry=True,
    # Ввод значений полей идёт текстом (MessageHandler), поэтому per_message=True невозможен:
    # диалог отслеживается по чату и пользователю
    per_message=False
)
