# flows/common.py

"""
Общие вспомогательные функции, используемые в различных сценариях (flows).
"""

from telegram import Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes, ConversationHandler

from app.utils.logger import log
from app.views.product_manager import ProductManagerView

# Ключи временных данных диалога в context.user_data
TEMP_KEYS = ('edit_field', 'pending_delete_id', 'products_page')


def get_view(context: ContextTypes.DEFAULT_TYPE) -> ProductManagerView:
    """
    Возвращает состояние экрана товаров текущего пользователя.

    Состояние создаётся при первом обращении и использует общий
    API-клиент из bot_data.
    """
    view = context.user_data.get('product_view')
    if view is None:
        view = ProductManagerView(context.bot_data['products_api'])
        context.user_data['product_view'] = view
    return view


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE) -> int:
    """
    Универсальный обработчик для отмены диалога ConversationHandler.

    Закрывает открытую форму (черновик сбрасывается) и очищает временные
    данные из `context.user_data`, сохраняя само состояние экрана.
    """
    message_text = "Action cancelled."

    if update.callback_query:
        # Если команда пришла от кнопки, редактируем исходное сообщение
        await update.callback_query.answer()
        await update.callback_query.edit_message_text(message_text)
    else:
        # Если пользователь ввел /cancel, отправляем новое сообщение
        await update.message.reply_text(message_text)

    view: ProductManagerView | None = context.user_data.get('product_view')
    if view:
        view.close_modal()
    for key in TEMP_KEYS:
        context.user_data.pop(key, None)

    return ConversationHandler.END


async def handle_expired_callback(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Обрабатывает нажатия на inline-кнопки, которые "устарели" после перезапуска бота.
    """
    query = update.callback_query
    # show_alert=True покажет пользователю всплывающее уведомление.
    await query.answer(
        text="⚠️ The bot was restarted. Please open the Product Manager again.",
        show_alert=True
    )
    try:
        await query.edit_message_text(
            text=query.message.text + "\n\n(This menu is no longer active)",
            reply_markup=None
        )
    except BadRequest as e:
        # Сообщение могло быть слишком старым или уже изменённым
        log.warning(f"Не удалось обновить устаревшее меню: {e}")
