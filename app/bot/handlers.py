from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, CallbackQueryHandler

from app.api.client import ProductsApiClient
from app.bot.keyboards import create_main_menu_keyboard
from app.flows.manage_products import products_conv_handler
from app.flows.common import handle_expired_callback
from app.utils.logger import log


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Отправляет приветственное сообщение и показывает главное меню в виде клавиатуры."""
    text = (
        f"Hello, {update.effective_user.first_name}!\n\n"
        "Use the button below or /products to manage products."
    )
    await update.message.reply_text(text, reply_markup=create_main_menu_keyboard())


async def open_api_client(application: Application) -> None:
    """post_init: создаёт общий для всех пользователей клиент сервиса товаров."""
    client = ProductsApiClient()
    application.bot_data['products_api'] = client
    log.info(f"Клиент сервиса товаров создан: {client.base_url}")


async def close_api_client(application: Application) -> None:
    """post_shutdown: закрывает HTTP-соединения клиента."""
    client: ProductsApiClient | None = application.bot_data.pop('products_api', None)
    if client:
        await client.aclose()
        log.info("Клиент сервиса товаров закрыт.")


def register_handlers(application: Application) -> None:
    """Регистрирует все обработчики в приложении."""
    application.add_handler(CommandHandler("start", start))
    application.add_handler(products_conv_handler)

    application.add_handler(CallbackQueryHandler(handle_expired_callback))
