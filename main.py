from telegram.ext import ApplicationBuilder
from app.config.settings import settings
from app.utils.logger import log
from app.bot.handlers import register_handlers, open_api_client, close_api_client

def main() -> None:
    """Основная функция для запуска бота."""
    log.info("Запуск бота...")

    application = (
        ApplicationBuilder()
        .token(settings.BOT_TOKEN)
        .post_init(open_api_client)
        .post_shutdown(close_api_client)
        .build()
    )

    register_handlers(application)
    log.info("Обработчики успешно зарегистрированы.")

    # run_polling() блокирует поток до остановки бота
    log.info("Запуск в режиме polling...")
    application.run_polling()

if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        log.info("Бот остановлен.")
