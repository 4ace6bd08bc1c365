import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Определяем базовую директорию проекта
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # --- Основные настройки, выносимые в .env ---
    BOT_TOKEN: str
    LOG_LEVEL: str = "INFO"

    # --- Внешний сервис товаров (REST) ---
    PRODUCTS_API_URL: str = "http://localhost:5286/api/Products"

    # Настройки интерфейса
    PAGINATION_PAGE_SIZE: int = 5

settings = Settings()
