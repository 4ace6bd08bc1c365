import os

# Settings() читается при импорте app.config.settings: токен нужен до импорта тестов
os.environ.setdefault("BOT_TOKEN", "test-token")
os.environ.setdefault("PRODUCTS_API_URL", "http://backend.test/api/Products")
