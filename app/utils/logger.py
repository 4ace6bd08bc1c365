import sys
from loguru import logger
from app.config.settings import settings

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)

# Ошибки обращений к сервису товаров и прочие сбои
logger.add(
    "logs/error.log",
    level="ERROR",
    rotation="10 MB",
    compression="zip",
    enqueue=True,
    backtrace=True,
    diagnose=True
)

# Журнал HTTP-запросов к REST API (только модули app.api)
logger.add(
    "logs/api.log",
    level="DEBUG",
    filter="app.api",
    rotation="5 MB",
    retention=5,
    enqueue=True
)

log = logger
