class ProductsApiError(Exception):
    """Любая неудачная операция с сервисом товаров."""


class NetworkError(ProductsApiError):
    """Сервис недоступен: ошибка соединения или транспорта."""


class ServerError(ProductsApiError):
    """Сервис ответил не-2xx статусом или некорректным телом ответа."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
