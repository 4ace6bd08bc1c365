# app/api/client.py

"""
Клиент внешнего REST-сервиса товаров.

Каждый метод соответствует одному HTTP-глаголу. Повторов, кэширования и
собственных таймаутов нет: используются значения транспорта по умолчанию.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from app.api.exceptions import NetworkError, ServerError
from app.config.settings import settings
from app.models.product import CREATE_FIELDS, Product
from app.utils.logger import log


class ProductsApiClient:
    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = (base_url or settings.PRODUCTS_API_URL).rstrip('/')
        self._http = httpx.AsyncClient(transport=transport)

    def _item_url(self, product_id: Any) -> str:
        return f"{self.base_url}/{product_id}"

    async def _request(self, method: str, url: str, json: Any = None) -> httpx.Response:
        """Выполняет запрос и переводит ошибки httpx в ошибки клиента."""
        log.debug(f"{method} {url}")
        try:
            response = await self._http.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {url} не выполнен: {e}") from e

        if not response.is_success:
            raise ServerError(
                f"{method} {url} вернул статус {response.status_code}",
                status_code=response.status_code
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ServerError(f"Некорректный JSON в ответе: {e}", status_code=response.status_code) from e

    async def list(self) -> list[Product]:
        """GET /api/Products: все товары в порядке ответа сервера."""
        response = await self._request("GET", self.base_url)
        data = self._json(response)
        if not isinstance(data, list):
            raise ServerError("Ожидался JSON-массив товаров", status_code=response.status_code)
        try:
            return Product.from_api_list(data)
        except ValidationError as e:
            raise ServerError(f"Некорректные данные товаров: {e}", status_code=response.status_code) from e

    async def create(self, draft: dict) -> Product | None:
        """
        POST /api/Products: создаёт товар, сервер назначает id.

        Любой 2xx-ответ означает, что товар создан. Тело ответа разбирается
        по возможности: если сервер не вернул товар, результат None.
        """
        payload = {field: draft.get(field) for field in CREATE_FIELDS}
        response = await self._request("POST", self.base_url, json=payload)
        if not response.content:
            return None
        try:
            return Product.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            log.warning(f"Товар создан, но ответ сервера не разобран: {e}")
            return None

    async def update(self, product_id: Any, draft: dict) -> None:
        """PUT /api/Products/{id}: тело ответа не используется."""
        await self._request("PUT", self._item_url(product_id), json=draft)

    async def delete(self, product_id: Any) -> None:
        """DELETE /api/Products/{id}: повторное удаление может завершиться ошибкой."""
        await self._request("DELETE", self._item_url(product_id))

    async def aclose(self) -> None:
        await self._http.aclose()
