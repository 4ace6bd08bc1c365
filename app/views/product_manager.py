# app/views/product_manager.py

"""
Состояние экрана управления товарами и сценарии работы с ним.

Локальная коллекция товаров лишь кэш, источником истины является внешний
сервис, поэтому после каждого изменения список запрашивается заново.
Ошибки сервиса только пишутся в лог, пользователь видит неизменившееся
состояние (форма остаётся открытой, список остаётся прежним).
"""

from typing import Any, Awaitable, Callable

from app.api.client import ProductsApiClient
from app.api.exceptions import ProductsApiError
from app.models.product import Product, empty_draft
from app.utils.logger import log

# Запрос подтверждения у пользователя: True означает "да"
ConfirmCallback = Callable[[], Awaitable[bool]]


class ProductManagerView:
    def __init__(self, api: ProductsApiClient):
        self.api = api
        self.products: list[Product] = []
        self.loading: bool = True
        self.show_add_modal: bool = False
        self.show_edit_modal: bool = False
        self.draft: dict[str, Any] = empty_draft()
        self.is_edit_mode: bool = False

    async def refresh(self) -> bool:
        """
        Заново загружает список товаров.

        Флаг loading снимается в любом случае. При ошибке остаётся
        последний успешно загруженный список.
        """
        self.loading = True
        try:
            self.products = await self.api.list()
            return True
        except ProductsApiError as e:
            log.error(f"Ошибка загрузки товаров: {e}")
            return False
        finally:
            self.loading = False

    def begin_add(self) -> None:
        self.draft = empty_draft()
        self.is_edit_mode = False
        self.show_add_modal = True

    def begin_edit(self, product: Product) -> None:
        self.draft = product.to_draft()
        self.is_edit_mode = True
        self.show_edit_modal = True

    def update_draft_field(self, field: str, value: Any) -> None:
        """Записывает одно поле в черновик без какой-либо проверки."""
        self.draft = {**self.draft, field: value}

    def _reset_form(self) -> None:
        self.draft = empty_draft()
        self.is_edit_mode = False

    async def submit_add(self) -> bool:
        try:
            created = await self.api.create(self.draft)
        except ProductsApiError as e:
            log.error(f"Ошибка добавления товара: {e}")
            return False

        if created:
            log.info(f"Товар '{created.name}' создан с id={created.id}.")
        else:
            log.info(f"Товар '{self.draft.get('name')}' создан.")
        self.show_add_modal = False
        self._reset_form()
        await self.refresh()
        return True

    async def submit_edit(self) -> bool:
        product_id = self.draft.get('id')
        try:
            await self.api.update(product_id, self.draft)
        except ProductsApiError as e:
            log.error(f"Ошибка обновления товара {product_id}: {e}")
            return False

        log.info(f"Товар {product_id} обновлён.")
        self.show_edit_modal = False
        self._reset_form()
        await self.refresh()
        return True

    async def remove_product(self, product_id: Any, confirm: ConfirmCallback) -> bool:
        """
        Удаляет товар после явного подтверждения пользователя.

        Returns:
            bool: True, если запрос на удаление был выполнен успешно.
                  False, если пользователь отказался или сервис вернул ошибку.
        """
        if not await confirm():
            log.debug(f"Удаление товара {product_id} отменено пользователем.")
            return False

        try:
            await self.api.delete(product_id)
        except ProductsApiError as e:
            log.error(f"Ошибка удаления товара {product_id}: {e}")
            return False

        log.info(f"Товар {product_id} удалён.")
        await self.refresh()
        return True

    def close_modal(self) -> None:
        self._reset_form()
        self.show_add_modal = False
        self.show_edit_modal = False

    def find_product(self, product_id: Any) -> Product | None:
        # id из callback_data всегда строка, а из API может прийти числом
        for product in self.products:
            if str(product.id) == str(product_id):
                return product
        return None
