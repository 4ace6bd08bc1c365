from typing import Any
from app.models.base import BaseApiModel

# Поля тела запроса на создание товара (id назначает сервер)
CREATE_FIELDS = ('name', 'price', 'quantity')


class Product(BaseApiModel):
    id: int | str | None = None
    name: str = ""
    price: float = 0.0
    quantity: int = 0

    def get_display_price(self) -> str:
        return f"{self.price:.2f}"

    def to_draft(self) -> dict[str, Any]:
        """Копия товара для редактирования в форме."""
        return {'id': self.id, 'name': self.name, 'price': self.price, 'quantity': self.quantity}


def empty_draft() -> dict[str, Any]:
    """Пустой шаблон формы (новый товар, id ещё не назначен)."""
    return {'id': '', 'name': '', 'price': '', 'quantity': ''}
