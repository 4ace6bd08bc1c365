from pydantic import BaseModel, ConfigDict


class BaseApiModel(BaseModel):
    """
    Базовая модель для сущностей, которые приходят из внешнего REST API.
    Лишние поля в ответе сервера игнорируются.
    """
    model_config = ConfigDict(extra='ignore')

    @classmethod
    def from_api_list(cls, rows: list[dict]) -> list:
        """Преобразует JSON-массив из ответа API в список моделей, сохраняя порядок."""
        return [cls.model_validate(row) for row in rows]
