# app/core/exceptions.py


class CalendarValidationError(Exception):
    """Некорректные параметры запроса календаря (ответ 400)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CalendarSourceError(Exception):
    """Не удалось получить данные из одного из источников календаря (ответ 500)."""
