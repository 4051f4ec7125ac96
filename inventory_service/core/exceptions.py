"""Исключения сервиса склада."""


class StorageError(Exception):
    """Хранилище недоступно или нарушено ограничение базы данных."""
