"""Исключения сервиса клиентов."""


class StorageError(Exception):
    """Хранилище недоступно или нарушено ограничение базы данных."""
