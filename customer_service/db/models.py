"""Модели базы данных сервиса клиентов."""

from sqlmodel import Field, SQLModel


class Customer(SQLModel, table=True):
    """Модель клиента. Идентификатор назначает база данных."""

    id: int | None = Field(default=None, primary_key=True)
    name: str
    email: str

    def __str__(self) -> str:
        return f"Customer(id={self.id}, name={self.name}, email={self.email})"
