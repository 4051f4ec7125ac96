"""Модели базы данных сервиса склада."""

from sqlmodel import Field, SQLModel


class Product(SQLModel, table=True):
    """Модель товара на складе."""

    # UUID генерирует вызывающий код, база его не меняет
    id: str = Field(primary_key=True)
    name: str
    price: float = Field(default=0.0)
    quantity: int = Field(default=0)

    def __str__(self) -> str:
        return (
            f"Product(id={self.id}, name={self.name}, "
            f"price={self.price}, quantity={self.quantity})"
        )
