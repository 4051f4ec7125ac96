"""Репозиторий клиентов: интерфейс, SQL-адаптер и хранилище в памяти."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from customer_service.core.exceptions import StorageError
from customer_service.db.models import Customer


class CustomerRepository(ABC):
    """Абстрактный интерфейс репозитория клиентов."""

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """Сохраняет клиента и возвращает сохраненную запись."""

    @abstractmethod
    async def find_all(self) -> Sequence[Customer]:
        """Возвращает всех сохраненных клиентов."""


class SqlCustomerRepository(CustomerRepository):
    """Реализация репозитория клиентов поверх сессии SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, customer: Customer) -> Customer:
        """
        Сохраняет клиента в базе данных.

        Args:
            customer: Клиент без идентификатора.

        Returns:
            Тот же объект с назначенным базой идентификатором.

        Raises:
            StorageError: Если база недоступна или нарушено ограничение.
        """
        self._session.add(customer)
        try:
            await self._session.commit()
            await self._session.refresh(customer)
        except (SQLAlchemyError, OSError) as e:
            logging.exception("Failed to save customer %s", customer.name)
            await self._session.rollback()
            raise StorageError(
                f"Не удалось сохранить клиента '{customer.name}'"
            ) from e
        return customer

    async def find_all(self) -> Sequence[Customer]:
        """
        Возвращает список всех клиентов.

        Raises:
            StorageError: Если база недоступна.
        """
        statement = select(Customer)
        try:
            result = await self._session.execute(statement)
        except (SQLAlchemyError, OSError) as e:
            logging.exception("Failed to load customers")
            raise StorageError("Не удалось получить список клиентов") from e
        return result.scalars().all()


class InMemoryCustomerRepository(CustomerRepository):
    """Хранилище клиентов в памяти для тестов."""

    def __init__(self) -> None:
        self._customers: list[Customer] = []
        self._next_id = 1

    async def save(self, customer: Customer) -> Customer:
        # Суррогатный ключ, как у автоинкремента
        if customer.id is None:
            customer.id = self._next_id
            self._next_id += 1
        elif any(c.id == customer.id for c in self._customers):
            raise StorageError(f"Клиент с ID {customer.id} уже существует")
        else:
            self._next_id = max(self._next_id, customer.id + 1)
        self._customers.append(customer)
        return customer

    async def find_all(self) -> Sequence[Customer]:
        return list(self._customers)
