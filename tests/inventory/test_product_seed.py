"""Тесты для начального заполнения склада."""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_service.core.exceptions import StorageError
from inventory_service.db.models import Product
from inventory_service.repositories.product_repository import (
    InMemoryProductRepository,
    ProductRepository,
    SqlProductRepository,
)
from inventory_service.services.seed import seed_products

EXPECTED = {
    "Laptop": (1000.0, 299),
    "Smartphone": (500.0, 450),
    "Headphones": (150.0, 120),
}


async def test_seed_fresh_store(session: AsyncSession) -> None:
    """На пустом складе появляются ровно три товара с разными ID."""
    repository = SqlProductRepository(session)

    await seed_products(repository)

    products = await repository.find_all()
    assert {p.name: (p.price, p.quantity) for p in products} == EXPECTED
    assert len({p.id for p in products}) == 3
    for product in products:
        assert str(uuid.UUID(product.id)) == product.id


async def test_seed_prints_each_product(capsys: pytest.CaptureFixture[str]) -> None:
    """Каждый товар печатается отдельной строкой в порядке хранилища."""
    repository = InMemoryProductRepository()

    await seed_products(repository)

    lines = capsys.readouterr().out.splitlines()
    products = await repository.find_all()
    assert lines == [str(p) for p in products]
    assert lines[0].startswith("Product(id=")
    assert lines[0].endswith(", name=Laptop, price=1000.0, quantity=299)")


async def test_seed_twice_generates_new_ids(session: AsyncSession) -> None:
    """Повторный запуск с новыми UUID дублирует товары."""
    repository = SqlProductRepository(session)

    await seed_products(repository)
    await seed_products(repository)

    products = await repository.find_all()
    assert len(products) == 6
    assert len({p.id for p in products}) == 6


async def test_seed_stops_on_first_storage_error() -> None:
    """После ошибки сохранения чтение и печать не выполняются."""
    repository = AsyncMock(spec=ProductRepository)
    repository.save.side_effect = StorageError("connection refused")

    with pytest.raises(StorageError):
        await seed_products(repository)

    repository.save.assert_awaited_once()
    repository.find_all.assert_not_awaited()


async def test_seed_unreachable_store(
    unreachable_session: AsyncSession, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(StorageError):
        await seed_products(SqlProductRepository(unreachable_session))

    assert capsys.readouterr().out == ""


class FailingAfterFirstSave(SqlProductRepository):
    """Репозиторий, который теряет соединение после первой вставки."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.saved = 0

    async def save(self, product: Product) -> Product:
        if self.saved == 1:
            raise StorageError("connection lost")
        self.saved += 1
        return await super().save(product)


async def test_seed_failure_leaves_only_saved_prefix(
    session: AsyncSession, capsys: pytest.CaptureFixture[str]
) -> None:
    """После сбоя виден только первый товар, и ничего не печатается."""
    repository = FailingAfterFirstSave(session)

    with pytest.raises(StorageError):
        await seed_products(repository)

    products = await repository.find_all()
    assert [p.name for p in products] == ["Laptop"]
    assert capsys.readouterr().out == ""
