"""Tests for SqlProductRepository against an in-memory SQLite database."""

from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from bakery_catalog.entities.service.product import (
    Product,
    ProductTable,
    SqlProductRepository,
)


@pytest.fixture
def repository(session: Session) -> SqlProductRepository:
    return SqlProductRepository(session)


class TestFindOperations:
    """Lookups return domain products, never rows."""

    def test_find_all_returns_every_product_in_order(self, repository, bakery_rows):
        """Should return all products, active and inactive, by id."""
        products = repository.find_all()

        assert [p.id for p in products] == [1, 2]
        assert all(isinstance(p, Product) for p in products)
        assert not any(isinstance(p, ProductTable) for p in products)

    def test_find_all_empty(self, repository):
        """Should return an empty list for an empty table."""
        assert repository.find_all() == []

    def test_find_active_products(self, repository, bakery_rows):
        """Should return only active products."""
        products = repository.find_active_products()

        assert [p.id for p in products] == [1]
        assert products[0].price == Decimal("3.50")

    def test_active_products_are_subset_of_all(self, repository, session, make_row):
        """Active lookup matches filtering find_all by the active flag."""
        for index in range(6):
            session.add(
                make_row(
                    name=f"Item {index}",
                    slug=f"item-{index}",
                    price_cents=100 + index,
                    is_active=index % 2 == 0,
                )
            )
        session.commit()

        everything = repository.find_all()
        active = repository.find_active_products()

        assert active == [p for p in everything if p.is_active]
        assert all(p.is_active for p in active)

    def test_find_by_id(self, repository, bakery_rows):
        """Should return the inactive product with its decimal price."""
        product = repository.find_by_id(2)

        assert product is not None
        assert product.id == 2
        assert product.name == "Salted Caramel"
        assert product.price == Decimal("4.20")
        assert product.is_active is False

    def test_find_by_id_not_found(self, repository, bakery_rows):
        """Should return None for a non-existent product."""
        assert repository.find_by_id(99) is None

    def test_find_by_slug(self, repository, bakery_rows):
        """Should find a product by its unique slug."""
        product = repository.find_by_slug("kremsnita")

        assert product is not None
        assert product.id == 1

    def test_find_by_slug_not_found(self, repository, bakery_rows):
        """Should return None for an unknown slug."""
        assert repository.find_by_slug("baklava") is None


class TestSave:
    """Inserts and updates through the domain model."""

    def test_save_new_product_assigns_id(self, repository, session):
        """Should insert a new product and store its price in cents."""
        saved = repository.save(
            Product(name="Rozata", slug="rozata", price=Decimal("2.75"))
        )

        assert saved.id is not None
        row = session.get(ProductTable, saved.id)
        assert row.price_cents == 275

        reloaded = repository.find_by_id(saved.id)
        assert reloaded.price == Decimal("2.75")
        assert reloaded.name == "Rozata"

    def test_save_existing_product_updates_row(self, repository, session, bakery_rows):
        """Should update the row that matches the product id."""
        product = repository.find_by_id(2)
        changed = product.model_copy(update={"price": Decimal("4.50"), "is_active": True})

        saved = repository.save(changed)

        assert saved.id == 2
        assert saved.price == Decimal("4.50")
        assert saved.is_active is True
        assert session.get(ProductTable, 2).price_cents == 450
        assert len(session.exec(select(ProductTable)).all()) == 2

    def test_save_existing_product_refreshes_updated_at(self, repository, bakery_rows):
        """Storage stamps a new modification time on every update."""
        product = repository.find_by_id(2)

        saved = repository.save(product.model_copy(update={"price": Decimal("4.50")}))

        assert saved.updated_at.replace(tzinfo=None) > datetime(2024, 3, 1, 8, 0)

    def test_save_existing_product_keeps_created_at(self, repository, bakery_rows):
        """A freshly built product with a known id keeps the stored creation time."""
        saved = repository.save(
            Product(id=1, name="Kremšnita", slug="kremsnita", price=Decimal("3.60"))
        )

        assert saved.price == Decimal("3.60")
        assert saved.created_at.replace(tzinfo=None) == datetime(2024, 3, 1, 8, 0)
        assert saved.updated_at.replace(tzinfo=None) > datetime(2024, 3, 1, 8, 0)

    def test_save_duplicate_slug_fails(self, repository, bakery_rows):
        """Slug uniqueness is enforced by storage and surfaces unchanged."""
        with pytest.raises(IntegrityError):
            repository.save(Product(name="Copy", slug="kremsnita", price=Decimal("1.00")))

    def test_save_without_price_fails_in_storage(self, repository):
        """A missing price reaches storage as NULL and is rejected there."""
        with pytest.raises(IntegrityError):
            repository.save(Product(name="Unpriced", slug="unpriced"))


class TestDeleteById:
    """Deleting by identifier."""

    def test_delete_existing(self, repository, bakery_rows):
        """Should remove the product."""
        repository.delete_by_id(1)

        assert repository.find_by_id(1) is None
        assert [p.id for p in repository.find_all()] == [2]

    def test_delete_missing_is_noop(self, repository, bakery_rows):
        """Should not raise for an unknown id."""
        repository.delete_by_id(99)

        assert len(repository.find_all()) == 2
