"""Tests for the cascade contract against an in-memory SQLite database."""

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session

from catalog.models import Base, Category, Photo, Product, SalePosition


@pytest.fixture
def session() -> Iterator[Session]:
    """Fresh schema per test."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


def _count(session: Session, model: type) -> int:
    return session.scalar(select(func.count()).select_from(model))


@pytest.fixture
def espresso(session: Session) -> Product:
    product = Product(
        article=12345,
        title="Espresso",
        url="espresso",
        price=45.0,
        category=Category(title="Coffee"),
        photo=Photo(title="espresso.jpg"),
    )
    product.sale_positions = [SalePosition(number=1), SalePosition(number=2)]
    session.add(product)
    session.commit()
    return product


def test_saving_product_saves_related_records(session: Session, espresso: Product):
    assert _count(session, Product) == 1
    assert _count(session, Photo) == 1
    assert _count(session, Category) == 1
    assert _count(session, SalePosition) == 2


def test_product_round_trip(session: Session, espresso: Product):
    product_id = espresso.id
    session.expunge_all()

    loaded = session.get(Product, product_id)
    assert loaded.title == "Espresso"
    assert loaded.article == 12345
    assert loaded.price == 45.0
    assert loaded.category.title == "Coffee"
    assert loaded.photo.title == "espresso.jpg"
    assert [p.number for p in loaded.sale_positions] == [1, 2]
    assert loaded == espresso
    assert hash(loaded) == hash(espresso)


def test_default_article_is_stored_as_zero(session: Session):
    product = Product(title="Latte")
    session.add(product)
    session.commit()
    session.expunge_all()

    assert session.scalars(select(Product.article)).one() == 0


def test_deleting_product_removes_photo_and_positions(session: Session, espresso: Product):
    session.delete(espresso)
    session.commit()

    assert _count(session, Product) == 0
    assert _count(session, Photo) == 0
    assert _count(session, SalePosition) == 0


def test_deleting_product_keeps_category(session: Session, espresso: Product):
    session.delete(espresso)
    session.commit()

    assert _count(session, Category) == 1


def test_replacing_sale_positions_deletes_dropped_ones(session: Session, espresso: Product):
    product_id = espresso.id
    espresso.sale_positions = [SalePosition(number=5)]
    session.commit()
    session.expunge_all()

    assert _count(session, SalePosition) == 1
    loaded = session.get(Product, product_id)
    assert [p.number for p in loaded.sale_positions] == [5]


def test_clearing_sale_positions(session: Session, espresso: Product):
    espresso.sale_positions = []
    session.commit()

    assert _count(session, SalePosition) == 0
    assert _count(session, Product) == 1


def test_unsaved_equal_products_keep_category_consistent(session: Session):
    category = Category(title="Coffee")
    first = Product(article=7, title="Espresso", category=category)
    second = Product(article=7, title="Espresso", category=category)

    second.category = None

    assert len(category.products) == 1
    assert category.products[0] is first

    session.add_all([first, second])
    session.commit()
    assert first.category_id == category.id
    assert second.category_id is None
