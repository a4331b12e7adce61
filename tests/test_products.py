import uuid
from datetime import datetime

from patternkit.products import Product, find_all, list_products


def test_find_all_returns_products():
    products = find_all()
    assert len(products) == 2
    assert products[0] == "Product A"
    assert products[1] == "Product B"


def test_find_all_does_not_return_empty_list():
    products = find_all()
    assert products


def test_list_products_joins_names():
    assert list_products() == "Product A, Product B"


def test_list_products_contains_every_product():
    listing = list_products()
    assert listing.split(", ") == find_all()


def test_product_holds_its_fields():
    identifier = uuid.uuid4()
    created = datetime(2024, 1, 2, 3, 4, 5)
    product = Product(
        uuid=identifier,
        name="Product A",
        description="First product",
        price=1999,
        created_at=created,
        active=True,
        available=False,
    )
    assert product.uuid == identifier
    assert product.price == 1999
    assert product.created_at == created
    assert product.active is True
    assert product.available is False