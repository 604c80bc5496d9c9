import pytest

from shopcore.factory import ProductType, create_electronics, create_product
from shopcore.product import Electronics


def test_create_electronics_sets_fields():
    product = create_electronics(101, "Laptop", 45000.0, 10, "Dell", 2)
    assert isinstance(product, Electronics)
    assert product.product_id == 101
    assert product.name == "Laptop"
    assert product.price == 45000.0
    assert product.quantity_available == 10
    assert product.brand == "Dell"
    assert product.warranty_years == 2
    assert product.category == "Electronics"


def test_create_product_electronics_parses_warranty():
    product = create_product(
        ProductType.ELECTRONICS, 102, "Smartphone", 25000.0, 15,
        {"brand": "Samsung", "warranty": "1"},
    )
    assert isinstance(product, Electronics)
    assert product.brand == "Samsung"
    assert product.warranty_years == 1
    assert product.quantity_available == 15


def test_create_product_matches_direct_constructor():
    via_map = create_product(
        ProductType.ELECTRONICS, 5, "Tablet", 900.0, 3, {"brand": "Acme", "warranty": "4"}
    )
    direct = create_electronics(5, "Tablet", 900.0, 3, "Acme", 4)
    assert via_map.describe() == direct.describe()


@pytest.mark.parametrize(
    "attributes",
    [{}, {"brand": "Dell"}, {"warranty": "2"}],
)
def test_create_product_missing_attributes(attributes):
    with pytest.raises(ValueError, match="brand"):
        create_product(ProductType.ELECTRONICS, 1, "X", 1.0, 1, attributes)


def test_create_product_unknown_type():
    with pytest.raises(ValueError, match="Unknown product type"):
        create_product("Furniture", 1, "Chair", 10.0, 1, {})


def test_create_product_non_numeric_warranty():
    with pytest.raises(ValueError):
        create_product(ProductType.ELECTRONICS, 1, "X", 1.0, 1, {"brand": "B", "warranty": "two"})


def test_factory_propagates_negative_price():
    with pytest.raises(ValueError, match="Price cannot be negative"):
        create_electronics(1, "X", -10.0, 1, "B", 1)