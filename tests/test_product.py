import pytest

from shopcore.exceptions import InsufficientStockException
from shopcore.product import Electronics, Product


def test_electronics_display_completeness(capsys):
    product = Electronics(101, "Laptop", 45000.0, 5, "Dell", 2)
    product.display()
    output = capsys.readouterr().out
    assert "101" in output
    assert "Laptop" in output
    assert "Rs." in output
    assert "45000" in output
    assert "5" in output
    assert "Dell" in output


def test_describe_exact_line():
    product = Electronics(101, "Laptop", 45000.0, 5, "Dell", 2)
    assert product.describe() == (
        "ID: 101 | Name: Laptop | Price: Rs. 45000.00 | Brand: Dell | "
        "Warranty: 2 year(s) | Available: 5"
    )


def test_electronics_discount_and_category():
    electronics = Electronics(101, "Laptop", 1000.0, 5, "Dell", 2)
    assert electronics.calculate_discount() == 100.0
    assert electronics.category == "Electronics"


def test_inventory_management():
    product = Electronics(101, "Laptop", 45000.0, 5, "Dell", 2)
    assert product.is_available(5)
    assert not product.is_available(6)

    product.decrement_stock(2)
    assert product.quantity_available == 3
    assert product.is_available(3)
    assert not product.is_available(4)

    product.increment_stock(3)
    assert product.quantity_available == 6
    assert product.is_available(6)


def test_default_quantities_are_one():
    product = Electronics(1, "Mouse", 10.0, 1, "Acme", 1)
    assert product.is_available()
    product.decrement_stock()
    assert product.quantity_available == 0
    assert not product.is_available()
    product.increment_stock()
    assert product.quantity_available == 1


def test_clone_copies_attributes():
    original = Electronics(101, "Laptop", 45000.0, 5, "Dell", 2)
    cloned = original.clone()
    assert cloned.product_id == 101
    assert cloned.name == "Laptop"
    assert cloned.price == 45000.0
    assert cloned.quantity_available == 5
    assert cloned.category == "Electronics"
    assert cloned.brand == "Dell"
    assert cloned.warranty_years == 2


def test_clone_is_independent():
    original = Electronics(101, "Laptop", 45000.0, 5, "Dell", 2)
    cloned = original.clone()
    cloned.decrement_stock(5)
    cloned.price = 1.0
    assert original.quantity_available == 5
    assert original.price == 45000.0


def test_negative_price_rejected():
    with pytest.raises(ValueError, match="Price cannot be negative"):
        Electronics(1, "X", -1.0, 1, "B", 1)


def test_negative_quantity_rejected():
    with pytest.raises(ValueError, match="Quantity cannot be negative"):
        Electronics(1, "X", 1.0, -1, "B", 1)


def test_set_negative_price_rejected():
    product = Electronics(1, "X", 10.0, 1, "B", 1)
    with pytest.raises(ValueError):
        product.price = -5.0
    assert product.price == 10.0


def test_decrement_negative_rejected():
    product = Electronics(1, "X", 10.0, 3, "B", 1)
    with pytest.raises(ValueError):
        product.decrement_stock(-1)
    assert product.quantity_available == 3


def test_decrement_beyond_stock_rejected():
    product = Electronics(1, "X", 10.0, 3, "B", 1)
    with pytest.raises(InsufficientStockException) as info:
        product.decrement_stock(4)
    assert info.value.requested_quantity == 4
    assert info.value.available_quantity == 3
    assert product.quantity_available == 3


def test_increment_negative_rejected():
    product = Electronics(1, "X", 10.0, 3, "B", 1)
    with pytest.raises(ValueError):
        product.increment_stock(-2)
    assert product.quantity_available == 3


def test_product_is_abstract():
    with pytest.raises(TypeError):
        Product(1, "X", 1.0, 1)