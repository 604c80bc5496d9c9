"""Construction of catalogue products by type."""

from enum import Enum

from .product import Electronics


class ProductType(Enum):
    """Kinds of product the factory can build."""

    ELECTRONICS = "Electronics"


def create_product(product_type, product_id, name, price, quantity, attributes):
    """Build a product of the given type from a mapping of extra attributes."""
    try:
        kind = ProductType(product_type)
    except ValueError:
        raise ValueError("Unknown product type") from None

    if kind is ProductType.ELECTRONICS:
        if "brand" not in attributes or "warranty" not in attributes:
            raise ValueError("Electronics requires 'brand' and 'warranty' attributes")
        warranty = int(attributes["warranty"])
        return Electronics(product_id, name, price, quantity, attributes["brand"], warranty)
    raise ValueError("Unknown product type")


def create_electronics(product_id, name, price, quantity, brand, warranty):
    """Build an Electronics product."""
    return Electronics(product_id, name, price, quantity, brand, warranty)