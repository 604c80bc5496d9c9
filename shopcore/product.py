"""Catalogue products and their category-specific behaviour."""

import copy
import sys
from abc import ABC, abstractmethod

from .exceptions import InsufficientStockException

_RESET = "\033[0m"
_CYAN = "\033[36m"
_BG_BLACK = "\033[40m"


class Product(ABC):
    """A product in the catalogue with a price and a stock level.

    Subclasses set ``category`` and define their own discount.
    """

    category = ""

    def __init__(self, product_id, name, price, quantity_available):
        if price < 0:
            raise ValueError("Price cannot be negative")
        if quantity_available < 0:
            raise ValueError("Quantity cannot be negative")
        self.product_id = product_id
        self.name = name
        self._price = price
        self.quantity_available = quantity_available

    @property
    def price(self):
        return self._price

    @price.setter
    def price(self, value):
        if value < 0:
            raise ValueError("Price cannot be negative")
        self._price = value

    def decrement_stock(self, qty=1):
        """Take qty units out of stock."""
        if qty < 0:
            raise ValueError("Quantity to decrement cannot be negative")
        if self.quantity_available < qty:
            raise InsufficientStockException(self.name, qty, self.quantity_available)
        self.quantity_available -= qty

    def increment_stock(self, qty=1):
        """Put qty units back into stock."""
        if qty < 0:
            raise ValueError("Quantity to increment cannot be negative")
        self.quantity_available += qty

    def is_available(self, qty=1):
        """Return True if at least qty units are in stock."""
        return self.quantity_available >= qty

    def describe(self):
        """Return a one-line description of the product."""
        return (
            f"ID: {self.product_id} | Name: {self.name} | "
            f"Price: Rs. {self.price:.2f} | Available: {self.quantity_available}"
        )

    def display(self):
        """Write the coloured one-line description to stdout and return it."""
        line = f"{_BG_BLACK}{_CYAN}{self.describe()}{_RESET}\n"
        sys.stdout.write(line)
        sys.stdout.flush()
        return line

    @abstractmethod
    def calculate_discount(self):
        """Return the discount granted on one unit of this product."""

    def clone(self):
        """Return an independent copy of this product."""
        return copy.copy(self)

    def __repr__(self):
        return (
            f"{type(self).__name__}(product_id={self.product_id!r}, "
            f"name={self.name!r}, price={self.price!r}, "
            f"quantity_available={self.quantity_available!r})"
        )


class Electronics(Product):
    """An electronic item with a brand and a warranty; 10% discount."""

    category = "Electronics"
    DISCOUNT_RATE = 0.10

    def __init__(self, product_id, name, price, quantity_available, brand, warranty_years):
        super().__init__(product_id, name, price, quantity_available)
        self.brand = brand
        self.warranty_years = warranty_years

    def describe(self):
        return (
            f"ID: {self.product_id} | Name: {self.name} | "
            f"Price: Rs. {self.price:.2f} | Brand: {self.brand} | "
            f"Warranty: {self.warranty_years} year(s) | "
            f"Available: {self.quantity_available}"
        )

    def calculate_discount(self):
        return self.price * self.DISCOUNT_RATE

    def clone(self):
        return Electronics(
            self.product_id,
            self.name,
            self.price,
            self.quantity_available,
            self.brand,
            self.warranty_years,
        )