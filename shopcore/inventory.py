"""The product catalogue: storage, lookup, search and display."""

import sys

from .logger import log_info, log_warning

_RESET = "\033[0m"
_BOLD = "\033[1m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_BG_BLACK = "\033[40m"

_RULE = "=" * 40


def _heading(title):
    return f"{_BG_BLACK}{_YELLOW}{_BOLD}\n{_RULE}\n          {title}\n{_RULE}\n{_RESET}"


def _footer():
    return f"{_BG_BLACK}{_YELLOW}{_BOLD}\n{_RULE}\n{_RESET}"


def _product_line(product):
    return f"{_BG_BLACK}{_CYAN}{_BG_BLACK}{_CYAN}{product.describe()}{_RESET}\n{_RESET}"


def _emit(text):
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


class Inventory:
    """Holds the products of the catalogue in insertion order."""

    def __init__(self):
        self._products = []

    def add_product(self, product):
        """Add a product; None is ignored."""
        if product is None:
            return
        self._products.append(product)
        log_info("Inventory", f"Product added: {product.name} (ID: {product.product_id})")

    def remove_product(self, product_id):
        """Remove the first product with this id; return whether one was found."""
        product = self.find_product(product_id)
        if product is None:
            log_warning("Inventory", f"Remove failed - product not found: ID {product_id}")
            return False
        self._products.remove(product)
        log_info("Inventory", f"Product removed: ID {product_id}")
        return True

    def update_price(self, product_id, new_price):
        """Set a positive price on a product; return whether it was updated."""
        product = self.find_product(product_id)
        if product is None or new_price <= 0:
            return False
        product.price = new_price
        log_info("Inventory", f"Price updated for product ID {product_id}")
        return True

    def update_stock(self, product_id, new_quantity):
        """Set a non-negative stock level; return whether it was updated."""
        product = self.find_product(product_id)
        if product is None or new_quantity < 0:
            return False
        difference = new_quantity - product.quantity_available
        if difference > 0:
            product.increment_stock(difference)
        elif difference < 0:
            product.decrement_stock(-difference)
        log_info("Inventory", f"Stock updated for product ID {product_id}")
        return True

    def find_product(self, product_id):
        """Return the first product with this id, or None."""
        return next((p for p in self._products if p.product_id == product_id), None)

    def search_by_name(self, name):
        """Return products whose names contain name, ignoring case."""
        needle = name.lower()
        return [p for p in self._products if needle in p.name.lower()]

    def filter_by_category(self, category):
        """Return products whose category equals category exactly."""
        return [p for p in self._products if p.category == category]

    def render_all(self):
        """Return the whole catalogue grouped by category, categories sorted."""
        parts = [_heading("PRODUCT CATALOG")]
        if not self._products:
            parts.append(f"{_BG_BLACK}{_CYAN}No products available in inventory.\n{_RESET}")
            return "".join(parts)

        grouped = {}
        for product in self._products:
            grouped.setdefault(product.category, []).append(product)

        for category in sorted(grouped):
            parts.append(f"{_BG_BLACK}{_YELLOW}{_BOLD}\n--- {category} ---\n{_RESET}")
            parts.extend(_product_line(p) for p in grouped[category])
        parts.append(_footer())
        return "".join(parts)

    def render_category(self, category):
        """Return the listing of a single category."""
        parts = [_heading(category)]
        matches = self.filter_by_category(category)
        if not matches:
            parts.append(
                f"{_BG_BLACK}{_CYAN}No products found in category: {category}\n{_RESET}"
            )
            return "".join(parts)
        parts.extend(_product_line(p) for p in matches)
        parts.append(_footer())
        return "".join(parts)

    def display_all_products(self):
        """Write the whole catalogue to stdout and return the text written."""
        return _emit(self.render_all())

    def display_by_category(self, category):
        """Write one category's listing to stdout and return the text written."""
        return _emit(self.render_category(category))

    def __iter__(self):
        return iter(self._products)

    def __len__(self):
        return len(self._products)