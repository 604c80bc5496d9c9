"""Persistent record of completed orders and the analytics drawn from it."""

import os
import sys
from collections import Counter

from .exceptions import FileReadException, FileWriteException
from .logger import log_info
from .order import Order
from .validation import validate_file_path

DEFAULT_STORAGE_FILE = "data/orders.txt"
GST_RATE = 0.18

_RESET = "\033[0m"
_BOLD = "\033[1m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_WHITE = "\033[37m"

_BOX = "═" * 56


def _restrict_permissions(path):
    if os.name == "nt":
        return
    try:
        os.chmod(path, 0o600)
    except OSError:
        pass


def _title(text):
    return (
        f"\n{_CYAN}{_BOLD}╔{_BOX}╗\n"
        f"{text}\n"
        f"╚{_BOX}╝{_RESET}\n\n"
    )


def _emit(text):
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


class OrderHistory:
    """All orders placed so far, with saving to and loading from a data file."""

    def __init__(self, storage_file=DEFAULT_STORAGE_FILE):
        self.storage_file = str(storage_file)
        self.orders = []

    def add_order(self, order):
        self.orders.append(order)
        log_info("OrderHistory", f"Order added: ID {order.order_id}")

    def save(self):
        """Write every order to the storage file; raise FileWriteException on failure."""
        if not validate_file_path(self.storage_file):
            raise FileWriteException(self.storage_file)
        try:
            with open(self.storage_file, "w", encoding="utf-8") as handle:
                handle.writelines(order.serialize() + "\n" for order in self.orders)
        except OSError as err:
            raise FileWriteException(self.storage_file) from err
        _restrict_permissions(self.storage_file)
        log_info("OrderHistory", f"Orders saved to {self.storage_file}")

    def load(self):
        """Replace the orders with those in the storage file.

        An invalid path or a missing file leaves the history untouched;
        malformed lines are skipped.
        """
        if not validate_file_path(self.storage_file):
            return
        try:
            handle = open(self.storage_file, encoding="utf-8")
        except OSError:
            return
        with handle:
            try:
                lines = handle.read().splitlines()
            except (OSError, UnicodeDecodeError) as err:
                raise FileReadException(self.storage_file) from err

        self.orders = []
        for line in filter(None, lines):
            try:
                self.orders.append(Order.deserialize(line))
            except (ValueError, IndexError):
                continue
        log_info("OrderHistory", f"Orders loaded from {self.storage_file}")

    def most_purchased_product(self):
        """Return the product with the most units sold, or "N/A"."""
        counts = Counter()
        for order in self.orders:
            for name, qty in order.products:
                counts[name] += qty
        best_name, best_count = "", 0
        for name, count in counts.items():
            if count > best_count:
                best_name, best_count = name, count
        return best_name or "N/A"

    def total_revenue(self):
        return sum((order.total_amount for order in self.orders), 0.0)

    def total_gst(self):
        """Return the GST contained in the GST-inclusive revenue."""
        return self.total_revenue() * (GST_RATE / (1 + GST_RATE))

    def render_history(self):
        parts = [_title("║                    ORDER HISTORY                       ║")]
        if not self.orders:
            parts.append(f"{_YELLOW}  No orders found.\n{_RESET}\n")
        else:
            parts.extend(order.render() for order in self.orders)
        return "".join(parts)

    def render_analytics(self):
        return (
            _title("║                  SALES ANALYTICS                       ║")
            + f"{_WHITE}  Most Purchased Product: "
            f"{_YELLOW}{self.most_purchased_product()}{_RESET}\n"
            + f"{_WHITE}  Total Revenue:          "
            f"{_YELLOW}₹{self.total_revenue():.2f}{_RESET}\n"
            + f"{_WHITE}  Total GST Collected:    "
            f"{_YELLOW}₹{self.total_gst():.2f}{_RESET}\n\n"
        )

    def display_history(self):
        """Write the order history to stdout and return the text written."""
        return _emit(self.render_history())

    def display_sales_analytics(self):
        """Write the sales analytics to stdout and return the text written."""
        return _emit(self.render_analytics())