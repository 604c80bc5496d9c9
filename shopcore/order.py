"""Completed orders and the payments that settle them."""

import itertools
import sys
from dataclasses import dataclass, field
from datetime import datetime

from .logger import log_info

_RESET = "\033[0m"
_BOLD = "\033[1m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_WHITE = "\033[37m"

_BOX = "═" * 56
_RULE = "─" * 56

_order_ids = itertools.count(1)


@dataclass(frozen=True)
class Payment:
    """An amount of money paid towards an order."""

    amount: float


def _item_entry(item):
    """Turn a cart item or a (product-or-name, quantity) pair into (name, quantity)."""
    if hasattr(item, "product") and hasattr(item, "quantity"):
        product, quantity = item.product, item.quantity
    else:
        product, quantity = item
    name = product if isinstance(product, str) else product.name
    return name, quantity


@dataclass
class Order:
    """A checked-out order: what was bought, for how much and how it was paid."""

    order_id: int = 0
    total_amount: float = 0.0
    payment_method: str = ""
    order_date: str = ""
    order_time: str = ""
    products: list = field(default_factory=list)

    @classmethod
    def create(cls, items, total_amount, payment_method):
        """Create an order with the next order id, stamped with the current time.

        ``items`` holds cart items (objects with ``product`` and ``quantity``)
        or ``(product, quantity)`` pairs, where product is a Product or a name.
        """
        now = datetime.now()
        order = cls(
            order_id=next(_order_ids),
            total_amount=total_amount,
            payment_method=payment_method,
            order_date=now.strftime("%d/%m/%Y"),
            order_time=now.strftime("%H:%M:%S"),
            products=[_item_entry(item) for item in items],
        )
        log_info(
            "Order",
            f"Order created: ID {order.order_id}, Total: {total_amount:.6f}, "
            f"Payment: {payment_method}",
        )
        return order

    def serialize(self):
        """Return the order as one pipe-delimited line.

        Format: ``id|date|time|payment|total|name1:qty1,name2:qty2,...``
        """
        items = ",".join(f"{name}:{qty}" for name, qty in self.products)
        return (
            f"{self.order_id}|{self.order_date}|{self.order_time}|"
            f"{self.payment_method}|{self.total_amount:.2f}|{items}"
        )

    @classmethod
    def deserialize(cls, data):
        """Parse a line produced by serialize; raise ValueError if malformed."""
        parts = data.split("|", 5)
        if len(parts) < 5:
            raise ValueError(f"Malformed order record: {data!r}")
        order_id, order_date, order_time, payment_method, total = parts[:5]
        products_field = parts[5] if len(parts) > 5 else ""

        products = []
        for entry in filter(None, products_field.split(",")):
            name, colon, qty = entry.rpartition(":")
            if colon:
                products.append((name, int(qty)))

        return cls(
            order_id=int(order_id),
            total_amount=float(total),
            payment_method=payment_method,
            order_date=order_date,
            order_time=order_time,
            products=products,
        )

    def render(self):
        """Return the coloured receipt-style view of the order."""
        parts = [
            "\n",
            f"{_CYAN}{_BOLD}╔{_BOX}╗\n",
            f"║              ORDER #{self.order_id:04d}"
            "                                  ║\n",
            f"╚{_BOX}╝{_RESET}\n\n",
            f"{_WHITE}Date: {self.order_date}   Time: {self.order_time}{_RESET}\n\n",
            f"{_CYAN}{_BOLD}Products Ordered:\n{_RESET}",
            f"{_CYAN}{_RULE}\n{_RESET}",
        ]
        parts.extend(
            f"{_WHITE}  {name}{_YELLOW}  x{qty}{_RESET}\n" for name, qty in self.products
        )
        parts.append(f"{_CYAN}{_RULE}\n{_RESET}")
        parts.append(
            f"{_WHITE}Total Amount:  {_YELLOW}₹{self.total_amount:.2f}{_RESET}\n"
        )
        parts.append(
            f"{_WHITE}Payment Method: {_GREEN}{self.payment_method}{_RESET}\n\n"
        )
        return "".join(parts)

    def display(self):
        """Write the order to stdout and return the text written."""
        text = self.render()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text