"""Product catalogue, inventory, orders, order history and logging for a small shop."""

__version__ = "1.0.0"