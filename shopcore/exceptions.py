"""Exception hierarchy for shopping operations."""


class ShoppingException(Exception):
    """Base class for all shopping errors, carrying a short error code."""

    def __init__(self, message, code):
        super().__init__(message)
        self.message = message
        self.code = code

    def detailed_message(self):
        """Return the message prefixed with its error code."""
        return f"[{self.code}] {self.message}"


class OutOfStockException(ShoppingException):
    """Raised when a product cannot be supplied from stock."""

    def __init__(self, product_name, available_quantity):
        super().__init__(f"Product out of stock: {product_name}", "STOCK_ERR")
        self.product_name = product_name
        self.available_quantity = available_quantity


class ProductUnavailableException(OutOfStockException):
    """Raised when a product has no stock at all."""

    def __init__(self, product_name):
        super().__init__(product_name, 0)


class InsufficientStockException(OutOfStockException):
    """Raised when the requested quantity exceeds the available stock."""

    def __init__(self, product_name, requested_quantity, available_quantity):
        super().__init__(product_name, available_quantity)
        self.requested_quantity = requested_quantity

    def detailed_message(self):
        return (
            f"[{self.code}] Insufficient stock for {self.product_name}. "
            f"Requested: {self.requested_quantity}, "
            f"Available: {self.available_quantity}"
        )


class FileWriteException(ShoppingException):
    """Raised when a data file cannot be written."""

    def __init__(self, path):
        super().__init__(f"Failed to write file: {path}", "FILE_ERR")
        self.path = path


class FileReadException(ShoppingException):
    """Raised when a data file cannot be read."""

    def __init__(self, path):
        super().__init__(f"Failed to read file: {path}", "FILE_ERR")
        self.path = path