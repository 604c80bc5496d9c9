# shopcore

shopcore is the core of a small shop system. It provides:

- a product model (`Product`) and one product category, `Electronics`, which has a 10% discount
- an inventory that you can search, filter, reprice and restock
- orders that serialize to one line of text
- an order history that saves to a file and reports revenue and GST
- helpers that validate and sanitise input
- a thread-safe file logger
- version banners

The package depends only on the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Products and inventory

```python
from shopcore.factory import create_electronics
from shopcore.inventory import Inventory

inventory = Inventory()
inventory.add_product(create_electronics(101, "Laptop", 45000.0, 10, "Dell", 2))

laptop = inventory.find_product(101)
print(laptop.calculate_discount())        # 4500.0
print(laptop.describe())

inventory.update_stock(101, 7)            # True
inventory.update_price(101, 42000.0)      # True; the price must be positive
print([p.name for p in inventory.search_by_name("lap")])   # case-insensitive substring match
print(len(inventory.filter_by_category("Electronics")))

text = inventory.render_all()             # the catalogue grouped by category, as a string
inventory.display_all_products()          # writes the same text to stdout
```

`Inventory` supports `len()` and iteration. `find_product` returns `None` when
no product has the given id. `remove_product` returns `False` in that case.

You can also build a product from a type and a mapping of attributes:

```python
from shopcore.factory import ProductType, create_product

phone = create_product(
    ProductType.ELECTRONICS, 102, "Smartphone", 25000.0, 15,
    {"brand": "Samsung", "warranty": "1"},
)
```

`create_product` raises `ValueError` in two cases: the type is unknown, or a
required attribute is missing.

### Stock and price rules

- `Product` raises `ValueError` for a negative price or a negative quantity,
  whether at construction or when you set the price later.
- `decrement_stock` raises `InsufficientStockException` when the stock is too
  low.
- `increment_stock` raises `ValueError` for a negative quantity.
- `clone()` returns an independent copy.

The exceptions live in `shopcore.exceptions`:

- `ShoppingException` is the base class. Each instance carries a `code`, and
  `detailed_message()` returns the message with that code.
- `OutOfStockException` has two subclasses, `ProductUnavailableException` and
  `InsufficientStockException`.
- `FileWriteException` and `FileReadException` report file errors.

## Orders and history

```python
from shopcore.order import Order
from shopcore.order_history import OrderHistory

order = Order.create([("Laptop", 1), ("Jeans", 2)], 55000.0, "UPI")
line = order.serialize()     # "id|dd/mm/yyyy|hh:mm:ss|UPI|55000.00|Laptop:1,Jeans:2"
assert Order.deserialize(line).order_id == order.order_id

history = OrderHistory("data/orders.txt")
history.add_order(order)
history.save()

print(history.most_purchased_product())   # "Jeans"
print(history.total_revenue(), history.total_gst())
history.display_sales_analytics()
```

### How `Order.create` builds an order

- Each entry in `items` can be a `(name, quantity)` pair or a
  `(Product, quantity)` pair. It can also be any object with `product` and
  `quantity` attributes.
- Order ids count up from 1 within a process.
- The order is stamped with the current date and time.

`Order.deserialize` raises `ValueError` when a record is malformed.

### Saving and loading

- `OrderHistory` accepts a storage path only if it starts with `data/` and
  contains no `..`.
- `save()` raises `FileWriteException` when the path is refused or the file
  cannot be written. The `data/` directory must already exist.
- `load()` leaves the history untouched when the path is refused or the file is
  missing. It skips malformed lines.
- `total_gst()` treats the stored totals as GST-inclusive and uses an 18% rate.

`Payment` is a small frozen record that holds an `amount`.

## Validation

```python
from shopcore.validation import (
    sanitize_string, validate_numeric_input, validate_product_id, validate_file_path,
)

sanitize_string("hello<script>")        # "helloscript"
validate_numeric_input("-12.5")         # True
validate_product_id(100000)             # False; the valid range is 1..99999
validate_file_path("data/../etc")       # False
```

## Logging

Use the functions in `shopcore.logger`:

- `log_info`, `log_warning`, `log_error`, `log_debug` and `log_exception`
  append timestamped entries to `data/system.log`, relative to the working
  directory.
- `get_logger()` returns the shared `Logger`.

You can also create your own logger with `Logger(path)`. It works as a context
manager, and `clear()` empties its file. If the file cannot be opened, logging
is silently disabled.

`Inventory`, `Order` and `OrderHistory` log through the shared logger. Using
them therefore creates `data/system.log`.

## Version information

`shopcore.version` defines `VERSION`, `PROJECT_NAME` and `BUILD_TIMESTAMP`.

- `banner_text()` and `about_text()` return the coloured banners.
- `display_banner()` and `display_about()` write those banners to stdout.

## What this package does not do

- **Product categories:** Electronics is the only category available.
- **Shopping:** there is no cart, bill, coupon or payment processing. `Order`
  only records a total that you compute yourself.
- **Interfaces:** there is no interactive menu, command-line program or
  network server.

## Running the tests

```
pytest
```