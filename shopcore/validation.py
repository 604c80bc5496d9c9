"""Validation and sanitisation of user-supplied input."""

_ALLOWED_PUNCTUATION = frozenset(" -_.@")

MIN_PRODUCT_ID = 1
MAX_PRODUCT_ID = 99999
DATA_DIR_PREFIX = "data/"


def _is_allowed(char):
    return (char.isascii() and char.isalnum()) or char in _ALLOWED_PUNCTUATION


def sanitize_string(text):
    """Drop every character outside the safe whitelist."""
    return "".join(char for char in text if _is_allowed(char))


def validate_numeric_input(text):
    """Return True if text is an optionally signed decimal number."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or body.count(".") > 1:
        return False
    digits = body.replace(".", "")
    return bool(digits) and all(c.isascii() and c.isdigit() for c in digits)


def validate_product_id(product_id):
    """Return True if the id lies within the accepted range."""
    return MIN_PRODUCT_ID <= product_id <= MAX_PRODUCT_ID


def validate_file_path(path):
    """Accept only paths inside the data directory with no traversal."""
    return ".." not in path and path.startswith(DATA_DIR_PREFIX)