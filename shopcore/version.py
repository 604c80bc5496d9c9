"""Project metadata and version banners."""

import sys
from datetime import datetime

VERSION = "1.0.0"
PROJECT_NAME = "Shopping Management System"
AUTHOR = "Shopping Management System Team"


def _build_timestamp():
    now = datetime.now()
    return f"{now:%b} {now.day:2d} {now:%Y} {now:%H:%M:%S}"


BUILD_TIMESTAMP = _build_timestamp()

_RESET = "\033[0m"
_BOLD = "\033[1m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_BG_BLACK = "\033[40m"

_RULE = "=" * 60 + "\n"

_ART = (
    "   ____  _                       _\n"
    "  / ___|| |__   ___  _ __  _ __ (_)_ __   __ _\n"
    "  \\___ \\| '_ \\ / _ \\| '_ \\| '_ \\| | '_ \\ / _` |\n"
    "   ___) | | | | (_) | |_) | |_) | | | | | (_| |\n"
    "  |____/|_| |_|\\___/| .__/| .__/|_|_| |_|\\__, |\n"
    "                    |_|   |_|             |___/\n"
)


def _details():
    return (
        f"  Version   : {VERSION}\n"
        f"  Author    : {AUTHOR}\n"
        f"  Built     : {BUILD_TIMESTAMP}\n"
    )


def banner_text():
    """Return the coloured start-up banner."""
    return (
        f"{_BG_BLACK}{_CYAN}{_BOLD}{_RULE}{_ART}{_RESET}"
        f"{_BG_BLACK}{_YELLOW}{_BOLD}{_RULE}  {PROJECT_NAME}\n"
        f"{_RESET}{_BG_BLACK}{_GREEN}{_details()}"
        f"{_CYAN}{_RULE}{_RESET}\n"
    )


def about_text():
    """Return the compact version block used by the About screen."""
    return (
        f"{_YELLOW}{_BOLD}{_RULE}  About {PROJECT_NAME}\n{_RULE}{_RESET}"
        f"{_GREEN}{_details()}"
        f"{_CYAN}{_RULE}{_RESET}"
    )


def _emit(text):
    stream = sys.stdout
    stream.write(text)
    stream.flush()
    return len(text)


def display_banner():
    """Write the start-up banner to standard output; return characters written."""
    return _emit(banner_text())


def display_about():
    """Write the About block to standard output; return characters written."""
    return _emit(about_text())