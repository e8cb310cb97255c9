"""Text formatting helpers for SPK documents.

All output follows Indonesian conventions: ``.`` as the thousands separator
and Indonesian month names in long dates.
"""

import re
from datetime import date

# Indonesian month names, January first
MONTH_NAMES_ID = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]

CURRENCY_PREFIX = "Rp "
EMPTY_VALUE = "-"

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE_RUN = re.compile(r"\s+")
_PATH_SEPARATORS = re.compile(r"[\\/]")


def format_currency(raw: str | None) -> str:
    """Format a salary input with Indonesian thousands grouping.

    Non-digit characters are stripped first, so already formatted input
    ("5.000.000", "Rp 5,000,000") yields the same result as plain digits.

    Args:
        raw: Value as typed by the user.

    Returns:
        Grouped digits such as ``"5.000.000"``, or ``"0"`` when no digits remain.
    """
    digits = _NON_DIGITS.sub("", raw or "")
    if not digits:
        return "0"
    return f"{int(digits):,}".replace(",", ".")


def format_rupiah(raw: str | None) -> str:
    """Format a salary input for display, e.g. ``"Rp 5.000.000"``."""
    return f"{CURRENCY_PREFIX}{format_currency(raw)}"


def format_counter(counter: int) -> str:
    """Zero-pad a document counter to four digits."""
    return str(counter).zfill(4)


def format_long_date(value: date) -> str:
    """Format a date as ``dd MMMM yyyy`` with an Indonesian month name."""
    return f"{value.day:02d} {MONTH_NAMES_ID[value.month - 1]} {value.year}"


def format_document_number(counter: int, today: date) -> str:
    """Build the document number shown under the title.

    Example:
        >>> format_document_number(7, date(2025, 12, 1))
        '0007/SPK/12/2025'
    """
    return f"{format_counter(counter)}/SPK/{today.month:02d}/{today.year}"


def build_filename(counter: int, name: str) -> str:
    """Build the download filename ``SPK-<counter>-<name>.png``.

    Whitespace runs in the worker name become single dashes, and path
    separators become dashes so the name cannot point into a directory.
    """
    slug = _PATH_SEPARATORS.sub('-', _WHITESPACE_RUN.sub('-', name))
    return f"SPK-{format_counter(counter)}-{slug}.png"


def display_value(value: str | None) -> str:
    """Return the value, or ``"-"`` when it is blank."""
    if value is None or not str(value).strip():
        return EMPTY_VALUE
    return str(value)
