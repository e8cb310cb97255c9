"""Tests for currency, date and filename formatting."""

from datetime import date

import pytest

from spk_generator.formatting import (
    build_filename,
    display_value,
    format_counter,
    format_currency,
    format_document_number,
    format_long_date,
    format_rupiah,
)


@pytest.mark.parametrize("raw, expected", [
    ("5000000", "5.000.000"),
    ("1000", "1.000"),
    ("999", "999"),
    ("0", "0"),
    ("007500", "7.500"),
    ("Rp 5.000.000", "5.000.000"),
    ("5,000,000", "5.000.000"),
    ("12345678901234567890", "12.345.678.901.234.567.890"),
])
def test_format_currency_groups_thousands(raw, expected):
    assert format_currency(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "abc", "Rp ", "-"])
def test_format_currency_without_digits_is_zero(raw):
    assert format_currency(raw) == "0"


@pytest.mark.parametrize("raw", ["5000000", "1", "123456789", "Rp 42.000", "x"])
def test_format_currency_is_idempotent(raw):
    once = format_currency(raw)
    assert format_currency(once) == once


def test_format_rupiah_prefix():
    assert format_rupiah("5000000") == "Rp 5.000.000"


@pytest.mark.parametrize("counter, expected", [(1, "0001"), (7, "0007"), (123, "0123"), (12345, "12345")])
def test_format_counter_pads_to_four_digits(counter, expected):
    assert format_counter(counter) == expected


def test_format_long_date_uses_indonesian_months():
    assert format_long_date(date(2025, 12, 31)) == "31 Desember 2025"
    assert format_long_date(date(2026, 3, 5)) == "05 Maret 2026"
    assert format_long_date(date(2024, 8, 17)) == "17 Agustus 2024"


def test_format_document_number():
    assert format_document_number(7, date(2025, 12, 1)) == "0007/SPK/12/2025"
    assert format_document_number(1, date(2026, 2, 9)) == "0001/SPK/02/2026"


@pytest.mark.parametrize("counter, name, expected", [
    (7, "Budi", "SPK-0007-Budi.png"),
    (12, "Budi Santoso", "SPK-0012-Budi-Santoso.png"),
    (1, "Siti  Nur\tAini", "SPK-0001-Siti-Nur-Aini.png"),
    (3, "Budi S/O Ahmad", "SPK-0003-Budi-S-O-Ahmad.png"),
    (4, "../../etc", "SPK-0004-..-..-etc.png"),
])
def test_build_filename(counter, name, expected):
    assert build_filename(counter, name) == expected


@pytest.mark.parametrize("value, expected", [("", "-"), ("   ", "-"), (None, "-"), ("Budi", "Budi")])
def test_display_value(value, expected):
    assert display_value(value) == expected
