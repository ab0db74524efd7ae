from __future__ import annotations

from datetime import date

from sellerdesk.domain.entities import Department, Seller
from sellerdesk.domain.formatting import (
    format_currency,
    format_date,
    try_parse_date,
    try_parse_float,
    try_parse_int,
)


def test_currency_uses_two_decimals_and_dot() -> None:
    assert format_currency(3000) == "3000.00"
    assert format_currency(1234.5) == "1234.50"
    assert format_currency(None) == ""


def test_date_uses_day_month_year_pattern() -> None:
    assert format_date(date(1990, 4, 21)) == "21/04/1990"
    assert try_parse_date("21/04/1990") == date(1990, 4, 21)
    assert try_parse_date("1990-04-21") is None
    assert try_parse_date("  ") is None


def test_lenient_number_parsing() -> None:
    assert try_parse_int(" 42 ") == 42
    assert try_parse_int("4x") is None
    assert try_parse_int("") is None
    assert try_parse_float("3000.50") == 3000.5
    assert try_parse_float("abc") is None


def test_seller_payload_round_trip() -> None:
    seller = Seller(
        id=7,
        name="Maria Green",
        email="maria@example.com",
        birth_date=date(1979, 12, 31),
        base_salary=3500.0,
        department=Department(2, "Electronics"),
    )

    payload = seller.to_payload()

    assert payload["birth_date"] == "1979-12-31"
    assert payload["department"] == {"id": 2, "name": "Electronics"}
    assert Seller.from_payload(payload) == seller


def test_department_without_id_payload() -> None:
    assert Department.from_payload({"name": "Books"}) == Department(None, "Books")
    assert str(Department(1, "Books")) == "Books"
