"""Discount arithmetic used by product cards, detail pages and the cart."""

from __future__ import annotations

from typing import Any, Optional


def parse_price(value: Any) -> float:
    """The API sends decimals as strings ("19.99"); tolerate numbers and blanks."""
    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _check_discount(discount: float) -> None:
    if discount < 0 or discount >= 100:
        raise ValueError(f"Discount must be in [0, 100), got {discount}")


def original_price_from_discount(price: float, discount: Optional[float]) -> float:
    """Price before the discount was applied: price / (1 - discount/100)."""
    if not discount:
        return price
    _check_discount(discount)
    return price / (1 - discount / 100)


def price_from_original(original_price: float, discount: Optional[float]) -> float:
    """Price after applying the discount: original * (1 - discount/100)."""
    if not discount:
        return original_price
    _check_discount(discount)
    return original_price * (1 - discount / 100)


def line_total(unit_price: float, quantity: int) -> float:
    return unit_price * quantity


def format_money(amount: float) -> str:
    return f"${amount:.2f}"
