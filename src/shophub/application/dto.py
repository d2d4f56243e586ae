"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as listed to the shopper."""

    id: str
    title: str
    category: str
    price: str  # formatted, e.g. "$15.00"
    stock: int
    available: int  # stock minus what is already in the cart
    in_stock: bool
    rating: float | None = None
    rating_count: int = 0


@dataclass(frozen=True)
class CartOutcomeDTO:
    """Output: what happened when the shopper touched the cart."""

    ok: bool
    product_id: str
    message: str
    issues: list[str]
    quantity: int  # quantity now in the cart, 0 if no line
    adjustments: list[str]


@dataclass(frozen=True)
class CartLineDTO:
    product_id: str
    title: str
    category: str
    quantity: int
    max_stock: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the full cart view with totals."""

    lines: list[CartLineDTO]
    item_count: int
    subtotal: str
    tax: str
    total: str
    adjustments: list[str]


@dataclass(frozen=True)
class StudentDTO:
    id: str
    nim: str
    name: str
    class_name: str
    points: int | None
    tier: str


@dataclass(frozen=True)
class StudentSummaryDTO:
    """Output: headline numbers for the dashboard, over every student."""

    total: int
    high_performers: int  # points above 80
    average_points: int | None  # None when no student has numeric points
