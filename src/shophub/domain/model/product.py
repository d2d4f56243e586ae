"""Product: a catalog entry as seen by the cart.

Products are supplied once per session by the product source and are
read-only from the cart's point of view. The stock quota is fixed for
the lifetime of the session.
"""

from __future__ import annotations

from dataclasses import dataclass

from shophub.domain.exceptions import ValidationError
from shophub.domain.model.value_objects import Money


@dataclass(frozen=True)
class Rating:
    rate: float
    count: int


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``stock`` is the maximum quantity purchasable this session.
    Everything besides ``id``, ``price`` and ``stock`` is display data.
    """

    id: str
    title: str
    price: Money
    stock: int
    category: str = ""
    description: str = ""
    image: str = ""
    rating: Rating | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if isinstance(self.stock, bool) or not isinstance(self.stock, int):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.stock).__name__}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.stock}")

    @property
    def is_out_of_stock(self) -> bool:
        """True when no new cart line may be opened, regardless of the cart."""
        return self.stock <= 0

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on the title."""
        return term.lower() in self.title.lower()
