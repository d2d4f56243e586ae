"""Persistence port for the cart snapshot.

Implementations must never raise on a bad or missing snapshot: ``load``
returns None and ``save`` logs and carries on. The cart engine calls
``save`` after every mutation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shophub.domain.model.cart import Cart


class CartStore(ABC):

    @abstractmethod
    def load(self) -> Cart | None:
        """Return the last saved cart, or None if there is nothing usable."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a full snapshot of *cart*."""
