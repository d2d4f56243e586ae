"""JSON-file-backed implementation of CartStore."""

from __future__ import annotations

import json
from pathlib import Path

from shophub.domain.exceptions import SnapshotError
from shophub.domain.model.cart import Cart
from shophub.domain.repository.cart_store import CartStore
from shophub.infrastructure.logging import get_logger
from shophub.infrastructure.persistence.cart_snapshot import (
    from_snapshot,
    to_snapshot,
)

logger = get_logger(__name__)


class JsonCartStore(CartStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartStore interface --------------------------------------------------

    def load(self) -> Cart | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return from_snapshot(raw)
        except (OSError, ValueError, SnapshotError) as exc:
            logger.warning("Ignoring unreadable cart snapshot %s: %s", self._file_path, exc)
            return None

    def save(self, cart: Cart) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(to_snapshot(cart), indent=2) + "\n", encoding="utf-8"
            )
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not save cart snapshot %s: %s", self._file_path, exc)
