"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_PRODUCTS_URL = "https://fakestoreapi.com/products"
DEFAULT_STUDENTS_URL = "https://mmc-clinic.com/dipa/api/mhs.php"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    products_url: str
    students_url: str
    http_timeout: float
    max_stock: int
    log_level: str

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def cart_file(self) -> Path:
        return self.data_dir / "cart.json"


def load_settings() -> Settings:
    data_dir = os.getenv("SHOPHUB_DATA_DIR")
    return Settings(
        data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR,
        products_url=os.getenv("SHOPHUB_PRODUCTS_URL", DEFAULT_PRODUCTS_URL),
        students_url=os.getenv("SHOPHUB_STUDENTS_URL", DEFAULT_STUDENTS_URL),
        http_timeout=float(os.getenv("SHOPHUB_HTTP_TIMEOUT", "10")),
        max_stock=int(os.getenv("SHOPHUB_MAX_STOCK", "20")),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
