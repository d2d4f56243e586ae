"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings are re-read on every call so tests can point the CLI at a
temporary data directory through the environment.
"""

from __future__ import annotations

from shophub.infrastructure.config import load_settings
from shophub.infrastructure.http.product_source import HttpProductSource
from shophub.infrastructure.http.student_proxy import ProxyStudentDirectory
from shophub.infrastructure.persistence.json_cart_store import JsonCartStore
from shophub.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(load_settings().products_file)


def cart_store() -> JsonCartStore:
    return JsonCartStore(load_settings().cart_file)


def product_source() -> HttpProductSource:
    settings = load_settings()
    return HttpProductSource(
        settings.products_url,
        timeout=settings.http_timeout,
        max_stock=settings.max_stock,
    )


def student_directory() -> ProxyStudentDirectory:
    settings = load_settings()
    return ProxyStudentDirectory(settings.students_url, timeout=settings.http_timeout)
