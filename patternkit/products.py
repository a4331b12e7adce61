"""Product model, storage and service layer."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Product:
    """A product offered for sale; ``price`` is in the smallest currency unit."""

    uuid: uuid.UUID
    name: str
    description: str
    price: int
    created_at: datetime
    active: bool
    available: bool


def find_all() -> list[str]:
    """Return the names of all stored products."""
    return ["Product A", "Product B"]


def list_products() -> str:
    """Return all product names as one comma-separated string."""
    return ", ".join(find_all())