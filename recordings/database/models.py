"""
Database Module for recordings - Models
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Value types returned by the repositories.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Album:
    """One row of the ``album`` table. ``id`` is None until inserted."""

    title: str
    artist: str
    price: float
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> 'Album':
        # DECIMAL columns come back as Decimal; prices are kept as float
        return cls(
            id=int(row['id']),
            title=row['title'],
            artist=row['artist'],
            price=float(row['price']),
        )

    def __str__(self):
        return f"{{{self.id} {self.title} {self.artist} {self.price:.2f}}}"
