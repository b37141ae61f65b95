"""Watch model."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(repr=False)
class Watch:
    """
    One catalog item.

    ``id`` is owned by the watch store: whatever the caller sets is
    overwritten when the watch is added. ``category_id`` is a loose
    reference; it is not checked against the category set.
    """

    brand: str
    model: str
    price: Decimal
    description: Optional[str] = None
    image_url: Optional[str] = None
    release_year: Optional[int] = None
    is_available: bool = False
    category_id: int = 0
    id: int = 0

    def to_dict(self):
        return {
            'id': self.id,
            'brand': self.brand,
            'model': self.model,
            'price': str(self.price),
            'description': self.description,
            'image_url': self.image_url,
            'release_year': self.release_year,
            'is_available': self.is_available,
            'category_id': self.category_id,
        }

    def __repr__(self):
        return f"<Watch(id={self.id}, brand='{self.brand}', model='{self.model}')>"
