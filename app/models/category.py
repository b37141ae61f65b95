"""Category model."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, repr=False)
class Category:
    """Watch category (Analog, Digital, ...). Immutable once constructed."""

    id: int
    name: str
    description: Optional[str] = None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
        }

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
