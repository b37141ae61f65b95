"""In-memory store for the fixed set of watch categories."""
from typing import Iterable, List, Optional

from app.models import Category


DEFAULT_CATEGORIES = (
    Category(id=1, name='Analog',
             description='Containing internal moving parts that need regular servicing.'),
    Category(id=2, name='Digital',
             description='Contains a battery that needs replacing when depleted.'),
    Category(id=3, name='Smart',
             description='Requires to be connected to a mobile phone or requires a sim-card.'),
    Category(id=4, name='Hybrid',
             description='It combines the traditional mechanical energy source (wound mainspring) '
                         'with a quartz-based regulation system.'),
)


class CategoryStore:
    """
    Read-only collection of categories.

    The set is fixed at construction and never mutated afterwards, so
    lookups are safe from any request thread.
    """

    def __init__(self, categories: Optional[Iterable[Category]] = None):
        if categories is None:
            categories = DEFAULT_CATEGORIES
        self._categories = tuple(categories)

    def list_all(self) -> List[Category]:
        """Return every category ordered by name."""
        return sorted(self._categories, key=lambda c: c.name)

    def get_by_id(self, category_id: int) -> Optional[Category]:
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def get_by_name(self, name: Optional[str]) -> Optional[Category]:
        """Case-insensitive exact match on the category name."""
        if not name:
            return None
        wanted = name.casefold()
        for category in self._categories:
            if category.name.casefold() == wanted:
                return category
        return None

    def __len__(self):
        return len(self._categories)
