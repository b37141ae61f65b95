"""Models package - exports the catalog entities."""
from app.models.category import Category
from app.models.watch import Watch

__all__ = ['Category', 'Watch']
