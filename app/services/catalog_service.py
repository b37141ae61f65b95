"""
Catalog service.

Facade over the category and watch stores used by the blueprints and CLI
commands. It adds create-time normalization (default description, image
fallback) and turns a missing watch into WatchNotFoundError.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from flask import Flask, current_app

from app.exceptions import WatchNotFoundError
from app.models import Category, Watch
from app.services.category_store import CategoryStore
from app.services.image_service import DEFAULT_TIMEOUT, resolve_image_url
from app.services.watch_store import PLACEHOLDER_IMAGE, WatchStore

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = 'No description provided.'


@dataclass
class WatchListing:
    """A watch paired with its resolved category (None for orphans)."""

    watch: Watch
    category: Optional[Category]

    @property
    def category_name(self) -> str:
        return self.category.name if self.category else 'Uncategorized'

    def to_dict(self):
        data = self.watch.to_dict()
        data['category_name'] = self.category_name
        return data


class CatalogService:
    """Composes the watch and category stores for presentation code."""

    def __init__(self, watch_store: Optional[WatchStore] = None,
                 category_store: Optional[CategoryStore] = None,
                 placeholder_image: str = PLACEHOLDER_IMAGE,
                 default_description: str = DEFAULT_DESCRIPTION,
                 check_image_urls: bool = False,
                 image_check_timeout: float = DEFAULT_TIMEOUT):
        self.watches = watch_store or WatchStore(placeholder_image=placeholder_image)
        self.categories = category_store or CategoryStore()
        self.placeholder_image = placeholder_image
        self.default_description = default_description
        self.check_image_urls = check_image_urls
        self.image_check_timeout = image_check_timeout

    # Watches

    def list_watches(self) -> List[Watch]:
        return self.watches.list_all()

    def get_watch_by_id(self, watch_id: int) -> Watch:
        """
        Get a watch by id.

        Raises:
            WatchNotFoundError: If no watch has ``watch_id``
        """
        watch = self.watches.get_by_id(watch_id)
        if watch is None:
            raise WatchNotFoundError(watch_id)
        return watch

    def add_watch(self, watch: Watch) -> Watch:
        """Normalize ``watch`` and append it to the store."""
        if not watch.description or not watch.description.strip():
            watch.description = self.default_description

        if self.check_image_urls:
            watch.image_url = resolve_image_url(
                watch.image_url,
                placeholder=self.placeholder_image,
                timeout=self.image_check_timeout,
            )

        stored = self.watches.add(watch)
        logger.info(f"[CATALOG] Watch {stored.id} added: {stored.brand} {stored.model}")
        return stored

    # Categories

    def list_categories(self) -> List[Category]:
        return self.categories.list_all()

    def get_category(self, category_id: int) -> Optional[Category]:
        return self.categories.get_by_id(category_id)

    def get_category_by_name(self, name: Optional[str]) -> Optional[Category]:
        return self.categories.get_by_name(name)

    # Combined views

    def list_watches_with_categories(self, category_id: Optional[int] = None) -> List[WatchListing]:
        """
        Pair every watch (brand order) with its category.

        Args:
            category_id: Only keep watches referencing this category
        """
        listings = []
        for watch in self.watches.list_all():
            if category_id is not None and watch.category_id != category_id:
                continue
            listings.append(WatchListing(watch, self.categories.get_by_id(watch.category_id)))
        return listings

    def group_by_category(self) -> List[Tuple[Optional[Category], List[Watch]]]:
        """Group watches by category in name order; orphans come last under None."""
        watches = self.watches.list_all()
        groups = []
        known_ids = set()
        for category in self.categories.list_all():
            known_ids.add(category.id)
            members = [w for w in watches if w.category_id == category.id]
            if members:
                groups.append((category, members))

        orphans = [w for w in watches if w.category_id not in known_ids]
        if orphans:
            groups.append((None, orphans))
        return groups


def init_catalog(app: Flask) -> CatalogService:
    """Build the single catalog instance for ``app``."""
    catalog = CatalogService(
        placeholder_image=app.config.get('PLACEHOLDER_IMAGE', PLACEHOLDER_IMAGE),
        default_description=app.config.get('DEFAULT_DESCRIPTION', DEFAULT_DESCRIPTION),
        check_image_urls=app.config.get('IMAGE_CHECK_ENABLED', True),
        image_check_timeout=app.config.get('IMAGE_CHECK_TIMEOUT', DEFAULT_TIMEOUT),
    )
    if not hasattr(app, 'extensions'):
        app.extensions = {}
    app.extensions['catalog'] = catalog
    logger.info(f"[CATALOG] Catalog ready: {catalog.watches.count()} watches, "
                f"{len(catalog.categories)} categories")
    return catalog


def get_catalog() -> CatalogService:
    """Get the catalog of the current application."""
    catalog = current_app.extensions.get('catalog')
    if catalog is None:
        raise RuntimeError("Catalog not initialized.")
    return catalog
