"""
Unit tests for the catalog service.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from app.exceptions import NotFoundError, WatchNotFoundError
from app.models import Watch
from app.services.catalog_service import CatalogService, DEFAULT_DESCRIPTION


class TestGetWatch:
    """Tests for CatalogService.get_watch_by_id."""

    def test_known_id(self, catalog):
        watch = catalog.get_watch_by_id(1)

        assert watch.brand == 'Nomos'
        assert watch.model == 'Club Sport neomatik'

    def test_unknown_id_raises_not_found(self, catalog):
        with pytest.raises(WatchNotFoundError) as exc_info:
            catalog.get_watch_by_id(999)

        assert exc_info.value.watch_id == 999
        assert '999' in exc_info.value.message
        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value, NotFoundError)

    def test_added_watch_round_trips(self, catalog, omega):
        stored = catalog.add_watch(omega)
        fetched = catalog.get_watch_by_id(stored.id)

        assert fetched.brand == 'Omega'
        assert fetched.model == 'Seamaster'
        assert fetched.price == Decimal('5000')
        assert fetched.release_year == 2024
        assert fetched.is_available is True
        assert fetched.category_id == 1


class TestAddWatch:
    """Tests for CatalogService.add_watch normalization."""

    @pytest.mark.parametrize('description', [None, '', '   '])
    def test_blank_description_gets_default(self, catalog, omega, description):
        omega.description = description

        stored = catalog.add_watch(omega)

        assert stored.description == DEFAULT_DESCRIPTION
        assert stored.description == 'No description provided.'

    def test_description_kept(self, catalog, omega):
        omega.description = 'Diver watch.'

        assert catalog.add_watch(omega).description == 'Diver watch.'

    def test_image_check_disabled_keeps_url(self, catalog, omega):
        omega.image_url = 'https://unreachable.invalid/omega.png'

        with patch('app.services.image_service.requests.head') as mock_head:
            stored = catalog.add_watch(omega)

        mock_head.assert_not_called()
        assert stored.image_url == 'https://unreachable.invalid/omega.png'

    def test_unreachable_image_replaced_when_check_enabled(self, watch_store, category_store, omega):
        catalog = CatalogService(watch_store, category_store, check_image_urls=True,
                                 image_check_timeout=2)
        omega.image_url = 'https://unreachable.invalid/omega.png'

        with patch('app.services.catalog_service.resolve_image_url',
                   return_value='images/no-picture-Square210.png') as mock_resolve:
            stored = catalog.add_watch(omega)

        mock_resolve.assert_called_once_with(
            'https://unreachable.invalid/omega.png',
            placeholder='images/no-picture-Square210.png',
            timeout=2
        )
        assert stored.image_url == 'images/no-picture-Square210.png'

    def test_add_delegates_id_assignment(self, catalog, omega):
        assert catalog.add_watch(omega).id == 11
        assert len(catalog.list_watches()) == 11


class TestCombinedViews:
    """Tests for listings joined with categories."""

    def test_listing_resolves_category_names(self, catalog):
        listings = catalog.list_watches_with_categories()
        by_brand = {l.watch.brand: l.category_name for l in listings}

        assert len(listings) == 10
        assert by_brand['Casio'] == 'Digital'
        assert by_brand['Garmin'] == 'Smart'
        assert by_brand['Nomos'] == 'Analog'

    def test_listing_in_brand_order(self, catalog):
        brands = [l.watch.brand for l in catalog.list_watches_with_categories()]

        assert brands == sorted(brands)

    def test_listing_filtered_by_category(self, catalog):
        listings = catalog.list_watches_with_categories(category_id=3)

        assert {l.watch.brand for l in listings} == {'Samsung', 'Garmin'}

    def test_orphan_category_is_tolerated(self, catalog):
        catalog.add_watch(Watch(brand='Omega', model='Seamaster', price=Decimal('5000'), category_id=99))
        listing = [l for l in catalog.list_watches_with_categories() if l.watch.brand == 'Omega'][0]

        assert listing.category is None
        assert listing.category_name == 'Uncategorized'
        assert listing.to_dict()['category_name'] == 'Uncategorized'

    def test_group_by_category(self, catalog):
        groups = catalog.group_by_category()
        names = [category.name for category, _ in groups]

        # Hybrid has no seeded watches and is left out
        assert names == ['Analog', 'Digital', 'Smart']
        assert sum(len(watches) for _, watches in groups) == 10

    def test_group_orphans_last(self, catalog):
        catalog.add_watch(Watch(brand='Omega', model='Seamaster', price=Decimal('5000'), category_id=99))
        category, watches = catalog.group_by_category()[-1]

        assert category is None
        assert [w.brand for w in watches] == ['Omega']

    def test_category_lookups(self, catalog):
        assert catalog.get_category(4).name == 'Hybrid'
        assert catalog.get_category_by_name('HYBRID').id == 4
        assert catalog.get_category_by_name('nonexistent') is None
        assert [c.name for c in catalog.list_categories()] == ['Analog', 'Digital', 'Hybrid', 'Smart']
