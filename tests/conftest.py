import pytest
from decimal import Decimal

from app import create_app
from app.models import Watch
from app.services.catalog_service import CatalogService, get_catalog
from app.services.category_store import CategoryStore
from app.services.watch_store import WatchStore


@pytest.fixture(scope='function')
def app():
    """Create application instance for testing (fresh catalog per test)."""
    app = create_app('config.TestConfig')
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Create CLI runner."""
    return app.test_cli_runner()


@pytest.fixture(scope='function')
def app_catalog(app):
    """The catalog instance owned by the test app."""
    with app.app_context():
        return get_catalog()


@pytest.fixture(scope='function')
def watch_store():
    """Watch store with the seed watches."""
    return WatchStore()


@pytest.fixture(scope='function')
def category_store():
    """Category store with the default categories."""
    return CategoryStore()


@pytest.fixture(scope='function')
def catalog(watch_store, category_store):
    """Catalog service without the network image check."""
    return CatalogService(watch_store=watch_store, category_store=category_store)


@pytest.fixture
def omega():
    """Unsaved watch used by the add scenarios."""
    return Watch(
        brand='Omega',
        model='Seamaster',
        price=Decimal('5000'),
        image_url='',
        release_year=2024,
        is_available=True,
        category_id=1
    )
