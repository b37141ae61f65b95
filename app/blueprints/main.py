"""Main blueprint with health check endpoint."""
from flask import Blueprint, jsonify
from app.services.catalog_service import get_catalog

main_bp = Blueprint('main', __name__)


@main_bp.route('/health')
def health():
    """
    Health check endpoint that reports catalog state.

    Returns:
        200: Healthy (catalog loaded)
        500: Unhealthy (catalog missing)
    """
    try:
        catalog = get_catalog()
        return jsonify({
            'status': 'healthy',
            'catalog': 'loaded',
            'watches': catalog.watches.count(),
            'categories': len(catalog.list_categories())
        }), 200

    except Exception as e:
        return jsonify({
            'status': 'unhealthy',
            'catalog': 'unavailable',
            'error': str(e),
            'message': 'Catalog is not initialized'
        }), 500
