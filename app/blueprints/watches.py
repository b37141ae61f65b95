"""Watches blueprint: catalog listing, detail and create form."""
from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app, abort, jsonify, Response
from typing import Union, Tuple
import logging

from app.exceptions import WatchNotFoundError
from app.forms.watch_forms import CreateWatchForm
from app.services.catalog_service import WatchListing, get_catalog
from app.blueprints.metrics import watches_created_total

logger = logging.getLogger(__name__)

watches_bp = Blueprint('watches', __name__)


def _build_create_form(**kwargs) -> CreateWatchForm:
    """Create form with category and year choices filled in."""
    catalog = get_catalog()
    return CreateWatchForm(
        categories=catalog.list_categories(),
        min_year=current_app.config.get('MIN_RELEASE_YEAR', 1900),
        **kwargs
    )


@watches_bp.route('/')
def index() -> str:
    """List all watches with their category names, optionally filtered by category."""
    catalog = get_catalog()
    categories = catalog.list_categories()

    category_name = request.args.get('category', '').strip()
    selected_category = None
    if category_name:
        selected_category = catalog.get_category_by_name(category_name)
        if selected_category is None:
            logger.warning(f"[WATCHES] Unknown category filter: {category_name}")
            flash(f'Category "{category_name}" does not exist. Showing all watches.', 'warning')

    listings = catalog.list_watches_with_categories(
        category_id=selected_category.id if selected_category else None
    )

    return render_template('watches/index.html',
                           listings=listings,
                           categories=categories,
                           selected_category=selected_category)


@watches_bp.route('/categories')
def by_category() -> str:
    """Show watches grouped under their category."""
    catalog = get_catalog()
    return render_template('watches/categories.html', groups=catalog.group_by_category())


@watches_bp.route('/watches/<int:watch_id>')
def detail(watch_id: int) -> str:
    """Show a single watch."""
    catalog = get_catalog()
    try:
        watch = catalog.get_watch_by_id(watch_id)
    except WatchNotFoundError:
        abort(404)

    return render_template('watches/detail.html',
                           watch=watch,
                           category=catalog.get_category(watch.category_id))


@watches_bp.route('/create', methods=['GET'])
def create_form() -> str:
    """Show form to add a watch."""
    return render_template('watches/create.html', form=_build_create_form())


@watches_bp.route('/create', methods=['POST'])
def create() -> Union[Tuple[str, int], Response]:
    """Validate the create form and add the watch to the catalog."""
    form = _build_create_form()

    if not form.validate_on_submit():
        return render_template('watches/create.html', form=form), 400

    watch = get_catalog().add_watch(form.to_watch())
    watches_created_total.inc()

    flash(f'Watch "{watch.brand} {watch.model}" added', 'success')
    return redirect(url_for('watches.index'))


# JSON API

@watches_bp.route('/api/watches')
def api_list_watches() -> Response:
    """All watches (brand order) with their category names."""
    listings = get_catalog().list_watches_with_categories()
    return jsonify([listing.to_dict() for listing in listings])


@watches_bp.route('/api/watches/<int:watch_id>')
def api_get_watch(watch_id: int) -> Response:
    """Single watch; unknown ids are answered by the NotFoundError handler."""
    catalog = get_catalog()
    watch = catalog.get_watch_by_id(watch_id)
    listing = WatchListing(watch, catalog.get_category(watch.category_id))
    return jsonify(listing.to_dict())


@watches_bp.route('/api/categories')
def api_list_categories() -> Response:
    return jsonify([c.to_dict() for c in get_catalog().list_categories()])
