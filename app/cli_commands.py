"""
Flask CLI commands for inspecting the catalog from a terminal.

Commands:
- flask list-watches: List every watch by id
- flask show-watch ID: Show a single watch
"""

import click
from app.exceptions import WatchNotFoundError
from app.services.catalog_service import get_catalog
from app.utils.formatters import year, yes_no


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('list-watches')
    def list_watches():
        """List all watches ordered by id, brand and model."""
        watches = sorted(
            get_catalog().list_watches(),
            key=lambda w: (w.id, w.brand, w.model)
        )
        for watch in watches:
            click.echo(f'ID: {watch.id} Brand: {watch.brand}, Model: {watch.model}')
        click.echo(f'Total watches: {len(watches)}')

    @app.cli.command('show-watch')
    @click.argument('watch_id', type=int)
    def show_watch(watch_id):
        """Show brand, model, price, year and availability of one watch."""
        try:
            watch = get_catalog().get_watch_by_id(watch_id)
        except WatchNotFoundError as e:
            click.echo(click.style(f'❌ {e.message}', fg='red'), err=True)
            raise click.exceptions.Exit(1)

        click.echo(f'Brand: {watch.brand}')
        click.echo(f'Model: {watch.model}')
        click.echo(f'Price: {watch.price}')
        click.echo(f'Year: {year(watch.release_year)}')
        click.echo(f'Is available: {yes_no(watch.is_available)}')
