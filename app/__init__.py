"""Flask application factory."""
from flask import Flask, render_template, request, redirect, flash, jsonify
from flask_wtf.csrf import CSRFProtect
import os


def _wants_json() -> bool:
    """True for JSON clients and the /api endpoints."""
    return request.is_json or request.path.startswith('/api/')


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize CSRF protection
    CSRFProtect(app)

    from flask_wtf.csrf import CSRFError

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        app.logger.warning(f"CSRF Error: {e.description}")
        if _wants_json():
            return jsonify({'status': 'error', 'message': 'The session has expired. Reload the page.'}), 400
        flash('Your session has expired or the form is invalid. Please try again.', 'warning')
        return redirect(request.referrer or '/')

    # Error tracking in production
    if app.config.get('SENTRY_DSN') and app.config.get('ENV') == 'production':
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            environment=app.config.get('ENV', 'production'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Setup Prometheus metrics instrumentation
    from app.blueprints.metrics import setup_metrics_instrumentation
    setup_metrics_instrumentation(app)

    # Build the in-memory catalog once for this application
    from app.services.catalog_service import init_catalog
    init_catalog(app)

    # Register Jinja filters for formatting
    from app.utils.formatters import money, year, yes_no, image_src
    app.jinja_env.filters['money'] = money
    app.jinja_env.filters['year'] = year
    app.jinja_env.filters['yes_no'] = yes_no
    app.jinja_env.filters['image_src'] = image_src

    # Error Handlers
    from app.exceptions import CatalogError, NotFoundError

    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        """Handle custom application exceptions."""
        app.logger.warning(f"CatalogError [{error.status_code}]: {error.message}")

        if _wants_json():
            return jsonify(error.to_dict()), error.status_code

        if isinstance(error, NotFoundError):
            return render_template('errors/404.html', message=error.message), 404

        # For regular requests: flash message and redirect back
        flash(error.message, 'danger')
        return redirect(request.referrer or '/')

    @app.errorhandler(404)
    def not_found_error(error):
        if _wants_json():
            return jsonify({'status': 'error', 'message': 'Not Found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}", exc_info=True)

        if _wants_json():
            return jsonify({'status': 'error', 'message': 'Internal Server Error'}), 500

        return render_template('errors/500.html'), 500

    # Register blueprints
    from app.blueprints.main import main_bp
    from app.blueprints.watches import watches_bp
    from app.blueprints.metrics import metrics_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(watches_bp)
    app.register_blueprint(metrics_bp)

    # Register CLI commands
    from app.cli_commands import init_cli_commands
    init_cli_commands(app)

    app.logger.info(f"IMAGE_CHECK_ENABLED={app.config.get('IMAGE_CHECK_ENABLED')}")

    return app
