"""
Flask application factory for the Roster demo.

The page shows two employee forms whose department selectors are backed by
different selection adapters, plus the table of employees of the current
session.
"""

import os
import logging
from cachelib import FileSystemCache
from flask import Flask, request, jsonify, flash, redirect, url_for
from flask_wtf.csrf import CSRFProtect, CSRFError
from flask_session import Session
from config import Config

logger = logging.getLogger(__name__)

csrf = CSRFProtect()
sess = Session()


def _configure_logging(app):
    """Apply LOG_LEVEL to the root logger and the Flask app logger."""
    log_level_name = str(app.config.get('LOG_LEVEL') or os.getenv('LOG_LEVEL', 'ERROR')).upper()
    log_level = getattr(logging, log_level_name, logging.ERROR)
    if not logging.getLogger().handlers:
        logging.basicConfig(format='[%(asctime)s] %(levelname)s - %(name)s - %(message)s')
    logging.getLogger().setLevel(log_level)
    app.logger.setLevel(log_level)


def _configure_session_store(app):
    """Back Flask-Session's cachelib interface with a FileSystemCache in SESSION_DIR."""
    if app.config.get('SESSION_TYPE') != 'cachelib' or app.config.get('SESSION_CACHELIB') is not None:
        return
    session_dir = app.config['SESSION_DIR']
    os.makedirs(session_dir, exist_ok=True)
    app.config['SESSION_CACHELIB'] = FileSystemCache(
        session_dir, threshold=app.config.get('SESSION_CACHE_THRESHOLD', 500)
    )


def _init_directory_registry(app):
    from .domain.directory import Directory
    from .infrastructure.department_sources import build_department_source
    from .sessions import DirectoryRegistry, REGISTRY_EXTENSION_KEY

    source = build_department_source(app.config)
    seed_employees = bool(app.config.get('SEED_EMPLOYEES', True))

    # Fail at startup rather than on the first request
    Directory.from_source(source, seed_employees=False)

    def factory():
        return Directory.from_source(source, seed_employees=seed_employees)

    app.extensions[REGISTRY_EXTENSION_KEY] = DirectoryRegistry(
        factory, ttl_seconds=app.config.get('DIRECTORY_SESSION_TTL', 3600)
    )
    app.logger.info("Department source: %s", type(source).__name__)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    _configure_logging(app)

    app.secret_key = app.config['SECRET_KEY']
    if not app.secret_key:
        raise RuntimeError("SECRET_KEY must be set in environment or config")

    _configure_session_store(app)

    csrf.init_app(app)
    sess.init_app(app)

    _init_directory_registry(app)

    @app.context_processor
    def inject_site_name():
        """Make site name available in all templates."""
        return dict(site_name=app.config.get('SITE_NAME', 'Roster'))

    @app.errorhandler(CSRFError)
    def handle_csrf_error(e):
        """Handle CSRF errors with user-friendly messages."""
        if request.path.startswith('/api/') or request.is_json:
            from flask_wtf.csrf import generate_csrf
            return jsonify({
                'error': 'CSRF token missing or invalid',
                'message': 'Please refresh the page and try again.',
                'csrf_token': generate_csrf()
            }), 400
        flash('Security token expired. Please try again.', 'error')
        return redirect(url_for('main.index'))

    from .routes import register_blueprints
    register_blueprints(app)

    return app
