"""
Routes package initialization.
Registers all blueprint modules for the Roster application.
"""

import logging

from .employee_routes import main_bp
from .api_routes import api_bp

logger = logging.getLogger(__name__)


def register_blueprints(app):
    """Register all blueprints with the Flask application."""
    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp)
    logger.debug("All blueprints registered successfully")


__all__ = ['main_bp', 'api_bp', 'register_blueprints']
