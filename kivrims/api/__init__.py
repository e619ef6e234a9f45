"""
API Blueprints Package
Registers all API blueprints
"""

from kivrims.api.payments import payments_bp
from kivrims.api.contact import contact_bp
from kivrims.api.health import health_bp

# Export blueprints
__all__ = [
    'payments_bp',
    'contact_bp',
    'health_bp',
    'register_blueprints'
]


def register_blueprints(app):
    """
    Register all blueprints with the Flask app

    Args:
        app: Flask application instance
    """

    url_base : str = '/api'

    app.register_blueprint(payments_bp, url_prefix=url_base)
    app.register_blueprint(contact_bp, url_prefix=url_base)
    app.register_blueprint(health_bp)
