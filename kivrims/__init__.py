from flask import Flask, jsonify
from flask_cors import CORS
from sqlalchemy.exc import SQLAlchemyError

from kivrims.config import config
from kivrims.errors import AppError, ConfigurationError
from kivrims.extensions import db
from kivrims.providers import MPesaClient
from kivrims.utils.logger import RequestLogger, configure_app_logging, get_logger

logger = get_logger(__name__)


def create_app(config_name='development'):
    """
    Application factory pattern

    Initialization order: configuration -> store (tables created) ->
    Daraja client -> routes. Raises ConfigurationError before touching anything else
    when a required setting is missing.
    """
    config_class = config.get(config_name, config['default'])

    missing = config_class.missing_settings()
    if missing:
        raise ConfigurationError(missing)

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config_class)

    # Logging
    configure_app_logging(app)
    RequestLogger(app)

    # Initialize extensions
    db.init_app(app)
    init_store(app)
    CORS(app)

    # Daraja client shared by all requests (read-only configuration)
    app.extensions['mpesa'] = MPesaClient.from_app_config(app.config)

    # Register blueprints
    from kivrims.api import register_blueprints
    register_blueprints(app)

    # Error handlers
    register_error_handlers(app)

    return app


def init_store(app):
    """Create missing tables; an unreachable store is logged, not fatal."""
    import kivrims.models  # noqa: F401  registers tables on db.metadata

    with app.app_context():
        try:
            db.create_all()
            logger.info('Database connected')
        except SQLAlchemyError as e:
            logger.error(f'Database error: {str(e)}')


def register_error_handlers(app):
    """Register error handlers"""

    @app.errorhandler(AppError)
    def app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'message': 'Bad request', 'error': str(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Not found', 'error': str(error)}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed', 'error': str(error)}), 405

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'message': 'Internal server error', 'error': str(error)}), 500
