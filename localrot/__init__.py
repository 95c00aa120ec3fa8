import logging
from flask import Flask
from flask_cors import CORS

__version__ = '1.0.0'


def create_app(config_name='default', **overrides):
    """Application factory pattern"""
    app = Flask(__name__, static_folder=None)

    # Load configuration
    from config import config
    app.config.from_object(config[config_name])
    app.config['ENV_NAME'] = config_name
    app.config.update(overrides)

    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    # Configure logging
    if not app.testing:
        logging.basicConfig(
            level=getattr(logging, app.config['LOG_LEVEL'].upper()),
            format='%(asctime)s %(levelname)s %(name)s: %(message)s'
        )

    # Initialize correlation ID middleware
    from localrot.api.middlewares.correlation_id import CorrelationIdMiddleware, init_correlation_id_logging
    CorrelationIdMiddleware(app)
    init_correlation_id_logging(app)

    # Open the record store
    from localrot.store import init_store
    store = init_store(app)
    app.logger.info(f"Record store ready at {store.data_dir}")

    # CORS setup
    origins = app.config.get('CORS_ORIGINS') or ['*']
    if origins == ['*']:
        CORS(app, origins='*', send_wildcard=True)
    else:
        CORS(app, origins=origins)

    # Register API blueprints
    from localrot.api.controllers import API_BLUEPRINTS, health_bp, home_bp
    for blueprint in API_BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix='/api')
    app.register_blueprint(health_bp)
    app.register_blueprint(home_bp)
    app.logger.info("Controllers registered successfully")

    # Register error handlers
    from localrot.utils.error_handlers import register_error_handlers
    register_error_handlers(app)

    return app


def close_app(app):
    """Release resources opened by create_app"""
    from localrot.store import EXTENSION_KEY
    store = app.extensions.pop(EXTENSION_KEY, None)
    if store is not None:
        store.close()
