#!/usr/bin/env python3
"""
LocalRot Server
Flask-based backend for game rentals, reservations and payments.
"""

import os
import sys
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from localrot import create_app, close_app
from localrot.validators.config_validator import validate_config, ConfigurationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    try:
        validate_config()
    except ConfigurationError as e:
        for error in e.errors:
            logger.critical(error)
        sys.exit(1)

    env = os.environ.get('FLASK_ENV', 'production')

    logger.info(f"Starting LocalRot server in {env} mode")

    app = create_app(env)

    host = app.config['HOST']
    port = app.config['PORT']
    debug = env == 'development'

    logger.info("========================================")
    logger.info(" LocalRot Server RUNNING ")
    logger.info(f" Port : {port}")
    logger.info("========================================")

    try:
        # Single-process server: the record store only serializes writes in-process
        app.run(
            host=host,
            port=port,
            debug=debug,
            use_reloader=False,
            threaded=True
        )
    finally:
        close_app(app)


if __name__ == '__main__':
    main()
