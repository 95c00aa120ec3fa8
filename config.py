import os


BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Base configuration"""

    # Flask
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Record store - one JSON file per collection
    DATA_DIR = os.environ.get('DATA_DIR', os.path.join(BASE_DIR, 'database'))

    # Frontend
    PUBLIC_DIR = os.environ.get('PUBLIC_DIR', os.path.join(BASE_DIR, 'public'))
    FRONTEND_INDEX = os.environ.get('FRONTEND_INDEX', 'localrot.html')

    # CORS
    CORS_ORIGINS = _split_origins(os.environ.get('CORS_ORIGINS', '*'))

    # Request body limit (1mb)
    MAX_CONTENT_LENGTH = 1024 * 1024

    # Server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 3000))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    # Tests pass their own temporary DATA_DIR to create_app
    DATA_DIR = None


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
