"""
Configuration Validator
Validates environment variables at application startup
Fails fast if any configuration value is invalid
"""

import os


def is_valid_port(port: str) -> bool:
    """Validates a port number"""
    try:
        port_num = int(port)
        return 0 < port_num <= 65535
    except (ValueError, TypeError):
        return False


def is_valid_log_level(level: str) -> bool:
    """Validates log level"""
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    return level.upper() in valid_levels


def is_valid_environment(env: str) -> bool:
    """Validates FLASK_ENV"""
    valid_envs = ['development', 'production', 'testing', 'default']
    return env.lower() in valid_envs


# Configuration validation rules
VALIDATION_RULES = {
    'FLASK_ENV': {
        'validator': is_valid_environment,
        'error_message': 'FLASK_ENV must be one of: development, production, testing, default',
    },
    'PORT': {
        'validator': is_valid_port,
        'error_message': 'PORT must be a valid port number',
    },
    'LOG_LEVEL': {
        'validator': is_valid_log_level,
        'error_message': 'LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL',
    },
    'DATA_DIR': {
        'validator': lambda v: len(v.strip()) > 0,
        'error_message': 'DATA_DIR must be a non-empty path',
    },
}


class ConfigurationError(Exception):
    """Raised when environment configuration is invalid"""

    def __init__(self, errors):
        self.errors = errors
        super().__init__('Invalid configuration: ' + '; '.join(errors))


def validate_config(environ=None):
    """
    Validate the optional settings that are present in the environment.

    Raises ConfigurationError listing every invalid value.
    """
    environ = os.environ if environ is None else environ
    errors = []

    for key, rule in VALIDATION_RULES.items():
        value = environ.get(key)
        if value is None:
            continue
        if not rule['validator'](value):
            errors.append(f"{key}: {rule['error_message']} (got {value!r})")

    if errors:
        raise ConfigurationError(errors)
