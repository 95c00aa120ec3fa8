"""
Controllers package initialization
"""

# Import all blueprints for registration
from localrot.api.controllers.auth import auth_bp
from localrot.api.controllers.reservations import reservations_bp
from localrot.api.controllers.payments import payments_bp
from localrot.api.controllers.stats import stats_bp
from localrot.api.controllers.health import health_bp
from localrot.api.controllers.home import home_bp

# Blueprints mounted under /api
API_BLUEPRINTS = [auth_bp, reservations_bp, payments_bp, stats_bp]

__all__ = ['auth_bp', 'reservations_bp', 'payments_bp', 'stats_bp', 'health_bp', 'home_bp',
           'API_BLUEPRINTS']
