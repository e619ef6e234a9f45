"""
Liveness Endpoint
"""

from flask import Blueprint

health_bp = Blueprint('health', __name__)

LIVENESS_MESSAGE = 'KivRims Backend API is running!'


@health_bp.route('/', methods=['GET'])
def liveness():
    """Plain-text liveness check; does not touch the database."""
    return LIVENESS_MESSAGE, 200, {'Content-Type': 'text/plain; charset=utf-8'}
