from flask import current_app

from kivrims.providers.mpesa_provider import MPesaClient


def get_mpesa_client() -> MPesaClient:
    """Return the Daraja client built for the current application."""
    return current_app.extensions['mpesa']


__all__ = ['MPesaClient', 'get_mpesa_client']
