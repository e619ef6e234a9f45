"""
Pytest Configuration and Fixtures
"""
import json
from unittest.mock import Mock

import pytest

from kivrims import create_app
from kivrims.extensions import db as _db


@pytest.fixture(scope='function')
def app():
    """Create application for testing with a fresh in-memory database"""
    app = create_app('testing')

    # Establish application context
    ctx = app.app_context()
    ctx.push()
    _db.create_all()

    yield app

    _db.session.remove()
    _db.drop_all()
    ctx.pop()


@pytest.fixture(scope='function')
def db(app):
    return _db


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def mpesa_client(app):
    return app.extensions['mpesa']


@pytest.fixture(scope='function')
def mpesa_session(mpesa_client):
    """Replace the Daraja HTTP session so no request leaves the process."""
    session = Mock()
    mpesa_client._session = session
    return session


@pytest.fixture
def http_response():
    """Factory for mock requests.Response objects."""

    def _make(json_data, status_code=200):
        resp = Mock()
        resp.ok = 200 <= status_code < 400
        resp.status_code = status_code
        resp.json.return_value = json_data
        resp.text = json.dumps(json_data)
        resp.headers = {'Content-Type': 'application/json'}
        return resp

    return _make


@pytest.fixture
def token_response(http_response):
    """Valid Daraja OAuth token response"""
    return http_response({'access_token': 'daraja_tok_abc', 'expires_in': '3599'})


@pytest.fixture
def stk_success_body():
    return {
        'MerchantRequestID': '29115-34620561-1',
        'CheckoutRequestID': 'ws_CO_191220191020363925',
        'ResponseCode': '0',
        'ResponseDescription': 'Success. Request accepted for processing',
        'CustomerMessage': 'Success. Request accepted for processing'
    }
