"""
Unit Tests for configuration loading and startup validation
"""

from unittest.mock import patch

import pytest

from kivrims import create_app
from kivrims.config import Config, TestingConfig
from kivrims.errors import ConfigurationError


class MissingGatewayConfig(TestingConfig):
    MPESA_PASSKEY = None
    MPESA_CALLBACK_URL = '   '


class MissingDatabaseConfig(TestingConfig):
    SQLALCHEMY_DATABASE_URI = None


class TestConfig:

    def test_testing_config_is_complete(self):
        assert TestingConfig.missing_settings() == []

    def test_required_settings_cover_store_and_gateway(self):
        assert 'SQLALCHEMY_DATABASE_URI' in Config.REQUIRED_SETTINGS
        for name in ('MPESA_CONSUMER_KEY', 'MPESA_CONSUMER_SECRET', 'MPESA_PASSKEY',
                     'MPESA_SHORTCODE', 'MPESA_CALLBACK_URL'):
            assert name in Config.REQUIRED_SETTINGS

    def test_blank_values_count_as_missing(self):
        assert MissingGatewayConfig.missing_settings() == ['MPESA_PASSKEY', 'MPESA_CALLBACK_URL']

    def test_create_app_fails_fast_without_database(self):
        with patch.dict('kivrims.config.config', {'broken': MissingDatabaseConfig}):
            with pytest.raises(ConfigurationError) as exc_info:
                create_app('broken')

        assert exc_info.value.missing == ['SQLALCHEMY_DATABASE_URI']
        assert 'SQLALCHEMY_DATABASE_URI' in exc_info.value.message

    def test_create_app_fails_fast_without_gateway_credentials(self):
        with patch.dict('kivrims.config.config', {'broken': MissingGatewayConfig}):
            with pytest.raises(ConfigurationError) as exc_info:
                create_app('broken')

        assert exc_info.value.missing == ['MPESA_PASSKEY', 'MPESA_CALLBACK_URL']

    def test_create_app_stores_gateway_client(self, app):
        client = app.extensions['mpesa']

        assert client.shortcode == TestingConfig.MPESA_SHORTCODE
        assert client.base_url == 'https://sandbox.safaricom.co.ke'
