import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')
    PORT = int(os.getenv('PORT', 5000))
    LOG_DIR = os.getenv('LOG_DIR')

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # M-Pesa (Daraja) Configuration
    MPESA_CONSUMER_KEY = os.getenv('MPESA_CONSUMER_KEY')
    MPESA_CONSUMER_SECRET = os.getenv('MPESA_CONSUMER_SECRET')
    MPESA_PASSKEY = os.getenv('MPESA_PASSKEY')
    MPESA_SHORTCODE = os.getenv('MPESA_SHORTCODE')
    MPESA_CALLBACK_URL = os.getenv('MPESA_CALLBACK_URL')
    MPESA_ENVIRONMENT = os.getenv('MPESA_ENVIRONMENT', 'sandbox')
    MPESA_TIMEOUT = float(os.getenv('MPESA_TIMEOUT', 30))

    # Settings the process refuses to start without
    REQUIRED_SETTINGS = (
        'SQLALCHEMY_DATABASE_URI',
        'MPESA_CONSUMER_KEY',
        'MPESA_CONSUMER_SECRET',
        'MPESA_PASSKEY',
        'MPESA_SHORTCODE',
        'MPESA_CALLBACK_URL',
    )

    @classmethod
    def missing_settings(cls) -> list[str]:
        """Return the names of required settings that are unset or blank."""
        missing = []
        for name in cls.REQUIRED_SETTINGS:
            value = getattr(cls, name, None)
            if value is None or not str(value).strip():
                missing.append(name)
        return missing


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    LOG_DIR = None
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

    MPESA_CONSUMER_KEY = 'test_consumer_key'
    MPESA_CONSUMER_SECRET = 'test_consumer_secret'
    MPESA_PASSKEY = 'test_passkey'
    MPESA_SHORTCODE = '174379'
    MPESA_CALLBACK_URL = 'https://example.com/api/mpesa-callback'
    MPESA_ENVIRONMENT = 'sandbox'


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
