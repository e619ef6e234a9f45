from kivrims.errors.exceptions import (
    AppError,
    ValidationError,
    ConfigurationError,
    AccessTokenError,
    GatewayError,
)

__all__= [
    'AppError',
    'ValidationError',
    'ConfigurationError',
    'AccessTokenError',
    'GatewayError',
]
