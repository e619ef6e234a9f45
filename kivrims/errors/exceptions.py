class AppError(Exception):
    status_code = 500
    error = "Application error"

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message

    def to_dict(self):
        return {'message': self.message, 'error': self.error}


class ValidationError(AppError):
    status_code = 400
    error = "Validation error"

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = errors or {}

    def to_dict(self):
        return {**super().to_dict(), 'errors': self.errors}


class ConfigurationError(AppError):
    error = "Configuration error"

    def __init__(self, missing):
        super().__init__(f"Missing required configuration: {', '.join(missing)}")
        self.missing = list(missing)


class AccessTokenError(AppError):
    error = "Failed to get M-Pesa access token"


class GatewayError(AppError):
    """Daraja answered the STK push with something other than success."""

    def __init__(self, message, payload=None, status_code=None):
        super().__init__(message, status_code)
        self.payload = payload

    def to_dict(self):
        return {'message': self.message, 'error': self.payload}
