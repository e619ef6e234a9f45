from kivrims.utils.logger import get_logger, configure_app_logging, RequestLogger
from kivrims.utils.phone import normalize_phone_number

__all__ = [
    'get_logger',
    'configure_app_logging',
    'RequestLogger',
    'normalize_phone_number',
]
