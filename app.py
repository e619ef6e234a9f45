import os
import signal
import sys

from kivrims import create_app
from kivrims.errors import ConfigurationError
from kivrims.extensions import db
from kivrims.utils.logger import get_logger

logger = get_logger('kivrims.bootstrap')

try:
    app = create_app(os.getenv('FLASK_ENV', 'development'))
except ConfigurationError as e:
    logger.critical(f'{e.error}: {e.message}. Set it in the environment or .env')
    sys.exit(1)


@app.shell_context_processor
def make_shell_context():
    from kivrims.models import ContactMessage
    return {
        'db': db,
        'ContactMessage': ContactMessage
    }


def shutdown(signum, frame):
    """Close pooled database connections and exit."""
    logger.info(f'Received signal {signum}, shutting down')
    with app.app_context():
        db.engine.dispose()
    sys.exit(0)


if __name__ == '__main__':
    signal.signal(signal.SIGTERM, shutdown)
    signal.signal(signal.SIGINT, shutdown)

    port = app.config['PORT']
    logger.info(f'Server running on http://localhost:{port}')
    app.run(host='0.0.0.0', port=port)
