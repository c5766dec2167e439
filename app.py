"""
Profile Hub
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the profilehub package.
"""

import logging
import os
import sys

from profilehub.config import Config

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    stream=sys.stdout
)

from profilehub import create_app  # noqa: E402

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8000))
    debug = os.environ.get('FLASK_DEBUG', 'False').lower() == 'true'
    app.run(debug=debug, host='0.0.0.0', port=port)
