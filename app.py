import os
import logging
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from utils.summarizer import DEFAULT_SAMPLE_SIZE, TemplateSummarizer


def create_app(config=None, summarizer=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configure logging
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO))

    app.secret_key = os.environ.get("SESSION_SECRET", "dev-secret-key-change-in-production")
    app.wsgi_app = ProxyFix(app.wsgi_app, x_proto=1, x_host=1)

    # Configure upload settings
    app.config['MAX_CONTENT_LENGTH'] = int(os.environ.get("MAX_CONTENT_LENGTH", 4 * 1024 * 1024))  # 4MB max file size
    app.config['SUMMARY_SAMPLE_SIZE'] = int(os.environ.get("SUMMARY_SAMPLE_SIZE", DEFAULT_SAMPLE_SIZE))

    if config:
        app.config.update(config)

    app.extensions['summarizer'] = summarizer or TemplateSummarizer()

    # Register routes
    from routes import register_routes
    register_routes(app)

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.environ.get("PORT", 5000)), debug=True)
