"""Flask application factory for the recompress backend."""

from __future__ import annotations

import logging
import sys

from flask import Flask
from flask_cors import CORS

from .config import Config
from .routes import convert_bp

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> Flask:
    """Create and configure the Flask application."""
    if config is None:
        config = Config.load()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.config["MAX_CONTENT_LENGTH"] = config.max_upload_bytes
    app.config["backend_config"] = config

    app.register_blueprint(convert_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info("Recompress backend initialized")
    return app


def main() -> None:
    """Entry point for running the development server."""
    config = Config.load()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=True, use_reloader=False)


if __name__ == "__main__":
    main()
