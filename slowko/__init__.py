"""
Słówko Game Server Application Package

A Polish Wordle-style word game: a pure guess-evaluation engine
(`slowko.engine`), in-memory game sessions (`slowko.services`) and a thin
JSON API over them.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_TO_FILE, config_class.LOG_LEVEL)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
