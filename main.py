"""
Słówko Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask application.
"""

from slowko import create_app
from slowko.config import Config, validate_word_list_integrity
from slowko.services.game_service import initialize_game_service
from slowko.services.word_lists import load_csv_dictionary
from slowko.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        print("✓ Word lists validated")

        extra_words = []
        if Config.DICTIONARY_CSV:
            dictionary = load_csv_dictionary(Config.DICTIONARY_CSV)
            extra_words = [word for words in dictionary.values() for word in words]
            print(f"✓ Loaded {len(extra_words)} words from {Config.DICTIONARY_CSV}")

        game_service = initialize_game_service(Config.TIMEZONE, Config.MAX_ATTEMPTS, extra_words)
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Słówko Server Starting")

        print(f"\nStarting Słówko Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Time zone: {Config.TIMEZONE}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Słówko Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
