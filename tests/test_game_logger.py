import logging

from slowko.utils.game_logger import GameLogger


def test_level_names_are_resolved():
    assert GameLogger(to_file=False, level="debug").logger.level == logging.DEBUG
    assert GameLogger(to_file=False, level=logging.ERROR).level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    game_logger = GameLogger(to_file=False, level="FOO")
    assert game_logger.level == logging.INFO

    game_logger.configure("logs", False, "LOUD")
    assert game_logger.logger.level == logging.INFO
