"""
Services Package

Contains all business logic and service classes.
"""

from .game_service import GameService, get_game_service, initialize_game_service
from .word_lists import WordListHandle, load_csv_dictionary, parse_csv_dictionary, select_word_list

__all__ = [
    'GameService', 'get_game_service', 'initialize_game_service',
    'WordListHandle', 'load_csv_dictionary', 'parse_csv_dictionary', 'select_word_list'
]
