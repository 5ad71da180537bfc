"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import get_user_identity, now_millis, utc_offset_minutes
from .game_logger import game_logger

__all__ = ['get_user_identity', 'now_millis', 'utc_offset_minutes', 'game_logger']
