"""
Helper Functions

Contains utility functions used throughout the application.
"""

import time
from datetime import datetime, timezone
from typing import Dict, Optional
from zoneinfo import ZoneInfo

from flask import request


def get_user_identity(request_obj=None) -> Dict[str, Optional[str]]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'
    headers = getattr(request_obj, 'headers', None)
    player_id = headers.get('X-Player-Id') if headers is not None else None

    return {
        'user_ip': user_ip,
        'player_id': player_id,
    }


def now_millis() -> int:
    return int(time.time() * 1000)


def utc_offset_minutes(tz_name: str, at_millis: int) -> int:
    """Offset of the named time zone from UTC at the given instant, in minutes."""
    moment = datetime.fromtimestamp(at_millis / 1000, tz=timezone.utc)
    offset = moment.astimezone(ZoneInfo(tz_name)).utcoffset()
    return int(offset.total_seconds() // 60) if offset else 0
