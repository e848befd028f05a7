"""Session Analyzer - Field validation"""

import ipaddress
import re
from datetime import time
from typing import Optional

from .models import EventType
from .patterns import TIME_PATTERN, USER_PATTERN, EVENT_TYPE_KEYWORDS

_time_re = re.compile(TIME_PATTERN)
_user_re = re.compile(USER_PATTERN)


def parse_time(text: str) -> Optional[time]:
    match = _time_re.fullmatch(text)
    if not match:
        return None
    try:
        return time(int(match.group('hour')),
                    int(match.group('minute')),
                    int(match.group('second')))
    except ValueError:
        # 24:00:00, 12:60:00 and friends
        return None


def parse_event_type(text: str) -> EventType:
    keyword = EVENT_TYPE_KEYWORDS.get(text)
    if keyword is None:
        return EventType.INVALID
    return EventType(keyword)


def is_valid_ipv4(text: str) -> bool:
    try:
        ipaddress.IPv4Address(text)
    except ValueError:
        return False
    return True


def is_alphanumeric(text: str) -> bool:
    return bool(_user_re.fullmatch(text))
