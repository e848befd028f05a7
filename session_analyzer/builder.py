"""Session Analyzer - Event construction from raw log lines"""

from datetime import time
from typing import Optional, Tuple

from .models import Event, EventType
from .patterns import LINE_SEPARATOR, LINE_FIELDS
from .validators import parse_time, parse_event_type, is_valid_ipv4, is_alphanumeric


def tokenize_line(line: str) -> Optional[Tuple[str, str, str, str]]:
    """Split "hh:mm:ss, TYPE, ip, user" into its four field strings"""
    fields = line.strip().split(LINE_SEPARATOR)
    if len(fields) != LINE_FIELDS:
        return None
    time_str, type_str, ip, user = (f.strip() for f in fields)
    return time_str, type_str, ip, user


class EventBuilder:
    """Collects validated fields and hands out an Event once all are set.

    Every setter returns whether the value was accepted. A rejected value
    leaves the field unset, so ``build()`` returns None until all four
    fields have been accepted.
    """

    def __init__(self):
        self._time: Optional[time] = None
        self._type: EventType = EventType.INVALID
        self._ip: Optional[str] = None
        self._user: Optional[str] = None

    def set_time(self, time_str: str) -> bool:
        parsed = parse_time(time_str)
        if parsed is None:
            return False
        self._time = parsed
        return True

    def set_type(self, type_str: str) -> bool:
        event_type = parse_event_type(type_str)
        if event_type is EventType.INVALID:
            return False
        self._type = event_type
        return True

    def set_ip(self, ip: str) -> bool:
        if not is_valid_ipv4(ip):
            return False
        self._ip = ip
        return True

    def set_user(self, user: str) -> bool:
        if not is_alphanumeric(user):
            return False
        self._user = user
        return True

    @property
    def is_complete(self) -> bool:
        return (self._time is not None
                and self._type is not EventType.INVALID
                and self._ip is not None
                and self._user is not None)

    def build(self) -> Optional[Event]:
        if not self.is_complete:
            return None
        return Event(time=self._time, type=self._type, ip=self._ip, user=self._user)


def parse_event(line: str) -> Optional[Event]:
    tokens = tokenize_line(line)
    if tokens is None:
        return None

    time_str, type_str, ip, user = tokens
    builder = EventBuilder()
    builder.set_time(time_str)
    builder.set_type(type_str)
    builder.set_ip(ip)
    builder.set_user(user)
    return builder.build()
