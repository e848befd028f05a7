"""Session Analyzer - Data models"""

from dataclasses import dataclass, field, asdict
from datetime import time
from enum import Enum
from typing import Dict, Optional


class EventType(Enum):
    LOGIN = 'login'
    LOGOUT = 'logout'
    # Only used while an event is being built, never stored in an EventLog
    INVALID = 'invalid'


@dataclass(frozen=True)
class Event:
    """One validated login or logout record"""
    time: time
    type: EventType
    ip: str
    user: str

    @property
    def seconds(self) -> int:
        """Seconds since midnight"""
        return self.time.hour * 3600 + self.time.minute * 60 + self.time.second


@dataclass
class AnalysisReport:
    """Aggregate statistics over a sorted event log"""
    most_distinct_logins_ip: Optional[str]
    highest_peak_sessions_user: Optional[str]
    avg_session_length_per_ip: Dict[str, int]
    total_lines: int = 0
    total_events: int = 0
    discarded_lines: int = 0
    logins_per_ip: Dict[str, int] = field(default_factory=dict)
    peak_sessions_per_user: Dict[str, int] = field(default_factory=dict)
    sessions_per_ip: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        data = asdict(self)
        return {
            'summary': {
                'total_lines': data['total_lines'],
                'total_events': data['total_events'],
                'discarded_lines': data['discarded_lines'],
            },
            'most_distinct_logins_ip': data['most_distinct_logins_ip'],
            'highest_peak_sessions_user': data['highest_peak_sessions_user'],
            'avg_session_length_per_ip': data['avg_session_length_per_ip'],
            'logins_per_ip': data['logins_per_ip'],
            'peak_sessions_per_user': data['peak_sessions_per_user'],
            'sessions_per_ip': data['sessions_per_ip'],
        }
