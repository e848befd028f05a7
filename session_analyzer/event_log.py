"""Session Analyzer - Event sequence and aggregations"""

import ipaddress
import logging
from collections import Counter, defaultdict
from operator import attrgetter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import Event, EventType
from .patterns import NO_SESSIONS

logger = logging.getLogger(__name__)

# (ip, user) -> times in seconds since midnight, in log order
LogTimes = Dict[Tuple[str, str], List[int]]


def _pick_max(counts: Dict[str, int]) -> Optional[str]:
    """Key with the largest positive value, smallest key on ties"""
    best_key = None
    best_value = 0
    for key in sorted(counts):
        if counts[key] > best_value:
            best_key = key
            best_value = counts[key]
    return best_key


def _truncated_mean(total: int, count: int) -> int:
    """total / count rounded toward zero"""
    mean = abs(total) // count
    return -mean if total < 0 else mean


class EventLog:
    """Ordered collection of validated login/logout events.

    Events are appended in log order and sorted once by time of day before
    the statistics are queried. The queries never modify the log.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self.events: List[Event] = []
        self.is_sorted = True
        self.extend(events)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.events)

    def append(self, event: Event):
        self.events.append(event)
        self.is_sorted = False

    def extend(self, events: Iterable[Event]):
        for event in events:
            self.append(event)

    def sort_chronologically(self):
        # list.sort is stable, equal times keep their log order
        self.events.sort(key=attrgetter('time'))
        self.is_sorted = True

    def _check_sorted(self, query: str):
        if not self.is_sorted:
            logger.warning("%s queried on an unsorted event log", query)

    def logins_per_ip(self) -> Dict[str, int]:
        self._check_sorted('logins_per_ip')
        return dict(Counter(e.ip for e in self.events if e.type is EventType.LOGIN))

    def most_distinct_logins_ip(self) -> Optional[str]:
        return _pick_max(self.logins_per_ip())

    def peak_sessions_per_user(self) -> Dict[str, int]:
        """Highest value of each user's running login/logout counter.

        The counter is a plain delta: a logout without an earlier login
        takes it below zero. The peak starts at zero and never decreases.
        """
        self._check_sorted('peak_sessions_per_user')
        current: Dict[str, int] = defaultdict(int)
        peak: Dict[str, int] = defaultdict(int)

        for event in self.events:
            if event.type is EventType.LOGIN:
                current[event.user] += 1
            elif event.type is EventType.LOGOUT:
                current[event.user] -= 1

            peak[event.user] = max(peak[event.user], current[event.user])

        return dict(peak)

    def highest_peak_sessions_user(self) -> Optional[str]:
        return _pick_max(self.peak_sessions_per_user())

    def _collect_log_times(self) -> Tuple[LogTimes, LogTimes]:
        login_times: LogTimes = defaultdict(list)
        logout_times: LogTimes = defaultdict(list)

        for event in self.events:
            key = (event.ip, event.user)
            if event.type is EventType.LOGIN:
                login_times[key].append(event.seconds)
            elif event.type is EventType.LOGOUT:
                logout_times[key].append(event.seconds)

        return login_times, logout_times

    def _pair_sessions(self) -> Tuple[Dict[str, int], Dict[str, int]]:
        """Total paired session length and number of pairs per IP.

        The i-th login of a user on an IP is paired with the i-th logout of
        the same user on the same IP. Leftover logins or logouts are ignored.
        A logout earlier in the day than its login gives a negative length.
        Every IP with a login appears, with zero pairs if none matched.
        """
        login_times, logout_times = self._collect_log_times()

        totals: Dict[str, int] = {}
        sessions: Dict[str, int] = {}

        for (ip, user), logins in login_times.items():
            logouts = logout_times.get((ip, user), [])
            totals.setdefault(ip, 0)
            sessions.setdefault(ip, 0)
            for login, logout in zip(logins, logouts):
                totals[ip] += logout - login
                sessions[ip] += 1

        return totals, sessions

    def sessions_per_ip(self) -> Dict[str, int]:
        """Number of paired login/logout sessions for every IP with a login"""
        self._check_sorted('sessions_per_ip')
        _totals, sessions = self._pair_sessions()
        return {ip: sessions[ip] for ip in sorted(sessions, key=ipaddress.IPv4Address)}

    def avg_session_length_per_ip(self) -> Dict[str, int]:
        """Average session length in seconds for every IP with a login.

        IPs whose logins were never paired report NO_SESSIONS. A real
        average can also be -1, so use sessions_per_ip() to tell them apart.
        """
        self._check_sorted('avg_session_length_per_ip')
        totals, sessions = self._pair_sessions()

        result = {}
        for ip in sorted(sessions, key=ipaddress.IPv4Address):
            if sessions[ip] == 0:
                result[ip] = NO_SESSIONS
            else:
                result[ip] = _truncated_mean(totals[ip], sessions[ip])
        return result
