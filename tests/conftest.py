import pytest

from session_analyzer import EventLog, parse_event

SAMPLE_LINES = [
    "09:00:00, LOGIN, 192.168.1.1, alice",
    "09:10:00, LOGOUT, 192.168.1.1, alice",
    "09:05:00, LOGIN, 192.168.1.1, bob",
    "09:20:00, LOGOUT, 192.168.1.1, bob",
]


def _build_log(lines, sort=True):
    log = EventLog(parse_event(line) for line in lines)
    if sort:
        log.sort_chronologically()
    return log


@pytest.fixture
def make_log():
    """Factory building an EventLog from raw lines, sorted by default"""
    return _build_log


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_log():
    return _build_log(SAMPLE_LINES)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "sessions.log"
    path.write_text("\n".join(SAMPLE_LINES + ["09:30:00, LOGIM, 10.0.0.1, carol"]) + "\n")
    return path
