"""Session Analyzer - Constants and patterns"""

VERSION = "1.0.0"

# Field separator of a log line: "hh:mm:ss, TYPE, ip, user"
LINE_SEPARATOR = ","
LINE_FIELDS = 4

# Time of day, one or two digits per field
TIME_PATTERN = r'^(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{1,2}):(?P<second>[0-9]{1,2})$'

USER_PATTERN = r'^[A-Za-z0-9]+$'

EVENT_TYPE_KEYWORDS = {
    'LOGIN': 'login',
    'LOGOUT': 'logout',
}

# Average session length reported for an IP without any login/logout pair
NO_SESSIONS = -1
