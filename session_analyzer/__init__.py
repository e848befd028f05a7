"""Session Analyzer package"""

from .patterns import VERSION, NO_SESSIONS
from .models import Event, EventType, AnalysisReport
from .builder import EventBuilder, parse_event, tokenize_line
from .event_log import EventLog
from .analyzer import SessionAnalyzer
from .output import print_report

__all__ = ['VERSION', 'NO_SESSIONS', 'Event', 'EventType', 'AnalysisReport',
           'EventBuilder', 'parse_event', 'tokenize_line', 'EventLog',
           'SessionAnalyzer', 'print_report']
