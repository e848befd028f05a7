"""Session Analyzer - Core analysis engine"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from .builder import parse_event
from .event_log import EventLog
from .models import AnalysisReport, Event

logger = logging.getLogger(__name__)


class SessionAnalyzer:
    """Builds an EventLog from login/logout lines and reports on it"""

    def __init__(self, console=None):
        self.console = console
        self.event_log = EventLog()
        self.total_lines = 0
        self.discarded_lines = 0

    def _reset(self):
        self.event_log = EventLog()
        self.total_lines = 0
        self.discarded_lines = 0

    def parse_line(self, line: str, line_num: int) -> Optional[Event]:
        if not line.strip():
            return None

        event = parse_event(line)
        if event is None:
            self.discarded_lines += 1
            logger.debug("Discarding line %d: %r", line_num, line.rstrip("\n"))
        return event

    def _process_line(self, line: str, line_num: int):
        self.total_lines += 1
        event = self.parse_line(line, line_num)
        if event:
            self.event_log.append(event)

    def analyze_lines(self, lines: Iterable[str]) -> AnalysisReport:
        self._reset()
        for i, line in enumerate(lines, 1):
            self._process_line(line, i)
        return self._finish()

    def analyze_file(self, filepath: str) -> AnalysisReport:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        self._reset()

        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.readlines()

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console
            ) as progress:
                task = progress.add_task("Analyzing sessions...", total=len(lines))

                for i, line in enumerate(lines, 1):
                    self._process_line(line, i)
                    progress.update(task, advance=1)
        else:
            for i, line in enumerate(lines, 1):
                self._process_line(line, i)

        return self._finish()

    def _finish(self) -> AnalysisReport:
        logger.info("Read %d lines, %d events, %d discarded",
                    self.total_lines, len(self.event_log), self.discarded_lines)
        self.event_log.sort_chronologically()
        return self.generate_report()

    def generate_report(self) -> AnalysisReport:
        log = self.event_log
        return AnalysisReport(
            most_distinct_logins_ip=log.most_distinct_logins_ip(),
            highest_peak_sessions_user=log.highest_peak_sessions_user(),
            avg_session_length_per_ip=log.avg_session_length_per_ip(),
            total_lines=self.total_lines,
            total_events=len(log),
            discarded_lines=self.discarded_lines,
            logins_per_ip=log.logins_per_ip(),
            peak_sessions_per_user=log.peak_sessions_per_user(),
            sessions_per_ip=log.sessions_per_ip(),
        )

    @property
    def events(self) -> List[Event]:
        return list(self.event_log)
