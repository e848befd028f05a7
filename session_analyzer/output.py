"""Session Analyzer - Report output"""

import json

from rich.panel import Panel
from rich.table import Table
from rich import box

from .models import AnalysisReport


def format_length(seconds: int, sessions: int) -> str:
    # -1 is also a real average when logouts precede their logins
    if sessions == 0:
        return "n/a"
    return f"{seconds}s"


def print_report(report: AnalysisReport, console=None):
    if console is None:
        print(json.dumps(report.to_dict(), indent=2))
        return

    console.print("\n" + "═" * 70, style="cyan")
    console.print("              SESSION ANALYZER REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    # Summary
    console.print(Panel.fit(
        f"Lines Read: [cyan]{report.total_lines:,}[/]\n"
        f"Events: [cyan]{report.total_events:,}[/]\n"
        f"Discarded Lines: [{'yellow' if report.discarded_lines > 0 else 'green'}]{report.discarded_lines:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    # Headline results
    console.print("\n" + "─" * 70, style="cyan")
    console.print("RESULTS", style="bold")
    console.print(f"  IP with most distinct logins: "
                  f"[green]{report.most_distinct_logins_ip or '-'}[/]")
    console.print(f"  User with highest peak sessions: "
                  f"[green]{report.highest_peak_sessions_user or '-'}[/]")

    # Average session length
    if report.avg_session_length_per_ip:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("AVERAGE SESSION LENGTH PER IP", style="bold")
        table = Table(box=box.ROUNDED)
        table.add_column("IP Address", style="cyan")
        table.add_column("Logins", style="white")
        table.add_column("Sessions", style="white")
        table.add_column("Avg Length", style="yellow")
        for ip, length in report.avg_session_length_per_ip.items():
            sessions = report.sessions_per_ip.get(ip, 0)
            table.add_row(ip, str(report.logins_per_ip.get(ip, 0)), str(sessions),
                          format_length(length, sessions))
        console.print(table)

    # Peak sessions
    if report.peak_sessions_per_user:
        console.print("\n" + "─" * 70, style="cyan")
        console.print("PEAK SESSIONS PER USER", style="bold")
        table = Table(box=box.ROUNDED)
        table.add_column("User", style="cyan")
        table.add_column("Peak", style="white")
        ranked = sorted(report.peak_sessions_per_user.items(), key=lambda kv: (-kv[1], kv[0]))
        for user, peak in ranked[:10]:
            table.add_row(user, str(peak))
        console.print(table)

    console.print("\n" + "═" * 70, style="cyan")
