#!/usr/bin/env python3
"""Session Analyzer - Entry point"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from session_analyzer import VERSION, SessionAnalyzer, print_report


def setup_logging(verbose: bool, console: Console):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Session Analyzer - Login/logout log statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Log file to analyze (hh:mm:ss, LOGIN|LOGOUT, ip, user)")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every discarded line")
    parser.add_argument("--version", action="version", version=f"SessionAnalyzer v{VERSION}")

    args = parser.parse_args(argv)

    console = Console(stderr=True) if args.json else Console()
    setup_logging(args.verbose, Console(stderr=True))

    analyzer = SessionAnalyzer(console=None if args.json else console)

    try:
        report = analyzer.analyze_file(args.logfile)

        if args.json:
            print(json.dumps(report.to_dict(), indent=2))
        else:
            print_report(report, console)

        if args.output:
            with open(args.output, 'w') as f:
                json.dump(report.to_dict(), f, indent=2)
            console.print(f"\n[green]Report saved to:[/] {args.output}")

    except OSError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
