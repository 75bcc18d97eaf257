"""
Console Notifier — plain, structured console output.

Every user-visible line of a run goes through here, with ANSI colors for
readability. Fatal errors go to stderr, everything else to stdout.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Sequence

from dateutil import parser as dateutil_parser

from incident_archiver.models import Incident

# ANSI color codes for terminal styling
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_CYAN = "\033[96m"
_WHITE = "\033[97m"
_GRAY = "\033[90m"


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def _format_timestamp(raw: str) -> str:
    """Render a feed timestamp for display, leaving unparseable ones as-is."""
    try:
        return dateutil_parser.parse(raw).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, TypeError, OverflowError):
        return raw


def print_banner() -> None:
    """Print the startup banner."""
    banner = f"""
{_BOLD}{_CYAN}+------------------------------------------------------------------+
|          Status Incident Archiver                                |
+------------------------------------------------------------------+{_RESET}
"""
    print(banner)


def print_fetching(feed_url: str) -> None:
    print(f"  {_BOLD}{_BLUE}> Fetching:{_RESET} {_WHITE}{feed_url}{_RESET}")


def print_parsed(entry_count: int, known_count: int) -> None:
    print(
        f"  {_DIM}{entry_count} feed entries, "
        f"{known_count} incidents already recorded{_RESET}"
    )


def print_incident(incident: Incident) -> None:
    """Print one newly recorded incident."""
    ts = _format_timestamp(incident.updated) if incident.updated else "-"
    print(f"  {_GRAY}[{ts}]{_RESET} {_BOLD}{_GREEN}NEW INCIDENT{_RESET}")
    print(f"    {_BOLD}Title :{_RESET} {incident.title}")
    print(f"    {_BOLD}ID    :{_RESET} {_DIM}{incident.id}{_RESET}")
    if incident.link:
        print(f"    {_BOLD}Link  :{_RESET} {_DIM}{incident.link}{_RESET}")
    print()


def print_no_new_incidents() -> None:
    print("No new incidents to commit.")


def print_saved(path: str, total: int) -> None:
    print(f"  {_DIM}Wrote {total} incidents to {path}{_RESET}")


def print_command(args: Sequence[str]) -> None:
    """Echo an external command before it runs."""
    print(f"  {_BOLD}{_CYAN}$ {' '.join(args)}{_RESET}")
    sys.stdout.flush()


def print_debug(message: str) -> None:
    print(f"  {_DIM}[{_now()}] {message}{_RESET}")


def print_notice(message: str) -> None:
    print(f"  {_YELLOW}{message}{_RESET}")


def print_warning(message: str) -> None:
    """Report a non-fatal problem (e.g. failing to close a file)."""
    print(f"  {_GRAY}[{_now()}]{_RESET} {_YELLOW}WARNING{_RESET} {message}")


def print_error(stage: str, message: str) -> None:
    """Print a fatal error labelled with the failing stage."""
    print(
        f"  {_GRAY}[{_now()}]{_RESET} {_RED}Error {stage}:{_RESET} {message}",
        file=sys.stderr,
    )


def print_summary(new_count: int, pushed: bool) -> None:
    action = "committed and pushed" if pushed else "committed (push disabled)"
    print(f"\n{_BOLD}{_GREEN}Recorded {new_count} new incident(s), {action}.{_RESET}\n")
