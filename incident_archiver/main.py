"""
Main entry point — one archiver run.

    fetch -> parse -> reconcile against data file -> save -> commit/push

Every stage raises an ArchiverError subclass on failure; main() is the
only place that turns one into an exit status.

Usage:
    python -m incident_archiver
    incident-archiver
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from incident_archiver.config import load_config
from incident_archiver.errors import ArchiverError
from incident_archiver.feed_parser import parse_feed
from incident_archiver.fetcher import fetch_feed_sync
from incident_archiver.models import ArchiverConfig, Incident
from incident_archiver.publisher import publish
from incident_archiver.reconciler import reconcile
from incident_archiver.store import load_store, save_store
from incident_archiver import notifier


@dataclass
class RunResult:
    """Outcome of a successful run."""

    new_incidents: List[Incident] = field(default_factory=list)
    committed: bool = False


def run_once(config: ArchiverConfig) -> RunResult:
    """Execute the pipeline once. Raises ArchiverError on any failure."""
    debug = config.log_level == "DEBUG"
    data_path = config.data_path

    notifier.print_fetching(config.feed_url)
    body = fetch_feed_sync(config.feed_url, timeout=config.request_timeout)
    if debug:
        notifier.print_debug(f"Received {len(body)} bytes")

    entries = parse_feed(body)
    store = load_store(data_path)
    notifier.print_parsed(len(entries), len(store))

    store, new_incidents = reconcile(entries, store)
    if not new_incidents:
        notifier.print_no_new_incidents()
        return RunResult()

    for incident in new_incidents:
        notifier.print_incident(incident)

    save_store(store, data_path)
    notifier.print_saved(str(data_path), len(store))

    publish(len(new_incidents), config)
    notifier.print_summary(len(new_incidents), pushed=config.push)
    return RunResult(new_incidents=new_incidents, committed=True)


def main(config: Optional[ArchiverConfig] = None) -> int:
    """Sync entry point. Returns the process exit status."""
    try:
        if config is None:
            config = load_config()
        notifier.print_banner()
        run_once(config)
    except ArchiverError as exc:
        notifier.print_error(exc.stage, str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
