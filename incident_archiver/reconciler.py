"""
Reconciler: merges parsed feed entries into the incident store.

The store only ever grows: an id seen once keeps its first recorded
content even if the feed later changes the entry.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from incident_archiver.models import FeedEntry, Incident, IncidentStore


def reconcile(
    entries: Iterable[FeedEntry],
    store: IncidentStore,
) -> Tuple[IncidentStore, List[Incident]]:
    """
    Add every entry whose id is not yet in ``store``.

    The store is updated in place and returned along with the newly
    added incidents, in feed order. Entries already present (including a
    repeated id later in the same feed) are skipped.
    """
    new_incidents: List[Incident] = []
    for entry in entries:
        if entry.id in store:
            continue
        incident = Incident.from_entry(entry)
        store[entry.id] = incident
        new_incidents.append(incident)
    return store, new_incidents
