"""
Data models for the incident archiver.

Defines the transient feed entry, the persisted incident record and the
run configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

# Field order of a stored incident record
INCIDENT_FIELDS = ("id", "updated", "title", "summary", "link")


@dataclass(frozen=True)
class FeedEntry:
    """A single <entry> as read from the remote feed."""

    id: str
    updated: str = ""
    title: str = ""
    summary: str = ""
    link: str = ""


@dataclass(frozen=True)
class Incident:
    """
    An incident recorded in the data file.

    Attributes:
        id: Feed-assigned identifier, also the key in the store.
        updated: Last update timestamp exactly as the feed reported it.
        title: Incident title.
        summary: Raw summary text (may contain HTML).
        link: URL of the incident page.
    """

    id: str
    updated: str = ""
    title: str = ""
    summary: str = ""
    link: str = ""

    @classmethod
    def from_entry(cls, entry: FeedEntry) -> "Incident":
        return cls(
            id=entry.id,
            updated=entry.updated,
            title=entry.title,
            summary=entry.summary,
            link=entry.link,
        )

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in INCIDENT_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Incident":
        return cls(**{name: data.get(name, "") for name in INCIDENT_FIELDS})


# id -> Incident
IncidentStore = Dict[str, Incident]


@dataclass(frozen=True)
class GitIdentity:
    """Committer identity configured before each commit."""

    user_name: str = "GitHub Actions"
    user_email: str = "github-actions[bot]@users.noreply.github.com"


@dataclass(frozen=True)
class ArchiverConfig:
    """Everything a single run needs, built once at startup."""

    feed_url: str = "https://status.webshare.io/feed.atom"
    data_file: str = "data.json"
    repo_dir: str = "."
    request_timeout: float = 30.0  # seconds
    push: bool = True
    git: GitIdentity = field(default_factory=GitIdentity)
    log_level: str = "INFO"

    @property
    def data_path(self) -> Path:
        """Data file location; relative paths are taken from repo_dir."""
        path = Path(self.data_file)
        if path.is_absolute():
            return path
        return Path(self.repo_dir) / path
