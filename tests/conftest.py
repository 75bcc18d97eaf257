"""Shared helpers for building small Atom feeds."""

import pytest


def make_feed(*ids: str) -> bytes:
    """An Atom document with one entry per id, in the given order."""
    entries = "".join(
        f"""
    <entry>
        <id>{entry_id}</id>
        <updated>2026-02-20T22:44:27Z</updated>
        <title>Incident {entry_id}</title>
        <summary>Summary of {entry_id}</summary>
        <link href="https://status.example.com/incidents/{entry_id}"/>
    </entry>"""
        for entry_id in ids
    )
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<feed xmlns="http://www.w3.org/2005/Atom">\n'
        "    <title>Example status</title>"
        f"{entries}\n"
        "</feed>\n"
    ).encode("utf-8")


@pytest.fixture
def feed_factory():
    return make_feed
