"""
Status Incident Archiver: status-page feed to git-tracked JSON.

Fetches an Atom status feed, records every incident not seen before in a
JSON data file, and commits that file back to the repository.
"""

__version__ = "1.0.0"
