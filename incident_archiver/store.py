"""
JSON incident store.

The data file is a single JSON object mapping incident id to the
incident record::

    {
      "tag:status.example.com,2005:Incident/1": {
        "id": "tag:status.example.com,2005:Incident/1",
        "updated": "2026-02-20T22:44:27Z",
        "title": "...",
        "summary": "...",
        "link": "https://..."
      }
    }

Saves go through a temporary file in the same directory that is then
renamed over the target, so an interrupted write never truncates the
existing store.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import IO, Any, Union

from incident_archiver.errors import DecodeError, EncodeError, StoreIOError
from incident_archiver.models import INCIDENT_FIELDS, Incident, IncidentStore
from incident_archiver import notifier

PathLike = Union[str, Path]


def _safe_close(fh: IO, path: PathLike) -> None:
    """Close ``fh``; a failure here is reported, never raised."""
    try:
        fh.close()
    except OSError as exc:
        notifier.print_warning(f"Error closing {path}: {exc}")


def _discard(path: PathLike) -> None:
    try:
        os.unlink(path)
    except OSError as exc:
        notifier.print_warning(f"Could not remove temporary file {path}: {exc}")


def _decode_store(raw: Any, path: PathLike) -> IncidentStore:
    if not isinstance(raw, dict):
        raise DecodeError(f"{path}: expected a JSON object, got {type(raw).__name__}")

    store: IncidentStore = {}
    for key, record in raw.items():
        if not isinstance(record, dict):
            raise DecodeError(f"{path}: incident {key!r} is not an object")
        for name in INCIDENT_FIELDS:
            value = record.get(name, "")
            if not isinstance(value, str):
                raise DecodeError(f"{path}: incident {key!r} field {name!r} is not a string")
        record = dict(record)
        record.setdefault("id", key)
        if record["id"] != key:
            raise DecodeError(
                f"{path}: incident stored under {key!r} has id {record['id']!r}"
            )
        store[key] = Incident.from_dict(record)
    return store


def load_store(path: PathLike) -> IncidentStore:
    """
    Load the incident store from ``path``.

    A missing file is an empty store. Both indented and compact JSON are
    accepted.

    Raises:
        StoreIOError: The file exists but cannot be opened or read.
        DecodeError: The file is not a JSON object of incident records.
    """
    try:
        fh = open(path, "r", encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise StoreIOError(f"cannot open {path}: {exc}") from exc

    try:
        raw = json.load(fh)
    except ValueError as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(f"{path}: {exc}") from exc
    except OSError as exc:
        raise StoreIOError(f"cannot read {path}: {exc}") from exc
    finally:
        _safe_close(fh, path)

    return _decode_store(raw, path)


def dumps_store(store: IncidentStore) -> bytes:
    """Serialize ``store`` as two-space indented UTF-8 JSON with a trailing newline."""
    try:
        payload = {key: incident.to_dict() for key, incident in store.items()}
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
        # Lone surrogates survive json.dumps but not UTF-8
        return text.encode("utf-8")
    except (TypeError, ValueError, AttributeError) as exc:
        raise EncodeError(str(exc)) from exc


def save_store(store: IncidentStore, path: PathLike) -> None:
    """
    Overwrite ``path`` with the full contents of ``store``.

    Raises:
        EncodeError: The store cannot be serialized.
        StoreIOError: The file cannot be written or moved into place.
    """
    data = dumps_store(store)
    target = Path(path)

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.",
            suffix=".tmp",
            dir=str(target.parent),
        )
    except OSError as exc:
        raise StoreIOError(f"cannot create {target}: {exc}") from exc

    fh = os.fdopen(fd, "wb")
    try:
        fh.write(data)
        fh.flush()
        os.fsync(fh.fileno())
    except BaseException as exc:
        _safe_close(fh, tmp_name)
        _discard(tmp_name)
        if isinstance(exc, OSError):
            raise StoreIOError(f"cannot write {target}: {exc}") from exc
        raise
    _safe_close(fh, tmp_name)

    try:
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, target)
    except OSError as exc:
        _discard(tmp_name)
        raise StoreIOError(f"cannot replace {target}: {exc}") from exc
