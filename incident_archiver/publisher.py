"""
Publisher: commits the data file and pushes it.

Runs a fixed sequence of git commands in the repository directory,
inheriting this process's stdout/stderr. The first failing command
aborts the sequence; commands that already ran are not undone.
"""

from __future__ import annotations

import subprocess
from datetime import datetime
from typing import List, Optional

from dateutil import tz

from incident_archiver.errors import CommandError
from incident_archiver.models import ArchiverConfig
from incident_archiver import notifier


def commit_message(new_count: int, now: Optional[datetime] = None) -> str:
    """
    Build the commit message, e.g.
    ``Update incidents: 2 new (2026-10-17T09:30:00+02:00)``.

    The timestamp is RFC 3339 at second precision in local time; UTC is
    written as ``Z``.
    """
    if now is None:
        now = datetime.now(tz.tzlocal())
    elif now.tzinfo is None:
        now = now.replace(tzinfo=tz.tzlocal())
    stamp = now.isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return f"Update incidents: {new_count} new ({stamp})"


def git_commands(new_count: int, config: ArchiverConfig) -> List[List[str]]:
    """The command sequence for one publish, in execution order."""
    commands = [
        ["git", "config", "--global", "user.email", config.git.user_email],
        ["git", "config", "--global", "user.name", config.git.user_name],
        ["git", "add", config.data_file],
        ["git", "commit", "-m", commit_message(new_count)],
    ]
    if config.push:
        commands.append(["git", "push"])
    return commands


def run_command(args: List[str], cwd: str) -> None:
    """
    Run one external command to completion.

    Raises:
        CommandError: The command could not be started or exited non-zero.
    """
    notifier.print_command(args)
    try:
        subprocess.run(args, cwd=cwd, check=True)
    except subprocess.CalledProcessError as exc:
        raise CommandError(args, returncode=exc.returncode) from exc
    except OSError as exc:
        raise CommandError(args, reason=str(exc)) from exc


def publish(new_count: int, config: ArchiverConfig) -> None:
    """Commit (and push) the already-saved data file."""
    for args in git_commands(new_count, config):
        run_command(args, cwd=config.repo_dir)
