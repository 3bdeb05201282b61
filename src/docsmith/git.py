"""Thin wrappers around the ``git`` command line."""

from __future__ import annotations

import logging
import os
import re
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

_SCP_LIKE_URL = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?!//)")
_URL = re.compile(r"^[a-z][a-z0-9+.-]*://(?:[^@/]+@)?(?P<host>[^:/]+)", re.IGNORECASE)

DEFAULT_AUTHOR = ("docsmith", "docsmith@localhost")


class GitCommandError(RuntimeError):
    """Raised when a git command exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(command)} failed with exit code {returncode}: {stderr.strip()}")


def run_git(args: list[str], cwd: Path, *, env: dict[str, str] | None = None) -> str:
    """Run ``git <args>`` in ``cwd`` and return its stdout.

    Raises:
        GitCommandError: If git exits with an error
        FileNotFoundError: If git is not installed

    """
    command = ["git", *args]
    logger.debug("Running %s in %s", " ".join(command), cwd)
    result = subprocess.run(
        command,
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
        env={**os.environ, **env} if env else None,
    )
    if result.returncode != 0:
        raise GitCommandError(command, result.returncode, result.stderr)
    return result.stdout.strip()


def remote_url(repo: Path, remote: str = "origin") -> str | None:
    """URL of ``remote`` in ``repo``, or None when there is no such remote or repo."""
    try:
        return run_git(["remote", "get-url", remote], repo) or None
    except (GitCommandError, FileNotFoundError) as e:
        logger.debug("No %s remote for %s: %s", remote, repo, e)
        return None


def url_host(url: str) -> str | None:
    """Host part of an https, ssh or scp-like git URL."""
    match = _URL.match(url) or _SCP_LIKE_URL.match(url)
    return match.group("host").lower() if match else None


def is_hosted_on(repo: Path, hosts: list[str], remote: str = "origin") -> bool:
    """True if ``remote`` of ``repo`` points at one of ``hosts``."""
    url = remote_url(repo, remote)
    if url is None:
        return False
    host = url_host(url)
    return host is not None and host in {h.lower() for h in hosts}


def commit_identity(repo: Path) -> dict[str, str]:
    """Author/committer environment taken from the project, with a fallback."""
    values = []
    for key, fallback in zip(("user.name", "user.email"), DEFAULT_AUTHOR, strict=True):
        try:
            values.append(run_git(["config", "--get", key], repo) or fallback)
        except (GitCommandError, FileNotFoundError):
            values.append(fallback)
    name, email = values
    return {
        "GIT_AUTHOR_NAME": name,
        "GIT_AUTHOR_EMAIL": email,
        "GIT_COMMITTER_NAME": name,
        "GIT_COMMITTER_EMAIL": email,
    }


__all__ = ["GitCommandError", "commit_identity", "is_hosted_on", "remote_url", "run_git", "url_host"]
