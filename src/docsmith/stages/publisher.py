"""Optional publication of the built site to a hosted pages branch."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from docsmith.exceptions import PublishError
from docsmith.git import GitCommandError, commit_identity, is_hosted_on, remote_url, run_git, url_host

if TYPE_CHECKING:
    from docsmith.config.params import BuildParams
    from docsmith.prompts import Prompter

logger = logging.getLogger(__name__)


def should_publish(params: BuildParams, prompter: Prompter) -> bool:
    """Decide whether to publish, asking the user when it is up to them."""
    if not is_hosted_on(params.project_root, params.publish_hosts, params.publish_remote):
        logger.debug("Remote %s is not on %s, not publishing", params.publish_remote, params.publish_hosts)
        return False

    if params.publish is None:
        params.publish = prompter.confirm("Do you want to publish the website to GitHub Pages?", default=False)

    if not params.publish:
        logger.info("Skipping GitHub Page creation")
        return False
    return True


def _push_url(params: BuildParams) -> str:
    url = remote_url(params.project_root, params.publish_remote)
    if url is None:
        msg = f"Remote {params.publish_remote} is not configured"
        raise PublishError(msg)
    if url_host(url) is None and not Path(url).is_absolute():
        # local remotes are resolved against the project, we push from elsewhere
        url = str((params.project_root / url).resolve())
    return url


def _continue_branch(work: Path, url: str, ref: str) -> bool:
    """Point the work repository's branch at the remote tip of ``ref``, if there is one."""
    if not run_git(["ls-remote", "--heads", url, ref], work):
        return False
    run_git(["fetch", "--quiet", url, ref], work)
    run_git(["update-ref", ref, run_git(["rev-parse", "FETCH_HEAD"], work)], work)
    return True


def publish_pages(params: BuildParams) -> bool:
    """Commit the destination folder on top of the pages branch and push it.

    The push happens from a throwaway repository so the project's own
    checkout and branches are never touched. The branch history is kept;
    the new commit's tree is exactly the destination folder.

    Returns:
        False when the branch already held this exact site

    Raises:
        PublishError: On any git, transport or authentication failure

    """
    logger.info("Publishing GitHub Page...")
    url = _push_url(params)
    ref = f"refs/heads/{params.publish_branch}"

    try:
        with tempfile.TemporaryDirectory(prefix="docsmith-pages-") as tmp:
            work = Path(tmp)
            shutil.copytree(params.destination, work, dirs_exist_ok=True)
            if params.nojekyll:
                (work / ".nojekyll").touch()

            run_git(["init", "--quiet"], work)
            run_git(["symbolic-ref", "HEAD", ref], work)
            existing = _continue_branch(work, url, ref)
            run_git(["add", "--all"], work)
            if existing and not run_git(["status", "--porcelain"], work):
                logger.info("GitHub pages already up to date")
                return False
            run_git(["commit", "--quiet", "-m", params.publish_message], work, env=commit_identity(params.project_root))
            run_git(["push", "--quiet", url, f"HEAD:{ref}"], work)
    except (GitCommandError, FileNotFoundError, OSError) as e:
        logger.info("[red]Error uploading to GitHub pages[/red]")
        msg = f"Error publishing GitHub pages: {e}"
        raise PublishError(msg) from e

    logger.info("[green]Website published in GitHub pages[/green]")
    return True


def publish(params: BuildParams, prompter: Prompter) -> bool:
    """Publish when the remote is supported and the user agrees.

    Returns:
        True if the pages branch now holds the site

    """
    if not should_publish(params, prompter):
        return False
    publish_pages(params)
    return True


__all__ = ["publish", "publish_pages", "should_publish"]
