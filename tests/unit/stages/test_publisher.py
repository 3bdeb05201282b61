"""Tests for publishing the built site to GitHub Pages."""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from conftest import write_tree

from docsmith.config import BuildParams
from docsmith.exceptions import PublishError
from docsmith.stages.publisher import publish, publish_pages, should_publish

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(*args: str, cwd: Path) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)
    return result.stdout


def _with_origin(params: BuildParams, url: str) -> None:
    _git("init", "--quiet", cwd=params.project_root)
    _git("remote", "add", "origin", url, cwd=params.project_root)


def test_unsupported_remote_never_asks(params: BuildParams, scripted_prompter):
    _with_origin(params, "https://gitlab.com/acme/widget.git")
    prompter = scripted_prompter(confirms=[True])

    assert should_publish(params, prompter) is False
    assert prompter.asked == []


def test_project_without_repository_does_not_publish(params: BuildParams, scripted_prompter):
    prompter = scripted_prompter()

    assert publish(params, prompter) is False
    assert prompter.asked == []


def test_declining_skips_without_failing(params: BuildParams, scripted_prompter):
    _with_origin(params, "git@github.com:acme/widget.git")
    prompter = scripted_prompter(confirms=[False])

    with patch("docsmith.stages.publisher.publish_pages") as mock_publish_pages:
        assert publish(params, prompter) is False

    assert len(prompter.asked) == 1
    mock_publish_pages.assert_not_called()


def test_confirming_publishes(params: BuildParams, scripted_prompter):
    _with_origin(params, "https://github.com/acme/widget.git")
    prompter = scripted_prompter(confirms=[True])

    with patch("docsmith.stages.publisher.publish_pages") as mock_publish_pages:
        assert publish(params, prompter) is True

    mock_publish_pages.assert_called_once_with(params)
    assert params.publish is True


def test_preset_answer_skips_the_prompt(params: BuildParams, scripted_prompter):
    _with_origin(params, "https://github.com/acme/widget.git")
    params.publish = True
    prompter = scripted_prompter()

    with patch("docsmith.stages.publisher.publish_pages") as mock_publish_pages:
        assert publish(params, prompter) is True

    assert prompter.asked == []
    mock_publish_pages.assert_called_once_with(params)


def test_publish_pages_pushes_destination_to_branch(params: BuildParams, tmp_path: Path):
    """
    GIVEN a built site and an origin pointing at a bare repository
    WHEN publish_pages runs
    THEN the pages branch holds exactly the site files plus .nojekyll.
    """
    bare = tmp_path / "remote.git"
    _git("init", "--quiet", "--bare", str(bare), cwd=tmp_path)
    _with_origin(params, str(bare))
    write_tree(params.destination, {"index.html": "<h1>hi</h1>", "guide/install.html": "install"})

    publish_pages(params)

    tracked = _git("ls-tree", "-r", "--name-only", "gh-pages", cwd=bare).split()
    assert sorted(tracked) == [".nojekyll", "guide/install.html", "index.html"]
    assert _git("log", "-1", "--format=%s", "gh-pages", cwd=bare).strip() == "Update documentation site"


def test_publish_pages_replaces_previous_content(params: BuildParams, tmp_path: Path):
    bare = tmp_path / "remote.git"
    _git("init", "--quiet", "--bare", str(bare), cwd=tmp_path)
    _with_origin(params, str(bare))
    params.nojekyll = False
    write_tree(params.destination, {"old.html": "old"})
    publish_pages(params)

    shutil.rmtree(params.destination)
    write_tree(params.destination, {"new.html": "new"})
    publish_pages(params)

    assert _git("ls-tree", "-r", "--name-only", "gh-pages", cwd=bare).split() == ["new.html"]


def test_push_failure_raises_publish_error(params: BuildParams, tmp_path: Path):
    _with_origin(params, str(tmp_path / "no-such-remote.git"))
    write_tree(params.destination, {"index.html": "hi"})

    with pytest.raises(PublishError) as exc_info:
        publish_pages(params)

    assert "Error publishing GitHub pages" in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


def test_missing_remote_raises_publish_error(params: BuildParams):
    _git("init", "--quiet", cwd=params.project_root)
    write_tree(params.destination, {"index.html": "hi"})

    with pytest.raises(PublishError, match="not configured"):
        publish_pages(params)


def test_publish_pages_keeps_branch_history(params: BuildParams, tmp_path: Path):
    """
    GIVEN a pages branch that already has a published site
    WHEN a changed site is published
    THEN a new commit is added on top of the previous one.
    """
    bare = tmp_path / "remote.git"
    _git("init", "--quiet", "--bare", str(bare), cwd=tmp_path)
    _with_origin(params, str(bare))
    write_tree(params.destination, {"index.html": "v1"})
    assert publish_pages(params) is True
    first = _git("rev-parse", "gh-pages", cwd=bare).strip()

    write_tree(params.destination, {"index.html": "v2"})
    assert publish_pages(params) is True

    assert _git("rev-list", "--count", "gh-pages", cwd=bare).strip() == "2"
    assert _git("rev-parse", "gh-pages~1", cwd=bare).strip() == first
    assert _git("show", "gh-pages:index.html", cwd=bare) == "v2"


def test_publish_pages_skips_an_unchanged_site(params: BuildParams, tmp_path: Path):
    bare = tmp_path / "remote.git"
    _git("init", "--quiet", "--bare", str(bare), cwd=tmp_path)
    _with_origin(params, str(bare))
    write_tree(params.destination, {"index.html": "same"})
    publish_pages(params)

    assert publish_pages(params) is False
    assert _git("rev-list", "--count", "gh-pages", cwd=bare).strip() == "1"
