"""Tests for the sequencing of the build stages."""

from pathlib import Path
from unittest.mock import patch

import pytest

from docsmith.config import BuildParams
from docsmith.exceptions import MissingSourceError, NoTemplateError
from docsmith.pipeline import SiteBuilder, build_site
from docsmith.prompts import NonInteractivePrompter


def test_failed_check_stops_before_cleaning(params: BuildParams, scripted_prompter):
    """
    GIVEN a previous build and a manifest without templates
    WHEN the pipeline runs
    THEN it fails at the check stage and the previous build is left alone.
    """
    params.destination.mkdir()
    (params.destination / "index.html").write_text("previous", encoding="utf-8")
    (params.manifest).write_text('[project]\nname = "x"\ndependencies = []\n', encoding="utf-8")

    with pytest.raises(NoTemplateError):
        SiteBuilder(params, scripted_prompter()).build()

    assert (params.destination / "index.html").read_text(encoding="utf-8") == "previous"


def test_stages_run_in_order(params: BuildParams):
    calls = []
    builder = SiteBuilder(params)

    with (
        patch("docsmith.stages.check", side_effect=lambda *a: calls.append("check")),
        patch("docsmith.stages.configure", side_effect=lambda *a: calls.append("configure")),
        patch("docsmith.stages.run", side_effect=lambda *a: calls.append("run")),
        patch("docsmith.stages.publish", side_effect=lambda *a: calls.append("publish") or False),
    ):
        builder.build()

    assert calls == ["check", "configure", "run", "publish"]


def test_publish_can_be_skipped(params: BuildParams, scripted_prompter):
    with patch("docsmith.stages.publish") as mock_publish:
        outcome = SiteBuilder(params, scripted_prompter()).build(publish=False)

    mock_publish.assert_not_called()
    assert outcome.published is False


def test_default_prompter_is_non_interactive(params: BuildParams):
    assert isinstance(SiteBuilder(params).prompter, NonInteractivePrompter)


def test_build_site_reads_config(project: Path):
    outcome = build_site(project, publish=False)

    assert outcome.result.destination == project.resolve() / "site"
    assert (project / "site" / "index.html").is_file()
    assert outcome.published is False


def test_build_site_overrides(project: Path):
    with pytest.raises(MissingSourceError):
        build_site(project, source="nowhere", publish=False)


def test_scaffolded_build_carries_the_answers(project: Path, scripted_prompter):
    """
    GIVEN a project without docs/index.md built in scaffold mode
    WHEN the user answers the scaffolding questions
    THEN the built site's metadata and root page carry those answers.
    """
    (project / "docs" / "index.md").unlink()
    prompter = scripted_prompter(texts=["Gizmo", "Gizmos made easy", "gizmo"])

    outcome = build_site(project, prompter=prompter, publish=False, missing_index="scaffold")

    assert outcome.result.metadata["toolName"] == "Gizmo"
    assert outcome.result.metadata["toolClaim"] == "Gizmos made easy"
    assert outcome.result.metadata["toolPackage"] == "gizmo"
    assert outcome.result.resolved_metadata("index.html")["toolName"] == "Gizmo"
    index = (project / "site" / "index.html").read_text(encoding="utf-8")
    assert "<header>Gizmo - Gizmos made easy</header>" in index
