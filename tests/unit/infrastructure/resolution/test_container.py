import pytest

from slack_workflow_notifier.core.application.exceptions import ConfigurationError
from slack_workflow_notifier.infrastructure.configuration import (
    ActionSettings,
    GithubContextSettings,
)
from slack_workflow_notifier.infrastructure.resolution.container import build_notify_workflow


def test_starting_workflow_needs_no_github_token(capsys, runner_env, monkeypatch):
    monkeypatch.setenv("INPUT_WEBHOOKURL", "https://hooks.slack.com/services/T/B/START")
    monkeypatch.setenv("INPUT_STARTING", "true")

    workflow = build_notify_workflow(ActionSettings(), GithubContextSettings())

    assert workflow is not None
    assert "::add-mask::https://hooks.slack.com/services/T/B/START" in capsys.readouterr().out


def test_finished_workflow_masks_token(capsys, runner_env, monkeypatch):
    monkeypatch.setenv("INPUT_WEBHOOKURL", "https://hooks.slack.com/services/T/B/END")
    monkeypatch.setenv("INPUT_GITHUBTOKEN", "ghs_container")

    build_notify_workflow(ActionSettings(), GithubContextSettings())

    assert "::add-mask::ghs_container" in capsys.readouterr().out


def test_finished_workflow_requires_github_token(runner_env, monkeypatch):
    monkeypatch.setenv("INPUT_WEBHOOKURL", "https://hooks.slack.com/services/T/B/END")

    with pytest.raises(ConfigurationError, match="githubToken"):
        build_notify_workflow(ActionSettings(), GithubContextSettings())
