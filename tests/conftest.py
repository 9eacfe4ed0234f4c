import pytest

from slack_workflow_notifier.core.domain.workflow import JobRecord, RunContext, StepRecord

ACTION_ENV_VARS = (
    "INPUT_WEBHOOKURL",
    "INPUT_GITHUBTOKEN",
    "INPUT_CHANNEL",
    "INPUT_USERNAME",
    "INPUT_ICON",
    "INPUT_STARTING",
    "SLACK_WEBHOOK_URL",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_ACTOR",
    "GITHUB_SHA",
    "GITHUB_REF",
    "GITHUB_RUN_ID",
    "GITHUB_WORKFLOW",
    "GITHUB_EVENT_PATH",
    "GITHUB_SERVER_URL",
    "GITHUB_API_URL",
)


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    """Tests may run inside a real runner; never read its environment."""
    for name in ACTION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner_env(monkeypatch, tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text('{"sender": {"avatar_url": "https://avatars.example.com/u/1"}}')
    env = {
        "GITHUB_REPOSITORY": "acme/rocket",
        "GITHUB_ACTOR": "octocat",
        "GITHUB_SHA": "abcdef1234567890",
        "GITHUB_REF": "refs/heads/main",
        "GITHUB_RUN_ID": "4242",
        "GITHUB_WORKFLOW": "CI",
        "GITHUB_EVENT_PATH": str(event_path),
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env


@pytest.fixture
def run_context() -> RunContext:
    return RunContext(
        repository="acme/rocket",
        actor="octocat",
        actor_avatar_url="https://avatars.githubusercontent.com/octocat",
        sha="abcdef1234567890",
        ref="refs/heads/main",
        run_id=4242,
        workflow="CI",
    )


def _make_job(
    job_id: int = 1,
    name: str = "build",
    status: str = "completed",
    conclusion: str | None = "success",
    steps: list[tuple[str, str | None]] | None = None,
) -> JobRecord:
    return JobRecord(
        id=job_id,
        name=name,
        status=status,
        conclusion=conclusion,
        steps=tuple(StepRecord(name=n, conclusion=c) for n, c in (steps or [])),
    )


@pytest.fixture
def make_job():
    return _make_job
