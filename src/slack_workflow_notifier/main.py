"""Process entry point for the ``slack-workflow-notifier`` console script."""

import asyncio
import sys
from typing import Any

import structlog

from slack_workflow_notifier.infrastructure.actions.workflow_commands import set_failed
from slack_workflow_notifier.infrastructure.configuration import (
    ActionSettings,
    GithubContextSettings,
)
from slack_workflow_notifier.infrastructure.observability import configure_logging
from slack_workflow_notifier.infrastructure.resolution.container import build_notify_workflow

logger = structlog.get_logger()

EXIT_FAILURE = 1


class FailureReporter:
    def __init__(self) -> None:
        self.failed = False

    def handle_error(self, error: BaseException | object) -> None:
        """Log the error and report it to the runner as an action failure."""
        logger.error("Notifier failed", error=repr(error), exc_info=_exc_info(error))
        if isinstance(error, BaseException) and str(error):
            set_failed(str(error))
        else:
            detail = repr(error) if isinstance(error, BaseException) else str(error)
            set_failed(f"Unhandled Error: {detail}")
        self.failed = True

    def handle_loop_exception(
        self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]
    ) -> None:
        """Event loop hook for errors raised by tasks nobody awaited."""
        self.handle_error(context.get("exception") or context.get("message", "unknown"))


async def main(reporter: FailureReporter) -> None:
    asyncio.get_running_loop().set_exception_handler(reporter.handle_loop_exception)

    settings = ActionSettings()
    workflow = build_notify_workflow(settings, GithubContextSettings())
    await workflow.execute(starting=settings.starting)


def run() -> int:
    configure_logging()
    reporter = FailureReporter()
    try:
        asyncio.run(main(reporter))
    except Exception as exc:  # noqa: BLE001
        reporter.handle_error(exc)
    return EXIT_FAILURE if reporter.failed else 0


def _exc_info(error: BaseException | object) -> BaseException | bool:
    return error if isinstance(error, BaseException) else False


if __name__ == "__main__":
    sys.exit(run())
