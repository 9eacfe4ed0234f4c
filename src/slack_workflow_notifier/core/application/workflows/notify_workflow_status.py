"""Start/finish notification pipeline: Fetch jobs -> Classify -> Format -> Send."""

import structlog
from structlog.contextvars import bind_contextvars

from slack_workflow_notifier.core.application.exceptions import ConfigurationError
from slack_workflow_notifier.core.application.formatting import (
    build_base_message,
    cancelled_message,
    failure_message,
    starting_message,
    success_message,
)
from slack_workflow_notifier.core.application.ports import CiJobsPort, NotifierPort
from slack_workflow_notifier.core.domain.notification import DeliveryResult, SlackMessage
from slack_workflow_notifier.core.domain.workflow import (
    RunContext,
    WorkflowConclusion,
    classify_jobs,
)

logger = structlog.get_logger()


class NotifyWorkflowStatusWorkflow:
    """Sends exactly one Slack notification for the current workflow run."""

    def __init__(
        self,
        context: RunContext,
        notifier: NotifierPort,
        ci_jobs: CiJobsPort | None,
        channel: str,
        username: str,
        icon_emoji: str,
    ) -> None:
        self._context = context
        self._notifier = notifier
        self._ci_jobs = ci_jobs
        self._base_message = build_base_message(context, channel, username, icon_emoji)

    async def execute(self, starting: bool) -> None:
        bind_contextvars(run_id=self._context.run_id, event_type="workflow.notify")
        if starting:
            logger.info("Sending starting notification", workflow=self._context.workflow)
            await self._send(starting_message(self._base_message, self._context))
            return
        await self._notify_finished()

    async def _notify_finished(self) -> None:
        if self._ci_jobs is None:
            raise ConfigurationError("A CI jobs source is required to report a finished workflow")

        jobs = await self._ci_jobs.list_run_jobs(
            self._context.owner, self._context.repository_name, self._context.run_id
        )
        classification = classify_jobs(jobs)
        logger.info(
            "Workflow classified",
            conclusion=str(classification.conclusion),
            failed_job=classification.failed_job,
            failed_step=classification.failed_step,
            jobs_count=len(jobs),
        )

        match classification.conclusion:
            case WorkflowConclusion.FAILURE:
                message = failure_message(self._base_message, self._context, classification)
            case WorkflowConclusion.CANCELLED:
                message = cancelled_message(self._base_message, self._context)
            case WorkflowConclusion.SUCCESS:
                message = success_message(self._base_message, self._context)
            case _:
                logger.warning(
                    "Unknown workflow conclusion",
                    conclusion=classification.conclusion,
                    jobs=[job.name for job in jobs],
                )
                return

        await self._send(message)

    async def _send(self, message: SlackMessage) -> DeliveryResult:
        result = await self._notifier.send(message)
        if not result.delivered:
            logger.info("Notification not delivered, continuing", error=result.error)
        return result
