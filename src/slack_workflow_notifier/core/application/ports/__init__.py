from slack_workflow_notifier.core.application.ports.ci_jobs_port import CiJobsPort
from slack_workflow_notifier.core.application.ports.notifier_port import NotifierPort

__all__ = ["CiJobsPort", "NotifierPort"]
