"""Workflow commands understood by the GitHub Actions runner.

Commands are plain lines on stdout, e.g. ``::add-mask::value``.
"""

import sys
from typing import TextIO

from slack_workflow_notifier.infrastructure.observability import redaction_service


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def issue_command(command: str, message: str, out: TextIO | None = None) -> None:
    print(f"::{command}::{escape_data(message)}", file=out or sys.stdout, flush=True)


def add_mask(secret: str, out: TextIO | None = None) -> None:
    """Ask the runner to mask the value in its logs, and mask it in ours too."""
    if not secret:
        return
    redaction_service.register(secret)
    issue_command("add-mask", secret, out)


def set_failed(message: str, out: TextIO | None = None) -> None:
    """Report the step as failed. The caller is responsible for the exit code."""
    issue_command("error", redaction_service.redact_text(message), out)
