"""Slack notifications for the start and end of GitHub Actions workflow runs."""
