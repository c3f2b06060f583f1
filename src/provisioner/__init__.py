"""Slack-to-GitLab provisioning bridge."""

__version__ = "0.1.0"
