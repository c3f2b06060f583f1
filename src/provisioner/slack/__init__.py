"""Slack ingress: signature verification, modal building, event dispatch and replies."""

from provisioner.slack.client import Messenger, SlackMessenger
from provisioner.slack.modals import build_modal, build_options
from provisioner.slack.replies import compose_reply

__all__ = [
    "Messenger",
    "SlackMessenger",
    "build_modal",
    "build_options",
    "compose_reply",
]
