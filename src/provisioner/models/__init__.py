"""Data models for Slack payloads and pipeline triggers."""

from provisioner.models.pipeline import PipelineTriggerRequest, PipelineTriggerResult
from provisioner.models.slack import (
    HandshakePayload,
    InteractionPayload,
    SlashCommand,
    VerifiedRequest,
)

__all__ = [
    "HandshakePayload",
    "InteractionPayload",
    "PipelineTriggerRequest",
    "PipelineTriggerResult",
    "SlashCommand",
    "VerifiedRequest",
]
