"""Slack webhook routes: handshake, slash commands and interactions."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from provisioner.dependencies import get_messenger, get_pipeline_client
from provisioner.models.slack import VerifiedRequest
from provisioner.pipeline.client import PipelineTriggerClient
from provisioner.slack.client import Messenger
from provisioner.slack.handlers import (
    handle_handshake,
    handle_interaction,
    handle_slash_command,
)
from provisioner.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.api_route("/", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def url_verification(request: Request) -> Response:
    """Receive Slack's URL-verification handshake. Unauthenticated by design."""
    body = await request.body()
    return handle_handshake(body)


@router.post("/slash")
async def slash_command(
    verified: VerifiedRequest = Depends(verify_slack_request),
    messenger: Messenger = Depends(get_messenger),
) -> Response:
    return await handle_slash_command(verified, messenger)


@router.post("/interactions")
async def interactions(
    verified: VerifiedRequest = Depends(verify_slack_request),
    pipeline_client: PipelineTriggerClient = Depends(get_pipeline_client),
    messenger: Messenger = Depends(get_messenger),
) -> Response:
    return await handle_interaction(verified, pipeline_client, messenger)
