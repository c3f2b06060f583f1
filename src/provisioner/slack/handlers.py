"""Slack event dispatch: handshake, slash command and interaction callbacks.

Every handler turns its own failures into an HTTP status. Nothing here
raises past the router, so one bad request never takes the service down.
"""

import json
import logging
from urllib.parse import unquote_plus

from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from provisioner.errors import MalformedPayloadError, MessagingError, TriggerError
from provisioner.models.slack import (
    HandshakePayload,
    InteractionPayload,
    SlashCommand,
    VerifiedRequest,
)
from provisioner.pipeline.client import PipelineTriggerClient
from provisioner.slack.client import Messenger
from provisioner.slack.modals import OS_TYPE_BLOCK_ID, VERSION_BLOCK_ID, build_modal
from provisioner.slack.replies import compose_reply

logger = logging.getLogger(__name__)

PROVISION_COMMAND = "/provision"
VIEW_SUBMISSION = "view_submission"


def handle_handshake(body: bytes) -> Response:
    """Answer Slack's URL-verification handshake.

    - empty body: 400
    - body with a string ``challenge``: echo it as plain text
    - anything else, including bodies that are not JSON: empty 200
    """
    if not body:
        return PlainTextResponse("Please send a request body", status_code=400)

    text = unquote_plus(body.decode("utf-8", errors="replace"))
    try:
        payload = HandshakePayload.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError):
        logger.info("Ignoring handshake request with unrecognised body")
        return Response(status_code=200)

    if payload.challenge is None:
        return Response(status_code=200)

    logger.info("Answering URL verification challenge")
    return PlainTextResponse(payload.challenge)


async def handle_slash_command(request: VerifiedRequest, messenger: Messenger) -> Response:
    """Open the provisioning modal in response to ``/provision``."""
    try:
        command = SlashCommand.from_form(request.body)
    except MalformedPayloadError as exc:
        logger.warning("Could not parse slash command: %s", exc)
        return Response(status_code=500)

    if command.command != PROVISION_COMMAND:
        logger.warning("Unsupported slash command %s from %s", command.command, command.user_id)
        return Response(status_code=500)

    try:
        await messenger.open_dialog(command.trigger_id, build_modal())
    except MessagingError:
        logger.error("Failed to open provisioning modal for %s", command.user_id, exc_info=True)
        return Response(status_code=500)

    logger.info("Opened provisioning modal for %s", command.user_id)
    return Response(status_code=200)


async def handle_interaction(
    request: VerifiedRequest,
    pipeline_client: PipelineTriggerClient,
    messenger: Messenger,
) -> Response:
    """Trigger the pipeline for a submitted modal and DM the tracking link.

    Interaction types other than view_submission are acknowledged and ignored.
    The trigger call always completes before the reply is sent; if it fails,
    no reply is sent.
    """
    try:
        payload = InteractionPayload.from_form(request.body)
    except MalformedPayloadError as exc:
        logger.warning("Could not parse interaction payload: %s", exc)
        return Response(status_code=401)

    logger.info("Interaction %s from %s", payload.type, payload.user.id)
    if payload.type != VIEW_SUBMISSION:
        return Response(status_code=200)

    try:
        os_type = payload.selected_value(OS_TYPE_BLOCK_ID)
        version = payload.selected_value(VERSION_BLOCK_ID)
    except MalformedPayloadError as exc:
        logger.warning("Incomplete view submission from %s: %s", payload.user.id, exc)
        return Response(status_code=500)

    try:
        result = await pipeline_client.trigger(version, os_type, payload.user.name)
    except TriggerError:
        logger.error("Pipeline trigger failed for %s", payload.user.id, exc_info=True)
        return Response(status_code=500)

    message = compose_reply(os_type, version, result.web_url)
    try:
        await messenger.send_direct_message(payload.user.id, message)
    except MessagingError:
        logger.error("Failed to send pipeline link to %s", payload.user.id, exc_info=True)
        return Response(status_code=500)

    logger.info("Pipeline %s (%s) triggered for %s", result.id, result.status, payload.user.id)
    return Response(status_code=200)
