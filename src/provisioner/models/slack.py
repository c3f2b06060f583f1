"""Pydantic models for the Slack request shapes the service consumes.

Slack posts three different shapes at us:

  - the URL-verification handshake: JSON (sometimes percent-encoded) with a
    ``challenge`` value we must echo back
  - slash commands: a flat ``application/x-www-form-urlencoded`` body
  - interaction callbacks: a single form field ``payload`` holding JSON
"""

import json
from urllib.parse import parse_qsl

from pydantic import BaseModel, ConfigDict, ValidationError

from provisioner.errors import MalformedPayloadError


class VerifiedRequest(BaseModel):
    """Raw body and headers of a request whose Slack signature checked out."""

    model_config = ConfigDict(frozen=True)

    body: bytes
    headers: dict[str, str]


class HandshakePayload(BaseModel):
    """URL-verification body. Anything without a string challenge is ignored."""

    challenge: str | None = None
    type: str | None = None
    token: str | None = None


class SlashCommand(BaseModel):
    """A parsed slash command invocation."""

    command: str
    trigger_id: str
    user_id: str
    user_name: str = ""
    text: str = ""
    channel_id: str | None = None
    team_id: str | None = None
    response_url: str | None = None

    @classmethod
    def from_form(cls, body: bytes) -> "SlashCommand":
        """Parse a form-encoded slash command body."""
        fields = dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
        try:
            return cls.model_validate(fields)
        except ValidationError as exc:
            raise MalformedPayloadError(f"Invalid slash command: {exc}") from exc


class SelectedOption(BaseModel):
    value: str


class ActionState(BaseModel):
    """State of a single input element inside a submitted view."""

    type: str | None = None
    selected_option: SelectedOption | None = None


class ViewState(BaseModel):
    # block_id -> action_id -> element state
    values: dict[str, dict[str, ActionState]] = {}


class InteractionView(BaseModel):
    id: str | None = None
    callback_id: str | None = None
    state: ViewState = ViewState()


class InteractionUser(BaseModel):
    id: str
    name: str = ""
    username: str | None = None


class InteractionPayload(BaseModel):
    """Payload Slack sends for interactive components and view submissions."""

    type: str
    user: InteractionUser
    view: InteractionView | None = None

    @classmethod
    def from_form(cls, body: bytes) -> "InteractionPayload":
        """Extract and parse the JSON ``payload`` form field."""
        fields = dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
        raw = fields.get("payload")
        if not raw:
            raise MalformedPayloadError("Interaction body has no payload field")
        try:
            return cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise MalformedPayloadError(f"Invalid interaction payload: {exc}") from exc

    def selected_value(self, block_id: str, action_id: str | None = None) -> str:
        """Return the selected option value of a static select in the submitted view.

        The action_id defaults to the block_id, matching how the provisioning
        modal is built. Raises MalformedPayloadError when nothing was selected.
        """
        action_id = action_id or block_id
        values = self.view.state.values if self.view else {}
        state = values.get(block_id, {}).get(action_id)
        if state is None or state.selected_option is None:
            raise MalformedPayloadError(f"No option selected for '{block_id}'")
        return state.selected_option.value
