"""GitLab pipeline trigger client.

Submits the user's selections to GitLab's pipeline trigger API as a
form-encoded POST and extracts the tracking URL from the JSON response.
"""

import logging

import httpx
from pydantic import ValidationError

from provisioner.config import Settings
from provisioner.errors import TriggerError
from provisioner.models.pipeline import PipelineTriggerRequest, PipelineTriggerResult

logger = logging.getLogger(__name__)

# Version choices that map to a different image tag
TAG_ALIASES: dict[str, str] = {
    "nightly-release-latest": "release-latest",
    "nightly-latest": "latest",
}


def resolve_tag(version: str) -> str:
    """Return the image tag for a version choice, applying nightly aliases."""
    return TAG_ALIASES.get(version, version)


class PipelineTriggerClient:
    """Triggers the provisioning pipeline. One instance per process."""

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None) -> None:
        self._url = settings.gitlab_trigger_url
        self._ref = settings.gitlab_trigger_ref
        self._label = settings.gitlab_trigger_label
        self._token = settings.gitlab_trigger_token
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(float(settings.http_timeout)),
        )

    def build_request(self, version: str, os_type: str, requester: str) -> PipelineTriggerRequest:
        return PipelineTriggerRequest(
            tag=resolve_tag(version),
            reference=version,
            os_type=os_type,
            requester=requester,
            ref=self._ref,
            trigger=self._label,
            token=self._token,
        )

    async def trigger(self, version: str, os_type: str, requester: str) -> PipelineTriggerResult:
        """Trigger a pipeline run and return GitLab's response.

        A 2xx response whose body is not the expected JSON yields an empty
        result (no web_url) instead of an error. Transport failures and any
        non-2xx response raise TriggerError.
        """
        request = self.build_request(version, os_type, requester)
        logger.info(
            "Triggering pipeline: tag=%s reference=%s os_type=%s requester=%s",
            request.tag,
            request.reference,
            request.os_type,
            request.requester,
        )

        try:
            response = await self._http.post(self._url, data=request.to_form())
        except httpx.HTTPError as exc:
            raise TriggerError(f"Pipeline trigger request failed: {exc}") from exc

        logger.info("Pipeline trigger responded %s", response.status_code)
        logger.debug("Pipeline trigger response body: %s", response.text)

        if not response.is_success:
            logger.warning(
                "Pipeline trigger returned HTTP %s with body %s",
                response.status_code,
                response.text,
            )
            raise TriggerError(f"Pipeline trigger returned HTTP {response.status_code}")

        try:
            return PipelineTriggerResult.model_validate_json(response.content)
        except ValidationError:
            logger.warning("Unparseable pipeline trigger response, continuing without URL")
            return PipelineTriggerResult()

    async def aclose(self) -> None:
        await self._http.aclose()
