"""Request and result types for the GitLab pipeline trigger."""

from pydantic import BaseModel


class PipelineTriggerRequest(BaseModel):
    """Variables submitted to the GitLab trigger endpoint. Built fresh per call."""

    tag: str
    reference: str
    os_type: str
    requester: str
    ref: str
    trigger: str
    token: str

    def to_form(self) -> dict[str, str]:
        """Render as the form fields GitLab's trigger API expects."""
        return {
            "variables[tag]": self.tag,
            "variables[reference]": self.reference,
            "variables[trigger]": self.trigger,
            "ref": self.ref,
            "variables[TF_OS_TYPE]": self.os_type,
            "variables[requester]": self.requester,
            "token": self.token,
        }


class PipelineTriggerResult(BaseModel):
    """Subset of GitLab's pipeline response. Only web_url is used downstream."""

    id: int = 0
    status: str = ""
    web_url: str = ""
