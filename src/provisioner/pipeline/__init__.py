"""GitLab pipeline triggering."""

from provisioner.pipeline.client import PipelineTriggerClient, resolve_tag

__all__ = ["PipelineTriggerClient", "resolve_tag"]
