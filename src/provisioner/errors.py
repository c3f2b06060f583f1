"""Exception types raised across the provisioner service."""


class ProvisionerError(Exception):
    """Base class for all provisioner errors."""


class ConfigurationError(ProvisionerError):
    """Required configuration is missing or invalid. Fatal at startup."""


class MalformedPayloadError(ProvisionerError):
    """An inbound Slack payload could not be parsed into the expected shape."""


class TriggerError(ProvisionerError):
    """The GitLab pipeline trigger call failed outright."""


class MessagingError(ProvisionerError):
    """A Slack API call (open dialog, send message) failed."""
