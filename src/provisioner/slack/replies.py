"""Confirmation message sent to the requester after a pipeline is triggered."""


def compose_reply(os_type: str, version: str, web_url: str) -> str:
    """Format the DM pointing the user at the pipeline's tracking URL.

    ``version`` is the choice as the user saw it, not the resolved image tag.
    """
    return (
        f"Hello your instance {os_type} {version}, is on the way! "
        f"_Click the link to follow the progress along_ :point_right: {web_url}"
    )
