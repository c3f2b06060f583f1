"""Option catalog and the provisioning modal view.

The modal's block ids double as the keys of ``view.state.values`` in the
submission payload, so the handlers look selections up with the same
constants defined here.
"""

OS_TYPE_BLOCK_ID = "osType"
VERSION_BLOCK_ID = "version"

OS_TYPES: tuple[str, ...] = ("ubuntu", "redhat")
VERSIONS: tuple[str, ...] = (
    "2.4.2",
    "2.5.0",
    "2.5.1",
    "nightly-latest",
    "nightly-release-latest",
)


def _plain_text(text: str) -> dict:
    return {"type": "plain_text", "text": text}


def build_options(values: list[str] | tuple[str, ...], mention: bool = False) -> list[dict]:
    """Build static-select option objects for the given values.

    With ``mention`` the visible label is wrapped as ``<value>``; the option
    value is always the raw string so it comes back unwrapped on submission.
    """
    return [
        {
            "text": _plain_text(f"<{value}>" if mention else value),
            "value": value,
        }
        for value in values
    ]


def _select_input_block(block_id: str, label: str, options: list[dict]) -> dict:
    return {
        "type": "input",
        "block_id": block_id,
        "label": _plain_text(label),
        "element": {
            "type": "static_select",
            "action_id": block_id,
            "options": options,
        },
    }


def build_modal() -> dict:
    """Build the "Application deployer" modal with OS type and version selects.

    Returns:
        Slack modal view payload
    """
    return {
        "type": "modal",
        "title": _plain_text("Application deployer"),
        "close": _plain_text("Close"),
        "submit": _plain_text("Submit"),
        "blocks": [
            {
                "type": "section",
                "text": {"type": "mrkdwn", "text": "Please enter the instance details"},
            },
            _select_input_block(OS_TYPE_BLOCK_ID, "OS Type", build_options(OS_TYPES, mention=True)),
            _select_input_block(VERSION_BLOCK_ID, "Versions", build_options(VERSIONS, mention=True)),
        ],
    }
