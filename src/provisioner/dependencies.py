"""FastAPI dependencies exposing the objects built once in the lifespan."""

from fastapi import Request

from provisioner.config import Settings
from provisioner.pipeline.client import PipelineTriggerClient
from provisioner.slack.client import Messenger


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_messenger(request: Request) -> Messenger:
    return request.app.state.messenger


def get_pipeline_client(request: Request) -> PipelineTriggerClient:
    return request.app.state.pipeline_client
