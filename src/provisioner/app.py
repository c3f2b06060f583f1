"""FastAPI application with lifespan, Slack routes and health endpoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from provisioner import __version__
from provisioner.config import Settings, get_settings
from provisioner.logging_config import configure_logging
from provisioner.pipeline.client import PipelineTriggerClient
from provisioner.slack.client import SlackMessenger
from provisioner.slack.router import router as slack_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Settings default to the environment."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Configure logging, validate config and build the outbound clients."""
        resolved = settings or get_settings()
        configure_logging(resolved.log_level)
        resolved.check_required()

        app.state.settings = resolved
        app.state.messenger = SlackMessenger(resolved)
        app.state.pipeline_client = PipelineTriggerClient(resolved)
        logger.info("Starting slack app (environment=%s)", resolved.environment)
        yield
        await app.state.pipeline_client.aclose()

    app = FastAPI(
        title="Slack Provisioner",
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(slack_router)

    @app.get("/health")
    async def health():
        """Health check endpoint for container probes and local development."""
        return {
            "status": "ok",
            "service": "slack-provisioner",
            "version": __version__,
        }

    return app


def main() -> None:
    """Run the service with uvicorn on the configured port."""
    settings = get_settings()
    settings.check_required()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


app = create_app()
