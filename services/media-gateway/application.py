"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from media_gateway_common import setup_logging

from config import load_config
from dependencies import ServiceContext, build_context
from error_handlers import register_error_handlers
from routes import chat_router, health_router, runway_router, transcription_router

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    owns_context = getattr(app.state, "context", None) is None
    if owns_context:
        app.state.context = build_context(load_config())
    yield
    if owns_context:
        await app.state.context.aclose()
        logger.info("Service context closed")


def create_app(context: ServiceContext | None = None) -> FastAPI:
    """
    Creates the gateway application.

    Args:
        context: Prebuilt adapters. When omitted, the context is built from
            environment configuration on startup.
    """
    app = FastAPI(title="Media Gateway", lifespan=lifespan)
    if context is not None:
        app.state.context = context

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(transcription_router)
    app.include_router(runway_router)
    app.include_router(chat_router)
    return app
