"""Liveness endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from response_models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Server ok"


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
