"""Video-generation job endpoints."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from dependencies import get_video_job_orchestrator
from domain import SaveRequest, UpstreamResponse, VideoGenerationRequest
from handlers import VideoJobOrchestrator
from response_models import SaveArtifactResponse

router = APIRouter(prefix="/runway", tags=["runway"])

OrchestratorDep = Annotated[VideoJobOrchestrator, Depends(get_video_job_orchestrator)]


def _passthrough(response: UpstreamResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


@router.post("/generate")
async def generate_video(
    orchestrator: OrchestratorDep,
    request: Annotated[VideoGenerationRequest | None, Body()] = None,
) -> JSONResponse:
    """Submits a text-to-video job; the upstream reply is returned as-is."""
    response = await orchestrator.submit(request or VideoGenerationRequest())
    return _passthrough(response)


@router.get("/tasks/{task_id}")
async def get_task(task_id: str, orchestrator: OrchestratorDep) -> JSONResponse:
    """Returns the upstream status of a job; the upstream reply is returned as-is."""
    response = await orchestrator.poll(task_id)
    return _passthrough(response)


@router.post("/save-to-firebase", response_model=SaveArtifactResponse)
@router.post("/save-to-storage", response_model=SaveArtifactResponse)
async def save_artifact(
    orchestrator: OrchestratorDep,
    request: Annotated[SaveRequest | None, Body()] = None,
) -> SaveArtifactResponse:
    """Downloads a finished video and stores it privately in the artifact bucket."""
    ref = await orchestrator.materialize(request or SaveRequest())
    return SaveArtifactResponse(storage_path=ref.key, bucket=ref.bucket)
