"""
Admin API routes: pipeline triggers and the model registry.
"""

from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_model_registry, get_pipeline_console
from ..errors import to_http_exception
from ..schemas import ModelRegistryResponse, ModelRunRowOut, PipelineStatusResponse
from ...admin import (
    ActionInProgressError,
    ModelActivationError,
    ModelRegistry,
    PipelineAction,
    PipelineConsole,
)
from ...client import (
    ActivationResult,
    ApiError,
    IngestionStatus,
    ProcessingStatus,
    TrainingStatus,
)


router = APIRouter(prefix="/admin", tags=["admin"])


def _registry_response(registry: ModelRegistry) -> ModelRegistryResponse:
    return ModelRegistryResponse(
        runs=[ModelRunRowOut(**row.to_dict()) for row in registry.rows()],
        active=registry.active,
        error=registry.error,
    )


@router.get("/pipeline", response_model=PipelineStatusResponse)
async def pipeline_status(
    pipeline: PipelineConsole = Depends(get_pipeline_console)
) -> PipelineStatusResponse:
    """Report which pipeline actions are running."""
    return PipelineStatusResponse(
        ingest=pipeline.is_pending(PipelineAction.INGEST),
        process=pipeline.is_pending(PipelineAction.PROCESS),
        train=pipeline.is_pending(PipelineAction.TRAIN),
    )


@router.post(
    "/{action}",
    response_model=Union[IngestionStatus, ProcessingStatus, TrainingStatus]
)
async def trigger_pipeline_action(
    action: PipelineAction,
    pipeline: PipelineConsole = Depends(get_pipeline_console)
):
    """
    Run one pipeline step (ingest, process or train).

    Returns 409 while the same step is still running.
    """
    try:
        return await pipeline.trigger(action)
    except ActionInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ApiError as e:
        raise to_http_exception(e)


@router.get("/models", response_model=ModelRegistryResponse)
async def list_models(
    registry: ModelRegistry = Depends(get_model_registry)
) -> ModelRegistryResponse:
    """
    List model runs and the active model.

    A failed refresh keeps the previously loaded runs and reports the
    failure in `error`.
    """
    await registry.refresh()
    return _registry_response(registry)


@router.post("/model-runs/{model_run_id}/activate", response_model=ActivationResult)
async def activate_model_run(
    model_run_id: str,
    registry: ModelRegistry = Depends(get_model_registry)
) -> ActivationResult:
    """Make a model run the one used for simulations."""
    if registry.find(model_run_id) is None:
        await registry.refresh()

    try:
        return await registry.activate(model_run_id)
    except ModelActivationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ApiError as e:
        raise to_http_exception(e)
