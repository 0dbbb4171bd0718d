"""
Deployment Log Endpoints.

Records deployments of the site to staging or production and their outcome.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from memopyk.core.database.base import utc_now_naive
from memopyk.core.database.entities.deployments import (
    Deployment,
    DeploymentEnvironment,
    DeploymentStatus,
)
from memopyk.core.logging_config import get_logger
from memopyk.core.models.io import DeploymentCreate, DeploymentRead, DeploymentStatusUpdate
from memopyk.server.services.deps import AdminDep, DeploymentRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["deployments"])


def _environment_or_404(environment: str) -> DeploymentEnvironment:
    try:
        return DeploymentEnvironment(environment)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown environment '{environment}'"
        ) from None


@router.post(
    "/{environment}",
    response_model=DeploymentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Start Deployment",
    description="Record a pending deployment to staging or production.",
    responses={404: {"description": "Unknown environment"}},
)
async def start_deployment(
    environment: str, payload: DeploymentCreate, admin_user: AdminDep, deployments: DeploymentRepoDep
) -> DeploymentRead:
    """
    Record a new deployment.

    - **environment**: ``staging`` or ``production``.
    - **version**: Version or commit being deployed.
    - **notes**: Optional free text.
    """
    env = _environment_or_404(environment)
    deployment = await deployments.create(
        Deployment(
            environment=env.value,
            version=payload.version,
            notes=payload.notes,
            deployed_by=admin_user,
        )
    )
    logger.info(f"Deployment {deployment.id} of {deployment.version} to {env.value} recorded")
    return DeploymentRead.model_validate(deployment)


@router.patch(
    "/{deployment_id}/status",
    response_model=DeploymentRead,
    summary="Update Deployment Status",
    responses={
        404: {"description": "Deployment not found"},
        409: {"description": "Deployment already finished"},
    },
)
async def update_deployment_status(
    deployment_id: str, payload: DeploymentStatusUpdate, _: AdminDep, deployments: DeploymentRepoDep
) -> DeploymentRead:
    deployment = await deployments.get_by_id(deployment_id)
    if deployment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Deployment {deployment_id} not found")
    if DeploymentStatus(deployment.status).is_finished:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Deployment {deployment_id} already {deployment.status}",
        )

    new_status = DeploymentStatus(payload.status)
    deployment.status = new_status.value
    if payload.notes is not None:
        deployment.notes = payload.notes
    if new_status.is_finished:
        deployment.completed_at = utc_now_naive()

    deployment = await deployments.update(deployment)
    logger.info(f"Deployment {deployment.id} is now {deployment.status}")
    return DeploymentRead.model_validate(deployment)


@router.get(
    "/history/{environment}",
    response_model=List[DeploymentRead],
    summary="Deployment History",
    description="Deployments to an environment, newest first.",
    responses={404: {"description": "Unknown environment"}},
)
async def deployment_history(
    environment: str,
    _: AdminDep,
    deployments: DeploymentRepoDep,
    limit: int = Query(20, ge=1, le=100),
) -> List[DeploymentRead]:
    env = _environment_or_404(environment)
    return [DeploymentRead.model_validate(d) for d in await deployments.history(env.value, limit=limit)]
