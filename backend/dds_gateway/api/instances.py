"""
DDS Instance Endpoints
Thin HTTP surface over DdsInstanceService

DDS errors are HTTPException subclasses, so they reach the caller with
the remote status (4xx/5xx) or 502 and a {"message", "details"} detail.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field
from dds_gateway.core.logging import logger
from dds_gateway.schemas.instance import (
    AvailabilityZoneOpts,
    AvailabilityZoneResponse,
    BackupPolicyResponse,
    BackupStrategy,
    CreateOpts,
    CreateResponse,
    DescriptionOpts,
    EnabledOpts,
    InstanceList,
    JobResponse,
    ListInstanceOpts,
    PortUpdateResponse,
    SlowLogStatus,
)
from dds_gateway.schemas.update import ExecutionResult, UpdateStep
from dds_gateway.services.instance_service import DdsInstanceService

router = APIRouter(prefix="/api/v1/dds", tags=["dds-instances"])

_service: Optional[DdsInstanceService] = None


def get_instance_service() -> DdsInstanceService:
    global _service
    if _service is None:
        _service = DdsInstanceService()
    return _service


# ===== Request bodies =====

class UpdateRequest(BaseModel):
    """Ordered update steps, executed one by one until the first failure"""
    steps: List[UpdateStep] = Field(default_factory=list)


class PortRequest(BaseModel):
    port: int


class SlowLogRequest(BaseModel):
    status: SlowLogStatus


class SlowLogResponse(BaseModel):
    status: str


class MonitoringRequest(BaseModel):
    enabled: bool


# ===== Endpoints =====

@router.post("/instances", response_model=CreateResponse, status_code=status.HTTP_202_ACCEPTED)
async def create_instance(opts: CreateOpts, service: DdsInstanceService = Depends(get_instance_service)):
    return await service.create(opts)


@router.get("/instances", response_model=InstanceList)
async def list_instances(
    id: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    mode: Optional[str] = Query(None, description="Sharding, ReplicaSet or Single"),
    datastore_type: Optional[str] = Query(None),
    vpc_id: Optional[str] = Query(None),
    subnet_id: Optional[str] = Query(None),
    offset: Optional[int] = Query(None, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    service: DdsInstanceService = Depends(get_instance_service),
):
    opts = ListInstanceOpts(
        id=id, name=name, mode=mode, datastore_type=datastore_type,
        vpc_id=vpc_id, subnet_id=subnet_id, offset=offset, limit=limit,
    )
    return await service.list_instances(opts)


@router.delete("/instances/{instance_id}", response_model=JobResponse, status_code=status.HTTP_202_ACCEPTED)
async def delete_instance(instance_id: str, service: DdsInstanceService = Depends(get_instance_service)):
    return await service.delete(instance_id)


@router.post("/instances/{instance_id}/update", response_model=ExecutionResult)
async def update_instance(
    instance_id: str,
    body: UpdateRequest,
    service: DdsInstanceService = Depends(get_instance_service),
):
    """
    Apply update steps in order

    **Errors:**
    - 502 when a step fails; detail carries the failing step and completed count
    """
    result = await service.update(instance_id, body.steps)
    if not result.success:
        logger.error(f"Update of {instance_id} stopped at step {result.error.step} ({result.error.target})")
    return result.raise_for_error()


@router.post("/instances/{instance_id}/port", response_model=PortUpdateResponse)
async def update_port(instance_id: str, body: PortRequest, service: DdsInstanceService = Depends(get_instance_service)):
    return await service.update_port(instance_id, body.port)


@router.post("/instances/{instance_id}/availability-zone", response_model=AvailabilityZoneResponse)
async def update_availability_zone(
    instance_id: str,
    body: AvailabilityZoneOpts,
    service: DdsInstanceService = Depends(get_instance_service),
):
    return await service.update_availability_zone(instance_id, body)


@router.put("/instances/{instance_id}/remark", status_code=status.HTTP_204_NO_CONTENT)
async def update_remark(instance_id: str, body: DescriptionOpts, service: DdsInstanceService = Depends(get_instance_service)):
    await service.update_remark(instance_id, body)


@router.get("/instances/{instance_id}/slow-log", response_model=SlowLogResponse)
async def get_slow_log_status(instance_id: str, service: DdsInstanceService = Depends(get_instance_service)):
    return SlowLogResponse(status=await service.get_slow_log_status(instance_id))


@router.put("/instances/{instance_id}/slow-log", status_code=status.HTTP_204_NO_CONTENT)
async def update_slow_log_status(instance_id: str, body: SlowLogRequest, service: DdsInstanceService = Depends(get_instance_service)):
    await service.update_slow_log_status(instance_id, body.status)


@router.get("/instances/{instance_id}/monitoring", response_model=EnabledOpts)
async def get_seconds_level_monitoring(instance_id: str, service: DdsInstanceService = Depends(get_instance_service)):
    return await service.get_seconds_level_monitoring(instance_id)


@router.put("/instances/{instance_id}/monitoring", response_model=EnabledOpts)
async def update_seconds_level_monitoring(
    instance_id: str,
    body: MonitoringRequest,
    service: DdsInstanceService = Depends(get_instance_service),
):
    return await service.update_seconds_level_monitoring(instance_id, body.enabled)


@router.get("/instances/{instance_id}/backup-policy", response_model=BackupPolicyResponse)
async def get_backup_policy(instance_id: str, service: DdsInstanceService = Depends(get_instance_service)):
    return await service.get_backup_policy(instance_id)


@router.put("/instances/{instance_id}/backup-policy", response_model=BackupPolicyResponse)
async def create_backup_policy(
    instance_id: str,
    body: BackupStrategy,
    service: DdsInstanceService = Depends(get_instance_service),
):
    return await service.create_backup_policy(instance_id, body)
