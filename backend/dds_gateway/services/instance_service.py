"""
DDS Instance Service
Service สำหรับจัดการ DDS instances (create/delete/list/update และ attribute ต่างๆ)

Every method maps one typed request to one DDS call, except:
- update(): ordered batch of UpdateStep via BatchAttributeUpdater
- list_all(): walks offset/limit pages until total_count is reached
"""
from typing import List, Optional, Sequence
from dds_gateway.builders import dds_paths
from dds_gateway.clients.dds_rest_client import DdsRestClient
from dds_gateway.core.config import settings
from dds_gateway.core.logging import logger
from dds_gateway.schemas.instance import (
    AvailabilityZoneOpts,
    AvailabilityZoneResponse,
    BackupPolicyOpts,
    BackupPolicyResponse,
    BackupStrategy,
    CreateOpts,
    CreateResponse,
    DescriptionOpts,
    EnabledOpts,
    Instance,
    InstanceList,
    JobResponse,
    ListInstanceOpts,
    PortOpts,
    PortUpdateResponse,
    SlowLogStatus,
    SlowLogStatusResponse,
)
from dds_gateway.schemas.request_spec import RequestSpec
from dds_gateway.schemas.update import ExecutionResult, UpdateStep
from dds_gateway.services.batch_updater import BatchAttributeUpdater


class DdsInstanceService:
    """
    Service สำหรับจัดการ DDS instances

    The client (and with it the default headers) is injected so that
    independent services never share request state.
    """

    def __init__(self, client: Optional[DdsRestClient] = None, page_size: Optional[int] = None):
        self.client = client or DdsRestClient()
        self.updater = BatchAttributeUpdater(self.client)
        self.page_size = page_size or settings.DDS_LIST_PAGE_SIZE

    # ===== Lifecycle =====

    async def create(self, opts: CreateOpts) -> CreateResponse:
        spec = RequestSpec(
            method="POST",
            path=dds_paths.instances_path(),
            payload=opts.model_dump(exclude_none=True),
            ok_codes=[202],
            operation="instance.create",
        )
        logger.info(f"Creating DDS instance {opts.name} ({opts.mode})")
        return await self.client.send_model(spec, CreateResponse)

    async def delete(self, instance_id: str) -> JobResponse:
        spec = RequestSpec(
            method="DELETE",
            path=dds_paths.instance_path(instance_id),
            operation="instance.delete",
        )
        logger.info(f"Deleting DDS instance {instance_id}")
        return await self.client.send_model(spec, JobResponse)

    async def list_instances(self, opts: Optional[ListInstanceOpts] = None) -> InstanceList:
        spec = RequestSpec(
            method="GET",
            path=dds_paths.instances_path(),
            query=opts.to_query() if opts else {},
            operation="instance.list",
        )
        return await self.client.send_model(spec, InstanceList)

    async def list_all(self, opts: Optional[ListInstanceOpts] = None) -> List[Instance]:
        """
        Collect every instance matching the filters

        Starts at opts.offset (default 0) and requests pages of opts.limit
        (default DDS_LIST_PAGE_SIZE) until total_count is reached or a page
        comes back empty. A page without total_count is a DecodeError.
        """
        opts = opts or ListInstanceOpts()
        offset = opts.offset or 0
        limit = opts.limit or self.page_size

        instances: List[Instance] = []
        while True:
            page = await self.list_instances(opts.model_copy(update={"offset": offset, "limit": limit}))
            instances.extend(page.instances)
            offset += len(page.instances)
            if not page.instances or offset >= page.total_count:
                break

        logger.info(f"Listed {len(instances)} DDS instances")
        return instances

    # ===== Batch update =====

    async def update(self, instance_id: str, steps: Sequence[UpdateStep]) -> ExecutionResult:
        return await self.updater.execute(instance_id, steps)

    # ===== Single attribute operations =====

    async def update_availability_zone(self, instance_id: str, opts: AvailabilityZoneOpts) -> AvailabilityZoneResponse:
        spec = RequestSpec(
            method="POST",
            path=dds_paths.availability_zone_path(instance_id),
            payload=opts.model_dump(),
            operation="instance.migrate_az",
        )
        return await self.client.send_model(spec, AvailabilityZoneResponse)

    async def update_remark(self, instance_id: str, opts: DescriptionOpts) -> None:
        spec = RequestSpec(
            method="PUT",
            path=dds_paths.remark_path(instance_id),
            payload=opts.model_dump(),
            ok_codes=[200, 201, 202, 204],
            operation="instance.remark",
        )
        await self.client.send(spec)

    async def update_slow_log_status(self, instance_id: str, status: SlowLogStatus) -> None:
        if status not in ("on", "off"):
            raise ValueError(f"slow log status must be 'on' or 'off', got {status!r}")
        spec = RequestSpec(
            method="PUT",
            path=dds_paths.update_slow_log_status_path(instance_id, status),
            ok_codes=[200, 201, 202, 204],
            operation="instance.slowlog.update",
        )
        await self.client.send(spec)

    async def get_slow_log_status(self, instance_id: str) -> str:
        spec = RequestSpec(
            method="GET",
            path=dds_paths.slow_log_status_path(instance_id),
            operation="instance.slowlog.get",
        )
        return (await self.client.send_model(spec, SlowLogStatusResponse)).status

    async def update_port(self, instance_id: str, port: int) -> PortUpdateResponse:
        spec = RequestSpec(
            method="POST",
            path=dds_paths.port_path(instance_id),
            payload=PortOpts(port=port).model_dump(),
            operation="instance.port",
        )
        return await self.client.send_model(spec, PortUpdateResponse)

    async def update_seconds_level_monitoring(self, instance_id: str, enabled: bool) -> EnabledOpts:
        spec = RequestSpec(
            method="PUT",
            path=dds_paths.seconds_level_monitoring_path(instance_id),
            payload=EnabledOpts(enabled=enabled).model_dump(),
            ok_codes=[204],
            operation="instance.monitoring.update",
        )
        return await self.client.send_model(spec, EnabledOpts)

    async def get_seconds_level_monitoring(self, instance_id: str) -> EnabledOpts:
        spec = RequestSpec(
            method="GET",
            path=dds_paths.seconds_level_monitoring_path(instance_id),
            operation="instance.monitoring.get",
        )
        return await self.client.send_model(spec, EnabledOpts)

    async def create_backup_policy(self, instance_id: str, policy: BackupStrategy) -> BackupPolicyResponse:
        spec = RequestSpec(
            method="PUT",
            path=dds_paths.backup_policy_path(instance_id),
            payload=BackupPolicyOpts(backup_policy=policy).model_dump(exclude_none=True),
            ok_codes=[200, 201, 202, 204],
            operation="instance.backup_policy.update",
        )
        return await self.client.send_model(spec, BackupPolicyResponse)

    async def get_backup_policy(self, instance_id: str) -> BackupPolicyResponse:
        spec = RequestSpec(
            method="GET",
            path=dds_paths.backup_policy_path(instance_id),
            operation="instance.backup_policy.get",
        )
        return await self.client.send_model(spec, BackupPolicyResponse)
