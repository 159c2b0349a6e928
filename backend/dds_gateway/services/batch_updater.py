"""
Batch Attribute Updater
ส่ง update steps ไปยัง DDS instance ตามลำดับ หยุดทันทีเมื่อ step ใด fail

Flow:
1. For each step in the given order
2. Build body: {payload_key: value} or value as-is
3. POST/PUT /instances/{instance_id}/{target}
4. 200/202 = success, decode into UpdateInstanceResponse
5. First failure stops the sequence (no retry, no rollback)

Completed steps stay applied on the DDS side; the caller decides whether
to resume from the failing step.
"""
from typing import Sequence
from dds_gateway.builders.dds_paths import instance_action_path
from dds_gateway.clients.dds_rest_client import DdsRestClient
from dds_gateway.core.errors import DdsRequestError, UnexpectedStatus
from dds_gateway.core.logging import logger
from dds_gateway.schemas.instance import UpdateInstanceResponse
from dds_gateway.schemas.request_spec import RequestSpec
from dds_gateway.schemas.update import ExecutionResult, StepFailure, UpdateStep

UPDATE_OK_CODES = [200, 202]


class BatchAttributeUpdater:

    def __init__(self, client: DdsRestClient):
        self.client = client

    def build_request(self, instance_id: str, step: UpdateStep) -> RequestSpec:
        return RequestSpec(
            method=step.verb.value,
            path=instance_action_path(instance_id, step.target),
            payload=step.body(),
            ok_codes=UPDATE_OK_CODES,
            operation=f"instance.update.{step.target}",
        )

    async def execute(self, instance_id: str, steps: Sequence[UpdateStep]) -> ExecutionResult:
        if not instance_id:
            raise ValueError("instance_id is required")

        result = ExecutionResult()
        for index, step in enumerate(steps):
            spec = self.build_request(instance_id, step)
            logger.info(f"Update step {index + 1}/{len(steps)}: {step.verb.value} {step.target} on {instance_id}")
            try:
                body = await self.client.send(spec)
                self.client.decode(spec, body, UpdateInstanceResponse)
            except DdsRequestError as e:
                logger.warning(f"Update step {index + 1} ({step.target}) failed on {instance_id}: {e.message}")
                result.error = StepFailure(
                    step=index + 1,
                    index=index,
                    target=step.target,
                    kind=e.kind,
                    message=e.message,
                    status_code=e.remote_status if isinstance(e, UnexpectedStatus) else None,
                )
                return result

            result.last_response_body = body
            result.completed_steps += 1

        return result
