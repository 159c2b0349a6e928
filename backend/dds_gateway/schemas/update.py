"""
Batch update schemas

An update is an ordered list of UpdateStep, each one a provider action
endpoint under the instance: <verb> /instances/{instance_id}/{target}
"""
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator

from dds_gateway.core.errors import UpdateStepFailed


class UpdateVerb(str, Enum):
    POST = "POST"
    PUT = "PUT"


class UpdateStep(BaseModel):
    """
    One attribute change applied to an instance

    Attributes:
        target: Action endpoint under the instance (e.g. "resize", "enlarge-volume")
        payload_key: When set the body is {payload_key: value}, otherwise value is the body
        value: New setting, None sends no body
        verb: POST or PUT
    """
    target: str = Field(..., min_length=1, examples=["resize", "enlarge-volume", "modify-name"])
    payload_key: Optional[str] = None
    value: Any = None
    verb: UpdateVerb

    @field_validator("verb", mode="before")
    @classmethod
    def normalize_verb(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    def body(self) -> Any:
        if self.payload_key:
            return {self.payload_key: self.value}
        return self.value


class StepFailure(BaseModel):
    """Which step stopped the sequence and why"""
    step: int = Field(description="1-based position of the failing step")
    index: int = Field(description="0-based index of the failing step")
    target: str
    kind: str = Field(examples=["transport", "unexpected_status", "decode"])
    message: str
    status_code: Optional[int] = None


class ExecutionResult(BaseModel):
    completed_steps: int = 0
    last_response_body: Optional[Dict[str, Any]] = None
    error: Optional[StepFailure] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> "ExecutionResult":
        if self.error is not None:
            raise UpdateStepFailed(
                step_number=self.error.step,
                target=self.error.target,
                completed_steps=self.completed_steps,
                cause=self.error.message,
            )
        return self
