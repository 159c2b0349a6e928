"""
DDS Instance Schemas

Request models are dumped with exclude_none=True so optional fields
left unset never reach the wire.

Terminology:
-----------
- instance_id: DDS instance identifier (e.g. "9136fd2a9fcd405ea4674276ce36dae8in02")
- job_id: Asynchronous job created by DDS for long running changes
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


# ===== Create =====

class DataStore(BaseModel):
    type: str = Field(..., examples=["DDS-Community"])
    version: str = Field(..., examples=["4.0"])
    storage_engine: str = Field(..., examples=["wiredTiger"])


class Configuration(BaseModel):
    type: str = Field(..., examples=["mongos", "shard", "config", "replica", "single"])
    configuration_id: str


class Flavor(BaseModel):
    type: str = Field(..., examples=["mongos", "shard", "config", "replica", "single"])
    num: int
    storage: Optional[str] = None
    size: Optional[int] = None
    spec_code: str


class BackupStrategy(BaseModel):
    start_time: str = Field(..., examples=["08:15-09:15"])
    keep_days: Optional[int] = None
    period: Optional[str] = Field(default=None, examples=["1,3,5"])


class ChargeInfo(BaseModel):
    charge_mode: str = Field(..., examples=["postPaid", "prePaid"])
    period_type: Optional[str] = None
    period_num: Optional[int] = None
    is_auto_renew: Optional[bool] = None
    is_auto_pay: Optional[bool] = None


class CreateOpts(BaseModel):
    name: str
    datastore: DataStore
    region: str
    availability_zone: str
    vpc_id: str
    subnet_id: str
    security_group_id: str
    password: Optional[str] = None
    port: Optional[str] = None
    disk_encryption_id: Optional[str] = None
    ssl_option: Optional[str] = None
    mode: str = Field(..., examples=["Sharding", "ReplicaSet", "Single"])
    configurations: Optional[List[Configuration]] = None
    flavor: List[Flavor]
    backup_strategy: Optional[BackupStrategy] = None
    enterprise_project_id: Optional[str] = None
    charge_info: Optional[ChargeInfo] = None


class CreateResponse(BaseModel):
    id: str
    name: Optional[str] = None
    datastore: Optional[DataStore] = None
    created: Optional[str] = None
    status: Optional[str] = None
    region: Optional[str] = None
    availability_zone: Optional[str] = None
    vpc_id: Optional[str] = None
    subnet_id: Optional[str] = None
    security_group_id: Optional[str] = None
    disk_encryption_id: Optional[str] = None
    mode: Optional[str] = None
    flavor: List[Flavor] = Field(default_factory=list)
    backup_strategy: Optional[BackupStrategy] = None
    ssl_option: Optional[str] = None
    job_id: Optional[str] = None
    order_id: Optional[str] = None
    enterprise_project_id: Optional[str] = None


# ===== Generic async job responses =====

class JobResponse(BaseModel):
    job_id: Optional[str] = None


class UpdateInstanceResponse(BaseModel):
    """Response of an instance action (resize, enlarge, modify-name, ...)"""
    job_id: Optional[str] = None
    order_id: Optional[str] = None


class PortUpdateResponse(JobResponse):
    pass


class AvailabilityZoneResponse(JobResponse):
    pass


# ===== List =====

class ListInstanceOpts(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    mode: Optional[str] = None
    datastore_type: Optional[str] = None
    vpc_id: Optional[str] = None
    subnet_id: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None

    def to_query(self) -> Dict[str, Any]:
        """Query params with zero values dropped"""
        return {k: v for k, v in self.model_dump().items() if v not in (None, "", 0)}


class NodeInfo(BaseModel):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None
    role: Optional[str] = None
    private_ip: Optional[str] = None
    public_ip: Optional[str] = None
    spec_code: Optional[str] = None
    availability_zone: Optional[str] = None


class VolumeInfo(BaseModel):
    size: Optional[str] = None
    used: Optional[str] = None


class GroupInfo(BaseModel):
    type: str
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    volume: Optional[VolumeInfo] = None
    nodes: List[NodeInfo] = Field(default_factory=list)


class InstanceDataStore(BaseModel):
    type: str
    version: Optional[str] = None
    storage_engine: Optional[str] = None


class Instance(BaseModel):
    id: str
    name: str
    remark: Optional[str] = None
    status: Optional[str] = None
    port: Optional[str] = None
    mode: Optional[str] = None
    region: Optional[str] = None
    datastore: Optional[InstanceDataStore] = None
    engine: Optional[str] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    db_user_name: Optional[str] = None
    ssl: Optional[int] = None
    vpc_id: Optional[str] = None
    subnet_id: Optional[str] = None
    security_group_id: Optional[str] = None
    backup_strategy: Optional[BackupStrategy] = None
    pay_mode: Optional[str] = None
    maintenance_window: Optional[str] = None
    groups: List[GroupInfo] = Field(default_factory=list)
    disk_encryption_id: Optional[str] = None
    enterprise_project_id: Optional[str] = None
    time_zone: Optional[str] = None
    actions: List[str] = Field(default_factory=list)


class InstanceList(BaseModel):
    instances: List[Instance] = Field(default_factory=list)
    total_count: int


# ===== Update options (composed into batch update steps) =====

class VolumeOpts(BaseModel):
    group_id: Optional[str] = None
    size: Optional[int] = None


class UpdateVolumeOpts(BaseModel):
    volume: VolumeOpts
    is_auto_pay: Optional[bool] = None


class UpdateNodeNumOpts(BaseModel):
    type: str = Field(..., examples=["mongos", "shard"])
    spec_code: str
    num: int
    volume: Optional[VolumeOpts] = None
    is_auto_pay: Optional[bool] = None


class SpecOpts(BaseModel):
    target_type: Optional[str] = None
    target_id: str
    target_spec_code: str


class UpdateSpecOpts(BaseModel):
    resize: SpecOpts
    is_auto_pay: Optional[bool] = None


# ===== Single attribute operations =====

class PortOpts(BaseModel):
    port: int


class EnabledOpts(BaseModel):
    """Monitoring switch as returned by DDS; the update returns 204 with no body"""
    enabled: Optional[bool] = None


class AvailabilityZoneOpts(BaseModel):
    target_azs: str = Field(..., examples=["az1xahz,az2xahz,az3xahz"])


class DescriptionOpts(BaseModel):
    remark: str


class BackupPolicyOpts(BaseModel):
    backup_policy: BackupStrategy


class BackupPolicyResponse(BaseModel):
    backup_policy: Optional[BackupStrategy] = None


SlowLogStatus = Literal["on", "off"]


class SlowLogStatusResponse(BaseModel):
    status: str = ""
