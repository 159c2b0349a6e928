"""
DDS v3 path builders

All paths are relative to the service root {endpoint}/v3/{project_id}
(see Settings.base_url).
"""

INSTANCES_PATH = "/instances"


def instances_path() -> str:
    return INSTANCES_PATH


def instance_path(instance_id: str) -> str:
    """
    Path of a single instance
    Example: /instances/9136fd2a9fcd405ea4674276ce36dae8in02
    """
    if not instance_id:
        raise ValueError("instance_id is required")
    return f"{INSTANCES_PATH}/{instance_id}"


def instance_action_path(instance_id: str, action: str) -> str:
    """
    Path of an action endpoint under an instance: /instances/{id}/{action}

    action is provider-defined and may contain '/' (e.g. "backups/policy").
    """
    if not action:
        raise ValueError("action is required")
    return f"{instance_path(instance_id)}/{action.strip('/')}"


def port_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "modify-port")


def availability_zone_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "migrate")


def remark_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "remark")


def slow_log_status_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "slowlog-desensitization")


def update_slow_log_status_path(instance_id: str, status: str) -> str:
    return f"{slow_log_status_path(instance_id)}/{status}"


def seconds_level_monitoring_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "monitoring-by-seconds/switch")


def backup_policy_path(instance_id: str) -> str:
    return instance_action_path(instance_id, "backups/policy")
