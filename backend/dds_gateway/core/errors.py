from typing import Any, Optional
from fastapi import HTTPException


class DdsRequestError(HTTPException):
    """Base for every failure talking to the DDS API"""
    kind = "request"

    def __init__(self, status_code: int, message: str, details: Any = None):
        super().__init__(status_code=status_code, detail={
            "message": message,
            "details": details
        })
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.message} ({self.status_code})"


class TransportError(DdsRequestError):
    """Connection failure or timeout before a response arrived"""
    kind = "transport"

    def __init__(self, url: str, cause: Exception):
        super().__init__(
            status_code=502,
            message=f"DDS transport error: {cause.__class__.__name__}: {cause}",
            details={"url": url}
        )
        self.url = url
        self.cause = cause


class UnexpectedStatus(DdsRequestError):
    """Response status outside the operation's accepted codes"""
    kind = "unexpected_status"

    def __init__(self, url: str, remote_status: int, body: str):
        # forward 4xx/5xx from DDS as-is, anything else is a gateway problem
        status_code = remote_status if remote_status >= 400 else 502
        super().__init__(
            status_code=status_code,
            message=f"DDS request failed with status {remote_status}",
            details={"url": url, "status": remote_status, "body": body}
        )
        self.url = url
        self.remote_status = remote_status
        self.body = body


class DecodeError(DdsRequestError):
    """Response body could not be parsed into the expected shape"""
    kind = "decode"

    def __init__(self, url: str, reason: str, body: Optional[str] = None):
        super().__init__(
            status_code=502,
            message=f"DDS response could not be decoded: {reason}",
            details={"url": url, "body": body}
        )
        self.url = url
        self.reason = reason


class UpdateStepFailed(DdsRequestError):
    """A batch update stopped at a failing step"""
    kind = "update_step"

    def __init__(self, step_number: int, target: str, completed_steps: int, cause: str):
        super().__init__(
            status_code=502,
            message=f"Update step {step_number} ({target}) failed: {cause}",
            details={
                "step": step_number,
                "target": target,
                "completed_steps": completed_steps,
            }
        )
        self.step_number = step_number
        self.target = target
        self.completed_steps = completed_steps
