import httpx
from typing import Any, Dict, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from dds_gateway.core.config import Settings, settings as default_settings
from dds_gateway.core.errors import DecodeError, TransportError, UnexpectedStatus
from dds_gateway.core.logging import logger
from dds_gateway.schemas.request_spec import RequestSpec

ModelT = TypeVar("ModelT", bound=BaseModel)


class DdsRestClient:
    """
    DDS v3 REST client

    URL layout: {endpoint}/v3/{project_id}{spec.path}

    Default headers (Content-Type, X-Language, X-Auth-Token) come from the
    settings passed in at construction; RequestSpec.headers override them
    per request. Requests are never retried, a failure is reported to the
    caller as TransportError, UnexpectedStatus or DecodeError.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        config = config or default_settings
        self.base_url = config.base_url()
        self.timeout = config.DDS_TIMEOUT_SEC
        self.default_headers = dict(headers) if headers is not None else config.default_headers()
        # tests swap in httpx.MockTransport here
        self.transport = transport

    def _full_url(self, spec: RequestSpec) -> str:
        return f"{self.base_url}{spec.path}"

    async def send(self, spec: RequestSpec) -> Any:
        """
        Send a request and return the decoded JSON body

        Returns None when the response has no body (e.g. 204).
        """
        url = self._full_url(spec)
        headers = {**self.default_headers, **spec.headers}

        logger.info(f"DDS Request: {spec.method} {url}")
        if spec.payload is not None:
            logger.debug(f"Payload: {spec.payload}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                # Only send json body if payload exists
                if spec.payload is not None:
                    resp = await client.request(
                        method=spec.method,
                        url=url,
                        params=spec.query or None,
                        headers=headers,
                        json=spec.payload
                    )
                else:
                    resp = await client.request(
                        method=spec.method,
                        url=url,
                        params=spec.query or None,
                        headers=headers
                    )
        except httpx.HTTPError as e:
            logger.warning(f"DDS transport error on {spec.method} {url}: {e}")
            raise TransportError(url, e) from e

        logger.info(f"DDS Response: {resp.status_code}")

        if resp.status_code not in spec.accepted_codes():
            raise UnexpectedStatus(url, resp.status_code, resp.text)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError(url, f"invalid JSON: {e}", body=resp.text) from e

    def decode(self, spec: RequestSpec, body: Any, model: Type[ModelT]) -> ModelT:
        """Validate a decoded body against a response model, empty body counts as {}"""
        try:
            return model.model_validate(body if body is not None else {})
        except ValidationError as e:
            raise DecodeError(self._full_url(spec), str(e)) from e

    async def send_model(self, spec: RequestSpec, model: Type[ModelT]) -> ModelT:
        """Send a request and validate the body against a response model"""
        return self.decode(spec, await self.send(spec), model)
