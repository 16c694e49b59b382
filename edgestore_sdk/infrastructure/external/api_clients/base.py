"""
Single HTTP primitive shared by every EdgeStore operation:
- JSON request body
- Basic authentication
- request/response logging (debug)
- non-2xx responses raised as RequestError
"""
import base64
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel

from edgestore_sdk.application.dtos.files import json_default, to_wire
from edgestore_sdk.core.config import get_settings
from edgestore_sdk.core.logging_config import get_logger
from edgestore_sdk.domain.exceptions import RequestError

logger = get_logger(__name__)

T = TypeVar('T', bound=BaseModel)


@dataclass(frozen=True)
class Credentials:
    """Access/secret key pair; never validated client side."""
    access_key: str
    secret_key: str

    def __repr__(self) -> str:
        return f"Credentials(access_key={self.access_key!r}, secret_key='***')"

    def basic_auth_header(self) -> str:
        raw = f"{self.access_key}:{self.secret_key}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


def build_body(body: Union[Mapping[str, Any], BaseModel]) -> Dict[str, Any]:
    """Dump DTO values and drop top-level keys that are None.

    Optional fields are sent absent, never as JSON null.
    """
    if isinstance(body, BaseModel):
        return to_wire(body)
    return {k: to_wire(v) for k, v in body.items() if v is not None}


def encode_body(payload: Mapping[str, Any]) -> bytes:
    """JSON-encode a built body; datetimes inside plain mappings become ISO-8601 UTC."""
    return json.dumps(payload, ensure_ascii=False, default=json_default).encode("utf-8")


class RequestClient:
    """
    EdgeStore REST client.

    One POST per call on a short-lived ``httpx.AsyncClient``; no state is
    shared between calls, so concurrent use needs no coordination.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        debug: Optional[bool] = None,
    ):
        """
        Args:
            base_url: API base URL, defaults to EDGE_STORE_API_ENDPOINT
            transport: httpx transport override (tests, proxies)
            debug: log requests and responses, defaults to EDGE_STORE_DEBUG
        """
        if base_url is None or debug is None:
            settings = get_settings()
            base_url = base_url or settings.API_ENDPOINT
            debug = settings.DEBUG if debug is None else debug
        self.base_url = base_url.rstrip('/')
        self.transport = transport
        self.debug = debug

    def _build_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _log_request(self, url: str, body: Any, headers: Mapping[str, str]):
        if self.debug:
            logger.debug(
                "edgestore_request",
                method="POST",
                url=url,
                json=body,
                headers={k: v for k, v in headers.items() if k.lower() != "authorization"},
            )

    def _log_response(self, path: str, response: httpx.Response, elapsed_ms: float):
        if self.debug:
            logger.debug(
                "edgestore_response",
                path=path,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
            )

    async def send(
        self,
        path: str,
        body: Union[Mapping[str, Any], BaseModel],
        credentials: Credentials,
        response_model: Optional[Type[T]] = None,
    ) -> Any:
        """
        Send one POST request.

        Args:
            path: route, e.g. ``/get-file``
            body: JSON body (mapping or DTO)
            credentials: key pair for the Authorization header
            response_model: optional pydantic model for the parsed JSON

        Returns:
            Parsed JSON, or ``response_model`` instance when given

        Raises:
            RequestError: non-2xx response
            httpx.HTTPError: transport failure
        """
        url = self._build_url(path)
        payload = build_body(body)
        headers = {
            "Content-Type": "application/json",
            "Authorization": credentials.basic_auth_header(),
        }

        self._log_request(url, payload, headers)

        start_time = datetime.now()
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(url, content=encode_body(payload), headers=headers)
        elapsed = (datetime.now() - start_time).total_seconds() * 1000

        self._log_response(path, response, elapsed)

        if not response.is_success:
            logger.error(
                "edgestore_request_failed",
                path=path,
                status_code=response.status_code,
                body=response.text,
            )
            raise RequestError(path=path, body=response.text, status_code=response.status_code)

        data = response.json()
        if response_model is not None:
            return response_model.model_validate(data)
        return data
