"""SDK exceptions.

Every error raised on purpose by the SDK derives from ``EdgeStoreError`` and
carries an ``ErrorCode`` so callers can branch without string matching.
"""
from __future__ import annotations

from typing import Optional

from edgestore_sdk.shared.codes import ErrorCode


class EdgeStoreError(Exception):
    """SDK 异常基类"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "EdgeStoreError",
        details: Optional[dict] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        super().__init__(self.message)


class CredentialsError(EdgeStoreError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            code=ErrorCode.CREDENTIALS_MISSING,
            message=message or (
                "Missing EDGE_STORE_ACCESS_KEY or EDGE_STORE_SECRET_KEY. "
                "Pass them explicitly or set them in the environment."
            ),
            error_type="CredentialsError",
        )


class RequestError(EdgeStoreError):
    """The API answered with a non-2xx status."""

    def __init__(self, path: str, body: str, status_code: Optional[int] = None):
        self.path = path
        self.body = body
        self.status_code = status_code
        super().__init__(
            code=ErrorCode.REQUEST_FAILED,
            message=f"Failed to make request to {path}: {body}",
            error_type="RequestError",
            details={"path": path, "status_code": status_code},
        )


class MissingPathParamError(EdgeStoreError, ValueError):
    def __init__(self, bucket_name: str, index: int):
        self.bucket_name = bucket_name
        self.index = index
        super().__init__(
            code=ErrorCode.PATH_PARAM_MISSING,
            message="Missing path param",
            error_type="MissingPathParam",
            details={"bucket": bucket_name, "index": index},
        )


__all__ = [
    "EdgeStoreError",
    "CredentialsError",
    "RequestError",
    "MissingPathParamError",
]
