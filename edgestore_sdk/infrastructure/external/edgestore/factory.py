"""
Factory for credential-bound EdgeStore clients.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import httpx

from edgestore_sdk.application.dtos.files import (
    DeleteFileResult,
    FileInfo,
    FileInfoForUpload,
    ListFilesFilter,
    ListFilesResult,
    MultipartPartsRequest,
    MultipartRequest,
    Pagination,
    RequestUploadPartsResult,
    RequestUploadResult,
)
from edgestore_sdk.application.ports.router import EdgeStoreRouter
from edgestore_sdk.core.config import get_settings
from edgestore_sdk.core.logging_config import get_logger
from edgestore_sdk.domain.exceptions import CredentialsError
from edgestore_sdk.infrastructure.external.api_clients import Credentials
from .raw_sdk import EdgeStoreRawSdk


logger = get_logger(__name__)


class EdgeStoreSdk:
    """The six API operations with credentials captured once."""

    __slots__ = ("_credentials", "_raw")

    def __init__(self, credentials: Credentials, raw: EdgeStoreRawSdk) -> None:
        self._credentials = credentials
        self._raw = raw

    def __repr__(self) -> str:
        return f"EdgeStoreSdk(base_url={self._raw.base_url!r}, credentials={self._credentials!r})"

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def _keys(self) -> dict[str, str]:
        return {
            "access_key": self._credentials.access_key,
            "secret_key": self._credentials.secret_key,
        }

    async def get_token(self, *, ctx: Mapping[str, Any], router: EdgeStoreRouter) -> str:
        return await self._raw.get_token(**self._keys(), ctx=ctx, router=router)

    async def get_file(self, *, url: str) -> FileInfo:
        return await self._raw.get_file(**self._keys(), url=url)

    async def request_upload(
        self,
        *,
        bucket_name: str,
        bucket_type: str,
        file_info: Union[FileInfoForUpload, Mapping[str, Any]],
        multipart: Union[MultipartRequest, Mapping[str, Any], None] = None,
    ) -> RequestUploadResult:
        return await self._raw.request_upload(
            **self._keys(),
            bucket_name=bucket_name,
            bucket_type=bucket_type,
            file_info=file_info,
            multipart=multipart,
        )

    async def request_upload_parts(
        self,
        *,
        key: str,
        multipart: Union[MultipartPartsRequest, Mapping[str, Any]],
    ) -> RequestUploadPartsResult:
        return await self._raw.request_upload_parts(**self._keys(), key=key, multipart=multipart)

    async def delete_file(self, *, url: str) -> DeleteFileResult:
        return await self._raw.delete_file(**self._keys(), url=url)

    async def list_files(
        self,
        *,
        bucket_name: str,
        filter: Union[ListFilesFilter, Mapping[str, Any], None] = None,
        pagination: Union[Pagination, Mapping[str, Any], None] = None,
    ) -> ListFilesResult:
        return await self._raw.list_files(
            **self._keys(),
            bucket_name=bucket_name,
            filter=filter,
            pagination=pagination,
        )


def init_edgestore_sdk(
    access_key: Optional[str] = None,
    secret_key: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> EdgeStoreSdk:
    """Create a client, falling back to EDGE_STORE_ACCESS_KEY / EDGE_STORE_SECRET_KEY.

    Raises:
        CredentialsError: either key is missing after the fallback
    """
    settings = get_settings()
    access_key = access_key or settings.ACCESS_KEY
    secret_key = secret_key or settings.SECRET_KEY
    if not access_key or not secret_key:
        raise CredentialsError()

    raw = EdgeStoreRawSdk(base_url=base_url or settings.API_ENDPOINT, transport=transport)
    logger.debug("edgestore_sdk_initialized", base_url=raw.base_url)
    return EdgeStoreSdk(Credentials(access_key, secret_key), raw)
