"""
EdgeStore raw SDK: one method per API route, credentials passed on every call.

Prefer ``init_edgestore_sdk()`` unless keys change between calls.
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
    PathSegment,
    RequestUploadPartsResult,
    RequestUploadResponse,
    RequestUploadResult,
    TokenBucket,
    TokenResponse,
    to_wire,
)
from edgestore_sdk.application.ports.router import EdgeStoreRouter
from edgestore_sdk.core.logging_config import get_logger
from edgestore_sdk.domain.exceptions import MissingPathParamError
from edgestore_sdk.infrastructure.external.api_clients import Credentials, RequestClient


logger = get_logger(__name__)

GET_TOKEN_PATH = "/get-token"
GET_FILE_PATH = "/get-file"
REQUEST_UPLOAD_PATH = "/request-upload"
REQUEST_UPLOAD_PARTS_PATH = "/request-upload-parts"
DELETE_FILE_PATH = "/delete-file"
LIST_FILES_PATH = "/list-files"


def build_token_buckets(router: EdgeStoreRouter) -> dict[str, dict[str, Any]]:
    """Evaluate every bucket's path functions into ``{name: {path, accessControl}}``.

    Raises:
        MissingPathParamError: a path level has no entry
    """
    buckets: dict[str, dict[str, Any]] = {}
    for bucket_name, bucket in router.buckets.items():
        definition = bucket.definition
        segments = []
        for index, param in enumerate(definition.path):
            first = next(iter(param.items()), None)
            if first is None:
                raise MissingPathParamError(bucket_name, index)
            key, value_fn = first
            segments.append(PathSegment(key=key, value=value_fn()))
        buckets[bucket_name] = to_wire(
            TokenBucket(path=segments, access_control=to_wire(definition.access_control))
        )
    return buckets


class EdgeStoreRawSdk:
    """Stateless wrapper over ``RequestClient``; safe to share between tasks."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        request_client: Optional[RequestClient] = None,
    ) -> None:
        self._client = request_client or RequestClient(base_url=base_url, transport=transport)

    @property
    def base_url(self) -> str:
        return self._client.base_url

    async def get_token(
        self,
        *,
        access_key: str,
        secret_key: str,
        ctx: Mapping[str, Any],
        router: EdgeStoreRouter,
    ) -> str:
        buckets = build_token_buckets(router)
        res = await self._client.send(
            GET_TOKEN_PATH,
            {"ctx": to_wire(ctx), "buckets": buckets},
            Credentials(access_key, secret_key),
            response_model=TokenResponse,
        )
        return res.token

    async def get_file(self, *, access_key: str, secret_key: str, url: str) -> FileInfo:
        return await self._client.send(
            GET_FILE_PATH,
            {"url": url},
            Credentials(access_key, secret_key),
            response_model=FileInfo,
        )

    async def request_upload(
        self,
        *,
        access_key: str,
        secret_key: str,
        bucket_name: str,
        bucket_type: str,
        file_info: Union[FileInfoForUpload, Mapping[str, Any]],
        multipart: Union[MultipartRequest, Mapping[str, Any], None] = None,
    ) -> RequestUploadResult:
        info = FileInfoForUpload.model_validate(file_info)
        res: RequestUploadResponse = await self._client.send(
            REQUEST_UPLOAD_PATH,
            {
                "multipart": multipart,
                "bucketName": bucket_name,
                "bucketType": bucket_type,
                "isPublic": info.is_public,
                "path": [to_wire(p) for p in info.path],
                "extension": info.extension,
                "size": info.size,
                "metadata": info.metadata,
                "replaceTargetUrl": info.replace_target_url,
            },
            Credentials(access_key, secret_key),
            response_model=RequestUploadResponse,
        )
        return RequestUploadResult(
            multipart=res.multipart,
            signed_url=res.signed_url,
            access_url=res.url,
        )

    async def request_upload_parts(
        self,
        *,
        access_key: str,
        secret_key: str,
        key: str,
        multipart: Union[MultipartPartsRequest, Mapping[str, Any]],
    ) -> RequestUploadPartsResult:
        res: RequestUploadPartsResult = await self._client.send(
            REQUEST_UPLOAD_PARTS_PATH,
            {"multipart": multipart, "key": key},
            Credentials(access_key, secret_key),
            response_model=RequestUploadPartsResult,
        )
        return RequestUploadPartsResult(multipart=res.multipart)

    async def delete_file(self, *, access_key: str, secret_key: str, url: str) -> DeleteFileResult:
        return await self._client.send(
            DELETE_FILE_PATH,
            {"url": url},
            Credentials(access_key, secret_key),
            response_model=DeleteFileResult,
        )

    async def list_files(
        self,
        *,
        access_key: str,
        secret_key: str,
        bucket_name: str,
        filter: Union[ListFilesFilter, Mapping[str, Any], None] = None,
        pagination: Union[Pagination, Mapping[str, Any], None] = None,
    ) -> ListFilesResult:
        return await self._client.send(
            LIST_FILES_PATH,
            {"bucketName": bucket_name, "filter": filter, "pagination": pagination},
            Credentials(access_key, secret_key),
            response_model=ListFilesResult,
        )


edgestore_raw_sdk = EdgeStoreRawSdk()
