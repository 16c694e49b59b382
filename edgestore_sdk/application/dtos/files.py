"""
File API DTOs (Pydantic v2) used at the SDK boundary.

Attributes are snake_case; the wire format is camelCase, handled by aliases.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import to_jsonable_python

T = TypeVar("T")


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResponseModel(WireModel):
    # Unknown fields from newer API versions are kept, not rejected.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


def _assume_utc(value: Any) -> Any:
    # Naive datetimes are UTC on the wire.
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    if isinstance(value, dict):
        return {k: _assume_utc(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_assume_utc(v) for v in value]
    return value


def to_wire(value: Any) -> Any:
    """Dump DTOs to their JSON shape; anything else is forwarded unchanged."""
    if isinstance(value, BaseModel):
        dumped = value.model_dump(mode="python", by_alias=True, exclude_none=True)
        return to_jsonable_python(_assume_utc(dumped))
    return value


def json_default(value: Any) -> Any:
    """``json.dumps`` fallback for values left inside plain mappings."""
    return to_jsonable_python(_assume_utc(value))


# ---- requests ----

class PathSegment(WireModel):
    key: str
    value: str


class FileInfoForUpload(WireModel):
    size: int
    extension: str
    is_public: bool
    path: list[PathSegment] = Field(default_factory=list)
    metadata: Optional[dict[str, str]] = None
    replace_target_url: Optional[str] = None


class MultipartRequest(WireModel):
    parts: list[int]


class MultipartPartsRequest(WireModel):
    upload_id: Optional[str] = None
    parts: list[int]


class Pagination(WireModel):
    current_page: int
    page_size: int


class TokenBucket(WireModel):
    path: list[PathSegment]
    access_control: Any = None


class ComparisonOperators(WireModel, Generic[T]):
    eq: Optional[T] = None
    neq: Optional[T] = None
    gt: Optional[T] = None
    gte: Optional[T] = None
    lt: Optional[T] = None
    lte: Optional[T] = None
    starts_with: Optional[T] = None
    ends_with: Optional[T] = None
    between: Optional[tuple[T, T]] = None


# A bare value means equality.
StringComparison = Union[str, ComparisonOperators[str]]
DateComparison = Union[datetime, ComparisonOperators[datetime]]


class ListFilesFilter(WireModel):
    """Boolean filter evaluated server side."""

    and_: Optional[list[ListFilesFilter]] = Field(default=None, alias="AND")
    or_: Optional[list[ListFilesFilter]] = Field(default=None, alias="OR")
    uploaded_at: Optional[DateComparison] = None
    path: Optional[dict[str, StringComparison]] = None
    metadata: Optional[dict[str, StringComparison]] = None


ListFilesFilter.model_rebuild()


# ---- responses ----

class TokenResponse(ResponseModel):
    token: str


class FileInfo(ResponseModel):
    url: str
    size: int
    uploaded_at: datetime
    path: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, str] = Field(default_factory=dict)


class UploadPart(ResponseModel):
    part_number: int
    signed_url: str


class MultipartUpload(ResponseModel):
    upload_id: str
    parts: list[UploadPart]


class RequestUploadResponse(ResponseModel):
    multipart: Optional[MultipartUpload] = None
    signed_url: Optional[str] = None
    url: str


class RequestUploadResult(ResponseModel):
    multipart: Optional[MultipartUpload] = None
    signed_url: Optional[str] = None
    access_url: str


class RequestUploadPartsResult(ResponseModel):
    multipart: MultipartUpload


class DeleteFileResult(ResponseModel):
    success: bool


class ListedFile(ResponseModel):
    url: str
    thumbnail_url: Optional[str] = None
    size: int
    uploaded_at: datetime
    path: dict[str, str] = Field(default_factory=dict)
    metadata: dict[str, str] = Field(default_factory=dict)


class PaginationResult(ResponseModel):
    current_page: int
    page_size: int
    total_pages: int
    total_count: int


class ListFilesResult(ResponseModel):
    data: list[ListedFile]
    pagination: PaginationResult
