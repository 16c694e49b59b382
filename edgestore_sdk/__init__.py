"""
EdgeStore Python SDK

Async client for the EdgeStore file API: token issuance, uploads,
file metadata, listing and deletion.
"""
from edgestore_sdk.application.dtos.files import (
    ComparisonOperators,
    DeleteFileResult,
    FileInfo,
    FileInfoForUpload,
    ListedFile,
    ListFilesFilter,
    ListFilesResult,
    MultipartPartsRequest,
    MultipartRequest,
    MultipartUpload,
    Pagination,
    PaginationResult,
    PathSegment,
    RequestUploadPartsResult,
    RequestUploadResult,
    UploadPart,
)
from edgestore_sdk.core.config import Settings, get_settings
from edgestore_sdk.core.logging_config import configure_logging
from edgestore_sdk.domain.exceptions import (
    CredentialsError,
    EdgeStoreError,
    MissingPathParamError,
    RequestError,
)
from edgestore_sdk.infrastructure.external.api_clients import Credentials, RequestClient
from edgestore_sdk.infrastructure.external.edgestore import (
    EdgeStoreRawSdk,
    EdgeStoreSdk,
    edgestore_raw_sdk,
    init_edgestore_sdk,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "init_edgestore_sdk",
    "EdgeStoreSdk",
    "EdgeStoreRawSdk",
    "edgestore_raw_sdk",
    "RequestClient",
    "Credentials",

    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",

    # Models
    "PathSegment",
    "FileInfoForUpload",
    "MultipartRequest",
    "MultipartPartsRequest",
    "Pagination",
    "ComparisonOperators",
    "ListFilesFilter",
    "FileInfo",
    "UploadPart",
    "MultipartUpload",
    "RequestUploadResult",
    "RequestUploadPartsResult",
    "DeleteFileResult",
    "ListedFile",
    "PaginationResult",
    "ListFilesResult",

    # Exceptions
    "EdgeStoreError",
    "CredentialsError",
    "RequestError",
    "MissingPathParamError",
]
