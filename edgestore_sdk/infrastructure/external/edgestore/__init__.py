"""EdgeStore API client entry point."""
from .factory import EdgeStoreSdk, init_edgestore_sdk
from .raw_sdk import EdgeStoreRawSdk, build_token_buckets, edgestore_raw_sdk

__all__ = [
    "EdgeStoreSdk",
    "init_edgestore_sdk",
    "EdgeStoreRawSdk",
    "build_token_buckets",
    "edgestore_raw_sdk",
]
