"""
API客户端模块

HTTP primitive the EdgeStore operations are built on
"""
from .base import RequestClient, Credentials, build_body

__all__ = [
    "RequestClient",
    "Credentials",
    "build_body",
]
