"""
Shared error codes used across layers.

Single source of truth so the exception classes and callers inspecting
``exc.code`` never drift apart.
"""
from enum import IntEnum


class ErrorCode(IntEnum):
    """SDK 错误码定义（单一来源）"""

    # 参数错误 (1xxxx)
    PATH_PARAM_MISSING = 10001

    # 认证错误 (3xxxx)
    CREDENTIALS_MISSING = 30001

    # 远端错误 (4xxxx)
    REQUEST_FAILED = 40000


__all__ = ["ErrorCode"]
