"""
core/parallel/types.py - 병렬 수집 공통 타입
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """에러 카테고리 분류"""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    THROTTLING = "throttling"
    TIMEOUT = "timeout"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    EXPIRED_TOKEN = "expired_token"
    NETWORK = "network"
    UNKNOWN = "unknown"
