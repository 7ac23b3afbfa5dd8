"""
core/parallel/errors.py - 에러 분류 및 수집

수집 중 skip 처리된 실패를 일관되게 기록하는 유틸리티입니다.
skip은 테이블에서는 조용히 빠지지만, 진단을 위해 여기에 반드시 남습니다.

주요 구성 요소:
- categorize_error / get_error_code: 예외 → ErrorCategory / 에러 코드
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기

Example:
    collector = ErrorCollector("route53")

    try:
        detail = client.get_hosted_zone(Id=zone_id)
    except ClientError as e:
        collector.collect(e, region="us-east-1", operation="get_hosted_zone", action="skip_item", resource_id=zone_id)

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime

from botocore.exceptions import ConnectTimeoutError, EndpointConnectionError, ReadTimeoutError

from .types import ErrorCategory

logger = logging.getLogger(__name__)

_EXPIRED_TOKEN_CODES = {"ExpiredToken", "ExpiredTokenException", "RequestExpired"}


def get_error_code(error: BaseException) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    ClientError의 경우 response에서 Code를 추출하고,
    그 외에는 예외 클래스명을 반환합니다.
    """
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        code: str = response.get("Error", {}).get("Code", "Unknown")
        return code
    return error.__class__.__name__


def categorize_error_code(error_code: str) -> ErrorCategory:
    """에러 코드 문자열을 기반으로 ErrorCategory 분류

    Args:
        error_code: AWS 에러 코드 문자열 (예: "AccessDenied", "ThrottlingException")

    Returns:
        분류된 에러 카테고리. 매칭되는 키워드가 없으면 UNKNOWN 반환.
    """
    if error_code in _EXPIRED_TOKEN_CODES:
        return ErrorCategory.EXPIRED_TOKEN

    code = error_code.lower()

    if any(x in code for x in ["accessdenied", "unauthorized", "forbidden"]):
        return ErrorCategory.ACCESS_DENIED
    if any(x in code for x in ["notfound", "nosuch", "doesnotexist"]):
        return ErrorCategory.NOT_FOUND
    if any(x in code for x in ["throttl", "ratelimit", "toomanyrequests", "requestlimitexceeded"]):
        return ErrorCategory.THROTTLING
    if any(x in code for x in ["timeout", "timedout"]):
        return ErrorCategory.TIMEOUT
    if any(x in code for x in ["invalid", "validation", "malformed"]):
        return ErrorCategory.INVALID_REQUEST
    if any(x in code for x in ["internal", "serviceunavailable", "serviceerror"]):
        return ErrorCategory.SERVICE_ERROR

    return ErrorCategory.UNKNOWN


def categorize_error(error: BaseException) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류

    ClientError는 응답의 에러 코드로, 그 외 네트워크 계열 예외는 타입으로 분류합니다.
    """
    if isinstance(getattr(error, "response", None), dict):
        return categorize_error_code(get_error_code(error))

    if isinstance(error, (ConnectTimeoutError, ReadTimeoutError, TimeoutError)):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (EndpointConnectionError, ConnectionError, OSError)):
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


@dataclass(frozen=True)
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        kind: 리소스 종류 이름 (예: "route53")
        region: AWS 리전 코드
        operation: API 작업 이름 (예: "get_hosted_zone")
        error_code: AWS 에러 코드 (예: "AccessDenied")
        error_message: 에러 메시지
        category: 에러 카테고리
        action: 적용된 정책 ("skip_region" 또는 "skip_item")
        resource_id: 관련 리소스 ID (항목 단위 실패인 경우)
    """

    timestamp: datetime
    kind: str
    region: str
    operation: str
    error_code: str
    error_message: str
    category: ErrorCategory
    action: str
    resource_id: str | None = None

    def __str__(self) -> str:
        target = f"{self.region}/{self.resource_id}" if self.resource_id else self.region
        return f"[{self.action}] {self.kind} {target} - {self.operation}: {self.error_code}"

    def to_dict(self) -> dict[str, str | None]:
        """딕셔너리로 변환 (로깅/직렬화용)"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "kind": self.kind,
            "region": self.region,
            "operation": self.operation,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "category": self.category.value,
            "action": self.action,
            "resource_id": self.resource_id,
        }


class ErrorCollector:
    """스레드 세이프 에러 수집기

    병렬 실행 중 여러 워커에서 발생하는 skip 에러를 안전하게 수집합니다.
    """

    def __init__(self, kind: str):
        """초기화

        Args:
            kind: 리소스 종류 이름 (수집된 에러에 공통 적용)
        """
        self.kind = kind
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: BaseException,
        region: str,
        operation: str,
        action: str,
        resource_id: str | None = None,
    ) -> CollectedError:
        """예외를 수집하고 WARNING으로 로깅

        Args:
            error: 원인 예외 (ClientError 또는 일반 예외)
            region: AWS 리전 코드
            operation: API 작업 이름
            action: 적용된 정책 이름
            resource_id: 관련 리소스 ID (선택사항)

        Returns:
            수집된 CollectedError
        """
        response = getattr(error, "response", None)
        message = str(error)
        if isinstance(response, dict):
            message = response.get("Error", {}).get("Message", message)

        collected = CollectedError(
            timestamp=datetime.now(),
            kind=self.kind,
            region=region,
            operation=operation,
            error_code=get_error_code(error),
            error_message=message,
            category=categorize_error(error),
            action=action,
            resource_id=resource_id,
        )

        with self._lock:
            self._errors.append(collected)

        logger.warning("%s", collected)
        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        """에러 존재 여부"""
        with self._lock:
            return len(self._errors) > 0

    def get_summary(self) -> str:
        """정책별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "건너뜀 3건 (skip_item: 2건, skip_region: 1건)")
        """
        with self._lock:
            if not self._errors:
                return "건너뜀 없음"

            by_action: dict[str, int] = {}
            for e in self._errors:
                by_action[e.action] = by_action.get(e.action, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_action.items())]
            return f"건너뜀 {len(self._errors)}건 ({', '.join(parts)})"

    def clear(self) -> None:
        """수집된 에러 전체 초기화"""
        with self._lock:
            self._errors.clear()
