"""
core/exceptions.py - 통합 예외 계층 구조

인벤토리 수집 파이프라인 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    LookrError (베이스)
    ├── ConfigurationError (리전/설정 관련 - 수집 시작 전 치명적)
    ├── CollectionError (수집 중 실패 - ErrorPolicy가 처리)
    │   ├── ListFailure (리전 단위 목록 조회 실패)
    │   └── DescribeFailure (항목 단위 상세 조회 실패)
    └── NormalizationFault (정규화 규칙 누락 - 프로그래밍 결함)

Usage:
    from core.exceptions import ListFailure

    try:
        summaries = provider.list_summaries(client, region)
    except Exception as e:
        raise ListFailure(kind="rds", region=region, operation="describe_db_instances", cause=e) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class LookrError(Exception):
    """lookr 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(LookrError):
    """설정 관련 예외

    인가된 리전이 없거나 환경 변수 값이 잘못된 경우 발생합니다.
    수집이 시작되기 전에 항상 치명적으로 처리됩니다.
    """

    def __init__(
        self,
        key: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 수집 관련 예외
# =============================================================================


def _error_code(cause: Exception | None) -> str | None:
    """botocore ClientError 형식이면 에러 코드 추출"""
    response = getattr(cause, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")
    return None


class CollectionError(LookrError):
    """리소스 수집 중 발생한 실패

    ErrorPolicy가 skip 또는 abort로 판정합니다. abort로 판정되면
    이 예외가 수집기 밖으로 전파되어 해당 리소스 종류의 출력이 생략됩니다.

    Attributes:
        kind: 리소스 종류 이름 (예: "rds")
        region: 실패한 리전 코드
        operation: 실패한 API 작업 이름
        error_code: AWS 에러 코드 (ClientError인 경우)
    """

    def __init__(
        self,
        message: str,
        kind: str,
        region: str,
        operation: str,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.kind = kind
        self.region = region
        self.operation = operation
        self.error_code = _error_code(cause)
        self.details.update(
            {
                "kind": kind,
                "region": region,
                "operation": operation,
                "error_code": self.error_code,
            }
        )


class ListFailure(CollectionError):
    """리전 단위 목록 조회 실패 (세션 생성 실패 포함)"""

    def __init__(
        self,
        kind: str,
        region: str,
        operation: str,
        cause: Exception | None = None,
    ):
        message = f"목록 조회 실패 [{kind}/{region}] {operation}"
        super().__init__(message, kind, region, operation, cause)


class DescribeFailure(CollectionError):
    """항목 단위 상세 조회 실패"""

    def __init__(
        self,
        kind: str,
        region: str,
        operation: str,
        summary_id: str,
        cause: Exception | None = None,
    ):
        message = f"상세 조회 실패 [{kind}/{region}] {operation} ({summary_id})"
        super().__init__(message, kind, region, operation, cause)
        self.summary_id = summary_id
        self.details["summary_id"] = summary_id


# =============================================================================
# 정규화 결함
# =============================================================================


class NormalizationFault(LookrError):
    """정규화 함수가 실패하거나 컬럼 수가 맞지 않는 경우

    런타임 조건이 아닌 프로그래밍 결함(폴백 규칙 누락)을 의미하므로
    ErrorPolicy와 무관하게 항상 전파됩니다.
    """

    def __init__(
        self,
        kind: str,
        summary_id: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"정규화 결함 [{kind}] {summary_id}: {message}"
        super().__init__(full_message, cause)
        self.kind = kind
        self.summary_id = summary_id
        self.details.update({"kind": kind, "summary_id": summary_id})
