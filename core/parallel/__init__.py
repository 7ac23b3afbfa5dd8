"""
core/parallel - 리전 client 및 병렬 처리 모듈

멀티 리전 AWS 조회를 안전하게 처리하기 위한 공통 구성 요소입니다.

주요 구성 요소:
- create_session / get_client / region_client: boto3 session/client 생성 (재시도 없음)
- ordered_map: 순서 보존 + 협조적 취소를 지원하는 병렬 map
- ErrorCollector: skip 처리된 실패의 스레드 세이프 수집기

Example:
    from core.parallel import create_session, ordered_map, region_client

    session = create_session()

    def count_volumes(region):
        with region_client(session, "ec2", region) as ec2:
            return len(ec2.describe_volumes()["Volumes"])

    counts = ordered_map(count_volumes, ["us-east-1", "eu-west-1"], max_workers=2)
"""

from .client import create_session, get_client, region_client
from .errors import (
    CollectedError,
    ErrorCollector,
    categorize_error,
    categorize_error_code,
    get_error_code,
)
from .executor import TaskCancelled, check_cancelled, ordered_map
from .types import ErrorCategory

__all__ = [
    # Client
    "create_session",
    "get_client",
    "region_client",
    # Errors
    "CollectedError",
    "ErrorCategory",
    "ErrorCollector",
    "categorize_error",
    "categorize_error_code",
    "get_error_code",
    # Executor
    "TaskCancelled",
    "check_cancelled",
    "ordered_map",
]
