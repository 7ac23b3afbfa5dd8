"""
core/parallel/client.py - boto3 session/client 생성 헬퍼

타임아웃과 연결 풀이 설정된 boto3 client를 생성합니다.
자동 재시도는 하지 않습니다 (max_attempts=1). 실패한 호출은 해당 범위
(항목/리전/전체)에서 종료되며, 판정은 ErrorPolicy가 담당합니다.

주요 구성 요소:
- create_session: 프로파일 기반 boto3 Session 생성
- get_client: 타임아웃이 적용된 boto3 client 생성
- region_client: 리전 단위 client 획득/해제 컨텍스트 매니저

Example:
    from core.parallel.client import create_session, region_client

    session = create_session("my-profile")
    with region_client(session, "ec2", "us-east-1") as ec2:
        volumes = ec2.describe_volumes()["Volumes"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

# 기본 설정 - 재시도 없음
DEFAULT_MAX_ATTEMPTS = 1
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10  # detail_workers 이상 권장


def create_session(profile: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile: named profile (None이면 기본 자격 증명 체인)
    """
    import boto3

    if profile:
        return boto3.Session(profile_name=profile)
    return boto3.Session()


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """타임아웃이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2, rds, iam 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 1 = 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )


@contextmanager
def region_client(
    session: boto3.Session,
    service_name: str,
    region_name: str,
    **kwargs: Any,
) -> Iterator[Any]:
    """리전 단위 client를 획득하고 작업 종료 시 반드시 해제

    목록 조회와 모든 상세 조회가 끝나거나 실패하면 (어떤 경로로 빠져나가든)
    client의 HTTP 연결 풀을 닫습니다.

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름
        region_name: 리전 코드
        **kwargs: get_client()에 전달할 추가 인자
    """
    client = get_client(session, service_name, region_name=region_name, **kwargs)
    try:
        yield client
    finally:
        close = getattr(client, "close", None)
        if callable(close):
            try:
                close()
            except Exception as e:  # close 실패는 로그만
                logger.debug("client close 실패 [%s/%s]: %s", service_name, region_name, e)
