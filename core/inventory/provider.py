"""
core/inventory/provider.py - 리소스 프로바이더 인터페이스

리소스 종류별 AWS 조회를 두 단계로 나눕니다.

1. list_summaries: 리전의 리소스 목록(요약) 조회
2. describe_detail: 요약 1건의 상세 조회 (supports_detail인 종류만)

세션(client)은 ``open(region)`` 컨텍스트 매니저로 리전 단위로 획득하며,
목록/상세 조회가 모두 끝나거나 실패하면 반드시 해제됩니다.

ResourceKind는 프로바이더, 헤더, 정규화 함수, 기본 정책을 하나로 묶어
범용 수집기(ResourceCollector)에 전달하는 바인딩입니다.

Usage:
    class VolumeProvider(ResourceProvider):
        service = "ec2"
        list_operation = "describe_volumes"
        id_key = "VolumeId"

        def list_summaries(self, client, region):
            return paginate(client, "describe_volumes", "Volumes")
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from core.parallel.client import create_session, region_client
from core.region import Region

from .normalize import dig, text
from .policy import FAIL_FAST, ErrorPolicy
from .types import Detail, Summary

if TYPE_CHECKING:
    import boto3

# (region, summary, detail) → 헤더 순서의 값 시퀀스
Normalizer = Callable[[Region, Summary, Detail], Sequence[str]]


def paginate(client: Any, operation: str, *result_path: str, **kwargs: Any) -> list[Any]:
    """paginator로 전체 페이지를 조회하고 결과 목록을 평탄화

    Args:
        client: boto3 client
        operation: paginator 작업 이름 (예: "describe_volumes")
        *result_path: 페이지 안의 결과 목록 경로 (예: "DistributionList", "Items")
        **kwargs: paginate()에 전달할 요청 인자

    Returns:
        모든 페이지의 결과를 순서대로 이어붙인 리스트 (없으면 [])
    """
    items: list[Any] = []
    paginator = client.get_paginator(operation)
    for page in paginator.paginate(**kwargs):
        items.extend(dig(page, *result_path, default=[]))
    return items


class ResourceProvider(ABC):
    """리소스 종류별 AWS 조회 어댑터

    Class Attributes:
        service: boto3 서비스 이름
        list_operation: 목록 조회 API 이름 (진단용)
        describe_operation: 상세 조회 API 이름 (None이면 상세 조회 없음)
        id_key: 요약 dict에서 식별자로 쓸 키
    """

    service: ClassVar[str]
    list_operation: ClassVar[str]
    describe_operation: ClassVar[str | None] = None
    id_key: ClassVar[str | None] = None

    def __init__(self, session: boto3.Session | None = None):
        self._session = session

    @property
    def session(self) -> boto3.Session:
        if self._session is None:
            self._session = create_session()
        return self._session

    @property
    def supports_detail(self) -> bool:
        return self.describe_operation is not None

    @contextmanager
    def open(self, region: Region) -> Iterator[Any]:
        """리전 client 획득 (with 블록 종료 시 해제)"""
        with region_client(self.session, self.service, region.code) as client:
            yield client

    @abstractmethod
    def list_summaries(self, client: Any, region: Region) -> list[Summary]:
        """리전의 리소스 요약 목록 조회 (없으면 [])"""

    def describe_detail(self, client: Any, region: Region, summary: Summary) -> Detail:
        """요약 1건의 상세 조회"""
        raise NotImplementedError(f"{type(self).__name__}는 상세 조회를 지원하지 않습니다")

    def summary_id(self, summary: Summary) -> str:
        """진단 메시지에 쓸 요약 식별자"""
        if self.id_key and isinstance(summary, dict):
            return text(summary.get(self.id_key), "?")
        return text(summary, "?")


@dataclass(frozen=True)
class ResourceKind:
    """리소스 종류 바인딩

    Attributes:
        name: CLI 명령 이름 (예: "rds")
        title: 표시 제목 (예: "RDS Instances")
        headers: 컬럼 헤더 (모든 Record의 길이 기준)
        provider: ResourceProvider 하위 클래스
        normalize: 정규화 함수
        policy: 기본 부분 실패 정책
        is_global: 계정 전역 리소스 여부 (한 번만 수집, Region 컬럼 "Global")
    """

    name: str
    title: str
    headers: tuple[str, ...]
    provider: type[ResourceProvider]
    normalize: Normalizer
    policy: ErrorPolicy = FAIL_FAST
    is_global: bool = False

    def create_provider(self, session: boto3.Session | None = None) -> ResourceProvider:
        return self.provider(session)

    @property
    def arity(self) -> int:
        return len(self.headers)
