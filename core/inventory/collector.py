"""
core/inventory/collector.py - 범용 멀티 리전 수집기

하나의 ResourceKind 바인딩을 받아 인가된 모든 리전에서 리소스를 수집합니다.

처리 순서 (리전마다):
    1. provider.open(region)으로 client 획득
    2. list_summaries → 실패 시 policy.on_list_failure (ABORT / SKIP_REGION)
    3. 요약마다 describe_detail → 실패 시 policy.on_detail_failure (ABORT / SKIP_ITEM)
    4. normalize → Record 추가 (리전 순서 → 목록 순서)

ABORT 판정이 나면 CollectionError가 호출자에게 전파되고 결과는 반환되지
않습니다. 정규화 결함(NormalizationFault)은 정책과 무관하게 항상 전파됩니다.

max_workers / detail_workers가 1보다 크면 리전 / 상세 조회를 스레드로
병렬 실행하되, 결과 순서는 순차 실행과 동일합니다.

Usage:
    from core.inventory import ResourceCollector, get_kind
    from core.region import StaticRegionSource

    collector = ResourceCollector(get_kind("rds"), StaticRegionSource(["us-east-1"]))
    result = collector.collect()
    for record in result.records:
        print(record.values)
"""

from __future__ import annotations

import logging
import threading
import time
from contextlib import ExitStack
from typing import TYPE_CHECKING, Any

from core.exceptions import DescribeFailure, ListFailure, NormalizationFault
from core.parallel.errors import ErrorCollector
from core.parallel.executor import check_cancelled, ordered_map
from core.region import Region, RegionSource
from core.region.data import GLOBAL_REGION_NAME

from .policy import DetailAction, ErrorPolicy, ListAction
from .provider import ResourceKind, ResourceProvider
from .types import CollectionResult, Detail, Record, Summary

if TYPE_CHECKING:
    import boto3

    from core.output.table import TableSink

logger = logging.getLogger(__name__)


class ResourceCollector:
    """리소스 종류 하나에 대한 멀티 리전 수집기

    Args:
        kind: 리소스 종류 바인딩
        region_source: 인가된 리전 공급자
        session: boto3 Session (None이면 프로바이더가 기본 세션 생성)
        provider: 프로바이더 인스턴스 (None이면 kind에서 생성)
        policy: 부분 실패 정책 (None이면 kind 기본값)
        max_workers: 리전 병렬 워커 수 (1 = 순차)
        detail_workers: 리전 내 상세 조회 워커 수 (1 = 순차)
    """

    def __init__(
        self,
        kind: ResourceKind,
        region_source: RegionSource,
        session: boto3.Session | None = None,
        provider: ResourceProvider | None = None,
        policy: ErrorPolicy | None = None,
        max_workers: int = 1,
        detail_workers: int = 1,
    ):
        self.kind = kind
        self.region_source = region_source
        self.provider = provider if provider is not None else kind.create_provider(session)
        self.policy = policy if policy is not None else kind.policy
        self.max_workers = max(1, max_workers)
        self.detail_workers = max(1, detail_workers)

    def target_regions(self) -> list[Region]:
        """수집 대상 리전 (전역 리소스는 첫 번째 리전 하나를 "Global"로 표시)

        Raises:
            ConfigurationError: 인가된 리전이 없는 경우
        """
        regions = self.region_source.regions()
        if self.kind.is_global:
            return [Region(regions[0].code, GLOBAL_REGION_NAME)]
        return regions

    def collect(self) -> CollectionResult:
        """모든 리전에서 수집

        Returns:
            CollectionResult (ABORT 판정 시 반환되지 않음)

        Raises:
            ConfigurationError: 인가된 리전이 없는 경우
            ListFailure / DescribeFailure: 정책이 ABORT로 판정한 경우
            NormalizationFault: 정규화 결함
        """
        regions = self.target_regions()
        errors = ErrorCollector(self.kind.name)
        cancel_event = threading.Event()

        logger.info(
            "%s 수집 시작: 리전 %d개, 정책 %s, workers=%d/%d",
            self.kind.name,
            len(regions),
            self.policy,
            self.max_workers,
            self.detail_workers,
        )
        start = time.monotonic()

        try:
            buffers = ordered_map(
                lambda region: self._collect_region(region, errors, cancel_event),
                regions,
                max_workers=self.max_workers,
                cancel_event=cancel_event,
            )
        except (ListFailure, DescribeFailure) as e:
            logger.error("%s 수집 중단: %s", self.kind.name, e)
            raise

        records = [record for buffer in buffers for record in buffer]
        result = CollectionResult(
            kind=self.kind.name,
            headers=self.kind.headers,
            records=records,
            regions=regions,
            skipped=errors.errors,
        )
        logger.info(
            "%s 수집 완료: %d건, %s (%.2fs)",
            self.kind.name,
            result.record_count,
            errors.get_summary(),
            time.monotonic() - start,
        )
        return result

    def run(self, sink: TableSink) -> CollectionResult:
        """수집 후 sink에 렌더링 (ABORT 시 sink는 건드리지 않음)"""
        result = self.collect()
        sink.write(result)
        return result

    # =========================================================================
    # 리전 단위 처리
    # =========================================================================

    def _collect_region(self, region: Region, errors: ErrorCollector, cancel_event: threading.Event) -> list[Record]:
        check_cancelled(cancel_event)

        with ExitStack() as stack:
            try:
                client = stack.enter_context(self.provider.open(region))
                start = time.monotonic()
                summaries = list(self.provider.list_summaries(client, region))
                logger.debug(
                    "%s/%s %s: %d건 (%.2fs)",
                    self.kind.name,
                    region.code,
                    self.provider.list_operation,
                    len(summaries),
                    time.monotonic() - start,
                )
            except Exception as e:
                if self.policy.on_list_failure(self.kind.name) is ListAction.ABORT:
                    cancel_event.set()
                    raise ListFailure(self.kind.name, region.code, self.provider.list_operation, cause=e) from e
                errors.collect(e, region=region.code, operation=self.provider.list_operation, action="skip_region")
                return []

            pairs = self._enrich(client, region, summaries, errors, cancel_event)

        return [self._normalize(region, summary, detail) for summary, detail in pairs]

    def _enrich(
        self,
        client: Any,
        region: Region,
        summaries: list[Summary],
        errors: ErrorCollector,
        cancel_event: threading.Event,
    ) -> list[tuple[Summary, Detail]]:
        """상세 조회 (지원하지 않는 종류는 detail=None)"""
        if not self.provider.supports_detail:
            return [(summary, None) for summary in summaries]

        operation = self.provider.describe_operation or ""

        def describe(summary: Summary) -> tuple[Summary, Detail] | None:
            check_cancelled(cancel_event)
            summary_id = self.provider.summary_id(summary)
            try:
                return summary, self.provider.describe_detail(client, region, summary)
            except Exception as e:
                if self.policy.on_detail_failure(self.kind.name) is DetailAction.ABORT:
                    cancel_event.set()
                    raise DescribeFailure(self.kind.name, region.code, operation, summary_id, cause=e) from e
                errors.collect(e, region=region.code, operation=operation, action="skip_item", resource_id=summary_id)
                return None

        results = ordered_map(describe, summaries, max_workers=self.detail_workers, cancel_event=cancel_event)
        return [pair for pair in results if pair is not None]

    def _normalize(self, region: Region, summary: Summary, detail: Detail) -> Record:
        summary_id = self.provider.summary_id(summary)
        try:
            values = tuple(self.kind.normalize(region, summary, detail))
        except Exception as e:
            raise NormalizationFault(self.kind.name, summary_id, "정규화 함수 예외", cause=e) from e

        if len(values) != self.kind.arity:
            raise NormalizationFault(
                self.kind.name,
                summary_id,
                f"컬럼 수 불일치 (값 {len(values)}개, 헤더 {self.kind.arity}개)",
            )
        if not all(isinstance(v, str) for v in values):
            raise NormalizationFault(self.kind.name, summary_id, "문자열이 아닌 값")

        return Record(region, values)
