"""
core/inventory/types.py - 수집 결과 타입 정의

Record: 한 리전의 한 리소스를 나타내는 고정 길이 행
CollectionResult: 한 리소스 종류의 전체 리전 수집 결과
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from core.parallel.errors import CollectedError
from core.region import Region

# 프로바이더별 원본 payload (boto3 응답 dict 등)
Summary = Any
Detail = Any


@dataclass(frozen=True)
class Record:
    """정규화된 행

    Attributes:
        region: 리소스가 속한 리전
        values: 헤더 순서대로 렌더링된 문자열 필드
    """

    region: Region
    values: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)


@dataclass
class CollectionResult:
    """한 리소스 종류의 수집 결과

    records는 리전 순서 → 리전 내 목록 순서를 따릅니다.

    Attributes:
        kind: 리소스 종류 이름
        headers: 컬럼 헤더
        records: 정규화된 행 목록
        regions: 처리 대상 리전
        skipped: skip 정책으로 제외된 실패 목록
    """

    kind: str
    headers: tuple[str, ...]
    records: list[Record] = field(default_factory=list)
    regions: list[Region] = field(default_factory=list)
    skipped: list[CollectedError] = field(default_factory=list)

    @property
    def rows(self) -> list[tuple[str, ...]]:
        """렌더링용 행 튜플 목록"""
        return [record.values for record in self.records]

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def has_skips(self) -> bool:
        return bool(self.skipped)
