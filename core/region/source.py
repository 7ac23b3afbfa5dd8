"""
core/region/source.py - 인가된 리전 공급자

수집기가 순회할 리전 목록을 순서대로 제공합니다.

Usage:
    from core.region import StaticRegionSource

    source = StaticRegionSource(["us-east-1", "eu-west-1"])
    for region in source.regions():
        print(region.code, region.name)   # us-east-1 US East (N. Virginia)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.exceptions import ConfigurationError

from .data import REGION_NAMES

if TYPE_CHECKING:
    from core.config import Settings


@dataclass(frozen=True)
class Region:
    """리전 정보

    Attributes:
        code: 리전 코드 (예: "us-east-1")
        name: 표시 이름 (예: "US East (N. Virginia)")
    """

    code: str
    name: str

    def __str__(self) -> str:
        return self.code


def get_region_name(code: str, names: Mapping[str, str] | None = None) -> str:
    """리전 코드의 표시 이름 반환 (모르는 코드는 코드 그대로)"""
    table = REGION_NAMES if names is None else names
    return table.get(code, code)


class RegionSource(ABC):
    """인가된 리전 공급자 인터페이스"""

    @abstractmethod
    def regions(self) -> list[Region]:
        """순서가 고정된 리전 목록 반환

        Raises:
            ConfigurationError: 인가된 리전이 없는 경우
        """


class StaticRegionSource(RegionSource):
    """고정 리전 목록 공급자

    중복 코드는 첫 등장 위치만 유지합니다.

    Args:
        codes: 리전 코드 목록
        names: 코드 → 표시 이름 매핑 (None이면 내장 테이블)
    """

    def __init__(self, codes: Iterable[str], names: Mapping[str, str] | None = None):
        self._codes = tuple(dict.fromkeys(c.strip() for c in codes if c and c.strip()))
        self._names = names

    def regions(self) -> list[Region]:
        if not self._codes:
            raise ConfigurationError("regions", "인가된 리전이 없습니다")
        return [Region(code, get_region_name(code, self._names)) for code in self._codes]


def region_source_from_settings(settings: Settings, overrides: Iterable[str] = ()) -> RegionSource:
    """설정(또는 CLI 지정 리전)으로 RegionSource 생성

    Args:
        settings: 실행 설정
        overrides: 명시적으로 지정된 리전 코드 (비어 있으면 settings.regions 사용)
    """
    codes = tuple(overrides) or settings.regions
    return StaticRegionSource(codes)
