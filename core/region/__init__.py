# core/region - 리전 데이터 및 RegionSource
"""
리전 모듈

Note:
    데이터 테이블은 Lazy Import 패턴을 사용합니다.
"""

from .source import Region, RegionSource, StaticRegionSource, get_region_name, region_source_from_settings

__all__ = [
    "ALL_REGIONS",
    "REGION_NAMES",
    "Region",
    "RegionSource",
    "StaticRegionSource",
    "get_region_name",
    "region_source_from_settings",
]


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in ("ALL_REGIONS", "REGION_NAMES"):
        from .data import ALL_REGIONS, REGION_NAMES

        if name == "ALL_REGIONS":
            return ALL_REGIONS
        return REGION_NAMES

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
