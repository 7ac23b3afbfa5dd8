"""
core/inventory - 멀티 리전 리소스 인벤토리 수집

RegionSource → ResourceProvider → 정규화 → ErrorPolicy → ResourceCollector
파이프라인을 제공합니다.

Usage:
    from core.inventory import ResourceCollector, get_kind
    from core.region import StaticRegionSource

    collector = ResourceCollector(get_kind("ebs"), StaticRegionSource(["us-east-1"]))
    result = collector.collect()
"""

from .collector import ResourceCollector
from .policy import BEST_EFFORT, FAIL_FAST, NAMED_POLICIES, SKIP_ITEMS, DetailAction, ErrorPolicy, ListAction, get_policy
from .provider import ResourceKind, ResourceProvider, paginate
from .services import RESOURCE_KINDS, get_kind
from .types import CollectionResult, Record

__all__ = [
    # Collector
    "ResourceCollector",
    "CollectionResult",
    "Record",
    # Provider
    "ResourceKind",
    "ResourceProvider",
    "paginate",
    # Policy
    "ErrorPolicy",
    "ListAction",
    "DetailAction",
    "FAIL_FAST",
    "BEST_EFFORT",
    "SKIP_ITEMS",
    "NAMED_POLICIES",
    "get_policy",
    # Registry
    "RESOURCE_KINDS",
    "get_kind",
]
