"""
core/inventory/policy.py - 부분 실패 정책

실패 지점(리전 목록 조회 / 항목 상세 조회)별로 전체 중단(abort),
리전 건너뛰기, 항목 건너뛰기 중 무엇을 할지 결정합니다.

이름 있는 정책:
    fail-fast   : 목록 실패 → ABORT,       상세 실패 → ABORT
    best-effort : 목록 실패 → SKIP_REGION, 상세 실패 → SKIP_ITEM
    skip-items  : 목록 실패 → ABORT,       상세 실패 → SKIP_ITEM

Usage:
    from core.inventory.policy import get_policy, ListAction

    policy = get_policy("best-effort")
    if policy.on_list_failure("rds") is ListAction.SKIP_REGION:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ListAction(Enum):
    """리전 목록 조회 실패 시 동작"""

    ABORT = "abort"
    SKIP_REGION = "skip_region"


class DetailAction(Enum):
    """항목 상세 조회 실패 시 동작"""

    ABORT = "abort"
    SKIP_ITEM = "skip_item"


@dataclass(frozen=True)
class ErrorPolicy:
    """리소스 종류별 부분 실패 정책

    Attributes:
        name: 정책 이름 (표시/선택용)
        on_list: 목록 조회(세션 생성 포함) 실패 시 동작
        on_detail: 상세 조회 실패 시 동작
    """

    name: str
    on_list: ListAction = ListAction.ABORT
    on_detail: DetailAction = DetailAction.ABORT

    def on_list_failure(self, kind: str) -> ListAction:
        return self.on_list

    def on_detail_failure(self, kind: str) -> DetailAction:
        return self.on_detail

    def __str__(self) -> str:
        return self.name


FAIL_FAST = ErrorPolicy("fail-fast", ListAction.ABORT, DetailAction.ABORT)
BEST_EFFORT = ErrorPolicy("best-effort", ListAction.SKIP_REGION, DetailAction.SKIP_ITEM)
SKIP_ITEMS = ErrorPolicy("skip-items", ListAction.ABORT, DetailAction.SKIP_ITEM)

NAMED_POLICIES: dict[str, ErrorPolicy] = {p.name: p for p in (FAIL_FAST, BEST_EFFORT, SKIP_ITEMS)}


def get_policy(name: str) -> ErrorPolicy:
    """이름으로 정책 조회

    Raises:
        ValueError: 알 수 없는 정책 이름
    """
    try:
        return NAMED_POLICIES[name]
    except KeyError:
        raise ValueError(f"알 수 없는 정책: {name} (선택: {', '.join(NAMED_POLICIES)})") from None
