"""
tests/core/inventory/conftest.py - 수집기 테스트용 가짜 프로바이더
"""

import threading
import time
from contextlib import contextmanager

import pytest

from core.inventory.normalize import dig, text
from core.inventory.policy import FAIL_FAST
from core.inventory.provider import ResourceKind, ResourceProvider


class FakeProvider(ResourceProvider):
    """리전별 요약/실패를 미리 지정하는 프로바이더

    Args:
        summaries: 리전 코드 → 요약 dict 목록 ({"Id": ...})
        list_errors: 리전 코드 → list_summaries에서 던질 예외
        open_errors: 리전 코드 → open()에서 던질 예외
        detail_errors: 요약 Id → describe_detail에서 던질 예외
        list_delays / detail_delays: 호출 지연 (초)
    """

    service = "fake"
    list_operation = "list_things"
    describe_operation = "describe_thing"
    id_key = "Id"

    def __init__(
        self,
        summaries=None,
        list_errors=None,
        open_errors=None,
        detail_errors=None,
        list_delays=None,
        detail_delays=None,
        with_detail=True,
    ):
        super().__init__(session=None)
        self.summaries = summaries or {}
        self.list_errors = list_errors or {}
        self.open_errors = open_errors or {}
        self.detail_errors = detail_errors or {}
        self.list_delays = list_delays or {}
        self.detail_delays = detail_delays or {}
        self.with_detail = with_detail

        self._lock = threading.Lock()
        self.opened = []
        self.closed = []
        self.list_calls = []
        self.describe_calls = []

    @property
    def supports_detail(self):
        return self.with_detail

    @contextmanager
    def open(self, region):
        if region.code in self.open_errors:
            raise self.open_errors[region.code]
        with self._lock:
            self.opened.append(region.code)
        try:
            yield f"client-{region.code}"
        finally:
            with self._lock:
                self.closed.append(region.code)

    def list_summaries(self, client, region):
        with self._lock:
            self.list_calls.append(region.code)
        time.sleep(self.list_delays.get(region.code, 0))
        if region.code in self.list_errors:
            raise self.list_errors[region.code]
        return list(self.summaries.get(region.code, []))

    def describe_detail(self, client, region, summary):
        with self._lock:
            self.describe_calls.append(summary["Id"])
        time.sleep(self.detail_delays.get(summary["Id"], 0))
        if summary["Id"] in self.detail_errors:
            raise self.detail_errors[summary["Id"]]
        return {"Size": summary.get("Size", 1)}


def normalize_thing(region, summary, detail):
    return (text(summary.get("Id")), region.name, text(dig(detail, "Size")))


def things(*ids):
    return [{"Id": i, "Size": n} for n, i in enumerate(ids, 1)]


@pytest.fixture
def fake_kind():
    """FakeProvider를 쓰는 ResourceKind 생성 헬퍼"""

    def factory(policy=FAIL_FAST, is_global=False, normalize=normalize_thing, headers=("ID", "Region", "Size")):
        return ResourceKind(
            name="things",
            title="Things",
            headers=headers,
            provider=FakeProvider,
            normalize=normalize,
            policy=policy,
            is_global=is_global,
        )

    return factory


@pytest.fixture
def fake_provider():
    """FakeProvider 클래스"""
    return FakeProvider


@pytest.fixture
def make_things():
    """요약 dict 목록 생성 헬퍼: make_things("a", "b") → [{"Id": "a", "Size": 1}, ...]"""
    return things
