"""
tests/core/inventory/services/conftest.py - 서비스 바인딩 테스트 픽스처
"""

from unittest.mock import MagicMock

import pytest

from core.inventory.collector import ResourceCollector
from core.region import StaticRegionSource


@pytest.fixture
def collect_with():
    """mock client로 ResourceKind를 수집하는 헬퍼

    Example:
        result = collect_with(EBS, client, regions=["us-east-1"])
    """

    def run(kind, client, regions=("us-east-1",), **kwargs):
        session = MagicMock()
        session.client.return_value = client
        collector = ResourceCollector(kind, StaticRegionSource(regions), session=session, **kwargs)
        return collector.collect()

    return run
