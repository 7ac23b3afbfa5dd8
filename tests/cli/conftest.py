"""
tests/cli/conftest.py - CLI 테스트 픽스처
"""

from unittest.mock import MagicMock, patch

import pytest

from core.inventory.types import CollectionResult, Record
from core.region import Region

US_EAST_1 = Region("us-east-1", "US East (N. Virginia)")


@pytest.fixture
def volume_result():
    """EBS 수집 결과 1건"""
    return CollectionResult(
        kind="ebs",
        headers=("Volume ID", "Region"),
        records=[Record(US_EAST_1, ("vol-1", "US East (N. Virginia)"))],
        regions=[US_EAST_1],
    )


@pytest.fixture
def patched_collector():
    """cli.headless의 세션/수집기 생성 모킹

    Yields:
        (ResourceCollector 클래스 mock, collector 인스턴스 mock)
    """
    with (
        patch("cli.headless.create_session", return_value=MagicMock()),
        patch("cli.headless.ResourceCollector") as collector_class,
    ):
        collector = MagicMock()
        collector_class.return_value = collector
        yield collector_class, collector
