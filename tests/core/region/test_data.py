"""
tests/core/region/test_data.py - 리전 데이터 테스트

리전 목록과 표시 이름 테이블의 일관성을 검증합니다.
"""

import re

import pytest

from core.config import DEFAULT_AUTHORIZED_REGIONS
from core.region.data import ALL_REGIONS, GLOBAL_REGION_NAME, REGION_NAMES


class TestAllRegions:
    """ALL_REGIONS 테스트"""

    def test_unique(self):
        assert len(ALL_REGIONS) == len(set(ALL_REGIONS))

    def test_matches_name_table(self):
        assert ALL_REGIONS == list(REGION_NAMES)

    def test_region_format(self):
        """리전 코드 형식 (예: us-east-1)"""
        pattern = re.compile(r"^[a-z]{2}(-[a-z]+)+-[0-9]+$")

        for region in ALL_REGIONS:
            assert pattern.match(region), f"Invalid region format: {region}"

    @pytest.mark.parametrize("region", DEFAULT_AUTHORIZED_REGIONS)
    def test_default_authorized_regions_have_names(self, region):
        assert region in REGION_NAMES


class TestRegionNames:
    def test_names_not_empty(self):
        assert all(name.strip() for name in REGION_NAMES.values())

    def test_global_name_not_a_region_name(self):
        assert GLOBAL_REGION_NAME not in REGION_NAMES.values()

    def test_lazy_package_attributes(self):
        import core.region

        assert core.region.ALL_REGIONS is ALL_REGIONS
        assert core.region.REGION_NAMES is REGION_NAMES
