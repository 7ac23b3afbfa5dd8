"""
tests/core/region/test_source.py - RegionSource 테스트
"""

import pytest

from core.config import Settings
from core.exceptions import ConfigurationError
from core.region import Region, StaticRegionSource, get_region_name, region_source_from_settings


class TestGetRegionName:
    def test_known(self):
        assert get_region_name("us-east-1") == "US East (N. Virginia)"
        assert get_region_name("eu-west-1") == "Europe (Ireland)"

    def test_unknown_falls_back_to_code(self):
        assert get_region_name("xx-test-9") == "xx-test-9"

    def test_custom_table(self):
        assert get_region_name("us-east-1", {"us-east-1": "Virginia"}) == "Virginia"


class TestStaticRegionSource:
    """StaticRegionSource 테스트"""

    def test_order_and_names(self):
        regions = StaticRegionSource(["us-east-1", "eu-west-1"]).regions()

        assert regions == [
            Region("us-east-1", "US East (N. Virginia)"),
            Region("eu-west-1", "Europe (Ireland)"),
        ]

    def test_duplicates_dropped(self):
        regions = StaticRegionSource(["us-east-1", " us-west-2", "us-east-1", ""]).regions()

        assert [r.code for r in regions] == ["us-east-1", "us-west-2"]

    def test_empty_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            StaticRegionSource([]).regions()

        assert exc_info.value.config_key == "regions"

    def test_side_effect_free(self):
        source = StaticRegionSource(["us-east-1"])

        assert source.regions() == source.regions()

    def test_region_str_is_code(self):
        assert str(Region("us-east-1", "US East (N. Virginia)")) == "us-east-1"


class TestRegionSourceFromSettings:
    def test_settings_regions(self):
        source = region_source_from_settings(Settings(regions=("sa-east-1",)))

        assert [r.code for r in source.regions()] == ["sa-east-1"]

    def test_overrides_win(self):
        source = region_source_from_settings(Settings(regions=("sa-east-1",)), ["eu-west-1"])

        assert [r.code for r in source.regions()] == ["eu-west-1"]
