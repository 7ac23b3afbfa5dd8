"""
tests/core/inventory/services/test_registry.py - 리소스 종류 레지스트리 테스트

모든 정규화 함수가 빈 payload에서도 헤더 길이의 문자열 행을 만드는지 확인합니다.
"""

import pytest

from core.inventory.policy import FAIL_FAST, SKIP_ITEMS
from core.inventory.services import RESOURCE_KINDS, get_kind
from core.region import Region

US_EAST_1 = Region("us-east-1", "US East (N. Virginia)")

EXPECTED_KINDS = [
    "acm",
    "aurora",
    "cloudfront",
    "dynamodb",
    "ebs",
    "ec2",
    "eks",
    "elasticache",
    "elb",
    "iam",
    "lambda",
    "rds",
    "route53",
    "sqs",
]


class TestRegistry:
    def test_all_kinds_registered(self):
        assert list(RESOURCE_KINDS) == EXPECTED_KINDS

    def test_get_kind_unknown(self):
        with pytest.raises(KeyError):
            get_kind("s3")

    def test_route53_skips_items(self):
        """route53만 상세 실패를 skip"""
        assert get_kind("route53").policy is SKIP_ITEMS
        assert all(kind.policy is FAIL_FAST for name, kind in RESOURCE_KINDS.items() if name != "route53")

    def test_global_kinds(self):
        assert sorted(name for name, kind in RESOURCE_KINDS.items() if kind.is_global) == [
            "cloudfront",
            "iam",
            "route53",
        ]

    def test_region_column_present(self):
        assert all("Region" in kind.headers for kind in RESOURCE_KINDS.values())


class TestNormalizerTotality:
    """빈 payload에 대한 정규화 총함수성"""

    @pytest.mark.parametrize("name", EXPECTED_KINDS)
    @pytest.mark.parametrize("detail", [None, {}])
    def test_empty_payload(self, name, detail):
        kind = get_kind(name)

        row = tuple(kind.normalize(US_EAST_1, {}, detail))

        assert len(row) == len(kind.headers)
        assert all(isinstance(value, str) for value in row)

    @pytest.mark.parametrize("name", ["dynamodb", "eks", "sqs"])
    def test_string_summary(self, name):
        """요약이 문자열(이름/URL)인 종류"""
        kind = get_kind(name)

        row = tuple(kind.normalize(US_EAST_1, "only-name", None))

        assert row[0] == "only-name"
        assert len(row) == len(kind.headers)
