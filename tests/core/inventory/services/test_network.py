"""
tests/core/inventory/services/test_network.py - ELB / CloudFront / Route53 바인딩 테스트
"""

from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

from core.exceptions import ListFailure
from core.inventory.collector import ResourceCollector
from core.inventory.services.network import (
    CLOUDFRONT,
    ELB,
    ROUTE53,
    normalize_distribution,
    normalize_hosted_zone,
)
from core.region import Region, StaticRegionSource

US_EAST_1 = Region("us-east-1", "US East (N. Virginia)")


class TestLoadBalancers:
    """ELBv2 로드 밸런서 테스트"""

    def test_collect(self, paginated_client, collect_with):
        lb = {
            "LoadBalancerName": "web",
            "DNSName": "web.elb.amazonaws.com",
            "Scheme": "internet-facing",
            "Type": "application",
            "State": {"Code": "active"},
            "LoadBalancerArn": "arn:lb/web",
        }
        client = paginated_client({"describe_load_balancers": [{"LoadBalancers": [lb]}]})

        result = collect_with(ELB, client)

        assert result.rows == [
            (
                "web",
                "US East (N. Virginia)",
                "web.elb.amazonaws.com",
                "internet-facing",
                "application",
                "active",
                "arn:lb/web",
            )
        ]


class TestDistributions:
    """CloudFront 배포 테스트"""

    def test_default_cache_behavior_fallback(self):
        """DefaultCacheBehavior가 없으면 "N/A" """
        row = normalize_distribution(US_EAST_1, {"Id": "E1", "DomainName": "d.cloudfront.net"}, None)

        assert row[4] == "N/A"

    def test_global_once(self, paginated_client, collect_with):
        dist = {
            "Id": "E1",
            "DomainName": "d.cloudfront.net",
            "Status": "Deployed",
            "DefaultCacheBehavior": {"TargetOriginId": "s3-origin"},
            "ARN": "arn:cloudfront:E1",
        }
        client = paginated_client({"list_distributions": [{"DistributionList": {"Items": [dist]}}]})

        result = collect_with(CLOUDFRONT, client, regions=("us-east-1", "us-west-2", "sa-east-1"))

        assert result.rows == [("E1", "Global", "d.cloudfront.net", "Deployed", "s3-origin", "arn:cloudfront:E1")]

    def test_empty_distribution_list(self, paginated_client, collect_with):
        client = paginated_client({"list_distributions": [{"DistributionList": {"Quantity": 0}}]})

        assert collect_with(CLOUDFRONT, client).rows == []


class TestHostedZones:
    """Route53 Hosted Zone 테스트 (상세 실패는 항목 skip)"""

    def _zones(self, count):
        return [
            {"Id": f"/hostedzone/Z{i}", "Name": f"zone{i}.com.", "Config": {"PrivateZone": i == 2}} for i in range(count)
        ]

    def test_detail_failure_skips_only_that_zone(self, paginated_client, collect_with, make_client_error):
        client = paginated_client({"list_hosted_zones": [{"HostedZones": self._zones(5)}]})

        def get_hosted_zone(Id):
            if Id == "/hostedzone/Z3":
                raise make_client_error("NoSuchHostedZone", "GetHostedZone")
            return {"HostedZone": {"Id": Id, "ResourceRecordSetCount": 4}}

        client.get_hosted_zone.side_effect = get_hosted_zone

        result = collect_with(ROUTE53, client)

        assert [row[0] for row in result.rows] == ["zone0.com.", "zone1.com.", "zone2.com.", "zone4.com."]
        assert result.rows[2] == ("zone2.com.", "Global", "Yes", "4")
        assert len(result.skipped) == 1
        assert result.skipped[0].resource_id == "/hostedzone/Z3"

    def test_list_failure_aborts(self, collect_with, make_client_error):
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = make_client_error("AccessDenied", "ListHostedZones")

        with pytest.raises(ListFailure) as exc_info:
            collect_with(ROUTE53, client)

        assert exc_info.value.operation == "list_hosted_zones"

    def test_missing_detail_count(self):
        row = normalize_hosted_zone(US_EAST_1, {"Name": "a.com."}, None)

        assert row == ("a.com.", "US East (N. Virginia)", "No", "")

    @mock_aws
    def test_collect_with_moto(self):
        route53 = boto3.client("route53", region_name="us-east-1")
        route53.create_hosted_zone(Name="example.com", CallerReference="ref-1")

        collector = ResourceCollector(
            ROUTE53,
            StaticRegionSource(["us-east-1", "eu-west-1"]),
            session=boto3.Session(region_name="us-east-1"),
        )
        result = collector.collect()

        assert len(result.rows) == 1
        name, region, private, count = result.rows[0]
        assert name == "example.com."
        assert region == "Global"
        assert private == "No"
        assert count.isdigit()
