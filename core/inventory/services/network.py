"""
core/inventory/services/network.py - Network 리소스 수집

ELB(v2) Load Balancer, CloudFront Distribution, Route53 Hosted Zone 수집.
CloudFront와 Route53은 전역 리소스입니다.
"""

from __future__ import annotations

from typing import Any

from core.region import Region

from ..normalize import dig, integer, text, yes_no
from ..policy import FAIL_FAST, SKIP_ITEMS
from ..provider import ResourceKind, ResourceProvider, paginate

# =============================================================================
# ELB
# =============================================================================


class LoadBalancerProvider(ResourceProvider):
    service = "elbv2"
    list_operation = "describe_load_balancers"
    id_key = "LoadBalancerName"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "describe_load_balancers", "LoadBalancers")


def normalize_load_balancer(region: Region, lb: dict, detail: None) -> tuple[str, ...]:
    return (
        text(lb.get("LoadBalancerName")),
        region.name,
        text(lb.get("DNSName")),
        text(lb.get("Scheme")),
        text(lb.get("Type")),
        text(dig(lb, "State", "Code")),
        text(lb.get("LoadBalancerArn")),
    )


ELB = ResourceKind(
    name="elb",
    title="Load Balancers",
    headers=("Load Balancer Name", "Region", "DNS Name", "Scheme", "Type", "State", "ARN"),
    provider=LoadBalancerProvider,
    normalize=normalize_load_balancer,
    policy=FAIL_FAST,
)


# =============================================================================
# CloudFront
# =============================================================================


class DistributionProvider(ResourceProvider):
    service = "cloudfront"
    list_operation = "list_distributions"
    id_key = "Id"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "list_distributions", "DistributionList", "Items")


def normalize_distribution(region: Region, dist: dict, detail: None) -> tuple[str, ...]:
    return (
        text(dist.get("Id")),
        region.name,
        text(dist.get("DomainName")),
        text(dist.get("Status")),
        text(dig(dist, "DefaultCacheBehavior", "TargetOriginId"), "N/A"),
        text(dist.get("ARN")),
    )


CLOUDFRONT = ResourceKind(
    name="cloudfront",
    title="CloudFront Distributions",
    headers=("Distribution ID", "Region", "Domain Name", "Status", "Default Cache Behavior", "ARN"),
    provider=DistributionProvider,
    normalize=normalize_distribution,
    policy=FAIL_FAST,
    is_global=True,
)


# =============================================================================
# Route53
# =============================================================================


class HostedZoneProvider(ResourceProvider):
    """Route53 Hosted Zone (list_hosted_zones → get_hosted_zone)

    상세 조회 실패는 해당 zone만 건너뜁니다 (SKIP_ITEMS).
    """

    service = "route53"
    list_operation = "list_hosted_zones"
    describe_operation = "get_hosted_zone"
    id_key = "Id"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "list_hosted_zones", "HostedZones")

    def describe_detail(self, client: Any, region: Region, summary: dict) -> dict:
        return client.get_hosted_zone(Id=summary["Id"]).get("HostedZone", {})


def normalize_hosted_zone(region: Region, zone: dict, detail: dict | None) -> tuple[str, ...]:
    return (
        text(zone.get("Name")),
        region.name,
        yes_no(dig(zone, "Config", "PrivateZone")),
        integer(dig(detail, "ResourceRecordSetCount")),
    )


ROUTE53 = ResourceKind(
    name="route53",
    title="Route53 Hosted Zones",
    headers=("Hosted Zone Name", "Region", "Private", "Record Count"),
    provider=HostedZoneProvider,
    normalize=normalize_hosted_zone,
    policy=SKIP_ITEMS,
    is_global=True,
)
