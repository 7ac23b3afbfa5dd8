"""
core/inventory/services/compute.py - Compute 리소스 수집

EC2 Instance, EBS Volume, Lambda Function, EKS Cluster 수집.
"""

from __future__ import annotations

from typing import Any

from core.region import Region

from ..normalize import dig, integer, text, yes_no
from ..policy import FAIL_FAST
from ..provider import ResourceKind, ResourceProvider, paginate

# =============================================================================
# EC2
# =============================================================================


class InstanceProvider(ResourceProvider):
    """EC2 인스턴스 (Reservation을 펼쳐 인스턴스 단위로 반환)"""

    service = "ec2"
    list_operation = "describe_instances"
    id_key = "InstanceId"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        instances = []
        for reservation in paginate(client, "describe_instances", "Reservations"):
            instances.extend(reservation.get("Instances", []))
        return instances


def normalize_instance(region: Region, instance: dict, detail: None) -> tuple[str, ...]:
    return (
        text(instance.get("InstanceId")),
        region.name,
        text(instance.get("InstanceType")),
        text(dig(instance, "State", "Name")),
        text(instance.get("PrivateIpAddress")),
        text(instance.get("PublicIpAddress")),
    )


EC2 = ResourceKind(
    name="ec2",
    title="EC2 Instances",
    headers=("Instance ID", "Region", "Instance Type", "State", "Private IP", "Public IP"),
    provider=InstanceProvider,
    normalize=normalize_instance,
    policy=FAIL_FAST,
)


# =============================================================================
# EBS
# =============================================================================


class VolumeProvider(ResourceProvider):
    service = "ec2"
    list_operation = "describe_volumes"
    id_key = "VolumeId"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "describe_volumes", "Volumes")


def normalize_volume(region: Region, volume: dict, detail: None) -> tuple[str, ...]:
    return (
        text(volume.get("VolumeId")),
        region.name,
        text(volume.get("AvailabilityZone")),
        integer(volume.get("Size")),
        text(volume.get("VolumeType")),
        text(volume.get("State")),
        integer(volume.get("Iops")),
        yes_no(volume.get("Encrypted")),
    )


EBS = ResourceKind(
    name="ebs",
    title="EBS Volumes",
    headers=("Volume ID", "Region", "AZ", "Size (GB)", "Type", "Status", "IOPS", "Encryption"),
    provider=VolumeProvider,
    normalize=normalize_volume,
    policy=FAIL_FAST,
)


# =============================================================================
# Lambda
# =============================================================================


class FunctionProvider(ResourceProvider):
    service = "lambda"
    list_operation = "list_functions"
    id_key = "FunctionName"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "list_functions", "Functions")


def normalize_function(region: Region, function: dict, detail: None) -> tuple[str, ...]:
    """Lambda 함수 행 (컨테이너 이미지 함수는 Runtime/Handler가 "")"""
    return (
        text(function.get("FunctionName")),
        region.name,
        text(function.get("Runtime")),
        text(function.get("Handler")),
        integer(function.get("MemorySize")),
        integer(function.get("Timeout")),
        text(function.get("FunctionArn")),
    )


LAMBDA = ResourceKind(
    name="lambda",
    title="Lambda Functions",
    headers=("Function Name", "Region", "Runtime", "Handler", "Memory (MB)", "Timeout (s)", "ARN"),
    provider=FunctionProvider,
    normalize=normalize_function,
    policy=FAIL_FAST,
)


# =============================================================================
# EKS
# =============================================================================


class ClusterProvider(ResourceProvider):
    """EKS 클러스터 (list_clusters → describe_cluster, 요약은 클러스터 이름)"""

    service = "eks"
    list_operation = "list_clusters"
    describe_operation = "describe_cluster"

    def list_summaries(self, client: Any, region: Region) -> list[str]:
        return paginate(client, "list_clusters", "clusters")

    def describe_detail(self, client: Any, region: Region, summary: str) -> dict:
        return client.describe_cluster(name=summary).get("cluster", {})


def normalize_cluster(region: Region, name: str, detail: dict | None) -> tuple[str, ...]:
    cluster = detail or {}
    return (
        text(cluster.get("name"), text(name)),
        region.name,
        text(cluster.get("status")),
        text(cluster.get("endpoint")),
        text(cluster.get("version")),
        text(cluster.get("arn")),
    )


EKS = ResourceKind(
    name="eks",
    title="EKS Clusters",
    headers=("Cluster Name", "Region", "Status", "Endpoint", "Kubernetes Version", "ARN"),
    provider=ClusterProvider,
    normalize=normalize_cluster,
    policy=FAIL_FAST,
)
