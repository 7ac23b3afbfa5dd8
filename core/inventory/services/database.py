"""
core/inventory/services/database.py - Database 리소스 수집

RDS Instance, Aurora Cluster, DynamoDB Table, ElastiCache Cluster 수집.
"""

from __future__ import annotations

from typing import Any

from core.region import Region

from ..normalize import dig, first_or, integer, join_values, text, yes_no
from ..policy import FAIL_FAST
from ..provider import ResourceKind, ResourceProvider, paginate

# =============================================================================
# RDS
# =============================================================================


class DBInstanceProvider(ResourceProvider):
    service = "rds"
    list_operation = "describe_db_instances"
    id_key = "DBInstanceIdentifier"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "describe_db_instances", "DBInstances")


def normalize_db_instance(region: Region, db: dict, detail: None) -> tuple[str, ...]:
    """RDS 인스턴스 행

    엔드포인트가 아직 없는 인스턴스(creating 등)는 Port가 ""입니다.
    """
    return (
        text(db.get("DBInstanceIdentifier")),
        region.name,
        text(db.get("AvailabilityZone")),
        text(db.get("DBInstanceStatus")),
        text(db.get("DBInstanceClass")),
        text(db.get("Engine")),
        text(db.get("EngineVersion")),
        integer(dig(db, "Endpoint", "Port")),
        text(db.get("StorageType")),
        integer(db.get("AllocatedStorage")),
        yes_no(db.get("MultiAZ")),
        yes_no(db.get("ReadReplicaDBInstanceIdentifiers")),
        text(db.get("DBInstanceArn")),
    )


RDS = ResourceKind(
    name="rds",
    title="RDS Instances",
    headers=(
        "DB Name",
        "Region",
        "AZ",
        "Status",
        "Instance Type",
        "Engine",
        "Version",
        "Port",
        "Storage Type",
        "Storage Size",
        "Multi-AZ",
        "Replica",
        "ARN",
    ),
    provider=DBInstanceProvider,
    normalize=normalize_db_instance,
    policy=FAIL_FAST,
)


# =============================================================================
# Aurora
# =============================================================================


class DBClusterProvider(ResourceProvider):
    service = "rds"
    list_operation = "describe_db_clusters"
    id_key = "DBClusterIdentifier"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "describe_db_clusters", "DBClusters")


def normalize_db_cluster(region: Region, cluster: dict, detail: None) -> tuple[str, ...]:
    return (
        text(cluster.get("DBClusterIdentifier")),
        region.name,
        text(cluster.get("Status")),
        text(cluster.get("Engine")),
        text(cluster.get("EngineVersion")),
        join_values(cluster.get("DBClusterMembers"), key="DBInstanceIdentifier"),
        first_or(cluster.get("ReadReplicaIdentifiers")),
        text(cluster.get("DBClusterArn")),
    )


AURORA = ResourceKind(
    name="aurora",
    title="Aurora Clusters",
    headers=("Cluster Name", "Region", "Status", "Engine", "Engine Version", "DB Instances", "Replicas", "ARN"),
    provider=DBClusterProvider,
    normalize=normalize_db_cluster,
    policy=FAIL_FAST,
)


# =============================================================================
# DynamoDB
# =============================================================================


class TableProvider(ResourceProvider):
    """DynamoDB 테이블 (list_tables → describe_table)

    요약은 테이블 이름 문자열입니다.
    """

    service = "dynamodb"
    list_operation = "list_tables"
    describe_operation = "describe_table"

    def list_summaries(self, client: Any, region: Region) -> list[str]:
        return paginate(client, "list_tables", "TableNames")

    def describe_detail(self, client: Any, region: Region, summary: str) -> dict:
        return client.describe_table(TableName=summary).get("Table", {})


def _throughput(table: dict) -> str:
    read = dig(table, "ProvisionedThroughput", "ReadCapacityUnits")
    write = dig(table, "ProvisionedThroughput", "WriteCapacityUnits")
    if read is None or write is None:
        return ""
    return f"Read: {integer(read)}, Write: {integer(write)}"


def normalize_table(region: Region, name: str, detail: dict | None) -> tuple[str, ...]:
    table = detail or {}
    return (
        text(table.get("TableName"), text(name)),
        region.name,
        text(table.get("TableStatus")),
        integer(table.get("ItemCount")),
        integer(table.get("TableSizeBytes")),
        _throughput(table),
        text(table.get("TableArn")),
    )


DYNAMODB = ResourceKind(
    name="dynamodb",
    title="DynamoDB Tables",
    headers=("Table Name", "Region", "Status", "Item Count", "Size (Bytes)", "Provisioned Throughput", "ARN"),
    provider=TableProvider,
    normalize=normalize_table,
    policy=FAIL_FAST,
)


# =============================================================================
# ElastiCache
# =============================================================================


class CacheClusterProvider(ResourceProvider):
    service = "elasticache"
    list_operation = "describe_cache_clusters"
    id_key = "CacheClusterId"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "describe_cache_clusters", "CacheClusters")


def normalize_cache_cluster(region: Region, cluster: dict, detail: None) -> tuple[str, ...]:
    mode = "Replication Group" if cluster.get("ReplicationGroupId") else "Standalone"
    return (
        text(cluster.get("CacheClusterId")),
        region.name,
        text(cluster.get("Engine")),
        text(cluster.get("EngineVersion")),
        text(cluster.get("CacheClusterStatus")),
        mode,
        text(cluster.get("CacheNodeType")),
        integer(cluster.get("NumCacheNodes")),
        text(cluster.get("ARN")),
    )


ELASTICACHE = ResourceKind(
    name="elasticache",
    title="ElastiCache Clusters",
    headers=(
        "Cluster ID",
        "Region",
        "Engine",
        "Engine Version",
        "Status",
        "Cluster Mode",
        "Node Type",
        "Nodes",
        "ARN",
    ),
    provider=CacheClusterProvider,
    normalize=normalize_cache_cluster,
    policy=FAIL_FAST,
)
