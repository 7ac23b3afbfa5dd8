"""
core/inventory/services - 리소스 종류 바인딩 레지스트리

CLI 명령 이름 → ResourceKind 매핑을 제공합니다.
"""

from __future__ import annotations

from ..provider import ResourceKind
from .compute import EBS, EC2, EKS, LAMBDA
from .database import AURORA, DYNAMODB, ELASTICACHE, RDS
from .messaging import SQS
from .network import CLOUDFRONT, ELB, ROUTE53
from .security import ACM, IAM

RESOURCE_KINDS: dict[str, ResourceKind] = {
    kind.name: kind
    for kind in (
        ACM,
        AURORA,
        CLOUDFRONT,
        DYNAMODB,
        EBS,
        EC2,
        EKS,
        ELASTICACHE,
        ELB,
        IAM,
        LAMBDA,
        RDS,
        ROUTE53,
        SQS,
    )
}


def get_kind(name: str) -> ResourceKind:
    """이름으로 ResourceKind 조회

    Raises:
        KeyError: 등록되지 않은 이름
    """
    try:
        return RESOURCE_KINDS[name]
    except KeyError:
        raise KeyError(f"알 수 없는 리소스 종류: {name}") from None


__all__ = [
    "RESOURCE_KINDS",
    "get_kind",
    "ACM",
    "AURORA",
    "CLOUDFRONT",
    "DYNAMODB",
    "EBS",
    "EC2",
    "EKS",
    "ELASTICACHE",
    "ELB",
    "IAM",
    "LAMBDA",
    "RDS",
    "ROUTE53",
    "SQS",
]
