"""
core/inventory/services/security.py - Security 리소스 수집

ACM Certificate, IAM Principal(Group/User/Role) 수집.
"""

from __future__ import annotations

from typing import Any

from core.region import Region

from ..normalize import dig, pick, text, timestamp
from ..policy import FAIL_FAST
from ..provider import ResourceKind, ResourceProvider, paginate


# =============================================================================
# ACM
# =============================================================================


class CertificateProvider(ResourceProvider):
    """ACM 인증서 (list_certificates → describe_certificate)"""

    service = "acm"
    list_operation = "list_certificates"
    describe_operation = "describe_certificate"
    id_key = "CertificateArn"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        return paginate(client, "list_certificates", "CertificateSummaryList")

    def describe_detail(self, client: Any, region: Region, summary: dict) -> dict:
        response = client.describe_certificate(CertificateArn=summary["CertificateArn"])
        return response.get("Certificate", {})


def normalize_certificate(region: Region, summary: dict, detail: dict | None) -> tuple[str, ...]:
    cert = detail or {}
    return (
        text(summary.get("CertificateArn")),
        region.name,
        text(summary.get("DomainName") or cert.get("DomainName")),
        text(cert.get("Status") or summary.get("Status")),
        text(cert.get("Type") or summary.get("Type")),
        text(dig(cert, "DomainValidationOptions", 0, "ValidationMethod")),
    )


ACM = ResourceKind(
    name="acm",
    title="ACM Certificates",
    headers=("Certificate ARN", "Region", "Domain Name", "Status", "Type", "Validation Method"),
    provider=CertificateProvider,
    normalize=normalize_certificate,
    policy=FAIL_FAST,
)


# =============================================================================
# IAM
# =============================================================================

# (PrincipalType, paginator, 결과 키)
_IAM_PRINCIPALS = (
    ("Group", "list_groups", "Groups"),
    ("User", "list_users", "Users"),
    ("Role", "list_roles", "Roles"),
)


class PrincipalProvider(ResourceProvider):
    """IAM Group/User/Role (전역, 상세 조회 없음)

    요약 dict에 ``PrincipalType`` 키를 추가해 반환합니다.
    """

    service = "iam"
    list_operation = "list_groups/list_users/list_roles"

    def list_summaries(self, client: Any, region: Region) -> list[dict]:
        principals: list[dict] = []
        for principal_type, operation, key in _IAM_PRINCIPALS:
            for item in paginate(client, operation, key):
                principals.append({"PrincipalType": principal_type, **item})
        return principals

    def summary_id(self, summary: dict) -> str:
        return text(pick(summary, "Arn", "GroupName", "UserName", "RoleName"), "?")


def normalize_principal(region: Region, summary: dict, detail: None) -> tuple[str, ...]:
    return (
        text(pick(summary, "GroupName", "UserName", "RoleName")),
        text(summary.get("PrincipalType")),
        region.name,
        timestamp(summary.get("CreateDate")),
        text(summary.get("Arn")),
    )


IAM = ResourceKind(
    name="iam",
    title="IAM Principals",
    headers=("Name", "Type", "Region", "Creation Time", "ARN"),
    provider=PrincipalProvider,
    normalize=normalize_principal,
    policy=FAIL_FAST,
    is_global=True,
)
