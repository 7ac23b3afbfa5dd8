"""
tests/core/inventory/services/test_security.py - ACM / IAM 바인딩 테스트
"""

import json
from datetime import datetime, timezone

import boto3
from moto import mock_aws

from core.inventory.collector import ResourceCollector
from core.inventory.services.security import ACM, IAM, normalize_certificate
from core.region import Region, StaticRegionSource

US_EAST_1 = Region("us-east-1", "US East (N. Virginia)")

CERT_ARN = "arn:aws:acm:us-east-1:123456789012:certificate/abc"


class TestCertificates:
    """ACM 인증서 테스트"""

    def test_collect(self, paginated_client, collect_with):
        client = paginated_client(
            {"list_certificates": [{"CertificateSummaryList": [{"CertificateArn": CERT_ARN, "DomainName": "a.com"}]}]}
        )
        client.describe_certificate.return_value = {
            "Certificate": {
                "CertificateArn": CERT_ARN,
                "DomainName": "a.com",
                "Status": "ISSUED",
                "Type": "AMAZON_ISSUED",
                "DomainValidationOptions": [{"DomainName": "a.com", "ValidationMethod": "DNS"}],
            }
        }

        result = collect_with(ACM, client)

        assert result.rows == [(CERT_ARN, "US East (N. Virginia)", "a.com", "ISSUED", "AMAZON_ISSUED", "DNS")]
        client.describe_certificate.assert_called_once_with(CertificateArn=CERT_ARN)

    def test_no_validation_options(self):
        """검증 옵션이 없으면 Validation Method는 "" """
        row = normalize_certificate(
            US_EAST_1,
            {"CertificateArn": CERT_ARN, "DomainName": "a.com"},
            {"Status": "IMPORTED", "Type": "IMPORTED", "DomainValidationOptions": []},
        )

        assert row == (CERT_ARN, "US East (N. Virginia)", "a.com", "IMPORTED", "IMPORTED", "")

    def test_headers_have_six_columns(self):
        assert len(ACM.headers) == 6
        assert ACM.headers[0] == "Certificate ARN"


class TestPrincipals:
    """IAM Group/User/Role 테스트"""

    def test_groups_then_users_then_roles(self, paginated_client, collect_with):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        client = paginated_client(
            {
                "list_groups": [{"Groups": [{"GroupName": "admins", "Arn": "arn:group", "CreateDate": created}]}],
                "list_users": [{"Users": [{"UserName": "alice", "Arn": "arn:user", "CreateDate": created}]}],
                "list_roles": [{"Roles": [{"RoleName": "deployer", "Arn": "arn:role", "CreateDate": created}]}],
            }
        )

        result = collect_with(IAM, client, regions=("us-east-1", "us-west-2"))

        assert result.rows == [
            ("admins", "Group", "Global", "2024-01-01 00:00:00 UTC", "arn:group"),
            ("alice", "User", "Global", "2024-01-01 00:00:00 UTC", "arn:user"),
            ("deployer", "Role", "Global", "2024-01-01 00:00:00 UTC", "arn:role"),
        ]

    @mock_aws
    def test_collect_with_moto(self):
        """moto IAM에서 전역 1회 수집"""
        iam = boto3.client("iam", region_name="us-east-1")
        iam.create_group(GroupName="ops")
        iam.create_user(UserName="bob")
        trust = {
            "Version": "2012-10-17",
            "Statement": [
                {"Effect": "Allow", "Principal": {"Service": "ec2.amazonaws.com"}, "Action": "sts:AssumeRole"}
            ],
        }
        iam.create_role(RoleName="app", AssumeRolePolicyDocument=json.dumps(trust))

        collector = ResourceCollector(
            IAM,
            StaticRegionSource(["us-east-1", "eu-west-1"]),
            session=boto3.Session(region_name="us-east-1"),
        )
        result = collector.collect()

        names = [(row[0], row[1]) for row in result.rows]
        assert names.index(("ops", "Group")) < names.index(("bob", "User")) < names.index(("app", "Role"))
        assert {row[2] for row in result.rows} == {"Global"}
