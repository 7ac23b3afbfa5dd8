"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(make_client_error, mock_boto3_session):
        error = make_client_error("AccessDenied", "describe_volumes")
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (가짜 자격 증명, lookr 환경 변수 제거)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)

    for key in ("LOOKR_REGIONS", "LOOKR_MAX_WORKERS", "LOOKR_DETAIL_WORKERS"):
        monkeypatch.delenv(key, raising=False)

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session

        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "us-east-1"

        yield mock_session


def _make_client_error(code: str, operation: str = "TestOperation", message: str = "test error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def make_client_error():
    """botocore ClientError 생성 헬퍼"""
    return _make_client_error


@pytest.fixture
def paginated_client():
    """paginator 작업 이름별 페이지를 돌려주는 MagicMock client 생성 헬퍼

    Example:
        client = paginated_client({"describe_volumes": [{"Volumes": [...]}]})
    """

    def factory(pages_by_operation: dict) -> MagicMock:
        client = MagicMock()

        def get_paginator(operation):
            paginator = MagicMock()
            paginator.paginate.return_value = pages_by_operation.get(operation, [{}])
            return paginator

        client.get_paginator.side_effect = get_paginator
        return client

    return factory
