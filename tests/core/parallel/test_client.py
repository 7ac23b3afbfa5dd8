"""
tests/core/parallel/test_client.py - boto3 client 생성 헬퍼 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.config import Config

from core.parallel.client import DEFAULT_MAX_ATTEMPTS, create_session, get_client, region_client


class TestGetClient:
    def test_retries_disabled(self):
        """자동 재시도 없음 (max_attempts=1)"""
        session = MagicMock()

        get_client(session, "ec2", "us-east-1")

        kwargs = session.client.call_args.kwargs
        assert kwargs["region_name"] == "us-east-1"
        assert kwargs["config"].retries == {"max_attempts": DEFAULT_MAX_ATTEMPTS, "mode": "standard"}
        assert DEFAULT_MAX_ATTEMPTS == 1

    def test_merges_existing_config(self):
        session = MagicMock()

        get_client(session, "ec2", "us-east-1", config=Config(user_agent_extra="lookr"))

        config = session.client.call_args.kwargs["config"]
        assert config.user_agent_extra == "lookr"
        assert config.retries["max_attempts"] == 1


class TestRegionClient:
    def test_closes_on_success(self):
        session = MagicMock()

        with region_client(session, "sqs", "us-east-1") as client:
            assert client is session.client.return_value

        client.close.assert_called_once()

    def test_closes_on_error(self):
        session = MagicMock()

        with pytest.raises(ValueError):
            with region_client(session, "sqs", "us-east-1"):
                raise ValueError("boom")

        session.client.return_value.close.assert_called_once()

    def test_close_failure_does_not_mask_result(self):
        session = MagicMock()
        session.client.return_value.close.side_effect = RuntimeError("close failed")

        with region_client(session, "sqs", "us-east-1") as client:
            result = client

        assert result is session.client.return_value


class TestCreateSession:
    @patch("boto3.Session")
    def test_profile(self, mock_session_class):
        create_session("dev")

        mock_session_class.assert_called_once_with(profile_name="dev")

    @patch("boto3.Session")
    def test_default_chain(self, mock_session_class):
        create_session()

        mock_session_class.assert_called_once_with()
