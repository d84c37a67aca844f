"""
core/auth/role.py 단위 테스트

switch_role()은 기본 세션을 변경하지 않고 임시 자격 증명 기반의
새 세션을 반환해야 합니다.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from core.auth.role import switch_role
from core.auth.types import ConfigurationError, RoleAssumptionError

ROLE_ARN = "arn:aws:iam::123456789012:role/AppConfigReader"


def _assume_role_response(key: str, expires_in: timedelta) -> dict:
    return {
        "Credentials": {
            "AccessKeyId": key,
            "SecretAccessKey": f"{key}-secret",
            "SessionToken": f"{key}-token",
            "Expiration": datetime.now(timezone.utc) + expires_in,
        }
    }


@pytest.fixture
def base_session(mock_sts_client):
    """STS client만 반환하는 기본 세션 Mock"""
    session = MagicMock()
    session.region_name = "us-west-2"
    session.client.return_value = mock_sts_client
    return session


class TestSwitchRoleWithMock:
    """Mock STS 기반 테스트"""

    def test_returns_new_session_with_temporary_credentials(self, base_session, mock_sts_client):
        new_session = switch_role(base_session, ROLE_ARN, session_name="unit-test")

        assert new_session is not base_session
        assert isinstance(new_session, boto3.Session)

        creds = new_session.get_credentials().get_frozen_credentials()
        assert creds.access_key == "ASIATEST123"
        assert creds.secret_key == "test-secret"
        assert creds.token == "test-token"

        mock_sts_client.assume_role.assert_called_once_with(RoleArn=ROLE_ARN, RoleSessionName="unit-test")

    def test_preserves_region(self, base_session):
        """기본 세션의 리전 유지"""
        new_session = switch_role(base_session, ROLE_ARN)

        assert new_session.region_name == "us-west-2"
        base_session.client.assert_called_once_with("sts", region_name="us-west-2")

    def test_base_session_only_used_for_sts(self, base_session):
        """전환 후 서비스 client는 새 세션에서 생성됨"""
        new_session = switch_role(base_session, ROLE_ARN)
        new_session.client("appconfig")

        assert [c.args[0] for c in base_session.client.call_args_list] == ["sts"]

    def test_duration_seconds(self, base_session, mock_sts_client):
        switch_role(base_session, ROLE_ARN, duration_seconds=900)

        assert mock_sts_client.assume_role.call_args.kwargs["DurationSeconds"] == 900

    def test_refresh_near_expiry(self, base_session, mock_sts_client):
        """만료 임박 시 AssumeRole 재호출로 자동 갱신"""
        mock_sts_client.assume_role.return_value = None
        mock_sts_client.assume_role.side_effect = [
            _assume_role_response("ASIAFIRST", timedelta(minutes=1)),
            _assume_role_response("ASIASECOND", timedelta(hours=1)),
        ]

        new_session = switch_role(base_session, ROLE_ARN)
        creds = new_session.get_credentials().get_frozen_credentials()

        assert creds.access_key == "ASIASECOND"
        assert mock_sts_client.assume_role.call_count == 2

    def test_access_denied(self, base_session, mock_sts_client):
        mock_sts_client.assume_role.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "not authorized"}},
            "AssumeRole",
        )

        with pytest.raises(RoleAssumptionError) as exc_info:
            switch_role(base_session, ROLE_ARN)

        assert exc_info.value.role_arn == ROLE_ARN
        assert exc_info.value.error_code == "AccessDenied"

    def test_connection_error(self, base_session, mock_sts_client):
        mock_sts_client.assume_role.side_effect = EndpointConnectionError(endpoint_url="https://sts")

        with pytest.raises(RoleAssumptionError):
            switch_role(base_session, ROLE_ARN)

    def test_missing_credentials_in_response(self, base_session, mock_sts_client):
        mock_sts_client.assume_role.return_value = {}

        with pytest.raises(RoleAssumptionError, match="자격 증명"):
            switch_role(base_session, ROLE_ARN)

    @pytest.mark.parametrize("role_arn", ["", "   "])
    def test_empty_role_arn(self, base_session, role_arn):
        with pytest.raises(ConfigurationError):
            switch_role(base_session, role_arn)
        base_session.client.assert_not_called()

    def test_session_name_too_long(self, base_session):
        with pytest.raises(ConfigurationError) as exc_info:
            switch_role(base_session, ROLE_ARN, session_name="x" * 65)
        assert exc_info.value.config_key == "role_session_name"


class TestSwitchRoleWithMoto:
    """moto STS 기반 테스트"""

    def test_assumed_role_identity(self, moto_aws):
        base = boto3.Session(
            aws_access_key_id="AKIABASEKEY000000000",
            aws_secret_access_key="base-secret",
            region_name="ap-northeast-2",
        )

        new_session = switch_role(base, "arn:aws:iam::123456789012:role/reader", session_name="moto-test")

        creds = new_session.get_credentials().get_frozen_credentials()
        assert creds.access_key != "AKIABASEKEY000000000"
        assert creds.token
        assert new_session.region_name == "ap-northeast-2"

        # 기본 세션은 변경되지 않음
        assert base.get_credentials().access_key == "AKIABASEKEY000000000"

        identity = new_session.client("sts").get_caller_identity()
        assert "assumed-role/reader/moto-test" in identity["Arn"]
