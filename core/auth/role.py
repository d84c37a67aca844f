# core/auth/role.py
"""
core/auth/role.py - 역할 전환 (STS AssumeRole)

기본 세션과 역할 ARN을 받아 임시 자격 증명 기반의 *새* 세션을 반환합니다.
기본 세션은 변경되지 않으며, 기본 세션의 자격 증명은 만료 시 AssumeRole을
다시 호출하는 용도로만 사용됩니다.

Usage:
    from core.auth.role import switch_role

    role_session = switch_role(base_session, "arn:aws:iam::123456789012:role/Reader")
    appconfig = role_session.client("appconfig")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import boto3
from botocore.credentials import RefreshableCredentials
from botocore.exceptions import BotoCoreError, ClientError
from botocore.session import get_session as get_botocore_session

from core.config import settings

from .types import ConfigurationError, RoleAssumptionError

logger = logging.getLogger(__name__)

CREDENTIAL_METHOD = "sts-assume-role"


def _format_expiry(expiration: Any) -> str:
    """AssumeRole 응답의 Expiration을 botocore가 기대하는 ISO 문자열로 변환"""
    if isinstance(expiration, datetime):
        return expiration.isoformat()
    return str(expiration)


def _build_refresher(
    sts_client: Any,
    role_arn: str,
    session_name: str,
    duration_seconds: int | None,
) -> Callable[[], dict[str, str]]:
    """RefreshableCredentials용 refresh 콜백 생성"""

    def refresh() -> dict[str, str]:
        params: dict[str, Any] = {"RoleArn": role_arn, "RoleSessionName": session_name}
        if duration_seconds:
            params["DurationSeconds"] = duration_seconds

        logger.debug("AssumeRole 호출: %s (session=%s)", role_arn, session_name)
        try:
            response = sts_client.assume_role(**params)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            raise RoleAssumptionError(role_arn, error_code=error_code, cause=e) from e
        except BotoCoreError as e:
            raise RoleAssumptionError(role_arn, cause=e) from e

        creds = response.get("Credentials")
        if not creds:
            raise RoleAssumptionError(role_arn, message="AssumeRole 응답에 자격 증명이 없습니다")

        return {
            "access_key": creds["AccessKeyId"],
            "secret_key": creds["SecretAccessKey"],
            "token": creds["SessionToken"],
            "expiry_time": _format_expiry(creds["Expiration"]),
        }

    return refresh


def switch_role(
    session: boto3.Session,
    role_arn: str,
    session_name: str = settings.DEFAULT_ROLE_SESSION_NAME,
    duration_seconds: int | None = None,
) -> boto3.Session:
    """기본 세션으로 역할을 전환한 새 세션 반환

    첫 AssumeRole은 즉시 수행하여 권한 문제를 바로 드러내고,
    이후 만료가 가까워지면 botocore가 자동으로 갱신합니다.
    리전은 기본 세션의 리전을 그대로 유지합니다.

    Args:
        session: 기본 boto3 Session (변경되지 않음)
        role_arn: 전환할 IAM 역할 ARN
        session_name: STS RoleSessionName
        duration_seconds: 임시 자격 증명 유효 시간 (None이면 STS 기본값)

    Returns:
        임시 자격 증명을 사용하는 새 boto3 Session

    Raises:
        ConfigurationError: role_arn 또는 session_name이 잘못된 경우
        RoleAssumptionError: AssumeRole 호출 실패
    """
    if not role_arn or not role_arn.strip():
        raise ConfigurationError("역할 ARN이 비어 있습니다", config_key="switch_role")
    if not session_name or len(session_name) > settings.ROLE_SESSION_NAME_MAX_LENGTH:
        raise ConfigurationError(
            f"RoleSessionName은 1~{settings.ROLE_SESSION_NAME_MAX_LENGTH}자여야 합니다: '{session_name}'",
            config_key="role_session_name",
        )

    region = session.region_name
    try:
        sts_client = session.client("sts", region_name=region)
    except BotoCoreError as e:
        raise RoleAssumptionError(role_arn, message="STS 클라이언트 생성 실패", cause=e) from e

    refresh = _build_refresher(sts_client, role_arn, session_name, duration_seconds)
    credentials = RefreshableCredentials.create_from_metadata(
        metadata=refresh(),
        refresh_using=refresh,
        method=CREDENTIAL_METHOD,
    )

    botocore_session = get_botocore_session()
    botocore_session._credentials = credentials
    if region:
        botocore_session.set_config_variable("region", region)

    logger.debug("역할 전환 완료: %s (region=%s)", role_arn, region or "<sdk default>")
    return boto3.Session(botocore_session=botocore_session)
