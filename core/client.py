"""
core/client.py - boto3 client 생성 헬퍼

세션에서 AppConfig 관련 client를 생성합니다.
재시도/타임아웃은 명시적으로 지정한 경우에만 설정하고,
지정하지 않으면 SDK 기본값을 그대로 사용합니다.

주요 구성 요소:
- get_client: boto3 client 생성 (리전 확인 + 에러 래핑)
- create_appconfig_clients: appconfig / appconfigdata client 쌍 생성

Example:
    from core.client import create_appconfig_clients

    appconfig, appconfigdata = create_appconfig_clients(session)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from botocore.exceptions import BotoCoreError

from core.auth.types import ProviderError

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

USER_AGENT_EXTRA = "acp"


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int | None = None,
    retry_mode: RetryMode | None = None,
    connect_timeout: int | None = None,
    read_timeout: int | None = None,
    **kwargs: Any,
) -> Any:
    """boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (appconfig, appconfigdata 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (None이면 SDK 기본값)
        retry_mode: 재시도 모드 (None이면 SDK 기본값)
        connect_timeout: 연결 타임아웃 (초, None이면 SDK 기본값)
        read_timeout: 읽기 타임아웃 (초, None이면 SDK 기본값)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client

    Raises:
        ProviderError: 리전 미지정 등으로 client 생성 실패
    """
    from botocore.config import Config

    options: dict[str, Any] = {"user_agent_extra": USER_AGENT_EXTRA}
    if max_attempts is not None or retry_mode is not None:
        retries: dict[str, Any] = {}
        if max_attempts is not None:
            retries["max_attempts"] = max_attempts
        if retry_mode is not None:
            retries["mode"] = retry_mode
        options["retries"] = retries
    if connect_timeout is not None:
        options["connect_timeout"] = connect_timeout
    if read_timeout is not None:
        options["read_timeout"] = read_timeout

    config = Config(**options)

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    try:
        # cast to Any to bypass boto3-stubs Literal type requirements
        return session.client(  # pyright: ignore[reportCallIssue]
            cast(Any, service_name),
            region_name=region_name,
            config=config,
            **kwargs,
        )
    except BotoCoreError as e:
        raise ProviderError("session", f"client({service_name})", "client 생성 실패", cause=e) from e


def create_appconfig_clients(session: boto3.Session, region_name: str | None = None) -> tuple[Any, Any]:
    """(appconfig, appconfigdata) client 쌍 생성

    두 client 모두 같은 세션(역할 전환 시 전환된 세션)에서 만들어집니다.
    """
    appconfig = get_client(session, "appconfig", region_name=region_name)
    appconfigdata = get_client(session, "appconfigdata", region_name=region_name)
    return appconfig, appconfigdata
