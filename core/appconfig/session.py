"""
core/appconfig/session.py - 구성 세션 시작

StartConfigurationSession을 호출하여 초기 구성 토큰을 받습니다.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import SessionStartError

from .types import ResourceIds

logger = logging.getLogger(__name__)


def start_session(
    client: Any,
    ids: ResourceIds,
    required_minimum_poll_interval: int | None = None,
) -> str:
    """구성 세션을 시작하고 초기 토큰 반환

    Args:
        client: appconfigdata client
        ids: 조회된 리소스 ID 묶음
        required_minimum_poll_interval: 최소 폴링 간격 (초, 옵션)

    Returns:
        InitialConfigurationToken

    Raises:
        SessionStartError: 호출 실패 또는 응답에 토큰이 없는 경우
    """
    params: dict[str, Any] = {
        "ApplicationIdentifier": ids.application_id,
        "EnvironmentIdentifier": ids.environment_id,
        "ConfigurationProfileIdentifier": ids.configuration_profile_id,
    }
    if required_minimum_poll_interval is not None:
        params["RequiredMinimumPollIntervalInSeconds"] = required_minimum_poll_interval

    try:
        response = client.start_configuration_session(**params)
    except (ClientError, BotoCoreError) as e:
        raise SessionStartError.from_client_error(e) from e

    token = response.get("InitialConfigurationToken")
    if not token:
        raise SessionStartError(
            service="appconfigdata",
            operation="start_configuration_session",
            error_message="응답에 InitialConfigurationToken이 없습니다",
        )

    logger.debug("구성 세션 시작: %s/%s/%s", ids.application_id, ids.environment_id, ids.configuration_profile_id)
    return token
