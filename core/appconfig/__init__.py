"""
core/appconfig - AWS AppConfig 조회 및 폴링

구성 요소:
    - resolver: 이름 → ID 조회 (애플리케이션, 환경, 구성 프로파일)
    - session: StartConfigurationSession (초기 토큰)
    - poller: GetLatestConfiguration 폴링 루프

Usage:
    from core.appconfig import ConfigurationPoller, resolve_resource_ids, start_session

    ids = resolve_resource_ids(appconfig, "prod", "live", "main")
    token = start_session(appconfigdata, ids)
    ConfigurationPoller(appconfigdata, token).run(print)
"""

from .poller import ConfigurationPoller
from .resolver import (
    find_id_by_name,
    resolve_application_id,
    resolve_configuration_profile_id,
    resolve_environment_id,
    resolve_resource_ids,
)
from .session import start_session
from .types import PollResult, ResourceIds, ResourceKind

__all__: list[str] = [
    # Types
    "PollResult",
    "ResourceIds",
    "ResourceKind",
    # Resolver
    "find_id_by_name",
    "resolve_application_id",
    "resolve_environment_id",
    "resolve_configuration_profile_id",
    "resolve_resource_ids",
    # Session
    "start_session",
    # Poller
    "ConfigurationPoller",
]
