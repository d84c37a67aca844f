"""
core/appconfig/resolver.py - AppConfig 이름 → ID 조회

애플리케이션, 환경, 구성 프로파일을 이름으로 찾아 ID를 반환합니다.

조회 규칙:
    - 이름은 대소문자를 구분하여 정확히 일치해야 합니다.
    - 같은 이름이 여러 개면 목록 순서상 마지막 항목의 ID를 반환합니다.
    - 일치하는 항목이 없으면 에러 없이 빈 문자열을 반환합니다.
      (빈 ID로 이어지는 다음 호출이 원격에서 실패합니다)
    - 목록은 NextToken을 따라 모든 페이지를 조회합니다.

Example:
    from core.appconfig.resolver import resolve_resource_ids

    ids = resolve_resource_ids(appconfig, "prod", "live", "main")
    print(ids.application_id)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import ResolutionError

from .types import ResourceIds, ResourceKind

logger = logging.getLogger(__name__)


def find_id_by_name(items: Iterable[dict[str, Any]], name: str) -> str:
    """항목 목록에서 이름이 일치하는 마지막 항목의 Id 반환

    Args:
        items: {"Id": ..., "Name": ...} 형태의 항목들
        name: 찾을 이름 (대소문자 구분)

    Returns:
        일치하는 마지막 항목의 Id, 없으면 ""
    """
    found = ""
    for item in items:
        if item.get("Name") == name:
            found = item.get("Id", "")
    return found


def _iter_items(client: Any, operation: str, **params: Any) -> Iterable[dict[str, Any]]:
    paginator = client.get_paginator(operation)
    for page in paginator.paginate(**params):
        yield from page.get("Items", [])


def _resolve(client: Any, kind: ResourceKind, operation: str, name: str, **params: Any) -> str:
    try:
        resource_id = find_id_by_name(_iter_items(client, operation, **params), name)
    except (ClientError, BotoCoreError) as e:
        raise ResolutionError.from_client_error(
            resource_kind=str(kind),
            operation=operation,
            client_error=e,
        ) from e

    if resource_id:
        logger.debug("%s '%s' → %s", kind, name, resource_id)
    else:
        logger.warning("%s '%s'을(를) 찾을 수 없습니다 - 빈 ID로 계속합니다", kind, name)
    return resource_id


def resolve_application_id(client: Any, name: str) -> str:
    """애플리케이션 이름으로 ID 조회"""
    return _resolve(client, ResourceKind.APPLICATION, "list_applications", name)


def resolve_environment_id(client: Any, application_id: str, name: str) -> str:
    """애플리케이션 범위의 환경 이름으로 ID 조회"""
    return _resolve(
        client,
        ResourceKind.ENVIRONMENT,
        "list_environments",
        name,
        ApplicationId=application_id,
    )


def resolve_configuration_profile_id(client: Any, application_id: str, name: str) -> str:
    """애플리케이션 범위의 구성 프로파일 이름으로 ID 조회"""
    return _resolve(
        client,
        ResourceKind.CONFIGURATION_PROFILE,
        "list_configuration_profiles",
        name,
        ApplicationId=application_id,
    )


def resolve_resource_ids(
    client: Any,
    application: str,
    environment: str,
    configuration_profile: str,
) -> ResourceIds:
    """세 이름을 순서대로 조회하여 ResourceIds 반환

    Raises:
        ResolutionError: 목록 API 호출 실패
    """
    application_id = resolve_application_id(client, application)
    environment_id = resolve_environment_id(client, application_id, environment)
    profile_id = resolve_configuration_profile_id(client, application_id, configuration_profile)
    return ResourceIds(
        application_id=application_id,
        environment_id=environment_id,
        configuration_profile_id=profile_id,
    )
