# core/auth/provider/assume_role.py
"""
core/auth/provider/assume_role.py - 역할 전환 Provider

기본 Provider로 세션을 만든 뒤 switch_role()로 역할을 전환합니다.
authenticate() 이후 get_session()은 항상 전환된 세션을 반환하며,
기본 세션은 외부로 노출되지 않습니다.
"""

from __future__ import annotations

import logging

import boto3

from core.config import settings

from ..role import switch_role
from ..types import NotAuthenticatedError, Provider, ProviderType

logger = logging.getLogger(__name__)


class AssumeRoleProvider(Provider):
    """기본 Provider 위에서 STS AssumeRole을 수행하는 Provider"""

    def __init__(
        self,
        base_provider: Provider,
        role_arn: str,
        session_name: str = settings.DEFAULT_ROLE_SESSION_NAME,
        duration_seconds: int | None = None,
    ):
        self._base = base_provider
        self._role_arn = role_arn
        self._session_name = session_name
        self._duration_seconds = duration_seconds
        self._session: boto3.Session | None = None

    @property
    def role_arn(self) -> str:
        return self._role_arn

    def type(self) -> ProviderType:
        return ProviderType.ASSUME_ROLE

    def name(self) -> str:
        return f"{self._base.name()}->{self._role_arn}"

    def authenticate(self) -> None:
        """기본 세션 구성 후 역할 전환

        Raises:
            AuthError: 기본 세션 생성 또는 AssumeRole 실패
        """
        if not self._base.is_authenticated():
            self._base.authenticate()

        self._session = switch_role(
            self._base.get_session(),
            self._role_arn,
            session_name=self._session_name,
            duration_seconds=self._duration_seconds,
        )
        logger.info("역할 전환: %s", self._role_arn)

    def is_authenticated(self) -> bool:
        return self._session is not None

    def get_session(self) -> boto3.Session:
        if self._session is None:
            raise NotAuthenticatedError("역할 전환 전입니다")
        return self._session

    def get_default_region(self) -> str:
        return self._base.get_default_region()
