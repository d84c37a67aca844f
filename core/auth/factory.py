# core/auth/factory.py
"""
core/auth/factory.py - Provider 생성 헬퍼

CLI 입력(자격 증명, 리전, 역할 ARN)으로 적절한 Provider를 구성합니다.
"""

from __future__ import annotations

from core.config import settings

from .provider.assume_role import AssumeRoleProvider
from .provider.static import StaticCredentialsConfig, StaticCredentialsProvider
from .types import Credentials, Provider


def create_provider(
    credentials: Credentials,
    region: str = "",
    switch_role_arn: str | None = None,
    role_session_name: str = settings.DEFAULT_ROLE_SESSION_NAME,
) -> Provider:
    """Provider 생성

    Args:
        credentials: 정적 자격 증명 (비어 있으면 SDK 기본 체인)
        region: AWS 리전
        switch_role_arn: 지정되면 AssumeRoleProvider로 감쌈
        role_session_name: STS RoleSessionName

    Returns:
        authenticate() 이전 상태의 Provider
    """
    provider: Provider = StaticCredentialsProvider(
        StaticCredentialsConfig(credentials=credentials, region=region)
    )
    if switch_role_arn:
        provider = AssumeRoleProvider(provider, switch_role_arn, session_name=role_session_name)
    return provider
