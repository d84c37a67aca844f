# core/auth/provider/static.py
"""
core/auth/provider/static.py - 정적 자격 증명 Provider

CLI 플래그 또는 환경변수로 전달된 액세스 키로 boto3 Session을 구성합니다.
키가 비어 있으면 SDK 기본 자격 증명 체인(프로파일, 인스턴스 역할 등)을 사용합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import boto3
from botocore.exceptions import BotoCoreError

from ..types import Credentials, NotAuthenticatedError, Provider, ProviderError, ProviderType

logger = logging.getLogger(__name__)


@dataclass
class StaticCredentialsConfig:
    """정적 자격 증명 Provider 설정

    Attributes:
        credentials: 액세스 키/시크릿/세션 토큰
        region: AWS 리전 (빈 문자열이면 SDK가 결정)
    """

    credentials: Credentials = field(default_factory=Credentials)
    region: str = ""

    @property
    def name(self) -> str:
        return "static-credentials"


class StaticCredentialsProvider(Provider):
    """정적 자격 증명 기반 Provider

    Example:
        provider = StaticCredentialsProvider(
            StaticCredentialsConfig(credentials=creds, region="ap-northeast-2")
        )
        provider.authenticate()
        session = provider.get_session()
    """

    def __init__(self, config: StaticCredentialsConfig):
        self._config = config
        self._name = config.name
        self._default_region = config.region
        self._session: boto3.Session | None = None

    def type(self) -> ProviderType:
        return ProviderType.STATIC_CREDENTIALS

    def name(self) -> str:
        return self._name

    def authenticate(self) -> None:
        """boto3 Session 구성

        Raises:
            ProviderError: 세션 생성 실패 시
        """
        creds = self._config.credentials
        if creds.is_empty:
            logger.debug("자격 증명 미지정 - SDK 기본 자격 증명 체인 사용")
        elif not creds.is_complete:
            logger.warning("액세스 키와 시크릿 중 하나가 비어 있습니다 (key=%s)", creds.masked_key())

        try:
            self._session = boto3.Session(
                aws_access_key_id=creds.access_key_id or None,
                aws_secret_access_key=creds.secret_access_key or None,
                aws_session_token=creds.session_token or None,
                region_name=self._default_region or None,
            )
        except BotoCoreError as e:
            raise ProviderError(self._name, "authenticate", "세션 생성 실패", cause=e) from e

        logger.debug(
            "세션 생성 완료 (key=%s, region=%s)",
            creds.masked_key(),
            self._session.region_name or "<sdk default>",
        )

    def is_authenticated(self) -> bool:
        return self._session is not None

    def get_session(self) -> boto3.Session:
        if self._session is None:
            raise NotAuthenticatedError()
        return self._session

    def get_default_region(self) -> str:
        if self._session is not None and self._session.region_name:
            return self._session.region_name
        return self._default_region
