# core/auth/types/types.py
"""
core/auth/types/types.py - AWS 인증 모듈의 핵심 타입 정의

이 모듈은 인증 시스템 전체에서 사용되는 기본 타입들을 정의합니다.

포함 항목:
    - ProviderType: 인증 Provider 타입 열거형 (STATIC_CREDENTIALS, ASSUME_ROLE)
    - Credentials: 정적 자격 증명 데이터 클래스 (불변)
    - Provider: 모든 인증 Provider가 구현해야 하는 추상 기본 클래스 (ABC)
    - 에러 클래스: AuthError, NotAuthenticatedError, ConfigurationError,
      ProviderError, RoleAssumptionError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from core.exceptions import ACPError

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


# =============================================================================
# Provider Type Enum
# =============================================================================


class ProviderType(Enum):
    """인증 Provider 타입을 나타내는 열거형

    - StaticCredentials: 액세스 키 또는 SDK 기본 자격 증명 체인
    - AssumeRole: 기본 세션으로 STS AssumeRole을 수행한 임시 자격 증명
    """

    STATIC_CREDENTIALS = "static-credentials"
    ASSUME_ROLE = "assume-role"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Credentials
# =============================================================================


@dataclass(frozen=True)
class Credentials:
    """정적 자격 증명

    CLI 플래그 또는 환경변수에서 만들어지며 생성 후 변경되지 않습니다.
    빈 문자열은 "지정되지 않음"을 의미합니다.

    Attributes:
        access_key_id: 액세스 키 ID
        secret_access_key: 시크릿 액세스 키 (repr에서 숨김)
        session_token: 세션 토큰 (옵션, repr에서 숨김)
    """

    access_key_id: str = ""
    secret_access_key: str = field(default="", repr=False)
    session_token: str | None = field(default=None, repr=False)

    @property
    def is_complete(self) -> bool:
        """키와 시크릿이 모두 지정되었는지 여부"""
        return bool(self.access_key_id and self.secret_access_key)

    @property
    def is_empty(self) -> bool:
        """아무 값도 지정되지 않았는지 여부 (SDK 기본 체인 사용)"""
        return not (self.access_key_id or self.secret_access_key or self.session_token)

    def masked_key(self) -> str:
        """로그 출력용 마스킹된 액세스 키 (앞 4자리만 표시)"""
        if not self.access_key_id:
            return "<none>"
        return f"{self.access_key_id[:4]}****"


# =============================================================================
# Provider Interface (Abstract Base Class)
# =============================================================================


class Provider(ABC):
    """모든 인증 Provider가 구현해야 하는 추상 기본 클래스

    Provider는 서명된 boto3 Session을 만드는 불투명한 기능입니다.
    HTTP/서명 세부사항은 SDK에 위임합니다.
    """

    @abstractmethod
    def type(self) -> ProviderType:
        """Provider 타입을 반환합니다."""
        pass

    @abstractmethod
    def name(self) -> str:
        """Provider 이름(식별자)을 반환합니다."""
        pass

    @abstractmethod
    def authenticate(self) -> None:
        """세션을 구성합니다.

        Raises:
            AuthError: 세션 구성 실패 시
        """
        pass

    @abstractmethod
    def is_authenticated(self) -> bool:
        """세션이 구성되었는지 확인합니다."""
        pass

    @abstractmethod
    def get_session(self) -> boto3.Session:
        """구성된 boto3 Session을 반환합니다.

        Raises:
            NotAuthenticatedError: authenticate() 이전에 호출한 경우
        """
        pass

    @abstractmethod
    def get_default_region(self) -> str:
        """세션 리전을 반환합니다. 지정되지 않았으면 빈 문자열."""
        pass


# =============================================================================
# Error Classes
# =============================================================================


class AuthError(ACPError):
    """인증 관련 기본 에러 클래스

    모든 인증 에러의 부모 클래스입니다.
    원인 예외(cause)를 체이닝하여 디버깅을 용이하게 합니다.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)


class NotAuthenticatedError(AuthError):
    """세션이 구성되지 않은 상태에서 세션을 요청할 때 발생하는 에러"""

    def __init__(self, message: str = "인증이 필요합니다", cause: Exception | None = None):
        super().__init__(message, cause)


class ConfigurationError(AuthError):
    """인증 설정값이 잘못되었을 때 발생하는 에러

    Attributes:
        config_key: 문제가 된 설정 키 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key


class ProviderError(AuthError):
    """Provider에서 발생하는 에러

    에러 메시지 형식: "[provider] operation: message"

    Attributes:
        provider: 에러가 발생한 Provider 이름
        operation: 실패한 작업 이름 (예: "authenticate")
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"[{provider}] {operation}: {message}"
        super().__init__(full_message, cause)
        self.provider = provider
        self.operation = operation


class RoleAssumptionError(AuthError):
    """STS AssumeRole 실패

    Attributes:
        role_arn: 전환하려던 역할 ARN
        error_code: AWS 에러 코드 (옵션)
    """

    def __init__(
        self,
        role_arn: str,
        message: str = "역할 전환 실패",
        error_code: str | None = None,
        cause: Exception | None = None,
    ):
        full_message = f"{message} [{role_arn}]"
        if error_code:
            full_message = f"{full_message} ({error_code})"
        super().__init__(full_message, cause)
        self.role_arn = role_arn
        self.error_code = error_code
        self.details.update({"role_arn": role_arn, "error_code": error_code})
