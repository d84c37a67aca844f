"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
라이브러리 코드는 프로세스를 종료하지 않고 타입이 지정된 예외를 올리며,
종료 여부는 최상위 핸들러(cli.runner.PollerRunner)가 결정합니다.

예외 계층 구조:
    ACPError (베이스)
    ├── AuthError (인증 관련) - core.auth.types에서 정의
    │   ├── NotAuthenticatedError
    │   ├── ConfigurationError
    │   ├── ProviderError
    │   └── RoleAssumptionError
    ├── APICallError (AWS API 호출)
    │   ├── ResolutionError      (이름 → ID 조회)
    │   ├── SessionStartError    (StartConfigurationSession)
    │   └── PollError            (GetLatestConfiguration)
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import ResolutionError

    try:
        response = client.list_applications()
    except ClientError as e:
        raise ResolutionError.from_client_error(
            resource_kind="application",
            operation="list_applications",
            client_error=e,
        ) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class ACPError(Exception):
    """AppConfig Poller 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# AWS API 호출 관련 예외
# =============================================================================


class APICallError(ACPError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        else:
            message = f"{message} 실패"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # ClientError 내용은 이미 message에 포함됨
        if self.error_code:
            return self.message
        return super().__str__()

    @staticmethod
    def _parse_client_error(client_error: Exception) -> tuple[str | None, str | None]:
        """ClientError에서 (code, message) 추출"""
        response = getattr(client_error, "response", None)
        if not isinstance(response, dict):
            return None, None
        error_info = response.get("Error", {})
        return error_info.get("Code"), error_info.get("Message")

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> APICallError:
        """botocore 예외로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError / BotoCoreError 예외

        Returns:
            APICallError 인스턴스
        """
        error_code, error_message = cls._parse_client_error(client_error)
        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


class ResolutionError(APICallError):
    """이름 → ID 조회 중 목록 API 호출 실패

    Attributes:
        resource_kind: "application" | "environment" | "configuration_profile"
    """

    def __init__(
        self,
        resource_kind: str,
        operation: str,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(
            service="appconfig",
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=cause,
        )
        self.resource_kind = resource_kind
        self.details["resource_kind"] = resource_kind

    @classmethod
    def from_client_error(  # type: ignore[override]
        cls,
        resource_kind: str,
        operation: str,
        client_error: Exception,
    ) -> ResolutionError:
        error_code, error_message = cls._parse_client_error(client_error)
        return cls(
            resource_kind=resource_kind,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


class SessionStartError(APICallError):
    """StartConfigurationSession 실패"""

    @classmethod
    def from_client_error(  # type: ignore[override]
        cls,
        client_error: Exception,
        operation: str = "start_configuration_session",
    ) -> SessionStartError:
        error_code, error_message = cls._parse_client_error(client_error)
        return cls(
            service="appconfigdata",
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


class PollError(APICallError):
    """GetLatestConfiguration 실패

    Attributes:
        token: 실패한 호출에 사용한 토큰
    """

    def __init__(self, *args: Any, token: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.token = token

    @classmethod
    def from_client_error(  # type: ignore[override]
        cls,
        client_error: Exception,
        token: str | None = None,
        operation: str = "get_latest_configuration",
    ) -> PollError:
        error_code, error_message = cls._parse_client_error(client_error)
        return cls(
            service="appconfigdata",
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
            token=token,
        )


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(ACPError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

_ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
}

_THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}

_NOT_FOUND_CODES = {
    "ResourceNotFoundException",
    "NotFoundException",
    "NoSuchEntity",
}


def _error_code(error: Exception) -> str | None:
    if isinstance(error, APICallError):
        return error.error_code

    # botocore ClientError 직접 확인
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code")

    return None


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인"""
    return _error_code(error) in _ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return _error_code(error) in _THROTTLING_CODES


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인

    빈 ID로 호출했을 때 AppConfig가 돌려주는 BadRequestException은
    포함하지 않습니다.
    """
    return _error_code(error) in _NOT_FOUND_CODES


_ACCESS_DENIED_MESSAGE = "권한이 없습니다. IAM 정책을 확인하세요."
_THROTTLING_MESSAGE = "요청이 너무 많습니다. 잠시 후 다시 시도하세요."
_NOT_FOUND_MESSAGE = "리소스를 찾을 수 없습니다. 이름과 ID를 확인하세요."

_FRIENDLY_MESSAGES = {
    "ExpiredToken": "인증 토큰이 만료되었습니다. 자격 증명을 갱신하세요.",
    "ExpiredTokenException": "인증 토큰이 만료되었습니다. 자격 증명을 갱신하세요.",
    "InvalidClientTokenId": "잘못된 자격 증명입니다.",
    "UnrecognizedClientException": "잘못된 자격 증명입니다.",
}


def _friendly_message(error: Exception) -> str | None:
    """에러 코드 분류에 따른 안내 문구"""
    if is_access_denied(error):
        return _ACCESS_DENIED_MESSAGE
    if is_throttling(error):
        return _THROTTLING_MESSAGE
    if is_not_found(error):
        return _NOT_FOUND_MESSAGE

    code = _error_code(error)
    return _FRIENDLY_MESSAGES.get(code) if code else None


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 한 줄 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    code = _error_code(error)
    friendly = _friendly_message(error)

    if isinstance(error, ACPError):
        text = str(error)
        if friendly:
            text = f"{text} ({friendly})"
        return text.replace("\n", " ")

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        message = response.get("Error", {}).get("Message", str(error))
        return friendly or f"{code or 'UnknownError'}: {message}"

    return str(error).replace("\n", " ")
