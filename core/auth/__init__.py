# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

자격 증명으로 boto3 Session을 만들고, 필요하면 역할을 전환합니다.
서명/HTTP 세부사항은 전부 SDK에 위임합니다.

지원하는 인증 방식:
- StaticCredentialsProvider: 정적 액세스 키 (비어 있으면 SDK 기본 체인)
- AssumeRoleProvider: 기본 세션에서 STS AssumeRole로 전환한 임시 자격 증명

사용 예시:
    from core.auth import Credentials, create_provider

    provider = create_provider(
        Credentials(access_key_id="AKIA...", secret_access_key="..."),
        region="ap-northeast-2",
        switch_role_arn="arn:aws:iam::123456789012:role/AppConfigReader",
    )
    provider.authenticate()
    session = provider.get_session()

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Types
    "ProviderType",
    "Provider",
    "Credentials",
    "AuthError",
    "NotAuthenticatedError",
    "ConfigurationError",
    "ProviderError",
    "RoleAssumptionError",
    # Providers
    "StaticCredentialsProvider",
    "StaticCredentialsConfig",
    "AssumeRoleProvider",
    # 역할 전환
    "switch_role",
    # Factory
    "create_provider",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Types
    "ProviderType": (".types", "ProviderType"),
    "Provider": (".types", "Provider"),
    "Credentials": (".types", "Credentials"),
    "AuthError": (".types", "AuthError"),
    "NotAuthenticatedError": (".types", "NotAuthenticatedError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    "ProviderError": (".types", "ProviderError"),
    "RoleAssumptionError": (".types", "RoleAssumptionError"),
    # Providers
    "StaticCredentialsProvider": (".provider", "StaticCredentialsProvider"),
    "StaticCredentialsConfig": (".provider", "StaticCredentialsConfig"),
    "AssumeRoleProvider": (".provider", "AssumeRoleProvider"),
    # 역할 전환
    "switch_role": (".role", "switch_role"),
    # Factory
    "create_provider": (".factory", "create_provider"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드

    CLI 시작 시간 최적화를 위해 무거운 의존성(boto3 등)을
    실제 필요한 시점에만 로드합니다.
    """
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
