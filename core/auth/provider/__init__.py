# core/auth/provider/__init__.py
"""
AWS 인증 Provider 구현 모듈

Provider 목록:
- StaticCredentialsProvider: 액세스 키 또는 SDK 기본 자격 증명 체인
- AssumeRoleProvider: 기본 Provider 위에서 STS AssumeRole 수행

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Static Credentials
    "StaticCredentialsProvider",
    "StaticCredentialsConfig",
    # Assume Role
    "AssumeRoleProvider",
]

_IMPORT_MAPPING = {
    "StaticCredentialsProvider": (".static", "StaticCredentialsProvider"),
    "StaticCredentialsConfig": (".static", "StaticCredentialsConfig"),
    "AssumeRoleProvider": (".assume_role", "AssumeRoleProvider"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
