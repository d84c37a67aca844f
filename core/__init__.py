"""
core - AppConfig Poller 인프라

아키텍처:
    core/
    ├── auth/           # 자격 증명, 세션, 역할 전환
    ├── appconfig/      # 이름 → ID 조회, 구성 세션, 폴링 루프
    ├── client.py       # boto3 client 생성 헬퍼
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.auth import Credentials, create_provider
    from core.appconfig import ConfigurationPoller, resolve_resource_ids, start_session
    from core.client import create_appconfig_clients

    provider = create_provider(Credentials(), region="ap-northeast-2")
    provider.authenticate()
    appconfig, appconfigdata = create_appconfig_clients(provider.get_session())
"""

__all__: list[str] = [
    # 서브패키지
    "auth",
    "appconfig",
    # 모듈
    "client",
    "config",
    "exceptions",
]
