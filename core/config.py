"""
core/config.py - 중앙 설정 관리

애플리케이션 전체에서 사용하는 기본값과 환경변수 헬퍼를 정의합니다.

Usage:
    from core.config import get_default_region, load_credentials_from_env

    region = get_default_region()          # AWS_REGION → AWS_DEFAULT_REGION → ""
    creds = load_credentials_from_env()    # {"access_key_id": ..., ...}
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VERSION = "0.3.1"


@dataclass(frozen=True)
class Settings:
    """애플리케이션 기본 설정 (불변)"""

    # 폴링
    DEFAULT_POLL_INTERVAL_SECONDS: float = 1.0

    # 역할 전환 (STS AssumeRole)
    DEFAULT_ROLE_SESSION_NAME: str = "acp-session"
    ROLE_SESSION_NAME_MAX_LENGTH: int = 64

    # 로깅
    DEFAULT_LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # 환경변수 이름
    ENV_ACCESS_KEY_ID: str = "AWS_ACCESS_KEY_ID"
    ENV_SECRET_ACCESS_KEY: str = "AWS_SECRET_ACCESS_KEY"
    ENV_SESSION_TOKEN: str = "AWS_SESSION_TOKEN"
    ENV_REGION: str = "AWS_REGION"
    ENV_DEFAULT_REGION: str = "AWS_DEFAULT_REGION"
    ENV_POLL_INTERVAL: str = "ACP_POLL_INTERVAL"
    ENV_LANG: str = "ACP_LANG"
    ENV_DEBUG: str = "ACP_DEBUG"


settings = Settings()


def get_version() -> str:
    """버전 문자열 반환"""
    return VERSION


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 해석

    "1", "true", "yes", "on" (대소문자 무시)만 True로 취급합니다.
    """
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_default_region() -> str:
    """환경변수에서 기본 리전 조회

    AWS_REGION → AWS_DEFAULT_REGION 순서로 확인하고, 둘 다 없으면 빈 문자열
    (SDK 기본 리전 탐색에 위임)을 반환합니다.
    """
    for name in (settings.ENV_REGION, settings.ENV_DEFAULT_REGION):
        value = os.getenv(name, "").strip()
        if value:
            return value
    return ""


def load_credentials_from_env() -> dict[str, str]:
    """환경변수에서 AWS 자격 증명 읽기

    Returns:
        access_key_id, secret_access_key, session_token 키를 가진 dict
        (없는 값은 빈 문자열)
    """
    return {
        "access_key_id": os.getenv(settings.ENV_ACCESS_KEY_ID, "").strip(),
        "secret_access_key": os.getenv(settings.ENV_SECRET_ACCESS_KEY, "").strip(),
        "session_token": os.getenv(settings.ENV_SESSION_TOKEN, "").strip(),
    }
