"""
core/appconfig/types.py - AppConfig 조회/폴링 데이터 타입

모든 값은 요청 범위의 불변 객체입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ResourceKind(Enum):
    """이름으로 조회하는 AppConfig 리소스 종류"""

    APPLICATION = "application"
    ENVIRONMENT = "environment"
    CONFIGURATION_PROFILE = "configuration_profile"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResourceIds:
    """조회된 (애플리케이션, 환경, 구성 프로파일) ID 묶음

    이름이 일치하는 리소스가 없으면 해당 ID는 빈 문자열입니다.
    """

    application_id: str
    environment_id: str
    configuration_profile_id: str


@dataclass(frozen=True)
class PollResult:
    """GetLatestConfiguration 한 번의 결과

    Attributes:
        next_token: 다음 호출에 사용할 토큰 (이전 토큰은 무효)
        configuration: 구성 값 (변경이 없으면 빈 바이트)
        content_type: 구성 값의 Content-Type
        next_poll_interval: 서버가 권장한 다음 폴링 간격 (초)
    """

    next_token: str
    configuration: bytes = b""
    content_type: str | None = None
    next_poll_interval: int | None = field(default=None, compare=False)

    @property
    def is_empty(self) -> bool:
        return not self.configuration

    @property
    def text(self) -> str:
        """UTF-8로 디코딩한 구성 값 (잘못된 바이트는 대체 문자)"""
        return self.configuration.decode("utf-8", errors="replace")
