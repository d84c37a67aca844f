"""
core/appconfig/poller.py - 최신 구성 폴링 루프

"interval만큼 대기 → GetLatestConfiguration 호출"을 반복합니다.
매 호출은 직전 응답의 NextPollConfigurationToken을 사용하며,
이전 토큰은 서버 계약상 무효이므로 다시 쓰지 않습니다.

루프는 stop_event가 설정되거나 max_polls에 도달하거나
호출이 실패할 때(PollError)까지 계속됩니다.

Example:
    poller = ConfigurationPoller(appconfigdata, token, interval=1.0)
    poller.run(lambda result: print(result.text))

    # 다른 스레드나 시그널 핸들러에서
    poller.stop()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import settings
from core.exceptions import ConfigError, PollError

from .types import PollResult

logger = logging.getLogger(__name__)


def _read_payload(body: Any) -> bytes:
    """StreamingBody 또는 bytes에서 구성 값 읽기"""
    if body is None:
        return b""
    if hasattr(body, "read"):
        data = body.read()
    else:
        data = body
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class ConfigurationPoller:
    """AppConfig 구성 폴러

    Attributes:
        interval: 폴링 간격 (초)
        poll_count: 성공한 폴링 횟수
    """

    def __init__(
        self,
        client: Any,
        token: str,
        interval: float = settings.DEFAULT_POLL_INTERVAL_SECONDS,
        stop_event: threading.Event | None = None,
    ):
        if interval < 0:
            raise ConfigError("interval", f"0 이상이어야 합니다: {interval}")
        self._client = client
        self._token = token
        self.interval = interval
        self._stop_event = stop_event or threading.Event()
        self.poll_count = 0

    @property
    def token(self) -> str:
        """다음 호출에 사용할 토큰"""
        return self._token

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """루프 종료 요청 (다음 폴링 전에 종료)"""
        self._stop_event.set()

    def poll_once(self) -> PollResult:
        """현재 토큰으로 최신 구성 조회 후 토큰 교체

        Raises:
            PollError: 호출 실패 (토큰은 교체되지 않음)
        """
        try:
            response = self._client.get_latest_configuration(ConfigurationToken=self._token)
            payload = _read_payload(response.get("Configuration"))
        except (ClientError, BotoCoreError) as e:
            raise PollError.from_client_error(e, token=self._token) from e

        next_token = response.get("NextPollConfigurationToken")
        if not next_token:
            raise PollError(
                service="appconfigdata",
                operation="get_latest_configuration",
                error_message="응답에 NextPollConfigurationToken이 없습니다",
                token=self._token,
            )

        result = PollResult(
            next_token=next_token,
            configuration=payload,
            content_type=response.get("ContentType"),
            next_poll_interval=response.get("NextPollIntervalInSeconds"),
        )
        self._token = next_token
        self.poll_count += 1

        logger.debug(
            "폴링 #%d: %d bytes (content-type=%s, 서버 권장 간격=%s초)",
            self.poll_count,
            len(payload),
            result.content_type,
            result.next_poll_interval,
        )
        return result

    def run(
        self,
        on_result: Callable[[PollResult], None],
        max_polls: int | None = None,
    ) -> int:
        """폴링 루프 실행

        Args:
            on_result: 매 폴링 결과를 받는 콜백
            max_polls: 최대 폴링 횟수 (None이면 무제한)

        Returns:
            이번 실행에서 완료한 폴링 횟수

        Raises:
            PollError: 호출 실패 시 즉시 전파
        """
        completed = 0
        while max_polls is None or completed < max_polls:
            # wait()가 True면 대기 중 stop() 호출됨
            if self._stop_event.wait(self.interval):
                logger.debug("폴링 중지 요청 수신")
                break
            result = self.poll_once()
            completed += 1
            on_result(result)
        return completed
