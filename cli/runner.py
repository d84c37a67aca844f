"""
cli/runner.py - AppConfig Poller Runner

세션 구성 → 이름 조회 → 구성 세션 시작 → 폴링을 순서대로 실행합니다.
각 단계의 실패는 타입이 지정된 예외로 올라오며, run()이 유일한 최상위
핸들러로서 한 줄 에러 메시지를 출력하고 종료 코드를 결정합니다.

출력 (stdout, 번역하지 않음):
    appID: <id>
    envID: <id>
    config-profile-id: '<id>'
    config: '<payload>'     (폴링마다 반복)

종료 코드:
    0: stop 요청, SIGTERM 또는 max_polls 도달
    1: 오류
    130: Ctrl+C
"""

from __future__ import annotations

import logging
import threading
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field

import click
from rich.console import Console
from rich.markup import escape

from cli.i18n import t
from core.appconfig import (
    ConfigurationPoller,
    PollResult,
    ResourceIds,
    resolve_application_id,
    resolve_configuration_profile_id,
    resolve_environment_id,
    start_session,
)
from core.auth import Credentials, create_provider
from core.client import create_appconfig_clients
from core.config import settings
from core.exceptions import format_error_for_user

logger = logging.getLogger(__name__)

console = Console(stderr=True)


class TerminationRequested(Exception):
    """SIGTERM 등 외부 종료 요청 (시그널 핸들러에서 발생)"""

    def __init__(self, signum: int | None = None):
        super().__init__(f"signal {signum}")
        self.signum = signum


@dataclass
class RunnerConfig:
    """Runner 실행 설정"""

    # 인증
    credentials: Credentials = field(default_factory=Credentials)
    region: str = ""
    switch_role: str = ""
    role_session_name: str = settings.DEFAULT_ROLE_SESSION_NAME

    # 조회 대상
    application: str = ""
    environment: str = ""
    configuration_profile: str = ""

    # 폴링
    interval: float = settings.DEFAULT_POLL_INTERVAL_SECONDS
    max_polls: int | None = None

    debug: bool = False


class PollerRunner:
    """AppConfig Poller 파이프라인 실행기"""

    def __init__(
        self,
        config: RunnerConfig,
        stop_event: threading.Event | None = None,
        echo: Callable[[str], None] = click.echo,
    ):
        self.config = config
        self.stop_event = stop_event or threading.Event()
        self._echo = echo
        self._stage = "stage_auth"

    def stop(self) -> None:
        """폴링 루프 종료 요청"""
        self.stop_event.set()

    def run(self) -> int:
        """파이프라인 실행

        Returns:
            종료 코드 (0, 1, 130)
        """
        try:
            # 1. 세션 구성 (역할 전환 포함)
            self._stage = "stage_auth"
            appconfig, appconfigdata = self._setup_clients()

            # 2. 이름 → ID 조회
            self._stage = "stage_resolve"
            ids = self._resolve(appconfig)

            # 3. 구성 세션 시작
            self._stage = "stage_session"
            token = start_session(appconfigdata, ids)

            # 4. 폴링
            self._stage = "stage_poll"
            poller = ConfigurationPoller(
                appconfigdata,
                token,
                interval=self.config.interval,
                stop_event=self.stop_event,
            )
            count = poller.run(self._print_result, max_polls=self.config.max_polls)
            logger.info(t("runner.stopped", count=count))
            return 0

        except TerminationRequested as e:
            logger.info(t("runner.terminated", signum=e.signum))
            return 0
        except KeyboardInterrupt:
            console.print(f"\n[dim]{t('runner.cancelled')}[/dim]")
            return 130
        except Exception as e:
            message = t("runner.error_label", stage=t(f"runner.{self._stage}"), message=format_error_for_user(e))
            console.print(f"[red]{escape(message)}[/red]")
            if self.config.debug:
                traceback.print_exc()
            return 1

    def _setup_clients(self):
        provider = create_provider(
            self.config.credentials,
            region=self.config.region,
            switch_role_arn=self.config.switch_role or None,
            role_session_name=self.config.role_session_name,
        )
        provider.authenticate()
        logger.debug("Provider: %s (%s)", provider.name(), provider.type())
        return create_appconfig_clients(provider.get_session())

    def _resolve(self, appconfig) -> ResourceIds:
        app_id = resolve_application_id(appconfig, self.config.application)
        self._echo(f"appID: {app_id}")

        env_id = resolve_environment_id(appconfig, app_id, self.config.environment)
        self._echo(f"envID: {env_id}")

        profile_id = resolve_configuration_profile_id(appconfig, app_id, self.config.configuration_profile)
        self._echo(f"config-profile-id: '{profile_id}'")

        return ResourceIds(
            application_id=app_id,
            environment_id=env_id,
            configuration_profile_id=profile_id,
        )

    def _print_result(self, result: PollResult) -> None:
        self._echo(f"config: '{result.text}'")
