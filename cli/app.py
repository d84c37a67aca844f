"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    acp --app <name> --env <name> --conf_profile <name> [옵션]
    acp --version

    예시:
    acp --app prod --env live --conf_profile main --region ap-northeast-2
    acp --app prod --env live --conf_profile main \\
        --switch_role arn:aws:iam::123456789012:role/AppConfigReader

자격 증명은 플래그가 없으면 AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY,
AWS_SESSION_TOKEN 환경변수에서, 리전은 AWS_REGION → AWS_DEFAULT_REGION
순서로 읽습니다.

Usage:
    $ acp --help
    $ python main.py --app prod --env live --conf_profile main
"""

from __future__ import annotations

import contextlib
import logging
import signal
import threading
from collections.abc import Iterator

import click

from cli.i18n import SUPPORTED_LANGS, set_lang
from core.config import get_default_region, get_env_bool, get_version, load_credentials_from_env, settings

# WARNING 레벨로 설정하여 INFO 로그가 구성 출력에 섞이지 않도록 함
logging.basicConfig(
    level=getattr(logging, settings.DEFAULT_LOG_LEVEL),
    format=settings.LOG_FORMAT,
    datefmt=settings.LOG_DATE_FORMAT,
)

VERSION = get_version()

# --debug 시 DEBUG로 올리는 로거 (botocore 로그는 제외)
_APP_LOGGERS = ("core", "cli")


def _configure_debug_logging() -> None:
    for name in _APP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)


def _raise_termination(signum, frame) -> None:
    from cli.runner import TerminationRequested

    raise TerminationRequested(signum)


@contextlib.contextmanager
def _stop_on_sigterm() -> Iterator[None]:
    """SIGTERM 수신 시 TerminationRequested 발생 (메인 스레드에서만)

    핸들러는 락을 잡지 않고 예외만 던지며, PollerRunner.run()이 이를
    정상 종료(0)로 처리합니다.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.signal(signal.SIGTERM, _raise_termination)
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


@click.command()
@click.version_option(VERSION, prog_name="acp")
@click.option("--access_key_id", default="", help="AWS 액세스 키 ID (기본: AWS_ACCESS_KEY_ID)")
@click.option("--secret_access_key", default="", help="AWS 시크릿 액세스 키 (기본: AWS_SECRET_ACCESS_KEY)")
@click.option("--session_token", default="", help="AWS 세션 토큰 (기본: AWS_SESSION_TOKEN)")
@click.option("--region", default=get_default_region, help="AWS 리전 (기본: AWS_REGION, AWS_DEFAULT_REGION)")
@click.option("--app", "application", default="", help="AppConfig 애플리케이션 이름")
@click.option("--env", "environment", default="", help="AppConfig 환경 이름")
@click.option("--conf_profile", "conf_profile", default="", help="AppConfig 구성 프로파일 이름")
@click.option("--switch_role", default="", help="먼저 전환할 IAM 역할 ARN")
@click.option(
    "--role_session_name",
    default=settings.DEFAULT_ROLE_SESSION_NAME,
    show_default=True,
    help="역할 전환 시 STS 세션 이름",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    envvar=settings.ENV_POLL_INTERVAL,
    default=settings.DEFAULT_POLL_INTERVAL_SECONDS,
    show_default=True,
    help="폴링 간격(초) (환경변수: ACP_POLL_INTERVAL)",
)
@click.option("--max_polls", type=click.IntRange(min=1), default=None, help="지정 횟수만큼 폴링 후 종료")
@click.option(
    "--lang",
    type=click.Choice(list(SUPPORTED_LANGS)),
    envvar=settings.ENV_LANG,
    default="ko",
    help="메시지 언어 / Message language (ko: 한국어, en: English)",
)
@click.option(
    "--debug",
    is_flag=True,
    flag_value=True,
    default=lambda: get_env_bool(settings.ENV_DEBUG),
    help="디버그 로그 및 오류 traceback 출력 (환경변수: ACP_DEBUG)",
)
def cli(
    access_key_id: str,
    secret_access_key: str,
    session_token: str,
    region: str,
    application: str,
    environment: str,
    conf_profile: str,
    switch_role: str,
    role_session_name: str,
    interval: float,
    max_polls: int | None,
    lang: str,
    debug: bool,
) -> None:
    """AppConfig 이름을 ID로 조회하고 최신 구성을 주기적으로 출력합니다."""
    from cli.runner import PollerRunner, RunnerConfig, TerminationRequested
    from core.auth.types import Credentials

    set_lang(lang)
    if debug:
        _configure_debug_logging()

    env_credentials = load_credentials_from_env()
    config = RunnerConfig(
        credentials=Credentials(
            access_key_id=access_key_id or env_credentials["access_key_id"],
            secret_access_key=secret_access_key or env_credentials["secret_access_key"],
            session_token=session_token or env_credentials["session_token"] or None,
        ),
        region=region,
        switch_role=switch_role,
        role_session_name=role_session_name,
        application=application,
        environment=environment,
        configuration_profile=conf_profile,
        interval=interval,
        max_polls=max_polls,
        debug=debug,
    )

    runner = PollerRunner(config)
    try:
        with _stop_on_sigterm():
            exit_code = runner.run()
    except TerminationRequested:
        # run() 반환 직후 핸들러 복원 전에 도착한 시그널
        exit_code = 0
    raise SystemExit(exit_code)


if __name__ == "__main__":
    cli()
