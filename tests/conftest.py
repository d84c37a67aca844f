"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(appconfig_client_factory, appconfigdata_client):
        client = appconfig_client_factory(applications=[{"Name": "prod", "Id": "a1"}])
        ...
"""

import io
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.response import StreamingBody

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


@pytest.fixture(autouse=True)
def reset_lang():
    """테스트마다 메시지 언어 초기화"""
    from cli.i18n import set_lang

    set_lang("ko")
    yield
    set_lang("ko")


# =============================================================================
# 헬퍼
# =============================================================================


def _pages(items, page_size):
    """항목 목록을 paginate() 응답 페이지 목록으로 분할"""
    if not page_size:
        return [{"Items": list(items)}]
    pages = [{"Items": list(items[i : i + page_size])} for i in range(0, len(items), page_size)]
    return pages or [{"Items": []}]


def streaming_body(data: bytes) -> StreamingBody:
    """GetLatestConfiguration 응답의 Configuration 필드 모사"""
    return StreamingBody(io.BytesIO(data), len(data))


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def appconfig_client_factory():
    """appconfig 클라이언트 Mock 팩토리

    Args (factory):
        applications: [{"Name": ..., "Id": ...}, ...]
        environments: {application_id: [{"Name": ..., "Id": ...}, ...]}
        profiles: {application_id: [{"Name": ..., "Id": ...}, ...]}
        page_size: 지정하면 여러 페이지로 분할
    """

    def factory(applications=None, environments=None, profiles=None, page_size=None):
        applications = applications or []
        environments = environments or {}
        profiles = profiles or {}

        def paginate_for(operation):
            def paginate(**kwargs):
                if operation == "list_applications":
                    return _pages(applications, page_size)
                scoped = environments if operation == "list_environments" else profiles
                return _pages(scoped.get(kwargs.get("ApplicationId"), []), page_size)

            return paginate

        client = MagicMock()
        paginators = {}

        def get_paginator(operation):
            if operation not in paginators:
                paginator = MagicMock()
                paginator.paginate.side_effect = paginate_for(operation)
                paginators[operation] = paginator
            return paginators[operation]

        client.get_paginator.side_effect = get_paginator
        client.paginators = paginators
        return client

    return factory


@pytest.fixture
def appconfigdata_client():
    """appconfigdata 클라이언트 Mock

    start_configuration_session → "tok-0"
    get_latest_configuration(tok-N) → (tok-N+1, b"v=N+1")
    """
    client = MagicMock()
    client.start_configuration_session.return_value = {"InitialConfigurationToken": "tok-0"}

    def get_latest_configuration(ConfigurationToken):
        n = int(ConfigurationToken.split("-")[1]) + 1
        payload = f"v={n}".encode()
        return {
            "NextPollConfigurationToken": f"tok-{n}",
            "NextPollIntervalInSeconds": 60,
            "ContentType": "text/plain",
            "Configuration": streaming_body(payload),
        }

    client.get_latest_configuration.side_effect = get_latest_configuration
    return client


@pytest.fixture
def mock_sts_client():
    """STS 클라이언트 Mock (AssumeRole 성공 응답)"""
    mock_client = MagicMock()
    mock_client.assume_role.return_value = {
        "Credentials": {
            "AccessKeyId": "ASIATEST123",
            "SecretAccessKey": "test-secret",
            "SessionToken": "test-token",
            "Expiration": datetime.now(timezone.utc) + timedelta(hours=1),
        }
    }
    return mock_client


@pytest.fixture
def scenario_appconfig(appconfig_client_factory):
    """prod/live/main → a1/e1/c1 시나리오"""
    return appconfig_client_factory(
        applications=[{"Name": "prod", "Id": "a1"}],
        environments={"a1": [{"Name": "live", "Id": "e1"}]},
        profiles={"a1": [{"Name": "main", "Id": "c1"}]},
    )


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def aws_credentials(monkeypatch):
    """moto 사용 시 AWS 자격 증명 설정"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-2")


@pytest.fixture
def moto_aws(aws_credentials):
    """moto를 사용한 AWS 모킹"""
    from moto import mock_aws

    with mock_aws():
        yield
