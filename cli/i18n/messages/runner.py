"""
cli/i18n/messages/runner.py - Poller Runner Messages

Contains translations for pipeline stages and error messages.
"""

from __future__ import annotations

RUNNER_MESSAGES = {
    # =========================================================================
    # Stages
    # =========================================================================
    "stage_auth": {
        "ko": "세션 구성",
        "en": "session setup",
    },
    "stage_resolve": {
        "ko": "리소스 조회",
        "en": "resource resolution",
    },
    "stage_session": {
        "ko": "구성 세션 시작",
        "en": "configuration session start",
    },
    "stage_poll": {
        "ko": "구성 폴링",
        "en": "configuration polling",
    },
    # =========================================================================
    # Results
    # =========================================================================
    "error_label": {
        "ko": "오류 ({stage}): {message}",
        "en": "Error ({stage}): {message}",
    },
    "cancelled": {
        "ko": "취소됨",
        "en": "Cancelled",
    },
    "stopped": {
        "ko": "폴링 종료 ({count}회)",
        "en": "Polling stopped after {count} poll(s)",
    },
    "terminated": {
        "ko": "종료 시그널 수신 ({signum}) - 폴링 종료",
        "en": "Termination signal received ({signum}), polling stopped",
    },
}
