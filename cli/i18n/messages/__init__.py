"""
cli/i18n/messages/__init__.py - Message Registry

Structure:
    MESSAGES = {
        "runner.error_label": {"ko": "...", "en": "..."},
        ...
    }
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """Message dictionary type."""

    ko: str
    en: str


# Master message registry
MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Register messages for a namespace."""
    for key, value in messages.items():
        MESSAGES[f"{namespace}.{key}"] = value


# These imports must come after register_messages is defined
from cli.i18n.messages.runner import RUNNER_MESSAGES  # noqa: E402

register_messages("runner", RUNNER_MESSAGES)
