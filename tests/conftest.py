"""
Shared pytest fixtures for all tests.
"""

import asyncio
from collections.abc import AsyncGenerator, Iterable
from typing import Optional

import pytest

from chatcmd.channels.base import BaseTransport, BotIdentity
from chatcmd.channels.events import Event
from config.settings import BotSettings


# ============================================================
# Fake Transport
# ============================================================


class FakeTransport(BaseTransport):
    """In-memory transport replaying scripted events."""

    service_name = "fake"

    def __init__(
        self,
        events: Iterable[Event] = (),
        identity: Optional[BotIdentity] = None,
    ):
        self._events = list(events)
        self._identity = identity
        self.sent: list[tuple[str, str]] = []
        self.delivered = 0
        self.closed = False

    @property
    def identity(self) -> Optional[BotIdentity]:
        return self._identity

    async def events(self) -> AsyncGenerator[Event, None]:
        try:
            for event in self._events:
                await asyncio.sleep(0)
                self.delivered += 1
                yield event
        finally:
            self.closed = True

    async def send(self, channel: str, text: str) -> bool:
        self.sent.append((channel, text))
        return True


@pytest.fixture
def bot_identity() -> BotIdentity:
    """Identity of the bot under test."""
    return BotIdentity(user_id="UBOT", mention="<@UBOT>")


@pytest.fixture
def make_transport(bot_identity):
    """Factory for FakeTransport instances with the test bot identity."""

    def _make(
        events: Iterable[Event] = (),
        identity: Optional[BotIdentity] = None,
    ) -> FakeTransport:
        return FakeTransport(events, identity=identity or bot_identity)

    return _make


# ============================================================
# Settings Fixtures
# ============================================================


@pytest.fixture
def bot_settings() -> BotSettings:
    """Dispatch settings independent of the environment."""
    return BotSettings(
        direct_channel_prefix="D",
        help_command="help",
        help_description="Show this help message",
        strip_mention=True,
        ignore_bot_messages=True,
        max_concurrent_handlers=0,
    )


# ============================================================
# Pattern Fixtures
# ============================================================


@pytest.fixture
def deploy_pattern() -> str:
    """Pattern with two literals and two parameters."""
    return "deploy <env> to <region>"


@pytest.fixture
def match_cases() -> list[tuple[str, Optional[dict]]]:
    """Cases for the deploy pattern: (text, expected parameters or None)."""
    return [
        ("deploy prod to us-east", {"env": "prod", "region": "us-east"}),
        ("deploy PROD to eu-west", {"env": "PROD", "region": "eu-west"}),
        ("deploy  prod  to  us-east", {"env": "prod", "region": "us-east"}),
        ("deploy prod", None),
        ("deploy prod to us-east now", None),
        ("Deploy prod to us-east", None),
        ("deploy prod into us-east", None),
        ("", None),
    ]
