"""Unit tests for Logfire sending decisions."""

from forum.config import ObservabilitySettings
from forum.util.observability import should_send


class TestShouldSend:
    def test_console_only_without_token(self):
        assert should_send(ObservabilitySettings()) is False

    def test_token_enables_sending(self):
        assert should_send(ObservabilitySettings(logfire_token="tok")) is True

    def test_explicit_flag_wins_over_token(self):
        settings = ObservabilitySettings(logfire_token="tok", send_to_logfire=False)

        assert should_send(settings) is False
