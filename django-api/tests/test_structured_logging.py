"""Tests for the structlog PII scrubber and logging config."""

from eventsphere.structured_logging import build_logging_config, scrub_pii


class TestScrubPii:
    def test_credentials_are_redacted(self):
        event = scrub_pii(
            None,
            "info",
            {"event": "auth.signin", "password": "hunter22", "auth_token": "abc"},
        )
        assert event["password"] == "[REDACTED]"
        assert event["auth_token"] == "[REDACTED]"

    def test_emails_are_masked_outside_email_fields(self):
        """Free-text fields lose addresses; dedicated email fields keep them."""
        event = scrub_pii(
            None,
            "info",
            {
                "event": "x",
                "reason": "ana@example.com is taken",
                "email": "ana@example.com",
            },
        )
        assert event["reason"] == "[EMAIL] is taken"
        assert event["email"] == "ana@example.com"

    def test_event_name_is_untouched(self):
        event = scrub_pii(None, "info", {"event": "role_store.role_set"})
        assert event["event"] == "role_store.role_set"


class TestLoggingConfig:
    def test_console_renderer_when_not_json(self):
        config = build_logging_config(level="DEBUG", json_output=False)
        assert config["root"]["level"] == "DEBUG"
        assert config["loggers"]["django.db.backends"]["level"] == "WARNING"
