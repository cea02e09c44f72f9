"""
Unit Tests: Reporters
=====================
Tests payload building and send() outcomes for the webhook reporters.
Uses a fake requests session - no network.
"""

import pytest
import requests


class TestSlackPayload:
    """Tests for SlackReporter.build_payload."""

    @pytest.mark.unit
    def test_builds_attachment_from_exception(self, slack_options, raised_exception):
        """Attachment carries type, message, traceback, and colour."""
        from webhook_report import SlackReporter

        payload = SlackReporter().build_payload(raised_exception, slack_options)

        assert payload["text"] == slack_options.text
        assert payload["channel"] == "#errors"
        assert payload["username"] == "test-app"

        attachment = payload["attachments"][0]
        assert attachment["title"] == "ValueError"
        assert attachment["color"] == "danger"
        assert attachment["fallback"] == "ValueError: bad value"
        assert "*ValueError*: bad value" in attachment["text"]
        assert "Traceback (most recent call last)" in attachment["text"]
        assert attachment["mrkdwn_in"] == ["text"]
        assert isinstance(attachment["ts"], int)

    @pytest.mark.unit
    def test_uses_custom_attachment_fields(self, slack_options):
        """Title, link, and main text come from the options when set."""
        from webhook_report import SlackReporter

        options = slack_options.copy(
            attachment_title="Checkout failed",
            attachment_title_link="https://example.com/logs/1",
            attachment_main_text="POST /checkout",
            attachment_color="#FF6600",
        )

        payload = SlackReporter().build_payload(KeyError("sku"), options)
        attachment = payload["attachments"][0]

        assert attachment["title"] == "Checkout failed"
        assert attachment["title_link"] == "https://example.com/logs/1"
        assert attachment["text"].startswith("POST /checkout\n")
        assert attachment["color"] == "#FF6600"

    @pytest.mark.unit
    def test_prefers_icon_emoji_over_icon_url(self, slack_options):
        """Only one icon field is sent."""
        from webhook_report import SlackReporter

        options = slack_options.copy(icon_emoji=":fire:", icon_url="https://example.com/i.png")

        payload = SlackReporter().build_payload(ValueError("x"), options)

        assert payload["icon_emoji"] == ":fire:"
        assert "icon_url" not in payload

    @pytest.mark.unit
    def test_omits_unset_optional_fields(self, slack_url):
        """Channel and title link are left out when not configured."""
        from webhook_report import SlackReporter, WebHookOptions

        payload = SlackReporter().build_payload(ValueError("x"), WebHookOptions(slack_url))

        assert "channel" not in payload
        assert "title_link" not in payload["attachments"][0]

    @pytest.mark.unit
    def test_qualifies_non_builtin_types(self, slack_options):
        """Non-builtin exception types are module-qualified."""
        from webhook_report import SlackReporter

        payload = SlackReporter().build_payload(requests.Timeout("slow"), slack_options)

        assert payload["attachments"][0]["title"] == "requests.exceptions.Timeout"


class TestDiscordPayload:
    """Tests for DiscordReporter.build_payload."""

    @pytest.mark.unit
    def test_builds_embed(self, raised_exception):
        """Embed carries title, description, and colour."""
        from webhook_report import DiscordReporter, WebHookOptions

        options = WebHookOptions(
            "https://discord.com/api/webhooks/1/abc",
            attachment_color="warning",
            icon_url="https://example.com/a.png",
        )

        payload = DiscordReporter().build_payload(raised_exception, options)
        embed = payload["embeds"][0]

        assert embed["title"] == "ValueError"
        assert "bad value" in embed["description"]
        assert embed["color"] == 0xFFCC00
        assert payload["content"] == options.text
        assert payload["avatar_url"] == "https://example.com/a.png"

    @pytest.mark.unit
    def test_converts_hex_colour(self):
        """Hex colours convert to Discord integers."""
        from webhook_report import DiscordReporter, WebHookOptions

        options = WebHookOptions("https://discord.com/api/webhooks/1/abc", attachment_color="#00FF00")

        payload = DiscordReporter().build_payload(ValueError("x"), options)

        assert payload["embeds"][0]["color"] == 0x00FF00


class TestGenericPayload:
    """Tests for GenericReporter.build_payload."""

    @pytest.mark.unit
    def test_builds_flat_document(self, raised_exception):
        """Generic payload is flat JSON."""
        from webhook_report import GenericReporter, WebHookOptions

        options = WebHookOptions("https://example.com/hook", username="billing")

        payload = GenericReporter().build_payload(raised_exception, options)

        assert payload["event"] == "exception"
        assert payload["exception_type"] == "ValueError"
        assert payload["message"] == "bad value"
        assert "raise ValueError" in payload["traceback"]
        assert payload["source"] == "billing"


class TestWebhookSend:
    """Tests for WebhookReporter.send."""

    @pytest.mark.unit
    def test_posts_json_and_returns_true(self, slack_options, fake_session):
        """A 200 response counts as delivered."""
        from webhook_report import SlackReporter

        reporter = SlackReporter(session=fake_session)

        assert reporter.send(ValueError("x"), slack_options) is True

        request = fake_session.requests[0]
        assert request["url"] == slack_options.webhook_url
        assert request["timeout"] == slack_options.timeout
        assert request["headers"]["Content-Type"] == "application/json"
        assert "attachments" in request["json"]

    @pytest.mark.unit
    def test_returns_false_on_error_status(self, slack_options, make_session):
        """A 4xx/5xx response is a declined delivery, not an error."""
        from webhook_report import SlackReporter

        session = make_session(status_code=404, text="no_service")

        assert SlackReporter(session=session).send(ValueError("x"), slack_options) is False
        assert len(session.requests) == 1

    @pytest.mark.unit
    def test_transport_error_propagates(self, slack_options, make_session):
        """requests errors are raised, not converted to False."""
        from webhook_report import SlackReporter

        session = make_session(error=requests.ConnectionError("refused"))

        with pytest.raises(requests.ConnectionError):
            SlackReporter(session=session).send(ValueError("x"), slack_options)

    @pytest.mark.unit
    def test_requires_webhook_url(self, fake_session):
        """Sending without a URL is a configuration error."""
        from webhook_report import SlackReporter, WebHookOptions, ConfigurationError

        with pytest.raises(ConfigurationError):
            SlackReporter(session=fake_session).send(ValueError("x"), WebHookOptions())

        assert fake_session.requests == []

    @pytest.mark.unit
    def test_uses_requests_post_without_session(self, slack_options, monkeypatch):
        """Module-level requests.post is used when no session is injected."""
        from webhook_report import GenericReporter

        calls = []

        class Response:
            status_code = 204
            text = ""

        def fake_post(url, **kwargs):
            calls.append(url)
            return Response()

        monkeypatch.setattr(requests, "post", fake_post)

        assert GenericReporter().send(ValueError("x"), slack_options) is True
        assert calls == [slack_options.webhook_url]

    @pytest.mark.unit
    def test_reporter_identity(self):
        """Each reporter reports its type and name."""
        from webhook_report import SlackReporter, DiscordReporter, GenericReporter

        assert SlackReporter().get_reporter_type() == "slack"
        assert DiscordReporter().get_reporter_name() == "Discord"
        assert GenericReporter().get_reporter_type() == "generic"
