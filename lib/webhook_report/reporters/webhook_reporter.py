"""
HTTP Webhook Reporter
=====================
Shared POST logic for reporters that deliver JSON to a webhook URL.
Subclasses only decide the payload shape.
"""

from abc import abstractmethod
from typing import Dict, Any, Optional

import requests

from .base import BaseExceptionReporter
from ..config.constants import USER_AGENT
from ..config.credentials import mask_webhook_url
from ..config.options import WebHookOptions
from ..errors import ConfigurationError


class WebhookReporter(BaseExceptionReporter):
    """
    Reporter that POSTs a JSON payload to options.webhook_url.

    Usage:
        reporter = SlackReporter()
        delivered = reporter.send(exc, options)

    A requests.Session may be injected to reuse connections across
    reports or to substitute a transport in tests.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize reporter.

        Args:
            session: Optional requests session (module-level requests.post if None)
        """
        self._session = session

    @abstractmethod
    def build_payload(self, exception: BaseException, options: WebHookOptions) -> Dict[str, Any]:
        """
        Build the JSON payload for a report.

        Args:
            exception: The exception to report
            options: Effective delivery options

        Returns:
            JSON-serializable payload dictionary
        """
        pass

    def _post(self, url: str, payload: Dict[str, Any], timeout: float) -> requests.Response:
        poster = self._session.post if self._session is not None else requests.post
        return poster(
            url,
            json=payload,
            timeout=timeout,
            headers={
                'Content-Type': 'application/json',
                'User-Agent': USER_AGENT,
            },
        )

    def send(self, exception: BaseException, options: WebHookOptions) -> bool:
        """
        POST one report to the webhook.

        Returns:
            True if the target answered with a 2xx/3xx status

        Raises:
            ConfigurationError: If options has no webhook_url
            requests.RequestException: On any transport error
        """
        if not options.webhook_url:
            raise ConfigurationError("WebHookOptions.webhook_url must be set to send a report")

        payload = self.build_payload(exception, options)
        response = self._post(options.webhook_url, payload, options.timeout)

        if response.status_code >= 400:
            print(
                f"[REPORT] {self.get_reporter_name()} webhook "
                f"{mask_webhook_url(options.webhook_url)} returned "
                f"{response.status_code}: {response.text[:200]}"
            )
            return False

        return True
