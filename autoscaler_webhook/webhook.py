"""Validate -> build URL -> build body -> send -> interpret.

One call of :meth:`AutoscalerWebhook.process` handles exactly one alert and
issues at most one HTTP request. Nothing is retried: the first failure stops
the pipeline and is reported back as a single ``SendingFailed`` error.
"""
import json
import logging

from .constants import LOG_LOCATION, LOG_TAG, REQUEST_TIMEOUT_SECONDS
from .exceptions import ParameterError, SendingFailed, WebhookError
from .formatters import build_autoscaler_url, build_embed
from .params import load_params
from .services import interpret_response, send_autoscaler_payload


class AutoscalerWebhook:
    def __init__(self, logger=None, session=None, timeout=REQUEST_TIMEOUT_SECONDS,
                 log_location=LOG_LOCATION):
        self.logger = logger or logging.getLogger(__name__)
        self.session = session
        self.timeout = timeout
        self.log_location = log_location

    def process(self, value: str) -> str:
        self.logger.info(f"{LOG_TAG} Executed with params: {value}")
        try:
            return self._process(value)
        except ParameterError as exc:
            self.logger.warning(f"{LOG_TAG} ERROR: {exc}")
            raise SendingFailed(f"Sending failed: {exc}") from exc
        except WebhookError as exc:
            self.logger.error(f"{LOG_TAG} ERROR: {exc}")
            raise SendingFailed(f"Sending failed: {exc}") from exc

    def _process(self, value: str) -> str:
        params = load_params(value)
        url = build_autoscaler_url(params)
        body = json.dumps(build_embed(params).to_payload())

        self.logger.info(f"{LOG_TAG} JSON: {body}")
        response_text = send_autoscaler_payload(
            url,
            body,
            proxy=params.http_proxy,
            session=self.session,
            timeout=self.timeout,
        )
        self.logger.info(f"{LOG_TAG} Response: {response_text}")

        return interpret_response(response_text, self.log_location, log=self.logger)


def run_webhook(value: str) -> str:
    return AutoscalerWebhook().process(value)
