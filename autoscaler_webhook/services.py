import json
import logging

import requests

from .constants import LOG_TAG
from .exceptions import DeliveryError, ResponseError

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_proxies(proxy):
    if not isinstance(proxy, str) or not proxy.strip():
        return None
    proxy = proxy.strip()
    return {"http": proxy, "https": proxy}


def send_autoscaler_payload(url, payload, proxy=None, session=None, timeout=None):
    """POST the JSON payload to the autoscaler and return the raw response text."""
    client = session if session is not None else requests
    body = payload if isinstance(payload, str) else json.dumps(payload)
    try:
        resp = client.post(
            url,
            data=body.encode("utf-8"),
            headers=JSON_HEADERS,
            proxies=build_proxies(proxy),
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise DeliveryError(f"Request to {url} failed: {exc}") from exc

    logger.debug(f"{LOG_TAG} HTTP status: {resp.status_code}")
    return resp.text


def interpret_response(response_text, log_location, log=None):
    """Return the raw response on success, raise ResponseError otherwise."""
    log = log or logger
    try:
        data = json.loads(response_text)
    except (TypeError, ValueError) as exc:
        log.error(f"{LOG_TAG} FAILED with response: {response_text}")
        raise ResponseError(f"Cannot parse response: {exc}", response_text) from exc

    if isinstance(data, dict) and data.get("id"):
        return response_text

    message = data.get("message") if isinstance(data, dict) else None
    if not isinstance(message, str):
        message = "Unknown error"

    log.error(f"{LOG_TAG} FAILED with response: {response_text}")
    raise ResponseError(f"{message}. For more details check {log_location}.", response_text)
