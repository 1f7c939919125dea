class WebhookError(Exception):
    """Base class for every failure of a single webhook invocation."""


class ParameterError(WebhookError):
    """Missing or invalid alert parameter."""


class DeliveryError(WebhookError):
    """The POST to the autoscaler could not be completed."""


class ResponseError(WebhookError):
    """The autoscaler answered, but not with a success payload."""

    def __init__(self, message, response_text=None):
        super().__init__(message)
        self.response_text = response_text


class SendingFailed(WebhookError):
    """Terminal error reported back to the alerting engine."""
