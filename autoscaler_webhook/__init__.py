"""Zabbix -> sacloud autoscaler webhook adapter.

This package contains:
- constants: environment variables, severity colours and size limits
- utils: truncation and small string helpers
- exceptions: error hierarchy for a single invocation
- params: parsing and validation of the Zabbix parameters
- models: embed message data classes
- formatters: autoscaler URL and embed body construction
- services: HTTP delivery to the autoscaler webhook input
- webhook: the validate -> format -> send pipeline
- logging_config: process-wide logging setup
- controller: Flask relay app
- cli: command line entry point
"""
from .webhook import AutoscalerWebhook, run_webhook

__all__ = ["AutoscalerWebhook", "run_webhook"]
