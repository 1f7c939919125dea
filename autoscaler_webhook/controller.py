from flask import Flask, request

from .exceptions import ParameterError, SendingFailed
from .logging_config import setup_logging
from .webhook import AutoscalerWebhook


def create_app(webhook=None):
    app = Flask(__name__)
    if webhook is None:
        webhook = AutoscalerWebhook(logger=setup_logging())

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'autoscaler-zabbix-webhook'}, 200

    @app.route('/webhook', methods=['POST'])
    def relay():
        value = request.get_data(as_text=True)
        try:
            result = webhook.process(value)
        except SendingFailed as exc:
            status = 400 if isinstance(exc.__cause__, ParameterError) else 502
            return str(exc), status, {'Content-Type': 'text/plain; charset=utf-8'}
        return result, 200, {'Content-Type': 'application/json'}

    return app
