#!/usr/bin/env python3
import unittest
from unittest.mock import Mock

from autoscaler_webhook.controller import create_app
from autoscaler_webhook.exceptions import DeliveryError, ParameterError, SendingFailed


def failure(cause):
    try:
        raise SendingFailed(f"Sending failed: {cause}") from cause
    except SendingFailed as exc:
        return exc


class TestRelayApp(unittest.TestCase):
    def setUp(self):
        self.webhook = Mock()
        self.client = create_app(webhook=self.webhook).test_client()

    def test_health(self):
        resp = self.client.get('/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()['status'], 'ok')

    def test_success_returns_autoscaler_response(self):
        self.webhook.process.return_value = '{"id": "job-1"}'

        resp = self.client.post('/webhook', data='{"autoscaler_event_type": "up"}')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_data(as_text=True), '{"id": "job-1"}')
        self.webhook.process.assert_called_once_with('{"autoscaler_event_type": "up"}')

    def test_parameter_error_is_bad_request(self):
        self.webhook.process.side_effect = failure(ParameterError('Cannot get autoscaler_endpoint'))

        resp = self.client.post('/webhook', data='{}')

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_data(as_text=True), 'Sending failed: Cannot get autoscaler_endpoint')

    def test_delivery_error_is_bad_gateway(self):
        self.webhook.process.side_effect = failure(DeliveryError('connection refused'))

        resp = self.client.post('/webhook', data='{}')

        self.assertEqual(resp.status_code, 502)


if __name__ == '__main__':
    unittest.main()
