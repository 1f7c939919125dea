#!/usr/bin/env python3
import io
import unittest
from unittest.mock import patch

from autoscaler_webhook import cli
from autoscaler_webhook.exceptions import ParameterError, SendingFailed


class TestCli(unittest.TestCase):
    def run_cli(self, argv, process_result=None, process_error=None, stdin=""):
        with patch.object(cli, "setup_logging") as setup_logging, \
                patch.object(cli, "AutoscalerWebhook") as webhook_cls, \
                patch("sys.stdin", io.StringIO(stdin)), \
                patch("sys.stdout", new_callable=io.StringIO) as stdout, \
                patch("sys.stderr", new_callable=io.StringIO) as stderr:
            webhook = webhook_cls.return_value
            if process_error is not None:
                webhook.process.side_effect = process_error
            else:
                webhook.process.return_value = process_result
            code = cli.main(argv)
        return code, stdout.getvalue(), stderr.getvalue(), webhook, webhook_cls, setup_logging

    def test_success_prints_response(self):
        code, out, _, webhook, _, _ = self.run_cli(['{"a": "b"}', "--no-log-file"], process_result='{"id": "1"}')
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), '{"id": "1"}')
        webhook.process.assert_called_once_with('{"a": "b"}')

    def test_reads_stdin_without_value(self):
        _, _, _, webhook, _, _ = self.run_cli(["--no-log-file"], process_result="{}", stdin='{"x": "y"}')
        webhook.process.assert_called_once_with('{"x": "y"}')

    def test_failure_exit_code(self):
        error = SendingFailed("Sending failed: Cannot get autoscaler_endpoint")
        error.__cause__ = ParameterError("Cannot get autoscaler_endpoint")
        code, _, err, _, _, _ = self.run_cli(["{}", "--no-log-file"], process_error=error)
        self.assertEqual(code, 1)
        self.assertIn("Sending failed: Cannot get autoscaler_endpoint", err)

    def test_log_location_follows_file_logging(self):
        _, _, _, _, webhook_cls, setup_logging = self.run_cli(["{}", "--no-log-file"], process_result="{}")
        self.assertEqual(webhook_cls.call_args[1]["log_location"], "webhook server log")
        self.assertFalse(setup_logging.call_args[1]["log_to_file"])

        _, _, _, _, webhook_cls, _ = self.run_cli(["{}", "--log-dir", "/var/log/zbx"], process_result="{}")
        self.assertTrue(webhook_cls.call_args[1]["log_location"].startswith("/var/log/zbx"))


if __name__ == "__main__":
    unittest.main()
