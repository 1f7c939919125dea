import argparse
import sys
from pathlib import Path

from .constants import LOG_DIR, LOG_FILE, LOG_LEVEL, LOG_TO_FILE
from .exceptions import SendingFailed
from .logging_config import setup_logging
from .webhook import AutoscalerWebhook


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoscaler-zabbix-webhook",
        description="Forward a Zabbix alert to the sacloud autoscaler webhook input.",
    )
    parser.add_argument(
        "value",
        nargs="?",
        default="-",
        help="alert parameters as a JSON object; '-' or omitted reads stdin",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="log level (default: %(default)s)")
    parser.add_argument("--log-dir", default=LOG_DIR, help="log directory (default: %(default)s)")
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        default=not LOG_TO_FILE,
        help="log to stderr only",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    value = sys.stdin.read() if args.value == "-" else args.value

    log_to_file = not args.no_log_file
    logger = setup_logging(level=args.log_level, log_to_file=log_to_file, log_dir=args.log_dir)
    log_location = str(Path(args.log_dir) / LOG_FILE) if log_to_file else "webhook server log"

    webhook = AutoscalerWebhook(logger=logger, log_location=log_location)
    try:
        result = webhook.process(value)
    except SendingFailed as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(result)
    return 0
