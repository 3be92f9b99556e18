"""nugetvis - Hide (unlist) or show (list) package versions on a NuGet gallery.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

import requests

from constants import Constants, ExitCodes, VisibilityAction
from common.http_client import RequestsTransport
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from cli_config import ConfigError, resolve_settings
from args import parse_args
from registry.nuget import visibility

logger = logging.getLogger(__name__)


def _setup_logging(args):
    """Configure logging based on CLI arguments."""
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def _action_for(args):
    if args.action == "hide":
        return VisibilityAction.HIDE
    if args.action == "show":
        return VisibilityAction.SHOW
    return args.ACTION


def run(args):
    """Execute the parsed command and return an ``ExitCodes`` member."""
    try:
        settings = resolve_settings(args)
    except ConfigError as e:
        logger.error("%s", e)
        return ExitCodes.VALIDATION_ERROR

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(
                event="function_entry",
                component="cli",
                action=args.action,
                package_id=args.PACKAGE_ID,
                package_version=args.PACKAGE_VERSION,
            )
        )

    transport = RequestsTransport(timeout=settings.timeout)
    try:
        result = visibility.set_visibility(
            _action_for(args),
            args.PACKAGE_ID,
            args.PACKAGE_VERSION,
            settings.api_key,
            settings.gallery_url,
            transport=transport,
        )
    except visibility.ValidationError as e:
        logger.error("%s", e)
        return ExitCodes.VALIDATION_ERROR
    except requests.Timeout:
        logger.error("Gallery request timed out after %s seconds", settings.timeout)
        return ExitCodes.CONNECTION_ERROR
    except requests.RequestException as exc:  # includes ConnectionError
        logger.error("Gallery connection error: %s", exc)
        return ExitCodes.CONNECTION_ERROR

    if not getattr(args, "QUIET", False):
        print(result.message)
    if not result.succeeded:
        logger.warning("Gallery answered %s for %s %s", result.status_code, result.method, result.url)
        return ExitCodes.REQUEST_FAILED
    return ExitCodes.SUCCESS


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)
    return run(args).value


if __name__ == "__main__":
    sys.exit(main())
