"""Argument parsing functionality for nugetvis."""

import argparse
from constants import Constants


def _add_common_options(parser):
    """Options shared by every subcommand."""
    parser.add_argument("-k", "--api-key",
                        dest="API_KEY",
                        help=f"Gallery API key (default: ${Constants.ENV_API_KEY} or config file)",
                        action="store",
                        type=str)
    parser.add_argument("-s", "--source",
                        dest="SOURCE",
                        help=f"Gallery base URL (default: {Constants.DEFAULT_GALLERY_URL})",
                        action="store",
                        type=str)
    parser.add_argument("--timeout",
                        dest="TIMEOUT",
                        help=f"HTTP timeout in seconds (default: {Constants.REQUEST_TIMEOUT})",
                        action="store",
                        type=float)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML, YML, or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not print the result message.",
                        action="store_true")


def _add_package_arguments(parser):
    parser.add_argument("PACKAGE_ID", help="Package identifier, e.g. Newtonsoft.Json")
    parser.add_argument("PACKAGE_VERSION", help="Exact package version, e.g. 1.0.0")


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="nugetvis",
        description="nugetvis - Hide (unlist) or show (list) package versions on a NuGet gallery",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", metavar="{hide,show,set}")
    subparsers.required = True

    hide_parser = subparsers.add_parser(
        "hide", help="Unlist a package version (HTTP DELETE)"
    )
    _add_package_arguments(hide_parser)
    _add_common_options(hide_parser)

    show_parser = subparsers.add_parser(
        "show", help="List a package version again (HTTP POST)"
    )
    _add_package_arguments(show_parser)
    _add_common_options(show_parser)

    set_parser = subparsers.add_parser(
        "set", help="Apply an action given as text; anything containing hide/show is accepted"
    )
    set_parser.add_argument("ACTION", help="Action, e.g. hide or show")
    _add_package_arguments(set_parser)
    _add_common_options(set_parser)

    return parser.parse_args(argv)
