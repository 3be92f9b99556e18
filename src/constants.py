"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    CONNECTION_ERROR = 2
    REQUEST_FAILED = 3


class VisibilityAction(Enum):
    """Listing actions supported by the gallery endpoint.

    Args:
        Enum (string): Listing actions supported by the program.
    """

    HIDE = "hide"
    SHOW = "show"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_GALLERY_URL = "https://nuget.org"
    PACKAGE_API_PATH = "/api/v2/Package"
    API_KEY_PARAM = "apiKey"
    ACTIONS = [VisibilityAction.HIDE.value, VisibilityAction.SHOW.value]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    USER_AGENT = "nugetvis/0.1.0"
    REDACTED = "***"
    SECRET_QUERY_PARAMS = ["apikey", "api_key", "token", "key"]

    # Environment overrides
    ENV_API_KEY = "NUGETVIS_API_KEY"
    ENV_GALLERY_URL = "NUGETVIS_GALLERY_URL"
    ENV_LOG_LEVEL = "NUGETVIS_LOG_LEVEL"
    ENV_TIMEOUT = "NUGETVIS_TIMEOUT"
