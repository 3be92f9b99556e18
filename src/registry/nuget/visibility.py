"""NuGet gallery listing client: hide (unlist) or show (list) a package version.

The gallery exposes ``/api/v2/Package/<id>/<version>``; DELETE unlists the
version and POST lists it again. Authentication is the ``apiKey`` query
parameter. A non-success status is reported in the returned result, while
validation problems raise ``ValidationError`` and transport failures raise
``requests.RequestException``.
"""
from __future__ import annotations

import logging
import urllib.parse
from dataclasses import dataclass
from http import HTTPStatus
from typing import Callable, Optional, Protocol, Tuple, Union

from constants import Constants, VisibilityAction
from common.http_client import RequestsTransport
from common.logging_utils import extra_context, is_debug_enabled, safe_url

logger = logging.getLogger(__name__)

# verb and past-tense description per action
_ACTION_DETAILS = {
    VisibilityAction.HIDE: ("DELETE", "hidden (unlisted)"),
    VisibilityAction.SHOW: ("POST", "shown (listed)"),
}


class Transport(Protocol):  # pylint: disable=too-few-public-methods
    """Anything able to send a body-less request and return its status."""

    def send(self, method: str, url: str) -> int:
        ...


class ValidationError(ValueError):
    """A request parameter is missing or not understood.

    Raised before any network activity. ``parameter`` names the offending
    argument.
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(message)
        self.parameter = parameter


@dataclass
class VisibilityRequest:
    """Parameters of one listing change."""
    action: Union[VisibilityAction, str]
    package_id: str
    package_version: str
    api_key: str
    gallery_url: str = Constants.DEFAULT_GALLERY_URL


@dataclass
class VisibilityResult:
    """Outcome of one listing change. ``url`` has the API key redacted."""
    status_code: int
    succeeded: bool
    message: str
    method: str
    url: str


def resolve_action(action: Union[VisibilityAction, str, None]) -> Tuple[VisibilityAction, str, str]:
    """Map an action to (action, HTTP verb, description).

    Strings are matched loosely: anything containing "hide" (any case) hides,
    anything containing "show" shows, with "hide" checked first. Whether the
    loose match is intended or should be exact equality is undecided; it is
    kept as-is so inputs like "Hide" or "please hide" keep working.

    Raises:
        ValidationError: When the action is missing or matches neither.
    """
    if isinstance(action, VisibilityAction):
        verb, description = _ACTION_DETAILS[action]
        return action, verb, description
    if action is None or not str(action).strip():
        raise ValidationError("action", "Missing required parameter: action")
    lowered = str(action).lower()
    for candidate in (VisibilityAction.HIDE, VisibilityAction.SHOW):
        if candidate.value in lowered:
            verb, description = _ACTION_DETAILS[candidate]
            return candidate, verb, description
    raise ValidationError(
        "action",
        f"Invalid action '{action}': expected one of {', '.join(Constants.ACTIONS)}",
    )


def build_package_url(gallery_url: str, package_id: str, package_version: str, api_key: str) -> str:
    """Build ``{gallery}/api/v2/Package/{id}/{version}?apiKey={key}``.

    A trailing slash on the gallery URL is dropped. Id, version and key are
    percent-encoded, which leaves ordinary NuGet ids and versions untouched.
    """
    base = gallery_url.rstrip("/")
    encoded_id = urllib.parse.quote(package_id, safe="")
    encoded_version = urllib.parse.quote(package_version, safe="")
    encoded_key = urllib.parse.quote(api_key, safe="")
    return (
        f"{base}{Constants.PACKAGE_API_PATH}/{encoded_id}/{encoded_version}"
        f"?{Constants.API_KEY_PARAM}={encoded_key}"
    )


def _require(name: str, value: Optional[str]) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(name, f"Missing required parameter: {name}")
    return str(value)


def _status_text(status_code: int) -> str:
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)


def set_visibility(
    action: Union[VisibilityAction, str, None],
    package_id: Optional[str],
    package_version: Optional[str],
    api_key: Optional[str],
    gallery_url: Optional[str] = None,
    *,
    transport: Optional[Transport] = None,
    output: Optional[Callable[[str], None]] = None,
) -> VisibilityResult:
    """Hide or show one package version on a NuGet gallery.

    Args:
        action: ``VisibilityAction`` or a string containing "hide"/"show".
        package_id: Package identifier, e.g. "Newtonsoft.Json".
        package_version: Exact version to change, e.g. "1.0.0".
        api_key: Gallery API key owning the package.
        gallery_url: Gallery base URL; None means the public gallery.
        transport: Object with ``send(method, url) -> int``; defaults to
            ``RequestsTransport``.
        output: Sink for progress messages; defaults to this module's logger.

    Returns:
        VisibilityResult: Status, success flag and a human-readable message.

    Raises:
        ValidationError: Before any request, for missing or invalid parameters.
        requests.RequestException: When the request could not be sent.
    """
    resolved, verb, description = resolve_action(action)
    package_id = _require("package_id", package_id)
    package_version = _require("package_version", package_version)
    api_key = _require("api_key", api_key)
    if gallery_url is None:
        gallery_url = Constants.DEFAULT_GALLERY_URL
    gallery_url = _require("gallery_url", gallery_url)

    url = build_package_url(gallery_url, package_id, package_version, api_key)
    shown_url = safe_url(url)
    emit = output if output is not None else logger.info
    emit(f"Submitting {verb} request to {shown_url}")

    if transport is None:
        transport = RequestsTransport()
    status_code = transport.send(verb, url)

    succeeded = 200 <= status_code < 300
    if succeeded:
        message = f"Package '{package_id}' Version '{package_version}' has been {description}."
    else:
        message = (
            f"Package '{package_id}' Version '{package_version}' was not {description}: "
            f"HTTP {_status_text(status_code)}."
        )
    if is_debug_enabled(logger):
        logger.debug(
            "Visibility request finished",
            extra=extra_context(
                event="visibility_result",
                component="nuget_visibility",
                action=resolved.value,
                outcome="success" if succeeded else "failure",
                status_code=status_code,
                target=shown_url,
            )
        )
    return VisibilityResult(
        status_code=status_code,
        succeeded=succeeded,
        message=message,
        method=verb,
        url=shown_url,
    )


def set_visibility_request(
    request: VisibilityRequest,
    *,
    transport: Optional[Transport] = None,
    output: Optional[Callable[[str], None]] = None,
) -> VisibilityResult:
    """Run ``set_visibility`` for a prepared ``VisibilityRequest``."""
    return set_visibility(
        request.action,
        request.package_id,
        request.package_version,
        request.api_key,
        request.gallery_url,
        transport=transport,
        output=output,
    )


def hide(
    package_id: Optional[str],
    package_version: Optional[str],
    api_key: Optional[str],
    gallery_url: Optional[str] = None,
    *,
    transport: Optional[Transport] = None,
    output: Optional[Callable[[str], None]] = None,
) -> VisibilityResult:
    """Unlist a package version."""
    return set_visibility(
        VisibilityAction.HIDE, package_id, package_version, api_key, gallery_url,
        transport=transport, output=output,
    )


def show(
    package_id: Optional[str],
    package_version: Optional[str],
    api_key: Optional[str],
    gallery_url: Optional[str] = None,
    *,
    transport: Optional[Transport] = None,
    output: Optional[Callable[[str], None]] = None,
) -> VisibilityResult:
    """List a package version again."""
    return set_visibility(
        VisibilityAction.SHOW, package_id, package_version, api_key, gallery_url,
        transport=transport, output=output,
    )
