from __future__ import annotations

from dataclasses import dataclass

import httpx

# Where Reddit sends requests for subreddits that do not exist.
SEARCH_REDIRECT_PREFIX = 'https://www.reddit.com/subreddits/search.json?'
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


@dataclass(slots=True, frozen=True)
class Success:
    status_code: int = 200


@dataclass(slots=True, frozen=True)
class ResourceNotFound:
    location: str
    status_code: int = 302


@dataclass(slots=True, frozen=True)
class HttpError:
    status_code: int
    location: str | None = None


Classification = Success | ResourceNotFound | HttpError


def classify_response(
    status_code: int,
    location: str | None = None,
    *,
    not_found_prefix: str = SEARCH_REDIRECT_PREFIX,
) -> Classification:
    """Sort a response by status and redirect target. The body is never consulted."""
    if 200 <= status_code < 300:
        return Success(status_code=status_code)
    if status_code in REDIRECT_STATUSES and location and location.startswith(not_found_prefix):
        return ResourceNotFound(location=location, status_code=status_code)
    return HttpError(status_code=status_code, location=location)


def classify(response: httpx.Response, *, not_found_prefix: str = SEARCH_REDIRECT_PREFIX) -> Classification:
    return classify_response(
        response.status_code,
        redirect_target(response),
        not_found_prefix=not_found_prefix,
    )


def redirect_target(response: httpx.Response) -> str | None:
    """Absolute ``Location`` of a redirect response, without following it."""
    if response.status_code not in REDIRECT_STATUSES:
        return None
    location = response.headers.get('Location')
    if not location:
        return None
    try:
        return str(response.request.url.join(location))
    except RuntimeError:
        # Responses built without a request cannot resolve relative targets.
        return location
