from __future__ import annotations

import logging
from typing import Any

import httpx

from redditjson.core.config import Settings
from redditjson.core.errors import HttpStatusError, SubredditNotFoundError, TransportError
from redditjson.schemas.things import Thing
from redditjson.services.response_classifier import HttpError, ResourceNotFound, classify
from redditjson.services.thing_decoder import decode_thing, decode_things
from redditjson.utils.ids import check_path_segment, strip_kind_prefix

LOGGER = logging.getLogger(__name__)


class RedditClient:
    """Read-only client for Reddit's anonymous ``.json`` endpoints.

    Each fetch is a single GET. Redirects are not followed: a redirect to the
    subreddit search page means the subreddit does not exist.
    """

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> 'RedditClient':
        if self._client is None:
            self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def user_agent(self) -> str:
        return self._settings.reddit_user_agent

    async def fetch_listing(self, subreddit: str, limit: int) -> Thing:
        """Fetch one page of a subreddit's front listing."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f'limit must be a positive integer, got {limit!r}')
        check_path_segment(subreddit, 'subreddit')
        response = await self._get(f'/r/{subreddit}.json', params={'limit': limit}, subreddit=subreddit)
        return decode_thing(response.content, excerpt_chars=self._settings.decode_error_excerpt_chars)

    async def fetch_comment_tree(self, subreddit: str, post_id: str) -> list[Thing]:
        """Fetch a post and its comments: a listing holding the post, then a listing of comments."""
        check_path_segment(subreddit, 'subreddit')
        post_id = check_path_segment(strip_kind_prefix(post_id), 'post id')
        response = await self._get(f'/r/{subreddit}/comments/{post_id}.json', params=None, subreddit=subreddit)
        return decode_things(response.content, excerpt_chars=self._settings.decode_error_excerpt_chars)

    async def _get(self, path: str, params: dict[str, Any] | None, subreddit: str) -> httpx.Response:
        if self._client is None:
            self._client = self._build_client()

        LOGGER.debug('GET %s params=%s', path, params)
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            LOGGER.warning('request to %s failed: %s', path, exc)
            raise TransportError(path, str(exc) or type(exc).__name__) from exc

        outcome = classify(response, not_found_prefix=self._settings.reddit_search_redirect_prefix)
        if isinstance(outcome, ResourceNotFound):
            LOGGER.warning('subreddit %r not found (redirected to %s)', subreddit, outcome.location)
            raise SubredditNotFoundError(subreddit, outcome.location)
        if isinstance(outcome, HttpError):
            LOGGER.warning('HTTP %s for %s', outcome.status_code, path)
            raise HttpStatusError(outcome.status_code, str(response.url), outcome.location)
        return response

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._settings.reddit_base_url.rstrip('/'),
            timeout=httpx.Timeout(
                connect=self._settings.reddit_timeout_connect,
                read=self._settings.reddit_timeout_read,
                write=10.0,
                pool=10.0,
            ),
            follow_redirects=False,
            headers={
                'User-Agent': self._settings.reddit_user_agent,
                'Accept': 'application/json',
            },
            transport=self._transport,
        )
