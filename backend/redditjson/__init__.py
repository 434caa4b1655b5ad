__version__ = '0.1.0'

from redditjson.core.errors import (  # noqa: E402
    DecodeError,
    HttpStatusError,
    RedditError,
    SubredditNotFoundError,
    TransportError,
)
from redditjson.schemas.common import PostHint  # noqa: E402
from redditjson.schemas.things import Comment, Link, Listing, More, Thing  # noqa: E402
from redditjson.services.reddit_client import RedditClient  # noqa: E402

__all__ = [
    'Comment',
    'DecodeError',
    'HttpStatusError',
    'Link',
    'Listing',
    'More',
    'PostHint',
    'RedditClient',
    'RedditError',
    'SubredditNotFoundError',
    'Thing',
    'TransportError',
]
