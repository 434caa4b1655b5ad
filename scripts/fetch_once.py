from __future__ import annotations

import asyncio
import logging
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
BACKEND_ROOT = ROOT / 'backend'
sys.path.insert(0, str(BACKEND_ROOT))

from redditjson.core.config import get_settings
from redditjson.core.errors import RedditError
from redditjson.core.logging import configure_logging
from redditjson.services.reddit_client import RedditClient

LOGGER = logging.getLogger('fetch_once')


async def main(subreddit: str, post_id: str | None = None, limit: int = 25) -> int:
    async with RedditClient(get_settings()) as client:
        try:
            if post_id:
                things = await client.fetch_comment_tree(subreddit, post_id)
                post_listing, comment_listing = things[0].as_listing(), things[1].as_listing()
                post = post_listing.children[0].as_link() if post_listing and post_listing.children else None
                print(post.title if post else '<no post>')
                print(f'{len(comment_listing.children) if comment_listing else 0} top-level comments')
            else:
                listing = (await client.fetch_listing(subreddit, limit)).as_listing()
                for child in listing.children if listing else ():
                    link = child.as_link()
                    if link is not None:
                        print(f'{link.score:>6} {link.name} {link.title}')
                print(f'after={listing.after if listing else None}')
        except RedditError as exc:
            LOGGER.error('%s', exc)
            return 2 if exc.is_not_found else 1
    return 0


if __name__ == '__main__':
    configure_logging()
    if len(sys.argv) < 2:
        raise SystemExit('usage: fetch_once.py SUBREDDIT [POST_ID]')
    raise SystemExit(asyncio.run(main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)))
