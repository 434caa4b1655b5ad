from __future__ import annotations

import json
from typing import Any


def link_data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        'id': 'h966lq',
        'name': 't3_h966lq',
        'author': 'poster',
        'author_flair_css_class': None,
        'author_flair_text': None,
        'clicked': False,
        'domain': 'i.redd.it',
        'hidden': False,
        'is_self': False,
        'likes': None,
        'link_flair_css_class': None,
        'link_flair_text': None,
        'locked': False,
        'media': None,
        'media_embed': {},
        'num_comments': 2,
        'over_18': False,
        'permalink': '/r/dankmemes/comments/h966lq/title/',
        'saved': False,
        'score': 41,
        'selftext': '',
        'selftext_html': None,
        'subreddit': 'dankmemes',
        'subreddit_id': 't5_2zmfe',
        'thumbnail': 'https://b.thumbs.redditmedia.com/x.jpg',
        'title': 'A meme',
        'url': 'https://i.redd.it/abc.jpg',
        'edited': False,
        'distinguished': None,
        'stickied': False,
        'ups': 41,
        'downs': 0,
        'created': 1592236800.0,
        'created_utc': 1592208000.0,
        'post_hint': 'image',
        'spoiler': False,
        'pinned': False,
        'archived': True,
    }
    data.update(overrides)
    return data


def comment_data(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        'id': 'fuwxyz1',
        'name': 't1_fuwxyz1',
        'approved_by': None,
        'author': 'commenter',
        'author_flair_css_class': None,
        'author_flair_text': None,
        'banned_by': None,
        'body': 'nice',
        'body_html': '&lt;div class="md"&gt;&lt;p&gt;nice&lt;/p&gt;&lt;/div&gt;',
        'edited': False,
        'gilded': 0,
        'likes': None,
        'link_id': 't3_h966lq',
        'num_reports': None,
        'parent_id': 't3_h966lq',
        'permalink': '/r/dankmemes/comments/h966lq/title/fuwxyz1/',
        'replies': '',
        'saved': False,
        'score': 7,
        'score_hidden': False,
        'subreddit': 'dankmemes',
        'subreddit_id': 't5_2zmfe',
        'distinguished': None,
        'depth': 0,
        'ups': 7,
        'downs': 0,
        'created': 1592240400.0,
        'created_utc': 1592211600.0,
    }
    data.update(overrides)
    return data


def listing(children: list[dict[str, Any]], *, after: str | None = None, before: str | None = None) -> dict[str, Any]:
    return {
        'kind': 'Listing',
        'data': {
            'modhash': '',
            'dist': len(children),
            'children': children,
            'after': after,
            'before': before,
        },
    }


def link(**overrides: Any) -> dict[str, Any]:
    return {'kind': 't3', 'data': link_data(**overrides)}


def comment(**overrides: Any) -> dict[str, Any]:
    return {'kind': 't1', 'data': comment_data(**overrides)}


def more(children: list[str], **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        'count': len(children),
        'name': 't1__',
        'id': '_',
        'parent_id': 't3_h966lq',
        'depth': 0,
        'children': children,
    }
    data.update(overrides)
    return {'kind': 'more', 'data': data}


def dumps(document: Any) -> bytes:
    return json.dumps(document, indent=2).encode('utf-8')
